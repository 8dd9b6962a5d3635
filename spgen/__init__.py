"""
Secure password generator and strength evaluator package.
"""

from .config import GenerationConfig, DEFAULT_CONFIG
from .charsets import CharacterPool, build_pool
from .errors import (
    ErrorKind,
    GenerationError,
    InvalidLength,
    NoCharacterTypesSelected,
    EmptyPoolAfterFiltering,
    RandomnessUnavailable,
)
from .generator import generate_password
from .strength import SecurityTier, StrengthReport, evaluate
from .cli import GenerationResult, generate

__all__ = [
    "GenerationConfig",
    "DEFAULT_CONFIG",
    "CharacterPool",
    "build_pool",
    "ErrorKind",
    "GenerationError",
    "InvalidLength",
    "NoCharacterTypesSelected",
    "EmptyPoolAfterFiltering",
    "RandomnessUnavailable",
    "generate_password",
    "SecurityTier",
    "StrengthReport",
    "evaluate",
    "GenerationResult",
    "generate",
]
