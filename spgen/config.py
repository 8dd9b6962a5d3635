"""
Configuration for the secure password generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from .errors import InvalidLength, NoCharacterTypesSelected

# Length bounds accepted by the generator.
MIN_LENGTH = 4
MAX_LENGTH = 128
DEFAULT_LENGTH = 12

# Below this length the evaluator recommends a longer password.
RECOMMENDED_MIN_LENGTH = 12

# Guesses per second for the crack-time estimate.
# These are rough heuristics, not benchmarks.
ATTACK_RATES = MappingProxyType(
    {
        "casual": 1e6,  # a personal computer
        "dedicated": 1e9,  # specialised cracking hardware
        "distributed": 1e12,  # a large botnet
    }
)
DEFAULT_ATTACK_PROFILE = "dedicated"
DEFAULT_ATTACK_RATE = ATTACK_RATES[DEFAULT_ATTACK_PROFILE]


@dataclass(frozen=True)
class GenerationConfig:
    # Desired password length in characters.
    length: int = DEFAULT_LENGTH

    # Character categories to draw from.
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True

    # Strip look-alike characters (0/O, 1/l/I) and brackets/slashes.
    exclude_ambiguous: bool = False

    @property
    def any_category(self) -> bool:
        return (
            self.include_uppercase
            or self.include_lowercase
            or self.include_numbers
            or self.include_symbols
        )

    def validate(self) -> None:
        """
        Raise InvalidLength or NoCharacterTypesSelected if this config
        cannot produce a password. Length is checked first.
        """
        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            raise InvalidLength(self.length, MIN_LENGTH, MAX_LENGTH)
        if not self.any_category:
            raise NoCharacterTypesSelected()


@dataclass(frozen=True)
class QuantumSourceConfig:
    # Number of qubits prepared in superposition per run.
    # NOTE: keep this <= the simulator limit (often 20-29 locally).
    num_qubits: int = 20

    # Independent circuit runs XOR-combined into one seed.
    quantum_streams: int = 2


# Default configuration instances you can import elsewhere
DEFAULT_CONFIG = GenerationConfig()
DEFAULT_QUANTUM_CONFIG = QuantumSourceConfig()
