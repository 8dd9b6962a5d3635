"""
Character set builder: turns a GenerationConfig into the pool of symbols
the generator samples from.
"""

from __future__ import annotations

import string
from dataclasses import dataclass

from .config import GenerationConfig, DEFAULT_CONFIG
from .errors import EmptyPoolAfterFiltering, NoCharacterTypesSelected

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
SYMBOLS = string.punctuation

# Characters often confused visually
SIMILAR = "0O1lI"
# Brackets and slashes that crowd together in most fonts
CONFUSING = "{}[]()/\\|`~"
AMBIGUOUS = frozenset(SIMILAR + CONFUSING)


@dataclass(frozen=True)
class CharacterPool:
    """
    Ordered, duplicate-free symbols eligible for random selection.
    """

    symbols: str

    @property
    def size(self) -> int:
        return len(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __getitem__(self, index: int) -> str:
        return self.symbols[index]

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and len(char) == 1 and char in self.symbols


def _dedupe(chars: str) -> str:
    # dict keeps first-seen order
    return "".join(dict.fromkeys(chars))


def build_pool(config: GenerationConfig | None = None) -> CharacterPool:
    """
    Concatenate the enabled categories (uppercase, lowercase, digits,
    symbols), drop ambiguous characters if requested and deduplicate.

    Raises NoCharacterTypesSelected when no category is enabled and
    EmptyPoolAfterFiltering when the ambiguous filter removed everything.
    """
    cfg = config or DEFAULT_CONFIG

    chars = ""
    if cfg.include_uppercase:
        chars += UPPERCASE
    if cfg.include_lowercase:
        chars += LOWERCASE
    if cfg.include_numbers:
        chars += NUMBERS
    if cfg.include_symbols:
        chars += SYMBOLS

    if not chars:
        raise NoCharacterTypesSelected()

    if cfg.exclude_ambiguous:
        chars = "".join(c for c in chars if c not in AMBIGUOUS)

    if not chars:
        raise EmptyPoolAfterFiltering()

    return CharacterPool(_dedupe(chars))
