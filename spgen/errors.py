"""
Typed failures raised by the generation pipeline.

Every failure carries an ErrorKind so a presentation layer can map it to
its own message; MESSAGES holds the default English wording.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_LENGTH = "invalid_length"
    NO_CHARACTER_TYPES_SELECTED = "no_character_types_selected"
    EMPTY_POOL_AFTER_FILTERING = "empty_pool_after_filtering"
    RANDOMNESS_UNAVAILABLE = "randomness_unavailable"


MESSAGES = {
    ErrorKind.INVALID_LENGTH: "Length must be between {min_length} and {max_length} characters.",
    ErrorKind.NO_CHARACTER_TYPES_SELECTED: "Select at least one character type.",
    ErrorKind.EMPTY_POOL_AFTER_FILTERING: (
        "Excluding ambiguous characters left nothing to choose from; "
        "enable another character type."
    ),
    ErrorKind.RANDOMNESS_UNAVAILABLE: (
        "No cryptographically secure random source is available."
    ),
}


class GenerationError(Exception):
    """Base class for every failure of generate()."""

    kind: ErrorKind

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or MESSAGES[self.kind])


class InvalidLength(GenerationError, ValueError):
    kind = ErrorKind.INVALID_LENGTH

    def __init__(self, length: int, min_length: int, max_length: int) -> None:
        self.length = length
        self.min_length = min_length
        self.max_length = max_length
        super().__init__(
            MESSAGES[self.kind].format(min_length=min_length, max_length=max_length)
        )


class NoCharacterTypesSelected(GenerationError, ValueError):
    kind = ErrorKind.NO_CHARACTER_TYPES_SELECTED


class EmptyPoolAfterFiltering(GenerationError, ValueError):
    kind = ErrorKind.EMPTY_POOL_AFTER_FILTERING


class RandomnessUnavailable(GenerationError, RuntimeError):
    kind = ErrorKind.RANDOMNESS_UNAVAILABLE
