"""Tests for configuration validation and error types."""

from __future__ import annotations

import pytest

from spgen.config import (
    ATTACK_RATES,
    DEFAULT_ATTACK_RATE,
    DEFAULT_CONFIG,
    MAX_LENGTH,
    MIN_LENGTH,
    GenerationConfig,
)
from spgen.errors import (
    MESSAGES,
    ErrorKind,
    GenerationError,
    InvalidLength,
    NoCharacterTypesSelected,
    RandomnessUnavailable,
)


class TestGenerationConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG.length == 12
        assert DEFAULT_CONFIG.include_uppercase
        assert DEFAULT_CONFIG.include_lowercase
        assert DEFAULT_CONFIG.include_numbers
        assert DEFAULT_CONFIG.include_symbols
        assert not DEFAULT_CONFIG.exclude_ambiguous

    @pytest.mark.parametrize("length", [MIN_LENGTH, 64, MAX_LENGTH])
    def test_valid_lengths(self, length):
        GenerationConfig(length=length).validate()

    @pytest.mark.parametrize("length", [0, MIN_LENGTH - 1, MAX_LENGTH + 1])
    def test_invalid_lengths(self, length):
        with pytest.raises(InvalidLength) as info:
            GenerationConfig(length=length).validate()
        assert info.value.length == length
        assert "between 4 and 128" in str(info.value)

    def test_no_categories(self):
        cfg = GenerationConfig(
            include_uppercase=False,
            include_lowercase=False,
            include_numbers=False,
            include_symbols=False,
        )
        with pytest.raises(NoCharacterTypesSelected):
            cfg.validate()

    def test_length_checked_before_categories(self):
        cfg = GenerationConfig(
            length=1,
            include_uppercase=False,
            include_lowercase=False,
            include_numbers=False,
            include_symbols=False,
        )
        with pytest.raises(InvalidLength):
            cfg.validate()

    def test_config_is_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.length = 20


class TestErrors:
    def test_every_kind_has_a_message(self):
        assert set(MESSAGES) == set(ErrorKind)

    def test_errors_share_a_base(self):
        assert issubclass(InvalidLength, GenerationError)
        assert issubclass(RandomnessUnavailable, GenerationError)
        assert issubclass(InvalidLength, ValueError)

    def test_default_message(self):
        assert str(NoCharacterTypesSelected()) == MESSAGES[
            ErrorKind.NO_CHARACTER_TYPES_SELECTED
        ]


def test_attack_rate_table_is_read_only():
    assert DEFAULT_ATTACK_RATE == 1e9
    with pytest.raises(TypeError):
        ATTACK_RATES["casual"] = 1.0
