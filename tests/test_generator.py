"""Tests for the secure generator and the high-level pipeline."""

from __future__ import annotations

import pytest

from spgen import generate, evaluate
from spgen.charsets import CharacterPool, build_pool
from spgen.config import GenerationConfig
from spgen.errors import (
    EmptyPoolAfterFiltering,
    InvalidLength,
    NoCharacterTypesSelected,
    RandomnessUnavailable,
)
from spgen.generator import generate_password
from spgen.mapping import values_to_password
from spgen.sources import RandomSource


class BrokenSource(RandomSource):
    name = "broken"

    def read_bytes(self, n: int) -> bytes:
        raise RandomnessUnavailable()


class TestMapping:
    def test_modulo_reduction(self):
        pool = CharacterPool("abc")
        assert values_to_password([0, 1, 2, 3, 4, 5], pool) == "abcabc"
        # 2**32 - 1 is a multiple of 3
        assert values_to_password([2**32 - 1], pool) == "a"


class TestGeneratePassword:
    def test_correct_length(self):
        pool = build_pool()
        assert len(generate_password(pool, 20)) == 20

    def test_only_pool_chars(self):
        pool = CharacterPool("xyz")
        pw = generate_password(pool, 200)
        assert set(pw) <= set("xyz")

    def test_uses_given_source(self, fixed_source):
        pool = CharacterPool("abcd")
        pw = generate_password(pool, 4, fixed_source([3, 2, 1, 4]))
        assert pw == "dcba"

    def test_zero_length(self):
        assert generate_password(CharacterPool("ab"), 0) == ""

    def test_negative_length_raises(self):
        with pytest.raises(InvalidLength):
            generate_password(CharacterPool("ab"), -1)

    def test_empty_pool_raises(self):
        with pytest.raises(EmptyPoolAfterFiltering):
            generate_password(CharacterPool(""), 8)

    def test_unavailable_source_propagates(self):
        with pytest.raises(RandomnessUnavailable):
            generate_password(CharacterPool("ab"), 8, BrokenSource())

    def test_fresh_output_each_call(self):
        pool = build_pool()
        passwords = {generate_password(pool, 16) for _ in range(20)}
        assert len(passwords) == 20


class TestGenerate:
    @pytest.mark.parametrize(
        "cfg",
        [
            GenerationConfig(),
            GenerationConfig(length=4, include_symbols=False),
            GenerationConfig(length=128, exclude_ambiguous=True),
            GenerationConfig(
                length=30,
                include_uppercase=False,
                include_lowercase=False,
                include_numbers=False,
            ),
        ],
    )
    def test_password_matches_config(self, cfg):
        result = generate(cfg)
        pool = build_pool(cfg)
        assert len(result.password) == cfg.length
        assert all(ch in pool for ch in result.password)
        assert result.pool == pool
        assert result.config is cfg

    def test_round_trip_report(self):
        cfg = GenerationConfig(length=10, include_symbols=False, exclude_ambiguous=True)
        result = generate(cfg)
        assert evaluate(result.password, result.pool.size, cfg) == result.report

    def test_round_trip_without_config_matches_numbers(self):
        result = generate(GenerationConfig(length=16))
        report = evaluate(result.password, result.pool.size)
        assert report.raw_entropy_bits == result.report.raw_entropy_bits
        assert report.adjusted_entropy_bits == result.report.adjusted_entropy_bits
        assert report.tier is result.report.tier
        assert report.estimated_crack_time == result.report.estimated_crack_time

    def test_sixteen_char_scenario(self, fixed_source):
        # values 0..15 map to "ABCD...P": every window is an ascending run
        result = generate(GenerationConfig(length=16), fixed_source(list(range(16))))
        assert result.password == "ABCDEFGHIJKLMNOP"
        assert result.pool.size == 94
        assert result.report.raw_entropy_bits == pytest.approx(104.87, abs=0.01)
        assert result.report.sequence_penalty == 0.5

    def test_invalid_length(self):
        with pytest.raises(InvalidLength):
            generate(GenerationConfig(length=200))

    def test_no_character_types(self):
        cfg = GenerationConfig(
            include_uppercase=False,
            include_lowercase=False,
            include_numbers=False,
            include_symbols=False,
        )
        with pytest.raises(NoCharacterTypesSelected):
            generate(cfg)

    def test_randomness_unavailable(self):
        with pytest.raises(RandomnessUnavailable):
            generate(source=BrokenSource())
