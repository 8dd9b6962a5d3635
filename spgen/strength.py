"""
Strength evaluator.

Scores a password from its length and the size of the pool it was drawn
from, then corrects the raw entropy for runs of consecutive characters,
character-class diversity, well-known passwords and keyboard walks.
The result is classified into a SecurityTier and turned into an average
brute-force crack time.

Everything here is a pure function of its arguments; the lookup tables
are immutable module-level data.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Tuple

from .charsets import LOWERCASE, NUMBERS, SYMBOLS, UPPERCASE
from .config import DEFAULT_ATTACK_RATE, RECOMMENDED_MIN_LENGTH, GenerationConfig

# Upper bound of the sequence penalty fraction.
MAX_SEQUENCE_PENALTY = 0.5

# Diversity bonus only applies from this length on.
DIVERSITY_MIN_LENGTH = 8
DIVERSITY_BONUS = MappingProxyType({1: 0.0, 2: 0.08, 3: 0.18, 4: 0.28})

COMMON_PASSWORD_PENALTY = 0.5
COMMON_PASSWORD_CEILING = 10.0
KEYBOARD_PATTERN_PENALTY = 0.4

# Entropy at which a strength meter reads 100%.
METER_FULL_SCALE_BITS = 150.0

COMMON_PASSWORDS = frozenset(
    {
        "password", "123456", "123456789", "qwerty", "abc123",
        "letmein", "monkey", "dragon", "111111", "iloveyou",
        "admin", "welcome", "football", "123123", "starwars",
        "qwertyuiop", "passw0rd", "master", "hello", "freedom",
        "whatever", "qazwsx", "trustno1", "654321", "jordan23",
        "superman", "harley", "hunter", "baseball", "batman",
    }
)

KEYBOARD_PATTERNS: Tuple[str, ...] = (
    "qwerty", "asdf", "zxcv", "12345", "qazwsx", "1q2w3e",
    "wasd", "poiuy", "lkjhg", "mnbvc", "pass", "word",
)

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_YEAR = 31536000


class SecurityTier(Enum):
    """
    Half-open entropy buckets [lower, upper); EXCELLENT is unbounded.
    """

    VERY_WEAK = (0.0, 25.0, "Very weak", "weak")
    WEAK = (25.0, 50.0, "Weak", "weak")
    FAIR = (50.0, 75.0, "Fair", "fair")
    GOOD = (75.0, 100.0, "Good", "good")
    STRONG = (100.0, 125.0, "Strong", "strong")
    EXCELLENT = (125.0, math.inf, "Excellent", "excellent")

    def __init__(self, lower: float, upper: float, label: str, css_class: str) -> None:
        self.lower = lower
        self.upper = upper
        self.label = label
        self.css_class = css_class

    @property
    def is_weak(self) -> bool:
        return self in (SecurityTier.VERY_WEAK, SecurityTier.WEAK)

    @classmethod
    def for_entropy(cls, bits: float) -> "SecurityTier":
        for tier in cls:
            if tier.lower <= bits < tier.upper:
                return tier
        return cls.EXCELLENT


@dataclass(frozen=True)
class StrengthReport:
    raw_entropy_bits: float
    adjusted_entropy_bits: float
    tier: SecurityTier
    estimated_crack_time: str
    crack_seconds: float
    is_common_password: bool
    recommendations: Tuple[str, ...] = ()

    # Intermediate factors, kept for display and debugging.
    sequence_penalty: float = 0.0
    diversity_bonus: float = 0.0
    keyboard_penalty: float = 0.0

    meter_percent: float = field(init=False)
    feedback_level: str = field(init=False)

    def __post_init__(self) -> None:
        percent = min(self.adjusted_entropy_bits / METER_FULL_SCALE_BITS * 100, 100.0)
        object.__setattr__(self, "meter_percent", percent)
        object.__setattr__(
            self, "feedback_level", "warning" if self.tier.is_weak else "info"
        )

    def as_dict(self) -> Dict[str, object]:
        return {
            "raw_entropy_bits": round(self.raw_entropy_bits, 2),
            "adjusted_entropy_bits": round(self.adjusted_entropy_bits, 2),
            "tier": self.tier.name,
            "tier_label": self.tier.label,
            "estimated_crack_time": self.estimated_crack_time,
            "is_common_password": self.is_common_password,
            "recommendations": list(self.recommendations),
            "sequence_penalty": round(self.sequence_penalty, 4),
            "diversity_bonus": self.diversity_bonus,
            "keyboard_penalty": self.keyboard_penalty,
            "meter_percent": round(self.meter_percent, 1),
            "feedback_level": self.feedback_level,
        }


# ---------- entropy factors ----------


def base_entropy(password: str, pool_size: int) -> float:
    """len(password) * log2(pool_size), or 0 for an empty password or a
    pool of at most one symbol."""
    if not password or pool_size <= 1:
        return 0.0
    return len(password) * math.log2(pool_size)


def sequence_penalty(password: str) -> float:
    """
    Fraction of 3-character windows whose code points step by exactly +1
    or exactly -1 twice in a row ("abc", "321"), capped at 0.5.
    """
    windows = len(password) - 2
    if windows <= 0:
        return 0.0

    hits = 0
    for i in range(windows):
        a, b, c = (ord(ch) for ch in password[i : i + 3])
        if b == a + 1 and c == b + 1:
            hits += 1
        elif b == a - 1 and c == b - 1:
            hits += 1
    return min(hits / windows, MAX_SEQUENCE_PENALTY)


def character_classes(password: str) -> List[str]:
    """Names of the classes (lowercase, uppercase, digit, symbol) present."""
    found = []
    if any("a" <= ch <= "z" for ch in password):
        found.append("lowercase")
    if any("A" <= ch <= "Z" for ch in password):
        found.append("uppercase")
    if any("0" <= ch <= "9" for ch in password):
        found.append("digit")
    if any(not ch.isascii() or not ch.isalnum() for ch in password):
        found.append("symbol")
    return found


def diversity_bonus(password: str) -> float:
    if len(password) < DIVERSITY_MIN_LENGTH:
        return 0.0
    return DIVERSITY_BONUS.get(len(character_classes(password)), 0.0)


def is_common_password(password: str) -> bool:
    return password.lower() in COMMON_PASSWORDS


def keyboard_pattern_penalty(password: str) -> float:
    lower = password.lower()
    if any(pattern in lower for pattern in KEYBOARD_PATTERNS):
        return KEYBOARD_PATTERN_PENALTY
    return 0.0


def estimate_pool_size(password: str) -> int:
    """
    Guess the pool a typed password was drawn from by summing the sizes of
    the canonical sets whose class it uses.
    """
    sizes = {
        "lowercase": len(LOWERCASE),
        "uppercase": len(UPPERCASE),
        "digit": len(NUMBERS),
        "symbol": len(SYMBOLS),
    }
    return sum(sizes[name] for name in character_classes(password))


# ---------- crack time ----------


def estimate_crack_seconds(entropy_bits: float, attack_rate: float = DEFAULT_ATTACK_RATE) -> float:
    """
    Average brute-force time: half of 2**entropy guesses at `attack_rate`
    guesses per second.
    """
    if attack_rate <= 0:
        raise ValueError("attack_rate must be positive.")
    try:
        combinations = 2.0 ** entropy_bits
    except OverflowError:
        return math.inf
    return combinations / (2 * attack_rate)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_crack_time(seconds: float) -> str:
    if seconds < 1:
        return "Instantaneous"
    if seconds < SECONDS_PER_MINUTE:
        return f"{_round_half_up(seconds)} seconds"
    if seconds < SECONDS_PER_HOUR:
        return f"{_round_half_up(seconds / SECONDS_PER_MINUTE)} minutes"
    if seconds < SECONDS_PER_DAY:
        return f"{_round_half_up(seconds / SECONDS_PER_HOUR)} hours"
    if seconds < SECONDS_PER_YEAR:
        return f"{_round_half_up(seconds / SECONDS_PER_DAY)} days"

    years = seconds / SECONDS_PER_YEAR
    if years < 1e6:
        return f"{_round_half_up(years):,} years"
    if years < 1e9:
        return f"{_round_half_up(years / 1e6)} million years"
    if years < 1e12:
        return f"{_round_half_up(years / 1e9)} billion years"
    return "Longer than the age of the universe"


# ---------- recommendations ----------


def recommendations_for(
    password: str,
    tier: SecurityTier,
    common: bool,
    config: GenerationConfig | None = None,
) -> Tuple[str, ...]:
    length = len(password)
    tips: List[str] = []

    if length < RECOMMENDED_MIN_LENGTH:
        tips.append(
            f"Consider using at least {RECOMMENDED_MIN_LENGTH} characters for better security."
        )
    if tier.is_weak:
        tips.append(
            "This password is vulnerable. Use more character types or increase the length."
        )
    if config is not None:
        if not config.include_symbols and length < 16:
            tips.append("Adding special symbols significantly improves security.")
        if config.exclude_ambiguous and length < 14:
            tips.append(
                "When excluding ambiguous characters, consider using a longer password."
            )
    if common:
        tips.append("This password is very common. Choose a stronger one.")

    return tuple(tips)


# ---------- public entry point ----------


def evaluate(
    password: str,
    pool_size: int,
    config: GenerationConfig | None = None,
    attack_rate: float = DEFAULT_ATTACK_RATE,
) -> StrengthReport:
    """
    Score `password` as if each character was drawn from a pool of
    `pool_size` symbols.

    `config`, when given, is the configuration the password was generated
    with; it only adds configuration-specific recommendations.
    """
    raw = base_entropy(password, pool_size)

    seq = sequence_penalty(password)
    bonus = diversity_bonus(password)
    entropy = max(0.0, raw * (1 - seq) * (1 + bonus))

    common = is_common_password(password)
    keyboard = keyboard_pattern_penalty(password)
    common_penalty = COMMON_PASSWORD_PENALTY if common else 0.0

    adjusted = entropy * (1 - common_penalty) * (1 - keyboard)
    if common:
        adjusted = min(adjusted, COMMON_PASSWORD_CEILING)

    tier = SecurityTier.for_entropy(adjusted)
    seconds = estimate_crack_seconds(adjusted, attack_rate)

    return StrengthReport(
        raw_entropy_bits=raw,
        adjusted_entropy_bits=adjusted,
        tier=tier,
        estimated_crack_time=format_crack_time(seconds),
        crack_seconds=seconds,
        is_common_password=common,
        recommendations=recommendations_for(password, tier, common, config),
        sequence_penalty=seq,
        diversity_bonus=bonus,
        keyboard_penalty=keyboard,
    )
