"""
Command-line interface and high-level generator function.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from typing import List, Sequence

from .charsets import CharacterPool, build_pool
from .config import (
    ATTACK_RATES,
    DEFAULT_ATTACK_PROFILE,
    DEFAULT_ATTACK_RATE,
    DEFAULT_CONFIG,
    DEFAULT_LENGTH,
    GenerationConfig,
)
from .errors import GenerationError
from .generator import generate_password
from .sources import SOURCES, RandomSource, get_source
from .strength import StrengthReport, estimate_pool_size, evaluate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """
    Full result of one password generation.
    """

    password: str
    pool: CharacterPool
    report: StrengthReport
    config: GenerationConfig


def generate(
    config: GenerationConfig | None = None,
    source: RandomSource | None = None,
    attack_rate: float = DEFAULT_ATTACK_RATE,
) -> GenerationResult:
    """
    High-level generation pipeline:

    - Validate the configuration.
    - Build the character pool.
    - Draw the password from a secure random source.
    - Evaluate its strength against the pool size.

    Raises a GenerationError subclass on any failure.
    """
    cfg = config or DEFAULT_CONFIG
    cfg.validate()

    pool = build_pool(cfg)
    password = generate_password(pool, cfg.length, source)
    report = evaluate(password, pool.size, cfg, attack_rate)

    logger.debug(
        "Password scored %.1f bits (%s)",
        report.adjusted_entropy_bits,
        report.tier.label,
    )
    return GenerationResult(password=password, pool=pool, report=report, config=cfg)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="spgen",
        description="Generate secure passwords and estimate their strength.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-l", "--length", type=int, default=DEFAULT_LENGTH, help="Password length"
    )
    parser.add_argument(
        "-c", "--count", type=int, default=1, help="Number of passwords to generate"
    )

    # Character class toggles
    parser.add_argument(
        "--no-upper",
        dest="include_uppercase",
        action="store_false",
        help="Exclude uppercase letters",
    )
    parser.add_argument(
        "--no-lower",
        dest="include_lowercase",
        action="store_false",
        help="Exclude lowercase letters",
    )
    parser.add_argument(
        "--no-digits",
        dest="include_numbers",
        action="store_false",
        help="Exclude digits",
    )
    parser.add_argument(
        "--no-symbols",
        dest="include_symbols",
        action="store_false",
        help="Exclude symbols",
    )
    parser.add_argument(
        "--exclude-ambiguous",
        action="store_true",
        help="Avoid look-alike characters (0 O 1 l I) and brackets/slashes",
    )

    parser.add_argument(
        "--source",
        choices=sorted(SOURCES),
        default="system",
        help="Random source",
    )

    rate = parser.add_mutually_exclusive_group()
    rate.add_argument(
        "--attack-profile",
        choices=list(ATTACK_RATES),
        default=DEFAULT_ATTACK_PROFILE,
        help="Attacker speed used for the crack-time estimate",
    )
    rate.add_argument(
        "--attack-rate",
        type=float,
        default=None,
        help="Explicit attacker speed in guesses per second",
    )

    parser.add_argument(
        "--check",
        metavar="PASSWORD",
        help="Evaluate an existing password instead of generating one",
    )
    parser.add_argument(
        "--pool-size",
        type=int,
        default=None,
        help="Pool size to assume with --check (estimated from the password if omitted)",
    )

    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def _print_report(report: StrengthReport) -> None:
    print(f"Strength:   {report.tier.label} ({report.adjusted_entropy_bits:.1f} bits)")
    print(f"Crack time: {report.estimated_crack_time}")
    if report.is_common_password:
        print("Warning:    this is a well-known password")
    for tip in report.recommendations:
        print(f"  - {tip}")


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for the `spgen` console script and `run_spgen.py`.
    """
    args = parse_arguments(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    attack_rate = (
        args.attack_rate
        if args.attack_rate is not None
        else ATTACK_RATES[args.attack_profile]
    )
    if attack_rate <= 0:
        logger.error("Attack rate must be positive.")
        return 2

    if args.check is not None:
        pool_size = (
            args.pool_size
            if args.pool_size is not None
            else estimate_pool_size(args.check)
        )
        report = evaluate(args.check, pool_size, attack_rate=attack_rate)
        if args.json:
            print(json.dumps({"pool_size": pool_size, **report.as_dict()}, indent=2))
        else:
            _print_report(report)
        return 0

    config = GenerationConfig(
        length=args.length,
        include_uppercase=args.include_uppercase,
        include_lowercase=args.include_lowercase,
        include_numbers=args.include_numbers,
        include_symbols=args.include_symbols,
        exclude_ambiguous=args.exclude_ambiguous,
    )
    source = get_source(args.source)

    results: List[GenerationResult] = []
    try:
        for _ in range(max(1, args.count)):
            results.append(generate(config, source, attack_rate))
    except GenerationError as exc:
        logger.error(str(exc))
        return 2

    if args.json:
        payload = [
            {"password": r.password, "pool_size": r.pool.size, **r.report.as_dict()}
            for r in results
        ]
        print(json.dumps(payload, indent=2))
        return 0

    print("\n[Secure Password Generator]")
    for r in results:
        print(f"Generated password: {r.password}")
        _print_report(r.report)
        print()
    return 0
