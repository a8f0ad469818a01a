#!/usr/bin/env python3
"""
Print every toolkit function applied to a fixed set of example inputs.

Example:
  python3 tools/numeric_demo.py --seed 7 --samples 5
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.numeric import (
    InvalidArgument,
    ToolkitConfig,
    average,
    default_rng,
    factorial,
    fibonacci,
    gcd,
    is_prime,
    lcm,
    median,
    mode,
    power,
    random_in_range,
)

logger = logging.getLogger("numeric_demo")


def _configure_logging(level: int) -> None:
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    for name in ("numeric_demo", "src.numeric"):
        lg = logging.getLogger(name)
        lg.setLevel(level)
        lg.addHandler(handler)
        lg.propagate = False


def _print_number_theory() -> None:
    print("--- Number theory ---")
    for a, b in ((48, 18), (0, 100), (-48, 18)):
        print(f"GCD of {a} and {b}: {gcd(a, b)}")
    for a, b in ((12, 15), (7, 13), (0, 5)):
        print(f"LCM of {a} and {b}: {lcm(a, b)}")
    for n in (0, 1, 10, 50):
        print(f"Fibonacci({n}): {fibonacci(n)}")
    for n in (0, 5, 20):
        print(f"Factorial of {n}: {factorial(n)}")
    for n in (7, 1, 10, 2, 29, 97):
        print(f"Is {n} prime? {is_prime(n)}")
    for base, exp in ((2, 3), (10, 5), (-2, 2)):
        print(f"{base} to the power of {exp}: {power(base, exp)}")


def _print_statistics() -> None:
    print("--- Statistics ---")
    numbers = [10, 20, 30, 40, 50]
    mixed = [5.5, 10, 2.5, 7.0]
    odd = [1, 3, 5, 7, 9]
    even = [2, 4, 6, 8]
    single_mode = [1, 2, 2, 3, 4, 4, 4, 5, 5, 6]
    multi_mode = [1, 2, 2, 3, 4, 4, 5]
    print(f"Average of {numbers}: {average(numbers)}")
    print(f"Average of {mixed}: {average(mixed)}")
    for values in (numbers, odd, even):
        print(f"Median of {values}: {median(values)}")
    for values in (single_mode, multi_mode, []):
        print(f"Mode of {values}: {mode(values)}")


def _print_random(lo: int, hi: int, samples: int, rng: random.Random) -> None:
    print("--- Random ---")
    for _ in range(samples):
        print(f"Random integer between {lo} and {hi} (inclusive): {random_in_range(lo, hi, rng=rng)}")


def _print_errors() -> None:
    print("--- Errors ---")
    cases: Sequence[Callable[[], object]] = (
        lambda: average([]),
        lambda: factorial(-5),
        lambda: random_in_range(10, 5),
    )
    for case in cases:
        try:
            case()
        except InvalidArgument as exc:
            print(f"Error: {exc}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Numeric toolkit demonstration")
    parser.add_argument("--seed", type=int, default=None, help="Seed the RNG (default: env or OS entropy)")
    parser.add_argument("--samples", type=int, default=3, help="Number of random draws")
    parser.add_argument("--min", dest="lo", type=int, default=10, help="Lower bound for random draws")
    parser.add_argument("--max", dest="hi", type=int, default=20, help="Upper bound for random draws")
    args = parser.parse_args(argv)

    if args.samples < 0:
        parser.error("--samples must be non-negative")
    if args.hi < args.lo:
        parser.error("--max must be greater than or equal to --min")

    try:
        env_cfg = ToolkitConfig.from_env()
    except ValueError as exc:
        print(f"[numeric-demo] FAIL: {exc}", file=sys.stderr)
        return 2
    cfg = ToolkitConfig(
        random_seed=args.seed if args.seed is not None else env_cfg.random_seed,
        log_level=env_cfg.log_level,
    )
    _configure_logging(cfg.log_level_value)

    logger.info("starting demo (seed=%s samples=%d)", cfg.random_seed, args.samples)
    _print_number_theory()
    _print_statistics()
    _print_random(args.lo, args.hi, args.samples, default_rng(cfg))
    _print_errors()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
