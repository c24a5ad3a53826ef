# primality/primes/cli.py
# Usage: python -m primality.primes.cli 5381 481232109 [--file numbers.txt] [--backend oracle|sympy|trial] [--verify]

import argparse
import logging
import sys
import time

from primality.config import backend_name
from primality.primes.backends import BACKEND_NAMES, SympyBackend, get_backend

DEFAULT_NUMBERS = (5381, 481232109, 23918221039111)

logger = logging.getLogger(__name__)


def _read_numbers(path: str):
    numbers = []
    with open(path, "r") as f:
        for line in f:
            line = line.split("#", 1)[0].strip()
            if line:
                numbers.append(int(line))
    return numbers


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Deterministic 64-bit primality checker")
    parser.add_argument("numbers", nargs="*", type=int, help="Integers to test")
    parser.add_argument("--file", type=str, default=None, help="Read integers from a file, one per line")
    parser.add_argument(
        "--backend",
        type=str,
        default=None,
        choices=list(BACKEND_NAMES),
        help="Primality backend (default: $PRIMALITY_BACKEND or oracle)",
    )
    parser.add_argument(
        "--trial-digits",
        type=int,
        default=None,
        help="Largest digit length settled by trial division (oracle backend)",
    )
    parser.add_argument("--verify", action="store_true", help="Cross-check every answer against sympy")
    parser.add_argument("--show-input", action="store_true", help="Prefix each answer with its input")
    parser.add_argument("--time", action="store_true", help="Report elapsed time on stderr")
    parser.add_argument("--verbose", action="store_true", help="Log tier decisions")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.trial_digits is not None and args.trial_digits < 1:
        print("Error: --trial-digits must be >= 1", file=sys.stderr)
        return 2

    numbers = list(args.numbers)
    if args.file:
        try:
            numbers.extend(_read_numbers(args.file))
        except (OSError, ValueError) as e:
            print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
            return 2
    if not numbers:
        numbers = list(DEFAULT_NUMBERS)

    try:
        backend = get_backend(args.backend or backend_name(), trial_digits=args.trial_digits)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    reference = SympyBackend() if args.verify else None

    mismatches = 0
    t0 = time.time()
    for n in numbers:
        try:
            answer = backend.is_prime(n)
        except (TypeError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        text = "true" if answer else "false"
        print(f"{n}: {text}" if args.show_input else text)
        if reference is not None and reference.is_prime(n) != answer:
            mismatches += 1
            logger.error("%s backend disagrees with sympy on %d", backend.name, n)
    dt = time.time() - t0

    if args.time:
        print(f"Time: {dt:.3f}s ({len(numbers)} numbers, backend {backend.name})", file=sys.stderr)
    if mismatches:
        print(f"Mismatches: {mismatches}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
