# CLI: solovay-strassen -n N [-k 100]
import argparse
import logging
import sys

from . import config
from .oracle import find_witness, is_prime


def _parse_n(ap: argparse.ArgumentParser, s: str | None) -> int:
    if s is None:
        ap.error("Missing integer.")
    t = s.strip()
    digits = t[1:] if t.startswith("-") else t
    if not (digits.isascii() and digits.isdigit()):
        ap.error(f"Invalid number, `{s}`")
    n = int(t, 10)
    if n < 0:
        ap.error(f"Invalid number, `{s}` (must be non-negative)")
    return n


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(
        prog="solovay-strassen",
        description="Simple Solovay-Strassen algorithm for testing the primality of integers.")
    ap.add_argument("-n", "--integer", help="Integer to test")
    ap.add_argument("-k", "--trials", type=int, default=config.TRIALS,
                    help=f"number of random trials (default: {config.TRIALS})")
    ap.add_argument("--seed", type=int, default=None, help="rng seed for reproducibility")
    ap.add_argument("--workers", type=int, default=None, help="pool size (default: cpu count)")
    ap.add_argument("--executor", choices=("process", "thread", "serial"), default=None)
    ap.add_argument("--regime", choices=("auto", "u64", "big"), default=None)
    ap.add_argument("--witness", action="store_true", help="print the witness base for composites")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    n = _parse_n(ap, args.integer)
    if args.trials < 1:
        ap.error("trials must be >= 1")
    opts = dict(seed=args.seed, workers=args.workers, executor=args.executor, regime=args.regime)
    want_witness = args.witness and n > 3 and n % 2
    hit = None
    try:
        if want_witness:
            hit = find_witness(n, args.trials, **opts)
            result = hit is None
        else:
            result = is_prime(n, args.trials, **opts)
    except ValueError as e:  # e.g. n too wide for --regime u64
        ap.error(str(e))

    print(f"{n} {'is likely prime' if result else 'is composite'}")
    if hit is not None:
        print(f"witness a={hit.base}  (a/n)={hit.symbol}  a^((n-1)/2) mod n={hit.euler}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
