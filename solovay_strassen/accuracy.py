# Cross-check is_prime against sympy on random primes, semiprimes and
# Carmichael numbers. Usage: python -m solovay_strassen.accuracy [--seed 42]
import argparse
import csv
import random
from concurrent.futures import ThreadPoolExecutor, as_completed

from sympy import isprime, nextprime

from . import config
from .oracle import is_prime

CARMICHAEL = [561, 1105, 1729, 2465, 2821, 6601, 8911, 10585, 15841, 29341, 41041, 62745]

def rand_k_digit_prime(k, rng):
    lo = 10**(k-1)
    hi = 10**k - 1
    return int(nextprime(rng.randrange(lo, hi)))

def rand_semiprime(k, rng):
    k1 = max(1, k//2)
    k2 = max(1, k - k1)
    return rand_k_digit_prime(k1, rng) * rand_k_digit_prime(k2, rng)

def cases(rng):
    yield 97, "prime"
    yield 91, "composite"
    yield 0x7FFF_FFFF, "prime"
    yield 0x7FFF_FFFE, "composite"
    for n in CARMICHAEL:
        yield n, "composite"
    for k in [2, 4, 6, 9, 12, 16, 20, 30]:
        for _ in range(3):
            yield rand_k_digit_prime(k, rng), "prime"
            yield rand_semiprime(k, rng), "composite"

def run_case(n, expect, trials, seed):
    got = is_prime(n, trials, seed=seed, executor="serial")
    truth = isprime(n)
    ok = got == truth and (expect == "prime") == truth
    return {"n": str(n), "digits": len(str(n)), "expect": expect,
            "sympy": truth, "ss": got, "ok": ok}

def run_suite(seed=42, trials=None, max_workers=8):
    rng = random.Random(seed)
    trials = trials or config.TRIALS
    jobs = list(cases(rng))
    results = []
    with ThreadPoolExecutor(max_workers=max_workers) as ex:
        futs = [ex.submit(run_case, n, tag, trials, rng.randrange(1 << 32)) for n, tag in jobs]
        for fut in as_completed(futs):
            results.append(fut.result())
    return results

def main(argv=None):
    ap = argparse.ArgumentParser(description="Compare Solovay-Strassen verdicts with sympy.isprime")
    ap.add_argument("--seed", type=int, default=42)
    ap.add_argument("-k", "--trials", type=int, default=config.TRIALS)
    ap.add_argument("--csv", default="accuracy_failures.csv", help="where to write failures")
    args = ap.parse_args(argv)

    results = run_suite(args.seed, args.trials)
    total = len(results)
    ok = sum(1 for r in results if r["ok"])
    by = {}
    for r in results:
        by.setdefault(r["expect"], [0, 0])
        by[r["expect"]][0 if r["ok"] else 1] += 1

    print("\n=== SUMMARY ===")
    print(f"Total: {total} | PASS: {ok} | FAIL: {total-ok}")
    for k, (p, f) in by.items():
        print(f"  {k:10s}  PASS {p:3d}  FAIL {f:3d}")

    fails = [r for r in results if not r["ok"]]
    if fails:
        with open(args.csv, "w", newline="") as f:
            w = csv.DictWriter(f, fieldnames=list(fails[0].keys()))
            w.writeheader()
            w.writerows(fails)
        print(f"\nWrote details for {len(fails)} failures to {args.csv}")
        return 1
    print("\nNo failures recorded.")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
