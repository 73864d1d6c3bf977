# solovay_strassen/arith.py
# Modular exponentiation over two integer regimes:
# - U64: fixed-width unsigned 64-bit, checked multiplication
# - BIG: arbitrary precision via gmpy2.mpz

from __future__ import annotations
import logging

import gmpy2

log = logging.getLogger(__name__)

# ---------- Plain square-and-multiply ----------

def mod_pow(x: int, e: int, n: int) -> int:
    """x^e mod n, binary method, bits of e from low to high."""
    if n < 1:
        raise ValueError("modulus must be >= 1")
    if e < 0:
        raise ValueError("negative exponent not supported")
    if n == 1:
        return 0
    res = 1
    x %= n
    while e:
        if e & 1:
            res = res * x % n
        e >>= 1
        x = x * x % n
    return res

# ---------- Regimes ----------

class ArbitraryPrecision:
    name = "big"

    def coerce(self, x) -> gmpy2.mpz:
        v = gmpy2.mpz(x)
        if v < 0:
            raise ValueError(f"expected a non-negative integer, got {x}")
        return v

    def mod_pow(self, x, e, n) -> gmpy2.mpz:
        if n < 1:
            raise ValueError("modulus must be >= 1")
        if n == 1:
            return gmpy2.mpz(0)
        return gmpy2.powmod(x, e, n)

    def __repr__(self):
        return "BIG"


class FixedWidth:
    """Unsigned integers of a fixed bit width. Never wraps: products that
    would not fit raise, and mod_pow promotes to BIG when (n-1)^2 can't fit."""

    def __init__(self, bits: int = 64):
        self.bits = bits
        self.max = (1 << bits) - 1
        self.name = f"u{bits}"

    def coerce(self, x) -> int:
        v = int(x)
        if not 0 <= v <= self.max:
            raise ValueError(f"{x} does not fit in {self.name}")
        return v

    def mul(self, a: int, b: int) -> int:
        r = a * b
        if r > self.max:
            raise OverflowError(f"{a} * {b} overflows {self.name}")
        return r

    def fits_square(self, n: int) -> bool:
        if n <= 1:
            return True
        return n - 1 < self.max // (n - 1)

    def mod_pow(self, x: int, e: int, n: int) -> int:
        if n < 1:
            raise ValueError("modulus must be >= 1")
        if n == 1:
            return 0
        if not self.fits_square(n):
            log.debug("%s: (n-1)^2 overflows for n=%d, promoting to BIG", self.name, n)
            return int(BIG.mod_pow(x, e, n))
        res = 1
        x %= n
        while e:
            if e & 1:
                res = self.mul(res, x) % n
            e >>= 1
            x = self.mul(x, x) % n
        return res

    def __repr__(self):
        return self.name.upper()


U64 = FixedWidth(64)
BIG = ArbitraryPrecision()

_REGIMES = {"u64": U64, "big": BIG}


def regime_for(n: int):
    """Smallest regime that holds n."""
    return U64 if 0 <= n <= U64.max else BIG


def get_regime(name, n: int | None = None):
    """Regime by name ("auto", "u64", "big"); regime objects pass through."""
    if isinstance(name, (FixedWidth, ArbitraryPrecision)):
        return name
    name = (name or "auto").strip().lower()
    if name == "auto":
        return BIG if n is None else regime_for(n)
    try:
        return _REGIMES[name]
    except KeyError:
        raise ValueError(f"unknown integer regime: {name!r}") from None
