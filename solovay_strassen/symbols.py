from __future__ import annotations


def jacobi(a, n) -> int:
    """Jacobi symbol (a/n) for a >= 0 and odd n > 0.

    Iterative quadratic reciprocity. Works the same on int and gmpy2.mpz;
    the sign is kept in `res`, the working values stay non-negative.
    """
    if n <= 0 or n % 2 == 0:
        raise ValueError("n must be odd positive")
    if a < 0:
        raise ValueError("a must be non-negative")
    res = 1
    while a != 0:
        while a % 2 == 0:
            a //= 2
            if n % 8 in (3, 5):
                res = -res
        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            res = -res
        a %= n
    return res if n == 1 else 0


def legendre(a, p) -> int:
    """Legendre symbol (a/p) for an odd prime p; 0 when p divides a."""
    return jacobi(a, p)
