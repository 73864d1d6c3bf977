# solovay_strassen/witness.py
# One Solovay-Strassen round: is base `a` a witness for the compositeness of `n`?

from __future__ import annotations
import operator
from typing import Tuple

from .arith import get_regime
from .symbols import jacobi
from . import config


class InvalidInput(ValueError):
    """Arguments outside the test's domain (a < 2, n < 3, even n, n | a)."""


def euler_pair(a, n, regime) -> Tuple[int, int]:
    """(a/n) and a^((n-1)/2) mod n, unchecked."""
    x = jacobi(a, n)
    m = regime.mod_pow(a, (n - 1) // 2, n)
    return x, m


def single_trial(a, n, regime) -> bool:
    # Euler criterion: for prime n, (a/n) == a^((n-1)/2) (mod n)
    x, m = euler_pair(a, n, regime)
    return x == 0 or x % n != m


def check_args(a, n) -> Tuple[int, int]:
    if isinstance(a, bool) or isinstance(n, bool):
        raise InvalidInput("a and n must be integers")
    try:
        a, n = operator.index(a), operator.index(n)
    except TypeError:
        raise InvalidInput("a and n must be integers") from None
    if a < 2:
        raise InvalidInput(f"base must be >= 2, got {a}")
    if n < 3:
        raise InvalidInput(f"n must be >= 3, got {n}")
    if n % 2 == 0:
        raise InvalidInput(f"n must be odd, got {n}")
    if a % n == 0:
        raise InvalidInput(f"base must not be a multiple of n, got a={a}")
    return a, n


def solovay_strassen(a: int, n: int, regime=None) -> bool:
    """Test whether `a` is a witness for the compositeness of `n`.

    True means n is definitely composite. False means this round was
    inconclusive. Raises InvalidInput if a < 2, n < 3, n is even or
    a is a multiple of n.

    >>> solovay_strassen(2, 27)
    True
    """
    a, n = check_args(a, n)
    regime = get_regime(regime or config.REGIME, max(a, n))
    a, n = regime.coerce(a), regime.coerce(n)
    return single_trial(a, n, regime)


is_witness = solovay_strassen
