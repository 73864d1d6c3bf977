import logging

from .arith import BIG, U64, mod_pow, regime_for
from .symbols import jacobi, legendre
from .witness import InvalidInput, is_witness, solovay_strassen
from .oracle import Witness, confidence, find_witness, is_prime

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BIG", "U64", "mod_pow", "regime_for",
    "jacobi", "legendre",
    "InvalidInput", "is_witness", "solovay_strassen",
    "Witness", "confidence", "find_witness", "is_prime",
]
