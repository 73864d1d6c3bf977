# solovay_strassen/oracle.py
# Multi-trial Solovay-Strassen oracle
# - k bases drawn uniformly from [2, n), with replacement
# - trials fanned out over a process/thread pool
# - first witness wins, pending work is cancelled

from __future__ import annotations
import concurrent.futures
import logging
import operator
import random
import time
from dataclasses import dataclass
from typing import List, Optional

from . import config
from .arith import get_regime
from .witness import InvalidInput, single_trial, euler_pair

log = logging.getLogger(__name__)

_POOLS = {
    "process": concurrent.futures.ProcessPoolExecutor,
    "thread": concurrent.futures.ThreadPoolExecutor,
}
# chunks submitted per worker; more chunks => finer-grained early exit
_CHUNKS_PER_WORKER = 4

@dataclass
class Witness:
    base: int
    n: int
    symbol: int
    euler: int
    elapsed_ms: int

def confidence(k: int) -> float:
    """1 - 2^-k, the caller-side bound for k trials on a composite n."""
    return 1.0 - 2.0 ** -k

# ---------- Sampling ----------

def sample_bases(n: int, k: int, rng: random.Random) -> List[int]:
    n = int(n)
    return [rng.randrange(2, n) for _ in range(k)]

# ---------- Workers (module level so the process pool can pickle them) ----------

def _scan(bases, n, regime) -> Optional[int]:
    for a in bases:
        if single_trial(a, n, regime):
            return a
    return None

def _chunks(seq: list, parts: int) -> List[list]:
    size = max(1, -(-len(seq) // parts))
    return [seq[i:i + size] for i in range(0, len(seq), size)]

def _run(bases: list, n, regime, workers: int, kind: str) -> Optional[int]:
    if kind != "serial" and kind not in _POOLS:
        raise ValueError(f"unknown executor: {kind!r}")
    if kind == "serial" or workers <= 1:
        return _scan(bases, n, regime)
    pool_cls = _POOLS[kind]

    chunks = _chunks(bases, workers * _CHUNKS_PER_WORKER)
    log.debug("%s pool: %d workers, %d chunks, n=%s", kind, workers, len(chunks), n)
    executor = pool_cls(max_workers=workers)
    try:
        futures = [executor.submit(_scan, c, n, regime) for c in chunks]
        for future in concurrent.futures.as_completed(futures):
            hit = future.result()
            if hit is not None:
                log.debug("early exit on base %s", hit)
                return hit
    finally:
        # don't block on chunks that are already running
        executor.shutdown(wait=False, cancel_futures=True)
    return None

# ---------- Entry points ----------

def _check_k(k) -> int:
    if k is None:
        k = config.TRIALS
    if isinstance(k, bool):
        raise TypeError("k must be an integer")
    k = operator.index(k)
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    return k

def _check_n(n) -> int:
    if isinstance(n, bool):
        raise TypeError("n must be an integer")
    return operator.index(n)

def find_witness(n, k: int | None = None, *, regime=None, rng: random.Random | None = None,
                 seed: int | None = None, workers: int | None = None,
                 executor: str | None = None) -> Optional[Witness]:
    """Run k trials against odd n >= 3 and return the first witness found, or None."""
    n, k = _check_n(n), _check_k(k)
    if n < 3 or n % 2 == 0:
        raise InvalidInput(f"n must be odd and >= 3, got {n}")

    t0 = time.time()
    regime = get_regime(regime or config.REGIME, n)
    n = regime.coerce(n)
    if rng is None:
        rng = random.Random(seed)
    bases = [regime.coerce(a) for a in sample_bases(n, k, rng)]
    w = config.worker_count(k, workers)
    kind = (executor or config.EXECUTOR).strip().lower()

    hit = _run(bases, n, regime, w, kind)
    ms = int((time.time() - t0) * 1000)
    if hit is None:
        log.debug("no witness for n=%s in %d trials (%d ms)", n, k, ms)
        return None
    symbol, euler = euler_pair(hit, n, regime)
    log.debug("witness %s for n=%s (%d ms)", hit, n, ms)
    return Witness(int(hit), int(n), int(symbol), int(euler), ms)

def is_prime(n, k: int | None = None, *, regime=None, rng: random.Random | None = None,
             seed: int | None = None, workers: int | None = None,
             executor: str | None = None) -> bool:
    """
    Test whether n is likely prime with k Solovay-Strassen trials.
    False is definite; True is wrong with probability at most 2^-k.
    """
    n, k = _check_n(n), _check_k(k)
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0:
        return False
    return find_witness(n, k, regime=regime, rng=rng, seed=seed,
                        workers=workers, executor=executor) is None
