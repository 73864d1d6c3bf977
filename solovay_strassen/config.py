import os

# Trials per is_prime call; false-prime probability is at most 2^-TRIALS
TRIALS    = int(os.getenv("SS_TRIALS", "100"))
# 0 => os.cpu_count()
WORKERS   = int(os.getenv("SS_WORKERS", "0"))
EXECUTOR  = os.getenv("SS_EXECUTOR", "process").strip().lower()   # process | thread | serial
REGIME    = os.getenv("SS_REGIME", "auto").strip().lower()        # auto | u64 | big
MAX_BITS  = int(os.getenv("SS_MAX_BITS", "4096"))                 # HTTP API input cap
MAX_TRIALS = int(os.getenv("SS_MAX_TRIALS", "10000"))             # HTTP API k cap
LOG_LEVEL = os.getenv("SS_LOG_LEVEL", "WARNING").strip().upper()


def worker_count(k: int, workers: int | None = None) -> int:
    """Pool size: explicit value, else WORKERS, else cpu count; never more than k."""
    w = workers if workers is not None else WORKERS
    if not w or w < 1:
        w = os.cpu_count() or 1
    return max(1, min(w, k))
