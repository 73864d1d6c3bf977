import logging
import time

from flask import Blueprint, Flask, jsonify, request

from . import config
from .arith import get_regime
from .oracle import confidence, find_witness
from .witness import euler_pair, solovay_strassen

log = logging.getLogger(__name__)

prime_bp = Blueprint("prime_bp", __name__)

# ------------------ helpers ------------------
def _int_param(value, name: str) -> int:
    s = str(value if value is not None else "").strip()
    if not s:
        raise ValueError(f"missing {name}")
    digits = s[1:] if s.startswith("-") else s
    # plain ASCII decimal only: no "1_000", no non-Latin digits
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"{name} must be an integer")
    return int(s, 10)

def _bad(msg: str):
    return jsonify({"error": msg}), 400

# ------------------ API ------------------
@prime_bp.get("/api/health")
def health():
    return jsonify({"ok": True, "executor": config.EXECUTOR,
                    "workers": config.worker_count(config.TRIALS), "trials": config.TRIALS,
                    "time": int(time.time())})

@prime_bp.get("/api/is_prime")
def api_is_prime():
    try:
        n = _int_param(request.args.get("n"), "n")
        k = _int_param(request.args.get("k", config.TRIALS), "k")
    except ValueError as e:
        return _bad(str(e))
    if n < 0:
        return _bad("n must be non-negative")
    if n.bit_length() > config.MAX_BITS:
        return _bad(f"Max {config.MAX_BITS} bits.")
    if not 1 <= k <= config.MAX_TRIALS:
        return _bad(f"k must be in [1, {config.MAX_TRIALS}]")

    t0 = time.time()
    witness = None
    if n <= 1:
        prime = False
    elif n <= 3:
        prime = True
    elif n % 2 == 0:
        prime = False
    else:
        try:
            hit = find_witness(n, k)
        except ValueError as e:
            return _bad(str(e))
        prime = hit is None
        witness = None if hit is None else str(hit.base)
    ms = int((time.time() - t0) * 1000)
    log.info("is_prime n_bits=%d k=%d prime=%s ms=%d", n.bit_length(), k, prime, ms)
    return jsonify({"n": str(n), "k": k, "bits": n.bit_length(), "prime": prime,
                    "confidence": confidence(k) if prime else 1.0,
                    "witness": witness, "elapsed_ms": ms})

@prime_bp.post("/api/witness")
def api_witness():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return _bad("expected a JSON object")
    try:
        a = _int_param(data.get("a"), "a")
        n = _int_param(data.get("n"), "n")
    except ValueError as e:
        return _bad(str(e))
    if max(a, n).bit_length() > config.MAX_BITS:
        return _bad(f"Max {config.MAX_BITS} bits.")
    try:
        hit = solovay_strassen(a, n)
    except ValueError as e:  # InvalidInput, or out of range for a forced regime
        return _bad(str(e))
    regime = get_regime(config.REGIME, max(a, n))
    symbol, euler = euler_pair(regime.coerce(a), regime.coerce(n), regime)
    return jsonify({"a": str(a), "n": str(n), "witness": hit,
                    "symbol": int(symbol), "euler": str(euler)})


def create_app() -> Flask:
    app = Flask(__name__)
    app.register_blueprint(prime_bp)
    return app
