import random
import threading
import time

import pytest
from sympy import nextprime

from solovay_strassen import Witness, config, confidence, find_witness, is_prime, jacobi, solovay_strassen
from solovay_strassen import oracle
from solovay_strassen.oracle import sample_bases

K = 100
CARMICHAEL = [561, 1105, 1729, 2465, 2821, 6601, 8911]


def test_mersenne_prime():
    # default executor (process pool)
    assert is_prime(0x7FFF_FFFF, K) is True


def test_mersenne_prime_minus_one():
    assert is_prime(0x7FFF_FFFE, K) is False


@pytest.mark.parametrize("k", [1, 5, K])
def test_trivial_small_primes(k):
    assert is_prime(2, k) is True
    assert is_prime(3, k) is True


@pytest.mark.parametrize("n", [-7, 0, 1, 4, 6, 100, 2**64])
def test_trivial_non_primes(n):
    assert is_prime(n, 5) is False


@pytest.mark.parametrize("n", CARMICHAEL)
def test_carmichael_numbers_are_composite(n, thread_pool):
    assert is_prime(n, 30, seed=n) is False


def test_primes_never_rejected():
    for p in (5, 7, 97, 7919, 0x7FFF_FFFF, 2**61 - 1):
        for seed in range(10):
            assert is_prime(p, 10, seed=seed, executor="serial") is True


def test_big_prime_and_semiprime(thread_pool):
    p = int(nextprime(2**255 + 12345))
    q = int(nextprime(2**200 + 999))
    assert is_prime(p, 40, seed=1) is True
    assert is_prime(p * q, 40, seed=1) is False


def test_u64_edge_prime():
    assert is_prime(2**64 - 59, 20, regime="u64", executor="serial") is True
    assert is_prime(2**64 - 59, 20, regime="big", executor="serial") is True


@pytest.mark.parametrize("n", [561, 1105, 91, (2**31 - 1) * (2**19 - 1)])
def test_executors_agree(n):
    verdicts = {kind: is_prime(n, 25, seed=3, executor=kind, workers=2)
                for kind in ("serial", "thread", "process")}
    assert set(verdicts.values()) == {False}


def test_find_witness_report():
    hit = find_witness(561, 50, seed=7, executor="serial")
    assert isinstance(hit, Witness)
    assert hit.n == 561
    assert 2 <= hit.base < 561
    assert solovay_strassen(hit.base, 561)
    assert hit.symbol == jacobi(hit.base, 561)
    assert hit.euler == pow(hit.base, 280, 561)
    assert hit.elapsed_ms >= 0


def test_find_witness_is_seeded():
    a = find_witness(1105, 50, seed=11, executor="serial")
    b = find_witness(1105, 50, seed=11, executor="serial")
    assert a.base == b.base


def test_find_witness_none_for_prime():
    assert find_witness(7919, 30, seed=0, executor="serial") is None


@pytest.mark.parametrize("n", [1, 2, 10])
def test_find_witness_needs_odd_n(n):
    with pytest.raises(ValueError):
        find_witness(n, 5)


def test_sampling_range_and_count():
    bases = sample_bases(11, 500, random.Random(3))
    assert len(bases) == 500
    assert set(bases) <= set(range(2, 11))
    assert bases == sample_bases(11, 500, random.Random(3))


def test_injected_rng_draws_k_bases():
    class CountingRandom(random.Random):
        calls = 0

        def randrange(self, *args, **kwargs):
            CountingRandom.calls += 1
            return super().randrange(*args, **kwargs)

    assert is_prime(7919, 17, rng=CountingRandom(5), executor="serial")
    assert CountingRandom.calls == 17


@pytest.mark.parametrize("k", [0, -1])
def test_bad_trial_count(k):
    with pytest.raises(ValueError):
        is_prime(7, k)


@pytest.mark.parametrize("n", [True, 7.0, "7"])
def test_non_integer_n(n):
    with pytest.raises(TypeError):
        is_prime(n, 5)


def test_default_trials_come_from_config(monkeypatch):
    monkeypatch.setattr(config, "TRIALS", 0)
    with pytest.raises(ValueError):
        is_prime(7)


def test_unknown_executor():
    with pytest.raises(ValueError):
        is_prime(561, 5, executor="gpu")
    with pytest.raises(ValueError):
        is_prime(561, 5, executor="gpu", workers=1)


def test_forced_u64_rejects_wide_n():
    with pytest.raises(ValueError):
        is_prime(2**89 - 1, 5, regime="u64")


def test_confidence():
    assert confidence(1) == 0.5
    assert confidence(10) == 1 - 1 / 1024


def test_worker_count(monkeypatch):
    monkeypatch.setattr(config, "WORKERS", 0)
    assert 1 <= config.worker_count(1000) <= 1000
    assert config.worker_count(3, workers=8) == 3
    assert config.worker_count(10, workers=4) == 4
    monkeypatch.setattr(config, "WORKERS", 2)
    assert config.worker_count(10) == 2


def test_first_hit_does_not_wait_for_running_chunks(monkeypatch):
    release = threading.Event()

    def scan(bases, n, regime):
        if bases[0] == 3:
            return 3
        release.wait(5)  # a slow chunk still in flight
        return None

    monkeypatch.setattr(oracle, "_scan", scan)
    t0 = time.monotonic()
    try:
        hit = oracle._run([5, 3], 561, None, workers=2, kind="thread")
        elapsed = time.monotonic() - t0
    finally:
        release.set()
    assert hit == 3
    assert elapsed < 2
