import random

import pytest


class SeededRandomSource:
    """A deterministic source of random bytes, for reproducible tests only."""

    def __init__(self, seed: int):
        self._random = random.Random(seed)

    def next_bytes(self, n: int) -> bytes:
        return self._random.randbytes(n)


def pytest_addoption(parser):
    parser.addoption(
        "--prime-trials",
        action="store",
        type=int,
        default=1000,
        help="Number of primes generated by the prime generation property tests",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running property tests")


@pytest.fixture
def prime_trials(request):
    return request.config.getoption("--prime-trials")


@pytest.fixture
def seeded_rng():
    return SeededRandomSource(seed=0x5EED)
