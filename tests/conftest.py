import numpy as np
import pytest


def sieve_mask(limit: int) -> np.ndarray:
    """Reference Eratosthenes sieve: mask[i] is True iff i is prime, for 0 <= i <= limit."""
    mask = np.ones(limit + 1, dtype=bool)
    mask[:2] = False
    for p in range(2, int(limit ** 0.5) + 1):
        if mask[p]:
            mask[p * p::p] = False
    return mask


@pytest.fixture(scope="session")
def reference_mask():
    return sieve_mask(10 ** 7)


@pytest.fixture
def rng():
    return np.random.default_rng(20241019)
