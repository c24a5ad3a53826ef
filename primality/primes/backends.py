# primality/primes/backends.py
from abc import ABC, abstractmethod
from typing import Optional

from sympy import isprime

from .oracle import check_int64, is_prime
from ..sieves.wheel import brute_force_prime


class PrimeBackend(ABC):
    name: str = ""

    @abstractmethod
    def is_prime(self, n: int) -> bool:
        ...


class OracleBackend(PrimeBackend):
    name = "oracle"

    def __init__(self, trial_digits: Optional[int] = None):
        self.trial_digits = trial_digits

    def is_prime(self, n: int) -> bool:
        return is_prime(n, self.trial_digits)


class SympyBackend(PrimeBackend):
    name = "sympy"

    def is_prime(self, n: int) -> bool:
        # independent reference; same domain checks as the oracle
        return bool(isprime(check_int64(n)))


class TrialDivisionBackend(PrimeBackend):
    name = "trial"

    def is_prime(self, n: int) -> bool:
        return brute_force_prime(check_int64(n))


_BACKENDS = {
    "oracle": OracleBackend,
    "default": OracleBackend,
    "sympy": SympyBackend,
    "trial": TrialDivisionBackend,
}

BACKEND_NAMES = ("oracle", "sympy", "trial")


def get_backend(name: str, trial_digits: Optional[int] = None) -> PrimeBackend:
    key = (name or "oracle").lower()
    if key not in _BACKENDS:
        raise ValueError(f"Unknown backend: {name}")
    cls = _BACKENDS[key]
    if cls is OracleBackend:
        return cls(trial_digits=trial_digits)
    return cls()
