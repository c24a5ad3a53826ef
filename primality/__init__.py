# primality/__init__.py
from .primes.oracle import is_prime, prime_mask

__all__ = ["is_prime", "prime_mask"]
