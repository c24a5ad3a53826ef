# primality/sieves/small_primes.py
# Fixed seed table of the primes below 100 and the integer digit count used for tier dispatch.
from typing import Tuple

SMALL_PRIMES: Tuple[int, ...] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41,
    43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
)

_SMALL_PRIME_SET = frozenset(SMALL_PRIMES)


def digit_length(n: int) -> int:
    """Number of base-10 digits of |n|, exact at powers of ten."""
    n = abs(n)
    size = 1
    bound = 10
    while n >= bound:
        size += 1
        bound *= 10
    return size


def is_table_prime(n: int) -> bool:
    return n in _SMALL_PRIME_SET


def has_small_factor(n: int) -> bool:
    # True for the table primes themselves; callers check is_table_prime first.
    for p in SMALL_PRIMES:
        if n % p == 0:
            return True
    return False
