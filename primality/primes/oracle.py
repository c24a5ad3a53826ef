# primality/primes/oracle.py
# Layered primality decision for signed 64-bit integers.
import logging
from typing import Iterable, Optional

import numpy as np

from ..config import INT64_MAX, INT64_MIN, trial_division_digits
from ..millerrabin.tester import is_probably_prime
from ..millerrabin.witnesses import select_witnesses
from ..sieves.small_primes import digit_length, has_small_factor, is_table_prime
from ..sieves.wheel import brute_force_prime

logger = logging.getLogger(__name__)


def check_int64(n) -> int:
    # bool is an int subclass but never a meaningful input here
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    n = int(n)
    if n < INT64_MIN or n > INT64_MAX:
        raise ValueError(f"{n} is outside the supported signed 64-bit range [{INT64_MIN}, {INT64_MAX}]")
    return n


def is_prime(n: int, trial_digits: Optional[int] = None) -> bool:
    """Deterministic primality decision for -2**63 <= n < 2**63.

    Small numbers are settled by 6k±1 trial division; numbers with more than
    ``trial_digits`` digits (default from PRIMALITY_TRIAL_DIGITS, 10) go to
    Miller-Rabin with a proven witness set, which is exact over the whole range.
    """
    n = check_int64(n)
    if n < 2:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    if is_table_prime(n):
        return True
    if has_small_factor(n):
        return False

    if trial_digits is None:
        trial_digits = trial_division_digits()
    digits = digit_length(n)
    if digits <= trial_digits:
        logger.debug("n=%d (%d digits): trial division", n, digits)
        return brute_force_prime(n)

    witnesses = select_witnesses(n)
    logger.debug("n=%d (%d digits): Miller-Rabin with witnesses %s", n, digits, witnesses)
    return is_probably_prime(n, witnesses)


def prime_mask(values: Iterable[int], trial_digits: Optional[int] = None) -> np.ndarray:
    """One is_prime decision per value, in input order, as a boolean array."""
    if trial_digits is None:
        trial_digits = trial_division_digits()
    return np.fromiter((is_prime(v, trial_digits) for v in values), dtype=bool)
