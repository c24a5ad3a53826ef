# primality/millerrabin/tester.py
from typing import Iterable, Tuple

from .modexp import mod_pow, mul_mod


def decompose(n: int) -> Tuple[int, int]:
    """Split n - 1 into 2**s * d with d odd; returns (s, d)."""
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    return s, d


def is_probably_prime(n: int, witnesses: Iterable[int]) -> bool:
    """Strong probable-prime test of odd n > 3 against each witness in order.

    False is a proof of compositeness. True is a proof of primality only when
    the witnesses come from a proven band for n (see witnesses.select_witnesses).
    """
    if n <= 3 or n % 2 == 0:
        raise ValueError(f"Miller-Rabin needs an odd n > 3, got {n}")
    s, d = decompose(n)
    for a in witnesses:
        a %= n
        if a == 0:
            continue
        x = mod_pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = mul_mod(x, x, n)
            if x == n - 1:
                break
        else:
            return False
    return True
