# primality/sieves/wheel.py
# Exhaustive trial division over the 6k±1 wheel.


def brute_force_prime(n: int) -> bool:
    if n <= 3:
        return n > 1
    if n % 2 == 0 or n % 3 == 0:
        return False
    d = 5
    # integer bound; a float sqrt can miss the factor of a near-square
    while d * d <= n:
        if n % d == 0 or n % (d + 2) == 0:
            return False
        d += 6
    return True
