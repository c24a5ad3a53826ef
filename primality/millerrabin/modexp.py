# primality/millerrabin/modexp.py
# Square-and-multiply modular exponentiation with a reduction after every product.


def mul_mod(a: int, b: int, modulus: int) -> int:
    # both operands lie in [0, modulus), so the product stays below modulus**2 < 2**128
    return (a % modulus) * (b % modulus) % modulus


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Compute base**exponent mod modulus in O(log exponent) multiplications.

    Works right to left over the bits of the exponent: the running square
    picks up one bit per step and is folded into the result whenever that
    bit is set.
    """
    if modulus <= 0:
        raise ValueError(f"modulus must be positive, got {modulus}")
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    if modulus == 1:
        return 0
    result = 1
    square = base % modulus
    while exponent > 0:
        if exponent & 1:
            result = mul_mod(result, square, modulus)
        square = mul_mod(square, square, modulus)
        exponent >>= 1
    return result
