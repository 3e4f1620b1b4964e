"""Modular exponentiation, modular inverse and gcd over arbitrary-precision integers."""

import math

from modcrypto.number.integers import bit_is_set, count_bits, is_odd
from modcrypto.util.errors import ArithmeticFailure, InputValueError
from modcrypto.util.utility_functions import check_int

BACKEND_IDENT = "modcrypto: Python int arithmetic, Montgomery exptmod for odd moduli, square-and-multiply fallback"


def ident() -> str:
    """Return a string identifying the arithmetic backend."""
    return BACKEND_IDENT


def _check_modulus(c: int, index: int, name: str):
    if c <= 0:
        msg = f"arg at index {index} ({name}) must be a positive modulus, not {c}"
        raise InputValueError(msg)


def xgcd(a: int, b: int) -> tuple[int, int, int]:
    """Extended Euclidean algorithm.

    Returns:
        A triple `(g, x, y)` such that `g = gcd(a, b) = a * x + b * y`, with `g >= 0`.
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y
    if old_r < 0:
        return -old_r, -old_x, -old_y
    return old_r, old_x, old_y


def gcd(a: int, b: int) -> int:
    """Return the non-negative greatest common divisor of `a` and `b`.

    Raises:
        InputTypeError: If `a` or `b` is not an integer.
    """
    check_int(a, 1, "a")
    check_int(b, 2, "b")
    return math.gcd(a, b)


def invmod(a: int, b: int) -> int:
    """Return the inverse of `a` modulo `b`, in the range [0, b).

    Raises:
        InputTypeError: If `a` or `b` is not an integer.
        InputValueError: If `b` is not positive.
        ArithmeticFailure: If `gcd(a, b) != 1`, i.e., `a` is not invertible modulo `b`.
    """
    check_int(a, 1, "a")
    check_int(b, 2, "b")
    _check_modulus(b, 2, "b")
    g, x, _ = xgcd(a % b, b)
    if g != 1:
        msg = f"{a} is not invertible modulo {b}: gcd is {g}"
        raise ArithmeticFailure(msg)
    return x % b


def fast_pow(a: int, b: int, c: int) -> int:
    """Compute `a^b mod c` by binary square-and-multiply.

    Works for any positive modulus, odd or even. The loop keeps `x^e * y` invariant and strictly decreases `e`,
    so it terminates after O(log b) iterations.

    Args:
        a (int): The base.
        b (int): The exponent, non-negative.
        c (int): The modulus, positive.

    Returns:
        `a^b mod c`. Note that `fast_pow(a, 0, c)` is `1` for every `c`.

    Raises:
        InputTypeError: If one of the arguments is not an integer.
        InputValueError: If `b` is negative or `c` is not positive.
    """
    check_int(a, 1, "a")
    check_int(b, 2, "b")
    check_int(c, 3, "c")
    _check_modulus(c, 3, "c")
    if b < 0:
        msg = f"arg at index 2 (b) must be a non-negative exponent, not {b}: use 'exptmod'"
        raise InputValueError(msg)

    x, e, y = a, b, 1
    while e > 0:
        if e % 2 == 0:
            x = (x * x) % c
            e //= 2
        else:
            y = (x * y) % c
            e -= 1
    return y


class _Montgomery:
    """Montgomery arithmetic modulo an odd modulus `n`, with R = 2^k and k the bit length of `n`."""

    def __init__(self, n: int):
        self.n = n
        self.k = n.bit_length()
        self.mask = (1 << self.k) - 1
        # n * n_prime = -1 mod R
        self.n_prime = (-invmod(n, 1 << self.k)) & self.mask

    def reduce(self, t: int) -> int:
        """Return t * R^-1 mod n, for 0 <= t < n * R."""
        m = ((t & self.mask) * self.n_prime) & self.mask
        u = (t + m * self.n) >> self.k
        return u - self.n if u >= self.n else u

    def to_montgomery(self, a: int) -> int:
        return (a << self.k) % self.n

    def multiply(self, a: int, b: int) -> int:
        return self.reduce(a * b)


def _montgomery_exptmod(a: int, b: int, c: int) -> int:
    """Left-to-right exponentiation in the Montgomery domain. `c` must be odd and `b` non-negative."""
    if c == 1:
        return 0
    ctx = _Montgomery(c)
    base = ctx.to_montgomery(a % c)
    result = ctx.to_montgomery(1)
    for i in range(count_bits(b) - 1, -1, -1):
        result = ctx.multiply(result, result)
        if bit_is_set(b, i):
            result = ctx.multiply(result, base)
    return ctx.reduce(result)


def exptmod(a: int, b: int, c: int, safe: bool = False) -> int:
    """Compute `a^b mod c`.

    If `c` is odd, the exponentiation is carried out with Montgomery reduction. Montgomery reduction needs an odd
    modulus: for an even `c` the function raises unless `safe` is set, in which case it falls back to
    `fast_pow`. A negative exponent is handled by inverting `a` modulo `c` first.

    Args:
        a (int): The base.
        b (int): The exponent.
        c (int): The modulus, positive.
        safe (bool): If `True`, accept an even modulus. Defaults to `False`.

    Returns:
        `a^b mod c`.

    Raises:
        InputTypeError: If `a`, `b` or `c` is not an integer.
        InputValueError: If `c` is not positive, or `c` is even and `safe` is `False`.
        ArithmeticFailure: If `b` is negative and `a` is not invertible modulo `c`.
    """
    check_int(a, 1, "a")
    check_int(b, 2, "b")
    check_int(c, 3, "c")
    _check_modulus(c, 3, "c")

    if not is_odd(c) and not safe:
        msg = "'exptmod' need odd modulus, set 'safe' or use 'fast_pow'"
        raise InputValueError(msg)

    if b < 0:
        a, b = invmod(a, c), -b

    if is_odd(c):
        return _montgomery_exptmod(a, b, c)
    return fast_pow(a, b, c)
