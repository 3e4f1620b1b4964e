"""Arbitrary-precision integer helpers.

Python integers already provide arbitrary-precision arithmetic. This module gathers the few operations that
modcrypto needs on top of them: two's-complement byte (de)serialisation, bit inspection and filling an integer
from a source of random bytes.
"""

from modcrypto.number.random_source import RandomSource
from modcrypto.util.errors import InputValueError, ResourceExhaustion

# Error code reported when the generator cannot proceed with the values it was given
ERROR_CODE_INVALID = 1


def int_from_signed_bytes(data: bytes) -> int:
    """Read a big-endian two's-complement byte string as an integer.

    Example:
        >>> int_from_signed_bytes(bytes.fromhex("0080"))
        128
        >>> int_from_signed_bytes(bytes.fromhex("80"))
        -128
        >>> int_from_signed_bytes(b"")
        0
    """
    return int.from_bytes(data, byteorder="big", signed=True)


def int_to_signed_bytes(value: int, length: int | None = None) -> bytes:
    """Write `value` as a big-endian two's-complement byte string.

    Args:
        value (int): The integer to serialise.
        length (int | None): The length of the output in bytes. If `None`, the shortest encoding is used.

    Returns:
        The encoding of `value`.

    Raises:
        ResourceExhaustion: If `value` does not fit in `length` bytes.

    Example:
        >>> int_to_signed_bytes(128).hex()
        '0080'
        >>> int_to_signed_bytes(-128).hex()
        '80'
    """
    if length is None:
        magnitude = value if value >= 0 else ~value
        length = (magnitude.bit_length() + 1 + 7) // 8
    try:
        return value.to_bytes(length, byteorder="big", signed=True)
    except OverflowError as err:
        msg = f"cannot serialise a {count_bits(value)}-bit integer into {length} bytes"
        raise ResourceExhaustion(msg) from err


def count_bits(a: int) -> int:
    """Return the number of bits in the magnitude of `a`."""
    return abs(a).bit_length()


def bit_is_set(a: int, i: int) -> bool:
    """Return the bit of index `i` of the magnitude of `a` (bit 0 is the least significant)."""
    if i < 0:
        return False
    return bool((abs(a) >> i) & 1)


def is_odd(a: int) -> bool:
    """Check whether `a` is odd."""
    return a & 1 == 1


def random_int(bits: int, rng: RandomSource) -> int:
    """Return a non-negative integer of at most `bits` bits, filled from `rng`.

    Raises:
        InputValueError: If `rng` returns fewer bytes than requested. The error carries
            `ERROR_CODE_INVALID` as its code.
    """
    n_bytes = (bits + 7) // 8
    data = rng.next_bytes(n_bytes)
    if len(data) != n_bytes:
        msg = f"{ERROR_CODE_INVALID}: random source returned {len(data)} bytes, {n_bytes} requested"
        raise InputValueError(msg, code=ERROR_CODE_INVALID)
    return int.from_bytes(data, byteorder="big") & ((1 << bits) - 1)
