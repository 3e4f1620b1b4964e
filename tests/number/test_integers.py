import pytest

from modcrypto.number.integers import (
    ERROR_CODE_INVALID,
    bit_is_set,
    count_bits,
    int_from_signed_bytes,
    int_to_signed_bytes,
    is_odd,
    random_int,
)
from modcrypto.util.errors import InputValueError, ResourceExhaustion


class ShortRandomSource:
    def next_bytes(self, n: int) -> bytes:
        return bytes(n - 1)


class ConstantRandomSource:
    def next_bytes(self, n: int) -> bytes:
        return b"\xff" * n


@pytest.mark.parametrize(
    ("value", "encoding"),
    [
        (0, "00"),
        (1, "01"),
        (127, "7f"),
        (128, "0080"),
        (255, "00ff"),
        (256, "0100"),
        (-1, "ff"),
        (-128, "80"),
        (-129, "ff7f"),
    ],
)
def test_signed_bytes(value, encoding):
    assert int_to_signed_bytes(value).hex() == encoding
    assert int_from_signed_bytes(bytes.fromhex(encoding)) == value


def test_signed_bytes_with_length():
    assert int_to_signed_bytes(1, 4).hex() == "00000001"
    assert int_to_signed_bytes(-2, 3).hex() == "fffffe"


def test_signed_bytes_buffer_too_small():
    with pytest.raises(ResourceExhaustion):
        int_to_signed_bytes(128, 1)


def test_empty_bytes_are_zero():
    assert int_from_signed_bytes(b"") == 0


@pytest.mark.parametrize(
    ("a", "bits"),
    [
        (0, 0),
        (1, 1),
        (255, 8),
        (256, 9),
        (-256, 9),
        (2**521 - 1, 521),
    ],
)
def test_count_bits(a, bits):
    assert count_bits(a) == bits


@pytest.mark.parametrize(
    ("a", "i", "expected"),
    [
        (0b1010, 0, False),
        (0b1010, 1, True),
        (0b1010, 3, True),
        (0b1010, 4, False),
        (0b1010, 100, False),
        (0b1010, -1, False),
        (-0b1010, 1, True),
    ],
)
def test_bit_is_set(a, i, expected):
    assert bit_is_set(a, i) is expected


@pytest.mark.parametrize(("a", "expected"), [(0, False), (1, True), (-3, True), (2**200, False)])
def test_is_odd(a, expected):
    assert is_odd(a) is expected


@pytest.mark.parametrize("bits", [1, 7, 8, 9, 255, 256])
def test_random_int_is_masked(bits):
    assert random_int(bits, ConstantRandomSource()) == 2**bits - 1


def test_random_int_is_reproducible(seeded_rng):
    value = random_int(256, seeded_rng)

    assert 0 <= value < 2**256


def test_random_int_short_read():
    with pytest.raises(InputValueError) as excinfo:
        random_int(64, ShortRandomSource())

    assert excinfo.value.code == ERROR_CODE_INVALID
    assert str(excinfo.value).startswith(f"{ERROR_CODE_INVALID}: ")
