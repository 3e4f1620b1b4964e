import logging

import pytest
from sympy import isprime

from modcrypto.number.integers import ERROR_CODE_INVALID
from modcrypto.number.primes import SMALL_PRIMES, PrimeService, generate_prime, is_prime
from modcrypto.util.errors import InputTypeError, InputValueError
from modcrypto.util.parameters import default_prime_parameters


class FirstByteRandomSource:
    """Answer the first request with `first`, then delegate to `rng`."""

    def __init__(self, first: bytes, rng):
        self.first = first
        self.rng = rng

    def next_bytes(self, n: int) -> bytes:
        if self.first is not None:
            data, self.first = self.first, None
            return data
        return self.rng.next_bytes(n)


class ShortRandomSource:
    def next_bytes(self, n: int) -> bytes:
        return b""


def test_small_primes():
    assert len(SMALL_PRIMES) == 256
    assert SMALL_PRIMES[:5] == [2, 3, 5, 7, 11]
    assert SMALL_PRIMES[-1] == 1619


@pytest.mark.parametrize(
    ("a", "expected"),
    [
        (-7, False),
        (0, False),
        (1, False),
        (2, True),
        (3, True),
        (4, False),
        (1619, True),
        (1621, True),
        (1619 * 1621, False),
        # Carmichael numbers
        (561, False),
        (41041, False),
        (825265, False),
        (2**61 - 1, True),
        (2**89 - 1, True),
        (2**127 - 1, True),
        (2**128 + 1, False),
        ((2**61 - 1) * (2**89 - 1), False),
        (0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F, True),
    ],
)
def test_is_prime(a, expected, seeded_rng):
    assert PrimeService(seeded_rng).is_prime(a) is expected


def test_is_prime_agrees_with_sympy(seeded_rng):
    service = PrimeService(seeded_rng)
    for a in range(10**6, 10**6 + 2000):
        assert service.is_prime(a) == isprime(a)


def test_is_prime_module_level():
    assert is_prime(2**127 - 1)
    assert not is_prime(2**127 + 1)


@pytest.mark.parametrize("a", [3.0, "7", None, True])
def test_is_prime_type_error(a):
    with pytest.raises(InputTypeError, match="expected a int"):
        is_prime(a)


def test_is_prime_invalid_rounds():
    with pytest.raises(InputValueError):
        is_prime(7, test_rounds=0)


@pytest.mark.slow
def test_generate_prime_256_bits(seeded_rng, prime_trials):
    service = PrimeService(seeded_rng)
    for _ in range(prime_trials):
        p = service.generate_prime(bits=256)
        assert p.bit_length() == 256
        assert service.is_prime(p)
        assert isprime(p)


@pytest.mark.parametrize("bits", [16, 17, 64, 100, 512])
def test_generate_prime_bit_length(bits, seeded_rng):
    p = PrimeService(seeded_rng).generate_prime(bits=bits)

    assert p.bit_length() == bits
    assert isprime(p)


@pytest.mark.parametrize("bits", [16, 32, 128])
def test_generate_safe_prime(bits, seeded_rng):
    p = PrimeService(seeded_rng).generate_prime(bits=bits, safe=True)

    assert p.bit_length() == bits
    assert p % 4 == 3
    assert isprime(p)
    assert isprime((p - 1) // 2)


@pytest.mark.parametrize(
    ("first", "second_msb"),
    [
        (b"\x00", 1),
        (b"\x02", 1),
        (b"\x01", 0),
        (b"\xff", 0),
    ],
)
def test_generate_prime_second_msb(first, second_msb, seeded_rng):
    bits = 128
    for _ in range(5):
        rng = FirstByteRandomSource(first, seeded_rng)
        p = PrimeService(rng).generate_prime(bits=bits)
        assert p.bit_length() == bits
        assert (p >> (bits - 2)) & 1 == second_msb


@pytest.mark.parametrize("bits", [-1, 0, 15, 4097, 10000])
def test_generate_prime_bits_out_of_range(bits):
    with pytest.raises(InputValueError, match=f"number of bits to generate must be in range 16-4096, not {bits} bits"):
        generate_prime(bits=bits)


def test_generate_prime_invalid_rounds(seeded_rng):
    with pytest.raises(InputValueError) as excinfo:
        PrimeService(seeded_rng).generate_prime(bits=64, test_rounds=0)

    assert excinfo.value.code == ERROR_CODE_INVALID


def test_generate_prime_short_read():
    with pytest.raises(InputValueError) as excinfo:
        PrimeService(ShortRandomSource()).generate_prime(bits=64)

    assert excinfo.value.code == ERROR_CODE_INVALID


@pytest.mark.parametrize(("bits", "test_rounds"), [(64.0, 25), (64, "25")])
def test_generate_prime_type_errors(bits, test_rounds):
    with pytest.raises(InputTypeError):
        generate_prime(bits=bits, test_rounds=test_rounds)


def test_service_parameters(seeded_rng):
    service = PrimeService(seeded_rng, default_prime_parameters.with_overrides(bits=80, safe=True))
    p = service.generate_prime()

    assert p.bit_length() == 80
    assert isprime((p - 1) // 2)


def test_generate_prime_module_level():
    p = generate_prime(bits=128)

    assert p.bit_length() == 128
    assert isprime(p)


def test_generate_prime_logs_candidates(seeded_rng, caplog):
    with caplog.at_level(logging.DEBUG, logger="modcrypto.number.primes"):
        PrimeService(seeded_rng).generate_prime(bits=64)

    assert "Generated 64-bit prime after" in caplog.text
