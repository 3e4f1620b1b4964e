"""Probabilistic prime generation and primality testing.

Primality is established by trial division by the first 256 primes followed by Miller-Rabin rounds whose bases
are drawn from an injected `RandomSource`.
"""

import logging

from modcrypto.number.integers import ERROR_CODE_INVALID, random_int
from modcrypto.number.random_source import RandomSource, SystemRandomSource
from modcrypto.util.errors import InputValueError
from modcrypto.util.parameters import MAX_PRIME_BITS, MIN_PRIME_BITS, PrimeParameters, default_prime_parameters
from modcrypto.util.utility_functions import check_int

logger = logging.getLogger(__name__)


def _sieve(limit: int) -> list[int]:
    """Return the primes smaller than `limit`."""
    is_candidate = [True] * limit
    is_candidate[0:2] = [False, False]
    for n in range(2, int(limit**0.5) + 1):
        if is_candidate[n]:
            is_candidate[n * n :: n] = [False] * len(range(n * n, limit, n))
    return [n for n in range(limit) if is_candidate[n]]


# The first 256 primes, the largest being 1619
SMALL_PRIMES = _sieve(1620)


class PrimeService:
    """Generate and test probable primes.

    Attributes:
        rng (RandomSource): The source of random bytes used for candidates and Miller-Rabin bases.
        parameters (PrimeParameters): The defaults used when an argument is not supplied.
    """

    def __init__(self, rng: RandomSource | None = None, parameters: PrimeParameters = default_prime_parameters):
        """Initialise the service.

        Args:
            rng (RandomSource | None): The source of random bytes. Defaults to the operating system CSPRNG.
            parameters (PrimeParameters): The defaults for `bits`, `test_rounds` and `safe`. Defaults to
                `default_prime_parameters`.
        """
        self.rng = rng if rng is not None else SystemRandomSource()
        self.parameters = parameters

    def _miller_rabin(self, n: int, test_rounds: int) -> bool:
        """Run `test_rounds` Miller-Rabin rounds on the odd integer `n > 4`."""
        d, s = n - 1, 0
        while d % 2 == 0:
            d //= 2
            s += 1

        for _ in range(test_rounds):
            base = random_int(n.bit_length(), self.rng) % (n - 3) + 2
            x = pow(base, d, n)
            if x in (1, n - 1):
                continue
            for _ in range(s - 1):
                x = pow(x, 2, n)
                if x == n - 1:
                    break
            else:
                return False
        return True

    def _is_probable_prime(self, n: int, test_rounds: int) -> bool:
        if n < 2:
            return False
        for p in SMALL_PRIMES:
            if n == p:
                return True
            if n % p == 0:
                return False
        if n < SMALL_PRIMES[-1] ** 2:
            return True
        return self._miller_rabin(n, test_rounds)

    def is_prime(self, a: int, test_rounds: int | None = None) -> bool:
        """Check whether `a` is a probable prime.

        Args:
            a (int): The integer to test.
            test_rounds (int | None): The number of Miller-Rabin rounds. Defaults to `self.parameters.test_rounds`.

        Returns:
            `True` if `a` passes trial division and every Miller-Rabin round, `False` otherwise. Integers smaller
            than 2 are not prime.

        Raises:
            InputTypeError: If `a` or `test_rounds` is not an integer.
            InputValueError: If `test_rounds` is smaller than 1.
        """
        check_int(a, name="a")
        test_rounds = self.parameters.test_rounds if test_rounds is None else test_rounds
        check_int(test_rounds, name="test_rounds")
        if test_rounds < 1:
            msg = f"the number of test rounds must be positive, not {test_rounds}"
            raise InputValueError(msg)
        return self._is_probable_prime(a, test_rounds)

    def _candidate(self, bits: int, second_msb_on: bool, safe: bool) -> int:
        candidate = random_int(bits, self.rng)
        candidate |= 1 << (bits - 1)
        if second_msb_on:
            candidate |= 1 << (bits - 2)
        else:
            candidate &= ~(1 << (bits - 2))
        # Safe primes are 3 mod 4, so that (p - 1) / 2 is odd
        candidate |= 3 if safe else 1
        return candidate

    def generate_prime(self, bits: int | None = None, test_rounds: int | None = None, safe: bool | None = None) -> int:
        """Generate a probable prime of exactly `bits` bits.

        The random source decides, once per call, whether the second most significant bit of the candidates is
        set or cleared, so that generated primes do not all fall in the same half of the range.

        Args:
            bits (int | None): The bit length of the prime, in [16, 4096]. Defaults to `self.parameters.bits`.
            test_rounds (int | None): The number of Miller-Rabin rounds. Defaults to `self.parameters.test_rounds`.
            safe (bool | None): If `True`, generate a safe prime p, i.e., such that (p - 1) / 2 is also prime.
                Defaults to `self.parameters.safe`.

        Returns:
            A probable prime of bit length `bits`.

        Raises:
            InputTypeError: If `bits` or `test_rounds` is not an integer.
            InputValueError: If `bits` is outside [16, 4096], if the generator fails (the error carries the
                generator code), or if the prime does not have `bits` bits.
        """
        bits = self.parameters.bits if bits is None else bits
        test_rounds = self.parameters.test_rounds if test_rounds is None else test_rounds
        safe = self.parameters.safe if safe is None else safe
        check_int(bits, name="bits")
        check_int(test_rounds, name="test_rounds")

        if bits < MIN_PRIME_BITS or bits > MAX_PRIME_BITS:
            msg = f"number of bits to generate must be in range {MIN_PRIME_BITS}-{MAX_PRIME_BITS}, not {bits} bits"
            raise InputValueError(msg)
        if test_rounds < 1:
            msg = f"{ERROR_CODE_INVALID}: the number of test rounds must be positive, not {test_rounds}"
            raise InputValueError(msg, code=ERROR_CODE_INVALID)

        second_msb_on = random_int(8, self.rng) & 1 == 0

        tries = 0
        while True:
            tries += 1
            candidate = self._candidate(bits, second_msb_on, safe)
            if not self._is_probable_prime(candidate, test_rounds):
                continue
            if safe and not self._is_probable_prime((candidate - 1) // 2, test_rounds):
                logger.debug("Rejected %d-bit prime: (p - 1) / 2 is not prime", bits)
                continue
            break
        logger.debug("Generated %d-bit %sprime after %d candidates", bits, "safe " if safe else "", tries)

        if candidate.bit_length() != bits:
            msg = f"Prime is {candidate.bit_length()}, not {bits} bits"
            raise InputValueError(msg)
        return candidate


def generate_prime(
    bits: int = default_prime_parameters.bits,
    test_rounds: int = default_prime_parameters.test_rounds,
    safe: bool = default_prime_parameters.safe,
    rng: RandomSource | None = None,
) -> int:
    """Generate a probable prime of exactly `bits` bits. See `PrimeService.generate_prime`."""
    return PrimeService(rng).generate_prime(bits=bits, test_rounds=test_rounds, safe=safe)


def is_prime(a: int, test_rounds: int = default_prime_parameters.test_rounds, rng: RandomSource | None = None) -> bool:
    """Check whether `a` is a probable prime. See `PrimeService.is_prime`."""
    return PrimeService(rng).is_prime(a, test_rounds=test_rounds)
