"""Configuration objects."""

from copy import copy
from dataclasses import dataclass
from typing import Self

MIN_PRIME_BITS = 16
MAX_PRIME_BITS = 4096


@dataclass
class PrimeParameters:
    """Default parameters for prime generation and testing.

    Attributes:
        bits (int): The bit length of generated primes. Defaults to `1024`.
        test_rounds (int): The number of Miller-Rabin rounds. Defaults to `25`.
        safe (bool): If `True`, generated primes are safe primes. Defaults to `False`.
    """

    bits: int = 1024
    test_rounds: int = 25
    safe: bool = False

    def with_overrides(self, **overrides) -> Self:
        """Return a copy of self with the attributes in `overrides` replaced.

        Raises:
            AttributeError: If one of the keys in `overrides` is not an attribute of `PrimeParameters`.
        """
        new_params = copy(self)
        for key, value in overrides.items():
            if hasattr(new_params, key):
                setattr(new_params, key, value)
            else:
                msg = f"PrimeParameters has no attribute '{key}'"
                raise AttributeError(msg)
        return new_params


default_prime_parameters = PrimeParameters()
