"""number package.

This package provides the integer arithmetic on which the rest of modcrypto is built.

Modules:
    - integers: Two's-complement serialisation, bit inspection and random integers.
    - modpow: Modular exponentiation (Montgomery and square-and-multiply), modular inverse and gcd.
    - random_source: The RandomSource protocol and the operating system backed implementation.
    - primes: The PrimeService class for prime generation and Miller-Rabin primality testing.

Usage example:
    >>> from modcrypto.number.modpow import exptmod, invmod
    >>> from modcrypto.number.primes import generate_prime, is_prime
    >>>
    >>> p = generate_prime(bits=256)
    >>> is_prime(p)
    True
    >>> exptmod(3, p - 1, p)
    1
    >>> invmod(3, 7)
    5
"""
