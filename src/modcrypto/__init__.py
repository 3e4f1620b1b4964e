"""modcrypto: A Python package for modular arithmetic, prime generation and elliptic curve cryptography.

The `modcrypto` package provides arbitrary-precision modular arithmetic (Montgomery exponentiation, modular
inverse, gcd), probabilistic prime generation and testing, arithmetic on short Weierstrass elliptic curves
parameterised by caller-supplied constants, and ECDSA signing and verification on top of it.

The arithmetic is not constant-time: the package is not hardened against side-channel attacks.

Usage example:
    Sign a message on secp256k1 and verify the signature:

    >>> import hashlib
    >>> from modcrypto.ecdsa.ecdsa import ecdsa_sign, ecdsa_verify
    >>> from modcrypto.elliptic_curves.named_curves import secp256k1
    >>>
    >>> d = 0xC0FFEE                                 # Private key
    >>> k = 0xBADC0DE                                # Nonce: secret, uniform and never reused
    >>> Q = d * secp256k1.G                          # Public key
    >>> digest = hashlib.sha256(b"hello").hexdigest()
    >>> signature = ecdsa_sign(digest, d, k, secp256k1)
    >>> ecdsa_verify(signature, digest, Q, secp256k1)
    True

    Generate a 512-bit safe prime:

    >>> from modcrypto.number.primes import generate_prime
    >>>
    >>> p = generate_prime(bits=512, safe=True)
"""
