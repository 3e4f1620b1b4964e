"""ecdsa package.

Modules:
    - signature: Contains the Signature value type.
    - ecdsa: ECDSA signing and verification, and the conversion of hex digests to integers.

Usage example:
    >>> import hashlib
    >>> from modcrypto.ecdsa.ecdsa import ecdsa_sign, ecdsa_verify
    >>> from modcrypto.elliptic_curves.named_curves import secp256k1
    >>>
    >>> d, k = 0x1234, 0x5678                       # Never hard-code or reuse nonces outside of tests
    >>> Q = d * secp256k1.G
    >>> digest = hashlib.sha256(b"message").hexdigest()
    >>> signature = ecdsa_sign(digest, d, k, secp256k1)
    >>> ecdsa_verify(signature, digest, Q, secp256k1)
    True
"""
