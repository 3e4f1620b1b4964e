"""ECDSA signing and verification over caller-supplied curves.

Digests are passed as ASCII hex, either as `str` or as `bytes` (e.g. `hashlib.sha256(msg).hexdigest()`).
"""

from modcrypto.ecdsa.signature import Signature
from modcrypto.elliptic_curves import group_law
from modcrypto.elliptic_curves.curve import Curve, Point
from modcrypto.number.integers import count_bits
from modcrypto.number.modpow import invmod
from modcrypto.util.errors import InputTypeError
from modcrypto.util.utility_functions import check_instance, check_int, hex_to_int, type_name


def _check_digest(digest, index: int) -> str | bytes:
    if not isinstance(digest, (str, bytes, bytearray)):
        msg = f"arg at index {index} (digest) expected a str/bytes, but {type_name(digest)} found"
        raise InputTypeError(msg)
    return digest


def digest_to_int(digest: str | bytes, order: int) -> int:
    """Convert a hex digest into the integer e used by ECDSA.

    If the digest is longer than the order, only its leftmost bits are kept. The length of the digest is taken
    as 4 bits per hex digit, so leading zero digits count.

    Args:
        digest (str | bytes): The hex digest of the message.
        order (int): The order of the base point of the curve.

    Returns:
        The leftmost `order.bit_length()` bits of the digest, as an integer.

    Raises:
        InputTypeError: If `digest` is not a `str` or `bytes`.
        InputValueError: If `digest` is empty or contains a non-hex digit.

    Example:
        >>> digest_to_int("ff", 19)
        31
    """
    e = hex_to_int(digest)
    digest_bits = 4 * len(digest)
    order_bits = count_bits(order)
    if digest_bits > order_bits:
        e >>= digest_bits - order_bits
    return e


def ecdsa_sign(digest: str | bytes, d: int, k: int, curve: Curve) -> Signature:
    """Sign `digest` with the private key `d` and the nonce `k`.

    The signature is r = (kG).x mod q and s = k^-1 (e + d r) mod q, where e is the integer obtained from the
    digest with `digest_to_int`.

    Warning:
        The nonce `k` is neither generated nor validated. It must be secret, uniform in [1, q - 1] and never
        used twice: two signatures sharing a nonce reveal the private key, and so does a predictable nonce.

    Args:
        digest (str | bytes): The hex digest of the message.
        d (int): The private key.
        k (int): The nonce.
        curve (Curve): The curve; its base point and order are used.

    Returns:
        The signature (r, s).

    Raises:
        InputTypeError: If one of the arguments has the wrong type.
        InputValueError: If `digest` is not valid hex.
        ArithmeticFailure: If `k` is not invertible modulo q.
    """
    _check_digest(digest, 1)
    check_int(d, 2, "d")
    check_int(k, 3, "k")
    check_instance(curve, Curve, 4, "curve")

    q = curve.q
    e = digest_to_int(digest, q)
    r = group_law.scalar_mul(curve.G, k, curve).x % q
    s = invmod(k, q) * (e + d * r) % q
    return Signature(r, s)


def ecdsa_verify(signature: Signature, digest: str | bytes, Q: Point, curve: Curve) -> bool:  # noqa: N803
    """Verify `signature` on `digest` against the public key `Q`.

    With w = s^-1 mod q, the signature is valid if and only if (e w G + r w Q).x = r mod q. The point is computed
    with Shamir's trick. The values r and s are not checked to lie in [1, q - 1].

    Args:
        signature (Signature): The signature to verify.
        digest (str | bytes): The hex digest of the message.
        Q (Point): The public key.
        curve (Curve): The curve; its base point and order are used.

    Returns:
        `True` if the signature is valid, `False` otherwise.

    Raises:
        InputTypeError: If one of the arguments has the wrong type.
        InputValueError: If `digest` is not valid hex.
        ArithmeticFailure: If s is not invertible modulo q.
    """
    check_instance(signature, Signature, 1, "signature")
    _check_digest(digest, 2)
    check_instance(Q, Point, 3, "Q")
    check_instance(curve, Curve, 4, "curve")

    q = curve.q
    e = digest_to_int(digest, q)
    w = invmod(signature.s, q)
    u1 = e * w % q
    u2 = signature.r * w % q
    X = group_law.dual_scalar_mul(curve.G, u1, Q, u2, curve)  # noqa: N806
    return X.x % q == signature.r
