"""The group law of short Weierstrass curves in affine coordinates.

The functions in this module do not validate their arguments: `ec_operations` is the checked public surface.
Every function takes the curve explicitly, returns a new `Point` on that curve and never modifies its operands.
"""

from modcrypto.elliptic_curves.curve import Curve, Point
from modcrypto.number.integers import bit_is_set, count_bits
from modcrypto.number.modpow import gcd, invmod


def negate(P: Point, curve: Curve) -> Point:  # noqa: N803
    """Return -P, i.e., the point (x, -y mod p)."""
    if P.is_infinity():
        return Point.infinity_of(curve)
    return Point(P.x, -P.y % curve.p, curve)


def double(P: Point, curve: Curve) -> Point:  # noqa: N803
    """Return 2P.

    The tangent slope is lambda = (3x^2 + a) / 2y. If 2y is not invertible modulo p (which for prime p means
    y = 0, a point of order 2) the result is the point at infinity.
    """
    if P.is_infinity():
        return Point.infinity_of(curve)
    p = curve.p
    denominator = (2 * P.y) % p
    if gcd(denominator, p) != 1:
        return Point.infinity_of(curve)
    gradient = (3 * P.x * P.x + curve.a) * invmod(denominator, p) % p
    x = (gradient * gradient - 2 * P.x) % p
    y = (gradient * (P.x - x) - P.y) % p
    return Point(x, y, curve)


def add(P: Point, Q: Point, curve: Curve) -> Point:  # noqa: N803
    """Return P + Q.

    Raises:
        ArithmeticFailure: If Q.x - P.x is not invertible modulo p, which only happens for a non-prime p.
    """
    if P.is_infinity():
        return Q.with_overrides(curve=curve)
    if Q.is_infinity():
        return P.with_overrides(curve=curve)

    p = curve.p
    if (P.x - Q.x) % p == 0:
        if (P.y - Q.y) % p == 0:
            return double(P, curve)
        if (P.y + Q.y) % p == 0:
            return Point.infinity_of(curve)

    gradient = (Q.y - P.y) * invmod((Q.x - P.x) % p, p) % p
    x = (gradient * gradient - P.x - Q.x) % p
    y = (gradient * (P.x - x) - P.y) % p
    return Point(x, y, curve)


def scalar_mul(P: Point, k: int, curve: Curve) -> Point:  # noqa: N803
    """Return kP.

    The multiplication runs a ladder over the bits of k from the second most significant one down to bit 0,
    keeping R1 - R0 = P: a set bit gives (R0, R1) <- (R0 + R1, 2 R1), an unset one (R0, R1) <- (2 R0, R0 + R1).
    Each step costs one addition and one doubling, but the arithmetic is not constant-time.

    Example:
        >>> toy = Curve(p=17, a=2, b=2, q=19, gx=5, gy=1)
        >>> scalar_mul(toy.G, 2, toy).to_list()
        [6, 3]
        >>> scalar_mul(toy.G, 19, toy).is_infinity()
        True
    """
    if k < 0:
        P, k = negate(P, curve), -k  # noqa: N806
    if P.is_infinity() or k == 0:
        return Point.infinity_of(curve)
    if k == 2:
        return double(P, curve)

    r0, r1 = P.with_overrides(curve=curve), double(P, curve)
    for i in range(count_bits(k) - 2, -1, -1):
        if bit_is_set(k, i):
            r0, r1 = add(r0, r1, curve), double(r1, curve)
        else:
            r0, r1 = double(r0, curve), add(r1, r0, curve)
    return r0


def dual_scalar_mul(P: Point, k1: int, Q: Point, k2: int, curve: Curve) -> Point:  # noqa: N803
    """Return k1 P + k2 Q with Shamir's trick.

    The sum S = P + Q is precomputed, then the bits of k1 and k2 are scanned together from the most significant
    one: at each step the accumulator is doubled and P, Q, S or nothing is added according to the pair of bits.
    """
    if k1 < 0:
        P, k1 = negate(P, curve), -k1  # noqa: N806
    if k2 < 0:
        Q, k2 = negate(Q, curve), -k2  # noqa: N806

    summands = {
        (True, False): P,
        (False, True): Q,
        (True, True): add(P, Q, curve),
    }
    result = Point.infinity_of(curve)
    for i in range(max(count_bits(k1), count_bits(k2)) - 1, -1, -1):
        result = double(result, curve)
        bits = (bit_is_set(k1, i), bit_is_set(k2, i))
        if bits in summands:
            result = add(result, summands[bits], curve)
    return result
