"""Checked elliptic curve operations.

Each function validates the kind of its arguments, reporting the (1-based) position of the offending one, and
then delegates to `group_law`.

Usage example:
    >>> from modcrypto.elliptic_curves.ec_operations import point_add, point_mul
    >>> from modcrypto.elliptic_curves.named_curves import secp256k1
    >>>
    >>> G = secp256k1.G
    >>> point_add(G, G, secp256k1) == point_mul(G, 2, secp256k1)
    True
"""

from modcrypto.elliptic_curves import group_law
from modcrypto.elliptic_curves.curve import Curve, Point
from modcrypto.util.utility_functions import check_instance, check_int


def _check_point(value, index: int) -> Point:
    return check_instance(value, Point, index)


def _check_curve(value, index: int) -> Curve:
    return check_instance(value, Curve, index)


def point_in_curve(point: Point, curve: Curve) -> bool:
    """Check whether `point` satisfies the equation of `curve`.

    The equation y^2 = x^3 + ax + b mod p is evaluated on the stored coordinates. The point at infinity stores
    `(0, 0)`, so it is reported on the curve only when b = 0 mod p.

    Raises:
        InputTypeError: If `point` is not a `Point` or `curve` is not a `Curve`.
    """
    _check_point(point, 1)
    _check_curve(curve, 2)
    x, y = point.x, point.y
    return (y * y - (x * x * x + curve.a * x + curve.b)) % curve.p == 0


def curve_equal(curve1: Curve, curve2: Curve) -> bool:
    """Check whether two curves have the same parameters p, a, b, q, gx, gy."""
    _check_curve(curve1, 1)
    _check_curve(curve2, 2)
    return curve1 == curve2


def point_equal(point1: Point, point2: Point) -> bool:
    """Check whether two points have the same coordinates and are both, or both not, the point at infinity."""
    _check_point(point1, 1)
    _check_point(point2, 2)
    return point1 == point2


def point_double(point: Point, curve: Curve) -> Point:
    """Return 2 * point on `curve`."""
    _check_point(point, 1)
    _check_curve(curve, 2)
    return group_law.double(point, curve)


def point_add(point1: Point, point2: Point, curve: Curve) -> Point:
    """Return point1 + point2 on `curve`.

    Raises:
        InputTypeError: If one of the arguments has the wrong type.
        ArithmeticFailure: If the chord slope cannot be computed, which only happens for a non-prime modulus.
    """
    _check_point(point1, 1)
    _check_point(point2, 2)
    _check_curve(curve, 3)
    return group_law.add(point1, point2, curve)


def point_sub(point1: Point, point2: Point, curve: Curve) -> Point:
    """Return point1 - point2 on `curve`. Neither operand is modified."""
    _check_point(point1, 1)
    _check_point(point2, 2)
    _check_curve(curve, 3)
    return group_law.add(point1, group_law.negate(point2, curve), curve)


def point_mul(point: Point, scalar: int, curve: Curve) -> Point:
    """Return scalar * point on `curve`. A negative scalar multiplies the negated point."""
    _check_point(point, 1)
    check_int(scalar, 2)
    _check_curve(curve, 3)
    return group_law.scalar_mul(point, scalar, curve)


def point_dual_mul(point1: Point, scalar1: int, point2: Point, scalar2: int, curve: Curve) -> Point:
    """Return scalar1 * point1 + scalar2 * point2 on `curve`, computed with Shamir's trick."""
    _check_point(point1, 1)
    check_int(scalar1, 2)
    _check_point(point2, 3)
    check_int(scalar2, 4)
    _check_curve(curve, 5)
    return group_law.dual_scalar_mul(point1, scalar1, point2, scalar2, curve)
