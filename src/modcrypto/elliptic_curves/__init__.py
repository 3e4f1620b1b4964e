"""elliptic_curves package.

This package provides arithmetic on short Weierstrass curves y^2 = x^3 + ax + b over F_p.

Modules:
    - curve: Contains the immutable Curve and Point value types.
    - group_law: Unchecked point negation, doubling, addition, scalar multiplication and Shamir's trick.
    - ec_operations: Checked versions of the group law operations, plus point and curve comparisons.
    - named_curves: The secp256k1 and secp256r1 curves.

Usage example:
    >>> from modcrypto.elliptic_curves.curve import Curve
    >>> from modcrypto.elliptic_curves.ec_operations import point_in_curve, point_mul
    >>>
    >>> toy = Curve(p=17, a=2, b=2, q=19, gx=5, gy=1, name="toy")
    >>> P = point_mul(toy.G, 7, toy)
    >>> point_in_curve(P, toy)
    True
    >>> (3 * P + toy.G) == point_mul(toy.G, 22, toy)
    True
"""
