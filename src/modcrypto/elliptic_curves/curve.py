"""Curve and Point value types for short Weierstrass curves y^2 = x^3 + ax + b over F_p.

Both types are immutable. Changing a field is done with `with_overrides`, which returns a new object validated
exactly as the constructor validates its arguments, so a point built on a curve never sees that curve change.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Self

from modcrypto.util.errors import InputTypeError, InputValueError, MismatchError
from modcrypto.util.utility_functions import check_instance, check_int, is_int, type_name, unhexlify

CURVE_PARAMETERS = ("p", "a", "b", "q", "gx", "gy")


def _to_name(name) -> str | None:
    if name is None or isinstance(name, str):
        return name
    if isinstance(name, (bytes, bytearray)):
        try:
            return bytes(name).decode("utf-8")
        except UnicodeDecodeError as err:
            msg = "name: invalid UTF-8 bytes"
            raise InputValueError(msg) from err
    msg = f"name: expected a str/bytes, but {type_name(name)} found"
    raise InputTypeError(msg)


def _to_oid(oid) -> bytes | None:
    if oid is None:
        return None
    if isinstance(oid, (bytes, bytearray)):
        return bytes(oid)
    if isinstance(oid, str):
        return unhexlify(oid)
    msg = f"oid: expected a str/bytes, but {type_name(oid)} found"
    raise InputTypeError(msg)


@dataclass(frozen=True)
class Curve:
    """A short Weierstrass curve y^2 = x^3 + ax + b over F_p, with a base point G of order q.

    Two curves are equal when their numeric parameters are equal: `name` and `oid` are not compared.

    Attributes:
        p (int): The modulus of the base field.
        a (int): The coefficient a of the curve equation.
        b (int): The coefficient b of the curve equation.
        q (int): The order of the base point.
        gx (int): The x-coordinate of the base point.
        gy (int): The y-coordinate of the base point.
        name (str | None): A human readable name. Bytes are decoded as UTF-8.
        oid (bytes | None): The ASN.1 object identifier of the curve. A hex string is decoded to bytes.

    Example:
        >>> curve = Curve(p=17, a=2, b=2, q=19, gx=5, gy=1, name="toy")
        >>> curve.G
        <Point x=5 y=1 curve=<Curve name=toy oid= p=17 a=2 b=2 q=19 gx=5 gy=1>>
    """

    p: int
    a: int
    b: int
    q: int
    gx: int
    gy: int
    name: str | None = field(default=None, compare=False)
    oid: bytes | None = field(default=None, compare=False)

    def __post_init__(self):
        for index, parameter in enumerate(CURVE_PARAMETERS, start=1):
            check_int(getattr(self, parameter), index, parameter)
        object.__setattr__(self, "name", _to_name(self.name))
        object.__setattr__(self, "oid", _to_oid(self.oid))

    @property
    def G(self) -> "Point":  # noqa: N802
        """The base point of the curve."""
        return Point(self.gx, self.gy, self)

    def with_overrides(self, **overrides) -> Self:
        """Return a copy of self with the fields in `overrides` replaced.

        Besides the dataclass fields, the key `G` is accepted: it takes a `Point` and sets `gx` and `gy` to its
        coordinates and `p`, `a`, `b`, `q` to the parameters of its curve.

        Raises:
            AttributeError: If one of the keys in `overrides` is not a field of `Curve`.
            InputTypeError, InputValueError: If one of the new values is invalid.

        Example:
            >>> toy = Curve(p=17, a=2, b=2, q=19, gx=5, gy=1)
            >>> toy.with_overrides(gx=6, gy=3).G.to_list()
            [6, 3]
        """
        field_names = {f.name for f in fields(self)}
        changes = {}
        for key, value in overrides.items():
            if key == "G":
                check_instance(value, Point, name="G")
                changes.update({parameter: getattr(value.curve, parameter) for parameter in ("p", "a", "b", "q")})
                changes.update(gx=value.x, gy=value.y)
            elif key in field_names:
                changes[key] = value
            else:
                msg = f"Curve has no attribute '{key}'"
                raise AttributeError(msg)
        return replace(self, **changes)

    def __contains__(self, point) -> bool:
        from modcrypto.elliptic_curves.ec_operations import point_in_curve

        return point_in_curve(point, self)

    def __repr__(self) -> str:
        name = self.name if self.name is not None else ""
        oid = self.oid.hex() if self.oid is not None else ""
        return (
            f"<Curve name={name} oid={oid} p={self.p} a={self.a} b={self.b} q={self.q} gx={self.gx} gy={self.gy}>"
        )


@dataclass(frozen=True)
class Point:
    """A point on a short Weierstrass curve, or the point at infinity.

    The point at infinity is marked by `infinity=True`; its stored coordinates are always `(0, 0)`. An affine
    point with coordinates `(0, 0)` is a different point. Two points are equal when their coordinates and their
    `infinity` flag are equal: the curves are not compared.

    Points support the group operations as operators: `P + Q`, `P - Q`, `-P`, `k * P` and `P * k`. Binary
    operators require the two points to be defined over equal curves.

    Attributes:
        x (int): The x-coordinate.
        y (int): The y-coordinate.
        curve (Curve): The curve the point is defined over.
        infinity (bool): Whether the point is the point at infinity. Defaults to `False`.
    """

    x: int
    y: int
    curve: Curve = field(compare=False)
    infinity: bool = False

    def __post_init__(self):
        check_int(self.x, 1, "x")
        check_int(self.y, 2, "y")
        check_instance(self.curve, Curve, 3, "curve")
        if not isinstance(self.infinity, bool):
            msg = f"arg at index 4 (infinity) expected a bool, but {type_name(self.infinity)} found"
            raise InputTypeError(msg)
        if self.infinity:
            object.__setattr__(self, "x", 0)
            object.__setattr__(self, "y", 0)

    @classmethod
    def infinity_of(cls, curve: Curve) -> Self:
        """Return the point at infinity of `curve`."""
        return cls(0, 0, curve, infinity=True)

    def is_infinity(self) -> bool:
        """Check whether self is the point at infinity."""
        return self.infinity

    def to_list(self) -> list[int]:
        """Return the coordinates `[x, y]` of self."""
        return [self.x, self.y]

    def with_overrides(self, **overrides) -> Self:
        """Return a copy of self with the fields in `overrides` replaced.

        Raises:
            AttributeError: If one of the keys in `overrides` is not a field of `Point`.
        """
        field_names = {f.name for f in fields(self)}
        for key in overrides:
            if key not in field_names:
                msg = f"Point has no attribute '{key}'"
                raise AttributeError(msg)
        return replace(self, **overrides)

    def _check_same_curve(self, other: "Point"):
        if self.curve != other.curve:
            msg = "curve of two Point's must be the same"
            raise MismatchError(msg)

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        self._check_same_curve(other)
        from modcrypto.elliptic_curves import group_law

        return group_law.add(self, other, self.curve)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        self._check_same_curve(other)
        from modcrypto.elliptic_curves import group_law

        return group_law.add(self, group_law.negate(other, self.curve), self.curve)

    def __neg__(self):
        from modcrypto.elliptic_curves import group_law

        return group_law.negate(self, self.curve)

    def __mul__(self, k):
        if not is_int(k):
            msg = "right must be a int"
            raise InputTypeError(msg)
        from modcrypto.elliptic_curves import group_law

        return group_law.scalar_mul(self, k, self.curve)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        if self.infinity:
            return f"<Point at infinity curve={self.curve!r}>"
        return f"<Point x={self.x} y={self.y} curve={self.curve!r}>"
