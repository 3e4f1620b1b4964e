"""The ECDSA signature value type."""

from dataclasses import dataclass

from modcrypto.util.utility_functions import check_int


@dataclass(frozen=True)
class Signature:
    """An ECDSA signature (r, s).

    Attributes:
        r (int): The x-coordinate of the nonce point, reduced modulo the curve order.
        s (int): The proof value k^-1 (e + d r) modulo the curve order.
    """

    r: int
    s: int

    def __post_init__(self):
        check_int(self.r, 1, "r")
        check_int(self.s, 2, "s")

    def __repr__(self) -> str:
        return f"<Signature r={self.r} s={self.s}>"
