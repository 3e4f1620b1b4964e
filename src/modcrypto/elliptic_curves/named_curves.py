"""Ready-made standard curves.

The secp256k1 constants are the ones shipped by `tx_engine`. The secp256r1 (NIST P-256) constants are those of
SEC 2, section 2.4.2.
"""

from tx_engine.engine.util import GROUP_ORDER_INT, PRIME_INT, Gx, Gy

from modcrypto.elliptic_curves.curve import Curve
from modcrypto.util.errors import InputValueError

secp256k1 = Curve(
    p=PRIME_INT,
    a=0,
    b=7,
    q=GROUP_ORDER_INT,
    gx=Gx,
    gy=Gy,
    name="secp256k1",
    oid="2b8104000a",
)

_P256_MODULUS = 0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF

secp256r1 = Curve(
    p=_P256_MODULUS,
    a=_P256_MODULUS - 3,
    b=0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
    q=0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
    gx=0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
    gy=0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
    name="secp256r1",
    oid="2a8648ce3d030107",
)

NAMED_CURVES = {curve.name: curve for curve in (secp256k1, secp256r1)}


def get_curve(name: str) -> Curve:
    """Return the standard curve called `name`.

    Raises:
        InputValueError: If no curve is called `name`.
    """
    if name not in NAMED_CURVES:
        msg = f"unknown curve {name!r}, expected one of {', '.join(sorted(NAMED_CURVES))}"
        raise InputValueError(msg)
    return NAMED_CURVES[name]
