import pytest

from modcrypto.util.errors import (
    ArithmeticFailure,
    InputTypeError,
    InputValueError,
    MismatchError,
    ResourceExhaustion,
)
from modcrypto.util.utility_functions import (
    check_instance,
    check_int,
    describe_argument,
    hex_to_int,
    is_int,
    unhexlify,
)


@pytest.mark.parametrize(
    ("error", "builtin"),
    [
        (InputTypeError, TypeError),
        (InputValueError, ValueError),
        (ArithmeticFailure, ArithmeticError),
        (ResourceExhaustion, MemoryError),
        (MismatchError, ValueError),
    ],
)
def test_errors_subclass_builtins(error, builtin):
    assert issubclass(error, builtin)


def test_input_value_error_code():
    assert InputValueError("boom").code is None
    assert InputValueError("1: boom", code=1).code == 1


@pytest.mark.parametrize(
    ("index", "name", "expected"),
    [
        (1, "p", "arg at index 1 (p) "),
        (3, None, "arg at index 3 "),
        (None, "name", "name: "),
        (None, None, ""),
    ],
)
def test_describe_argument(index, name, expected):
    assert describe_argument(index, name) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, True),
        (-(2**300), True),
        (True, False),
        (1.0, False),
        ("1", False),
        (None, False),
    ],
)
def test_is_int(value, expected):
    assert is_int(value) is expected


def test_check_int():
    assert check_int(42, 1, "a") == 42
    with pytest.raises(InputTypeError, match=r"arg at index 2 \(b\) expected a int, but float found"):
        check_int(2.0, 2, "b")
    with pytest.raises(InputTypeError, match="expected a int, but bool found"):
        check_int(False)


def test_check_instance():
    assert check_instance("x", str, 1) == "x"
    with pytest.raises(InputTypeError, match="arg at index 1 expected a str, but int found"):
        check_instance(1, str, 1)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", b""),
        ("2b8104000a", bytes([0x2B, 0x81, 0x04, 0x00, 0x0A])),
        ("ABcd", bytes([0xAB, 0xCD])),
    ],
)
def test_unhexlify(text, expected):
    assert unhexlify(text) == expected


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("abc", "odd-length string"),
        ("zz", "non-hex digit found"),
        ("0x12", "non-hex digit found"),
    ],
)
def test_unhexlify_errors(text, message):
    with pytest.raises(InputValueError, match=message):
        unhexlify(text)


@pytest.mark.parametrize(
    ("digits", "expected"),
    [
        ("ff", 255),
        ("00ff", 255),
        ("abc", 0xABC),
        (b"1F", 31),
        (bytearray(b"10"), 16),
    ],
)
def test_hex_to_int(digits, expected):
    assert hex_to_int(digits) == expected


@pytest.mark.parametrize(
    ("digits", "error", "message"),
    [
        ("", InputValueError, "empty hex string"),
        ("12g4", InputValueError, "non-hex digit found"),
        (" 12", InputValueError, "non-hex digit found"),
        (b"\xff\xfe", InputValueError, "non-hex digit found"),
        (1234, InputTypeError, "expected a str/bytes, but int found"),
    ],
)
def test_hex_to_int_errors(digits, error, message):
    with pytest.raises(error, match=message):
        hex_to_int(digits)
