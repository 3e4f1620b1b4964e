"""Utility functions."""

from string import hexdigits

from modcrypto.util.errors import InputTypeError, InputValueError


def type_name(value) -> str:
    """Return the name of the type of `value`, as used in error messages."""
    return type(value).__name__


def describe_argument(index: int | None, name: str | None) -> str:
    """Return the prefix identifying an argument in error messages.

    Example:
        >>> describe_argument(1, "p")
        'arg at index 1 (p) '
        >>> describe_argument(None, "name")
        'name: '
        >>> describe_argument(None, None)
        ''
    """
    if index is not None and name is not None:
        return f"arg at index {index} ({name}) "
    if index is not None:
        return f"arg at index {index} "
    if name is not None:
        return f"{name}: "
    return ""


def is_int(value) -> bool:
    """Check whether `value` is an integer. Booleans are not accepted as integers."""
    return isinstance(value, int) and not isinstance(value, bool)


def check_int(value, index: int | None = None, name: str | None = None) -> int:
    """Check that `value` is an integer and return it.

    Args:
        value: The value to check.
        index (int | None): The (1-based) position of the argument, used in the error message.
        name (str | None): The name of the argument, used in the error message.

    Returns:
        `value`, unchanged.

    Raises:
        InputTypeError: If `value` is not an integer.
    """
    if not is_int(value):
        msg = f"{describe_argument(index, name)}expected a int, but {type_name(value)} found"
        raise InputTypeError(msg)
    return value


def check_instance(value, expected: type, index: int | None = None, name: str | None = None):
    """Check that `value` is an instance of `expected` and return it.

    Args:
        value: The value to check.
        expected (type): The expected type.
        index (int | None): The (1-based) position of the argument, used in the error message.
        name (str | None): The name of the argument, used in the error message.

    Raises:
        InputTypeError: If `value` is not an instance of `expected`.
    """
    if not isinstance(value, expected):
        msg = f"{describe_argument(index, name)}expected a {expected.__name__}, but {type_name(value)} found"
        raise InputTypeError(msg)
    return value


def unhexlify(text: str) -> bytes:
    """Decode an even-length hex string into bytes.

    Example:
        >>> unhexlify("2b8104000a")
        b'+\\x81\\x04\\x00\\n'

    Raises:
        InputValueError: If `text` has odd length or contains a non-hex digit.
    """
    if len(text) % 2 != 0:
        msg = "odd-length string"
        raise InputValueError(msg)
    if any(char not in hexdigits for char in text):
        msg = "non-hex digit found"
        raise InputValueError(msg)
    return bytes.fromhex(text)


def hex_to_int(digits: str | bytes) -> int:
    """Read a big-endian hex string (or ASCII hex bytes) as a non-negative integer.

    Unlike `unhexlify`, odd-length input is accepted: the digits are read as a number, not as bytes.

    Raises:
        InputTypeError: If `digits` is neither a string nor bytes.
        InputValueError: If `digits` is empty or contains a non-hex digit.
    """
    if isinstance(digits, (bytes, bytearray)):
        try:
            digits = bytes(digits).decode("ascii")
        except UnicodeDecodeError as err:
            msg = "non-hex digit found"
            raise InputValueError(msg) from err
    elif not isinstance(digits, str):
        msg = f"expected a str/bytes, but {type_name(digits)} found"
        raise InputTypeError(msg)
    if len(digits) == 0:
        msg = "empty hex string"
        raise InputValueError(msg)
    if any(char not in hexdigits for char in digits):
        msg = "non-hex digit found"
        raise InputValueError(msg)
    return int(digits, 16)
