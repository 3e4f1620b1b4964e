"""Exceptions raised by modcrypto.

Each exception subclasses the matching built-in, so callers may catch either the specific class or the
built-in one (e.g. `InputValueError` is a `ValueError`).
"""


class InputTypeError(TypeError):
    """An argument has the wrong kind (e.g. a non-integer where an integer is required)."""


class InputValueError(ValueError):
    """An argument has the right kind but lies outside the accepted domain.

    Attributes:
        code (int | None): The error code reported by the underlying generator, if any.
    """

    def __init__(self, msg: str, code: int | None = None):
        """Initialise the error.

        Args:
            msg (str): The error message.
            code (int | None): The error code reported by the underlying generator. Defaults to `None`.
        """
        super().__init__(msg)
        self.code = code


class ArithmeticFailure(ArithmeticError):
    """A modular inverse does not exist."""


class ResourceExhaustion(MemoryError):
    """An integer does not fit in the buffer it must be serialised into."""


class MismatchError(ValueError):
    """Two operands are defined over different curves."""
