"""Sources of random bytes used by prime generation."""

import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """A source of random bytes.

    Any object with a `next_bytes(n)` method returning `n` bytes can be injected where a `RandomSource` is
    expected. modcrypto assumes, but does not verify, that the source is cryptographically secure.
    """

    def next_bytes(self, n: int) -> bytes:
        """Return `n` random bytes."""
        ...


class SystemRandomSource:
    """Random bytes from the operating system CSPRNG."""

    def next_bytes(self, n: int) -> bytes:
        """Return `n` random bytes from `secrets.token_bytes`."""
        return secrets.token_bytes(n)

    def __repr__(self) -> str:
        return "SystemRandomSource()"
