"""Error types: dual struct+exception for value-based and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'EntropyUnavailable',
    'EntropyUnavailableError',
]


class EntropyUnavailable(msgspec.Struct, frozen=True, gc=False):
    """No entropy could be read - struct variant."""

    source: str
    reason: str | None = None

    def to_exception(self) -> EntropyUnavailableError:
        """Convert to exception for raise-based code."""
        return EntropyUnavailableError(self.source, self.reason)


class EntropyUnavailableError(Exception):
    """No entropy could be read - exception variant.

    Raised by the lazy seed of a ``GRand`` whose entropy source failed. The
    instance stays pending, so seeding it explicitly recovers.
    """

    def __init__(self, source: str, reason: str | None = None) -> None:
        self.source = source
        self.reason = reason
        msg = f"Entropy source '{source}' unavailable"
        if reason:
            msg = f'{msg}: {reason}'
        super().__init__(msg)

    def to_struct(self) -> EntropyUnavailable:
        """Convert to struct for value-based code."""
        return EntropyUnavailable(self.source, self.reason)
