"""Structural protocol for uniform random bit generators.

A uniform random bit generator (URBG) is anything exposing the bounds of its
raw output and a zero-argument call producing the next raw word. The
distributions and shuffle algorithms in this package accept any URBG, so
``GRand``, ``MT19937`` or a user type can be passed without adaptation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ['UniformRandomBitGenerator']


@runtime_checkable
class UniformRandomBitGenerator(Protocol):
    """Protocol for generators of uniformly distributed raw words.

    Every call must return an integer in ``[min_word(), max_word()]``, each
    value equally likely. ``min_word() < max_word()`` must hold.

    Example:
        ```python
        from grand import GRand, UniformRandomBitGenerator

        assert isinstance(GRand(7), UniformRandomBitGenerator)
        ```
    """

    def min_word(self) -> int:
        """Smallest value ``__call__()`` can return."""
        ...

    def max_word(self) -> int:
        """Largest value ``__call__()`` can return."""
        ...

    def __call__(self) -> int:
        """Return the next raw word."""
        ...
