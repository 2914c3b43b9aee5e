"""Shuffle algorithms and a ``random.Random`` adapter for any generator.

Usage:
    >>> from grand import GRand
    >>> from grand.algorithms import RandomAdapter, random_shuffle, shuffle
    >>> r = GRand(7)
    >>> cards = list(range(52))
    >>> shuffle(cards, r)          # any UniformRandomBitGenerator
    >>> random_shuffle(cards, r)   # any rand(n) callable
    >>> RandomAdapter(r).choice(cards) in cards
    True
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any

from grand.distributions import generate_canonical, uniform_int

if TYPE_CHECKING:
    from collections.abc import Callable, MutableSequence

    from grand.protocols import UniformRandomBitGenerator

__all__ = ['RandomAdapter', 'random_shuffle', 'shuffle']


def shuffle(x: MutableSequence[Any], urbg: UniformRandomBitGenerator) -> None:
    """Shuffle ``x`` in place (Fisher-Yates), drawing from ``urbg``."""
    for i in reversed(range(1, len(x))):
        j = uniform_int(urbg, 0, i)
        x[i], x[j] = x[j], x[i]


def random_shuffle(x: MutableSequence[Any], rand: Callable[[int], int]) -> None:
    """Shuffle ``x`` in place using ``rand(n)``, which must return an int in ``[0, n)``.

    ``GRand`` instances qualify, as do plain functions such as
    ``secrets.randbelow``.
    """
    for i in range(1, len(x)):
        j = rand(i + 1)
        if i != j:
            x[i], x[j] = x[j], x[i]


class RandomAdapter(random.Random):
    """Expose a uniform random bit generator as a ``random.Random``.

    Every ``random.Random`` method (``choice``, ``sample``, ``shuffle``,
    ``randrange``, ``gauss``, ...) then draws from the wrapped generator, so
    reseeding or snapshotting the generator reproduces their results.

    Example:
        ```python
        from grand import GRand, RandomAdapter

        rnd = RandomAdapter(GRand(7))
        rnd.shuffle(deck)
        hand = rnd.sample(deck, 5)
        ```
    """

    def __init__(self, urbg: UniformRandomBitGenerator) -> None:
        self._urbg = urbg
        self.gauss_next = None

    @property
    def generator(self) -> UniformRandomBitGenerator:
        """The wrapped generator."""
        return self._urbg

    def random(self) -> float:
        return generate_canonical(self._urbg)

    def getrandbits(self, k: int) -> int:
        if k < 0:
            msg = 'number of bits must be non-negative'
            raise ValueError(msg)
        if k == 0:
            return 0
        return uniform_int(self._urbg, 0, (1 << k) - 1)

    def seed(self, a: Any = None, version: int = 2) -> None:
        """Reseed the wrapped generator; ``None`` asks it for a fresh seed.

        Raises:
            TypeError: If the wrapped generator has no ``seed`` method.
        """
        seed = getattr(self._urbg, 'seed', None)
        if seed is None:
            msg = f'{type(self._urbg).__name__} cannot be reseeded'
            raise TypeError(msg)
        if a is None:
            seed()
        else:
            seed(a)
        self.gauss_next = None

    def getstate(self) -> tuple[Any, float | None]:
        return self._urbg.getstate(), self.gauss_next  # type: ignore[attr-defined]

    def setstate(self, state: tuple[Any, float | None]) -> None:
        urbg_state, self.gauss_next = state
        self._urbg.setstate(urbg_state)  # type: ignore[attr-defined]
