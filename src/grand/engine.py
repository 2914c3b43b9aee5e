"""32-bit Mersenne Twister engine with ``std::mt19937`` semantics.

Seeding uses the ``init_genrand`` recurrence on a single 32-bit word, so a
given seed produces the same output sequence as the C++ standard library
engine. Python's own ``random.Random`` is also an MT19937, but it seeds
through ``init_by_array`` and cannot reproduce that sequence.

Example:
    ```python
    from grand.engine import MT19937

    mt = MT19937()
    mt()  # 3499211612
    ```
"""

from __future__ import annotations

import operator
from typing import SupportsIndex

__all__ = ['DEFAULT_SEED', 'MT19937']

DEFAULT_SEED = 5489

_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_WORD_MASK = 0xFFFFFFFF
_INIT_MULTIPLIER = 1812433253


class MT19937:
    """Mersenne Twister producing 32-bit words in ``[0, 2**32 - 1]``.

    Satisfies ``UniformRandomBitGenerator``.
    """

    WORD_BITS = 32
    STATE_SIZE = _N

    __slots__ = ('_index', '_mt')

    def __init__(self, seed_value: SupportsIndex = DEFAULT_SEED) -> None:
        self._mt = [0] * _N
        self._index = _N
        self.seed(seed_value)

    def seed(self, seed_value: SupportsIndex = DEFAULT_SEED) -> None:
        """Reset the state from ``seed_value`` reduced modulo ``2**32``."""
        mt = self._mt
        mt[0] = operator.index(seed_value) & _WORD_MASK
        for i in range(1, _N):
            prev = mt[i - 1]
            mt[i] = (_INIT_MULTIPLIER * (prev ^ (prev >> 30)) + i) & _WORD_MASK
        self._index = _N

    def _twist(self) -> None:
        mt = self._mt
        for i in range(_N):
            y = (mt[i] & _UPPER_MASK) | (mt[(i + 1) % _N] & _LOWER_MASK)
            value = mt[(i + _M) % _N] ^ (y >> 1)
            if y & 1:
                value ^= _MATRIX_A
            mt[i] = value
        self._index = 0

    def __call__(self) -> int:
        if self._index >= _N:
            self._twist()
        y = self._mt[self._index]
        self._index += 1

        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y

    def discard(self, z: int) -> None:
        """Advance the state by ``z`` outputs."""
        for _ in range(z):
            if self._index >= _N:
                self._twist()
            self._index += 1

    @staticmethod
    def min_word() -> int:
        return 0

    @staticmethod
    def max_word() -> int:
        return _WORD_MASK

    def getstate(self) -> tuple[tuple[int, ...], int]:
        """Return ``(words, index)``; ``index == 624`` means a twist is due."""
        return tuple(self._mt), self._index

    def setstate(self, state: tuple[tuple[int, ...], int]) -> None:
        """Restore a state produced by ``getstate()``.

        Raises:
            ValueError: If the word count or index is out of range.
        """
        words, index = state
        if len(words) != _N:
            msg = f'MT19937 state needs {_N} words, got {len(words)}'
            raise ValueError(msg)
        if not 0 <= index <= _N:
            msg = f'MT19937 state index must be in [0, {_N}], got {index}'
            raise ValueError(msg)
        self._mt = [int(w) & _WORD_MASK for w in words]
        self._index = index

    def __repr__(self) -> str:
        return f'MT19937(index={self._index})'
