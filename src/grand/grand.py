"""GRand: easy pseudorandom number generation.

Convenience wrapper around a Mersenne Twister engine. Intended for simple
pseudorandom number generation, not for cryptographic use.

Example:
    ```python
    from grand import GRand, shuffle

    r = GRand()    # seeded with an unpredictable value on first use
    r2 = GRand(7)  # fixed seed gives a predictable sequence
    r2.seed(2)     # another way to seed

    r.next_int(100)     # int in {0, 1, ..., 99}
    r.next_bool()       # coin flip
    r.next_bool(0.75)   # True with 75% probability
    r.next_double()     # float in [0.0, 1.0)
    r.next_double(3.0)  # float in [0.0, 3.0)

    shuffle(values, r)  # shuffle a list in place
    ```
"""

from __future__ import annotations

import operator
from typing import Any, Self, SupportsIndex

import msgspec

from grand._config import draw_entropy, get_config
from grand._logging import get_logger
from grand.distributions import bernoulli, uniform_int, uniform_real
from grand.engine import MT19937

__all__ = ['GRand', 'GRandState']

logger = get_logger(__name__)


class GRandState(msgspec.Struct, frozen=True, gc=False):
    """Snapshot of a GRand: pending-seed flag plus engine words and index."""

    seed_needed: bool
    words: tuple[int, ...]
    index: int


class GRand:
    """Pseudorandom number generator with deferred entropy seeding.

    Constructed without a seed, the engine is seeded from the configured
    entropy source just before the first output is produced. Constructed with
    a seed, or given one via ``seed(value)`` before first use, it never reads
    entropy at all.

    GRand satisfies ``UniformRandomBitGenerator`` (``min_word``, ``max_word``,
    zero-argument call) and the ``rand(n)`` shape, so it can be handed to
    ``shuffle``, ``random_shuffle`` and ``RandomAdapter`` directly.

    Not safe for concurrent use; give each thread its own instance.
    """

    __slots__ = ('_rng', '_seed_needed')

    def __init__(self, seed_value: SupportsIndex | None = None) -> None:
        self._rng = MT19937()
        if seed_value is None:
            self._seed_needed = True
        else:
            self._seed_needed = False
            self._rng.seed(_to_word(seed_value))

    def seed(self, seed_value: SupportsIndex | None = None) -> None:
        """Seed the generator.

        With no argument, request an unpredictable seed; it is applied on the
        next output, not now. With a value, seed deterministically at once.
        """
        if seed_value is None:
            self._seed_needed = True
            logger.debug('entropy_seed_requested')
            return
        self._seed_needed = False
        self._rng.seed(_to_word(seed_value))

    def next_int(self, n: int = 2) -> int:
        """Return a random integer in ``[0, n-1]``, or 0 if ``n <= 0``."""
        return self.sample(n)

    def next_double(self, bound: float = 1.0) -> float:
        """Return a random float.

        In ``[0.0, bound)`` if ``bound > 0``, in ``(bound, 0.0]`` if
        ``bound < 0``, and exactly ``0.0`` if ``bound == 0``.
        """
        self._check_seed()
        if bound > 0.0:
            return uniform_real(self._rng, 0.0, bound)
        if bound < 0.0:
            return -uniform_real(self._rng, 0.0, -bound)
        return 0.0

    def next_bool(self, p: float = 0.5) -> bool:
        """Return True with probability ``p``."""
        self._check_seed()
        if p <= 0.0:
            return False
        if p >= 1.0:
            return True
        return bernoulli(self._rng, p)

    def next_raw_word(self) -> int:
        """Return the engine's next word, in ``[min_word(), max_word()]``."""
        self._check_seed()
        return self._rng()

    def sample[T: SupportsIndex](self, n: T) -> T | int:
        """Return a random integer in ``[0, n-1]``, or 0 if ``n <= 0``.

        Generic over integer types: the result has the type of ``n`` when
        that type can be built from an int, and is a plain int otherwise.
        """
        self._check_seed()
        count = operator.index(n)
        value = uniform_int(self._rng, 0, count - 1) if count > 0 else 0
        try:
            return type(n)(value)  # type: ignore[call-arg]
        except (TypeError, ValueError):
            return value

    def discard(self, z: int) -> None:
        """Skip the next ``z`` raw words."""
        self._check_seed()
        self._rng.discard(z)

    # --- Uniform random bit generator support ---

    @staticmethod
    def min_word() -> int:
        return MT19937.min_word()

    @staticmethod
    def max_word() -> int:
        return MT19937.max_word()

    def __call__(self, n: Any = None) -> Any:
        """With no argument, return the next raw word; with ``n``, ``sample(n)``."""
        if n is None:
            return self.next_raw_word()
        return self.sample(n)

    # --- State ---

    def getstate(self) -> GRandState:
        """Return a snapshot that ``setstate`` can restore."""
        words, index = self._rng.getstate()
        return GRandState(seed_needed=self._seed_needed, words=words, index=index)

    def setstate(self, state: GRandState) -> None:
        """Restore a snapshot taken by ``getstate``.

        Raises:
            ValueError: If the snapshot does not describe a valid engine state.
        """
        self._rng.setstate((state.words, state.index))
        self._seed_needed = state.seed_needed

    def copy(self) -> Self:
        """Return an independent generator in the same state."""
        twin = type(self).__new__(type(self))
        twin._rng = MT19937()
        twin.setstate(self.getstate())
        return twin

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.copy()

    def __repr__(self) -> str:
        state = 'pending' if self._seed_needed else 'seeded'
        return f'GRand({state})'

    # --- Internal ---

    def _check_seed(self) -> None:
        """Seed from entropy if a seed is pending; otherwise do nothing.

        Lets a default-constructed GRand be seeded explicitly later without
        an entropy read in between, so environments with no entropy source
        work as long as a seed is given before first use.
        """
        if not self._seed_needed:
            return
        source = get_config().entropy
        self._rng.seed(draw_entropy(source))
        self._seed_needed = False
        logger.debug('entropy_seeded', source=source.value)


def _to_word(seed_value: SupportsIndex) -> int:
    """Convert a seed to the engine's unsigned 32-bit word."""
    return operator.index(seed_value) & MT19937.max_word()
