"""Sampling distributions over any uniform random bit generator.

The algorithms follow libstdc++ (``uniform_int_distribution``,
``generate_canonical``, ``uniform_real_distribution`` and
``bernoulli_distribution``), so for an ``MT19937`` seeded with the same value
they yield the same numbers as the C++ standard library.

Key functions:
    - uniform_int(): unbiased integer in a closed range (rejection sampling)
    - generate_canonical(): float in [0.0, 1.0) built from whole raw words
    - uniform_real(): float in [a, b)
    - bernoulli(): bool that is True with a given probability

Usage:
    >>> from grand.engine import MT19937
    >>> from grand.distributions import uniform_int
    >>> mt = MT19937(7)
    >>> 0 <= uniform_int(mt, 0, 99) <= 99
    True
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grand.protocols import UniformRandomBitGenerator

__all__ = [
    'DOUBLE_DIGITS',
    'bernoulli',
    'generate_canonical',
    'uniform_int',
    'uniform_real',
]

# Mantissa bits of an IEEE 754 double.
DOUBLE_DIGITS = 53

_U32_MAX = (1 << 32) - 1
_U64_MAX = (1 << 64) - 1


def _multiply_reject(urbg: UniformRandomBitGenerator, erange: int, digits: int) -> int:
    """Lemire's nearly-divisionless reduction of a ``digits``-bit word to ``[0, erange)``."""
    low_mask = (1 << digits) - 1
    urbg_min = urbg.min_word()
    product = (urbg() - urbg_min) * erange
    low = product & low_mask
    if low < erange:
        threshold = ((1 << digits) - erange) % erange
        while low < threshold:
            product = (urbg() - urbg_min) * erange
            low = product & low_mask
    return product >> digits


def uniform_int(urbg: UniformRandomBitGenerator, a: int, b: int) -> int:
    """Return an integer uniformly distributed over ``[a, b]``.

    Downscales with multiply-and-reject when the generator spans exactly 32 or
    64 bits and with division-based rejection otherwise. Ranges wider than the
    generator are built from several draws.

    Args:
        urbg: Source of raw words.
        a: Lower bound, inclusive.
        b: Upper bound, inclusive.

    Returns:
        An integer N with ``a <= N <= b``.

    Raises:
        ValueError: If ``a > b``.
    """
    if a > b:
        msg = f'uniform_int requires a <= b, got a={a}, b={b}'
        raise ValueError(msg)

    urbg_min = urbg.min_word()
    urbg_range = urbg.max_word() - urbg_min
    urange = b - a

    if urbg_range > urange:
        erange = urange + 1
        if urbg_range == _U64_MAX:
            ret = _multiply_reject(urbg, erange, 64)
        elif urbg_range == _U32_MAX:
            ret = _multiply_reject(urbg, erange, 32)
        else:
            scaling = urbg_range // erange
            past = erange * scaling
            ret = urbg() - urbg_min
            while ret >= past:
                ret = urbg() - urbg_min
            ret //= scaling
    elif urbg_range < urange:
        erng_range = urbg_range + 1
        while True:
            high = erng_range * uniform_int(urbg, 0, urange // erng_range)
            ret = high + (urbg() - urbg_min)
            if ret <= urange:
                break
    else:
        ret = urbg() - urbg_min

    return ret + a


def generate_canonical(urbg: UniformRandomBitGenerator, bits: int = DOUBLE_DIGITS) -> float:
    """Return a float in ``[0.0, 1.0)`` carrying at least ``bits`` random bits.

    Consumes ``ceil(bits / log2(R))`` whole words, where R is the number of
    distinct raw values; two words for a 32-bit generator.
    """
    bits = min(bits, DOUBLE_DIGITS)
    urbg_min = urbg.min_word()
    r = urbg.max_word() - urbg_min + 1
    log2r = r.bit_length() - 1
    k = max(1, (bits + log2r - 1) // log2r)

    total = 0.0
    scale = 1.0
    for _ in range(k):
        total += float(urbg() - urbg_min) * scale
        scale *= r
    ret = total / scale
    if ret >= 1.0:
        ret = math.nextafter(1.0, 0.0)
    return ret


def uniform_real(urbg: UniformRandomBitGenerator, a: float, b: float) -> float:
    """Return a float uniformly distributed over ``[a, b)``."""
    ret = generate_canonical(urbg) * (b - a) + a
    # Rounding can land exactly on b for some spans.
    if a < b and ret >= b:
        ret = math.nextafter(b, a)
    return ret


def bernoulli(urbg: UniformRandomBitGenerator, p: float) -> bool:
    """Return True with probability ``p``."""
    return generate_canonical(urbg) < p
