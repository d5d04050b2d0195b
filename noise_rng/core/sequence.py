# ==============================================================================
# File: noise_rng/core/sequence.py
# Purpose: Counter-based pseudorandom sequence built on Hasher.
# ==============================================================================
"""
Lightweight, fast, but sufficiently random pseudorandom number generator.
Based on the "noise-based RNG" idea from Squirrel Eiserloh's GDC 2017 talk
"Math for Game Programmers: Noise-Based RNG".

Draw ``n`` is ``Hasher(seed).eat_u32(n).avalanche()``, a pure function of
``(seed, n)``. The only mutable state is the position counter, so jumping to
any point of the sequence is O(1) and two copies of a generator never
influence each other.

A generator must not be shared by reference between threads. Hand each
worker its own ``copy()`` / ``fork()`` instead.
"""
from __future__ import annotations

import operator
from typing import Optional, Tuple

import numpy as np

from .constants import (
    BYTE_MAX,
    BYTE_MIN,
    INT_MAX,
    INT_MIN,
    INV_U24_RANGE,
    INV_U32_RANGE,
    SBYTE_MAX,
    SBYTE_MIN,
    U32_MASK,
    UINT_MAX,
    UINT_MIN,
    to_i32,
    to_i8,
)
from .easing import lerp
from .errors import InvalidArgument
from .hashing import Hasher

F32 = np.float32


def _check_range(min_value: int, max_value: int, lo: int, hi: int, kind: str) -> Tuple[int, int]:
    """Validates integer range bounds and returns them as Python ints."""
    # numpy scalars would do the span arithmetic in their own, narrower dtype
    try:
        min_value, max_value = operator.index(min_value), operator.index(max_value)
    except TypeError as exc:
        raise InvalidArgument(
            f"{kind} range bounds must be integers, got ({min_value!r}, {max_value!r})"
        ) from exc
    if not (lo <= min_value <= hi and lo <= max_value <= hi):
        raise InvalidArgument(
            f"{kind} range bounds must lie in [{lo}, {hi}], got ({min_value}, {max_value})"
        )
    if not min_value < max_value:
        raise InvalidArgument("min must be lower than max!")
    return min_value, max_value


def _check_chance(p: float) -> None:
    # NaN fails both comparisons
    if not (0.0 <= p <= 1.0):
        raise InvalidArgument("chance_to_return_true must be between 0 and 1.")


class SequenceGenerator:
    __slots__ = ("_seed", "_position")

    # ------------------------------------------------------------ state management

    def __init__(self, seed: int, position: int = 0):
        self._seed = int(seed) & U32_MASK
        self._position = int(position) & U32_MASK

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def position(self) -> int:
        return self._position

    def advance(self, offset: int) -> None:
        """
        Jumps the position forwards without generating the skipped values.
        Wraps modulo 2**32.
        """
        self._position = (self._position + int(offset)) & U32_MASK

    def rewind(self, offset: int) -> None:
        """Jumps the position backwards. Wraps modulo 2**32."""
        self._position = (self._position - int(offset)) & U32_MASK

    def seek(self, position: int) -> None:
        self._position = int(position) & U32_MASK

    def copy(self) -> "SequenceGenerator":
        return SequenceGenerator(self._seed, self._position)

    __copy__ = copy

    def fork(self, offset: int = 0) -> "SequenceGenerator":
        """Independent copy positioned ``offset`` draws ahead of this one."""
        return SequenceGenerator(self._seed, self._position + int(offset))

    # ------------------------------------------------------------ standard accessors

    def peek_u32(self, position: Optional[int] = None) -> int:
        """Value at ``position`` (default: the current one) without moving."""
        pos = self._position if position is None else int(position) & U32_MASK
        return Hasher(self._seed).eat_u32(pos).avalanche()

    def next_u32(self) -> int:
        value = Hasher(self._seed).eat_u32(self._position).avalanche()
        self._position = (self._position + 1) & U32_MASK
        return value

    next_uint = next_u32

    def next_int(self) -> int:
        return to_i32(self.next_u32())

    def next_byte(self) -> int:
        return self.next_u32() & BYTE_MAX

    def next_sbyte(self) -> int:
        return to_i8(self.next_u32())

    def next_float(self) -> np.float32:
        # a float32 mantissa holds 24 bits; the top 24 bits of the draw keep the result below 1.0
        return F32(self.next_u32() >> 8) * F32(INV_U24_RANGE)

    def next_double(self) -> float:
        return self.next_u32() * INV_U32_RANGE

    def next_bool(self) -> bool:
        return (self.next_u32() % 2) == 0

    # ------------------------------------------------------------ range accessors

    def range_uint(self, min_value: int, max_value: int) -> int:
        min_value, max_value = _check_range(min_value, max_value, UINT_MIN, UINT_MAX, "uint")
        span = (max_value - min_value) & U32_MASK
        return min_value + self.next_u32() % span

    def range_int(self, min_value: int, max_value: int) -> int:
        min_value, max_value = _check_range(min_value, max_value, INT_MIN, INT_MAX, "int")
        span = (max_value - min_value) & U32_MASK
        return min_value + self.next_u32() % span

    def range_byte(self, min_value: int, max_value: int) -> int:
        min_value, max_value = _check_range(min_value, max_value, BYTE_MIN, BYTE_MAX, "byte")
        return min_value + self.next_u32() % (max_value - min_value)

    def range_sbyte(self, min_value: int, max_value: int) -> int:
        min_value, max_value = _check_range(min_value, max_value, SBYTE_MIN, SBYTE_MAX, "sbyte")
        return min_value + self.next_u32() % (max_value - min_value)

    def range_float(self, min_value: float, max_value: float) -> np.float32:
        lo, hi = F32(min_value), F32(max_value)
        value = lerp(lo, hi, self.next_float())
        # lerp rounding can land on max for large-magnitude bounds
        if lo < hi and value >= hi:
            value = np.nextafter(hi, lo)
        return value

    def range_double(self, min_value: float, max_value: float) -> float:
        lo, hi = float(min_value), float(max_value)
        value = lerp(lo, hi, self.next_double())
        if lo < hi and value >= hi:
            value = float(np.nextafter(hi, lo))
        return value

    # ------------------------------------------------------------ special accessors

    def chance(self, chance_to_return_true: float) -> bool:
        """
        True with the given probability.

        A ``numpy.float32`` probability is compared against ``next_float``,
        anything else against ``next_double``.
        """
        _check_chance(chance_to_return_true)
        if isinstance(chance_to_return_true, np.float32):
            return bool(self.next_float() < chance_to_return_true)
        return self.next_double() < chance_to_return_true

    # ------------------------------------------------------------ block accessors

    def next_u32_block(self, count: int) -> np.ndarray:
        """``count`` sequential draws as a uint32 array; advances by ``count``."""
        # numba is only imported once a block is requested
        from ..numerics import draw_block

        block = draw_block(self._seed, self._position, count)
        self._position = (self._position + count) & U32_MASK
        return block

    def next_double_block(self, count: int) -> np.ndarray:
        from ..numerics import to_unit_float64

        return to_unit_float64(self.next_u32_block(count))

    def next_float_block(self, count: int) -> np.ndarray:
        from ..numerics import to_unit_float32

        return to_unit_float32(self.next_u32_block(count))

    # ------------------------------------------------------------ value semantics

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SequenceGenerator):
            return NotImplemented
        return self._seed == other._seed and self._position == other._position

    def __repr__(self) -> str:
        return f"SequenceGenerator(seed={self._seed}, position={self._position})"
