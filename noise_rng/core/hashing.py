# ==============================================================================
# File: noise_rng/core/hashing.py
# Purpose: Minimal xxHash32-style accumulator for combining a seed with any
#          number of integer keys into one deterministic 32-bit digest.
# ==============================================================================
"""
Stateless-friendly hashing primitive.

A ``Hasher`` starts from a seed and "eats" values one at a time. Every eat
mixes the value into a single 32-bit accumulator, so the digest depends on
both the values and the order they were eaten in. ``avalanche()`` finalises
the accumulator so a one-bit change in any input flips about half of the
output bits.

Diverges from reference xxHash32 once more than a single lane of data has
been eaten: there are no stripes, only the sequential accumulator.

Example usages::

    town_theme = Hasher(level_seed).eat(town_id).avalanche()
    world_height = Hasher(level_seed).eat(x).eat(z).avalanche()
    hair_style = Hasher(level_seed).eat(town_id).eat(npc_id).eat(slot).avalanche()

Hashers are immutable values: ``eat`` returns a new instance, so a partly
built hasher can be branched and shared between threads freely.
"""
from __future__ import annotations

from typing import Iterable, Union

import numpy as np

from .constants import (
    AVALANCHE_SHIFTS,
    PRIME_A,
    PRIME_B,
    PRIME_C,
    PRIME_D,
    PRIME_E,
    ROT_U32,
    ROT_U8,
    U32_MASK,
    U8_MASK,
    rotl32,
)

BytesLike = Union[bytes, bytearray, memoryview]


class Hasher:
    __slots__ = ("_acc",)

    def __init__(self, seed: int = 0):
        self._acc = (int(seed) + PRIME_E) & U32_MASK

    @classmethod
    def _from_accumulator(cls, acc: int) -> "Hasher":
        h = cls.__new__(cls)
        h._acc = acc
        return h

    @property
    def accumulator(self) -> int:
        return self._acc

    # --- ingest ---

    def eat_u32(self, data: int) -> "Hasher":
        acc = (self._acc + ((int(data) & U32_MASK) * PRIME_C)) & U32_MASK
        return Hasher._from_accumulator((rotl32(acc, ROT_U32) * PRIME_D) & U32_MASK)

    def eat_u8(self, data: int) -> "Hasher":
        acc = (self._acc + ((int(data) & U8_MASK) * PRIME_E)) & U32_MASK
        return Hasher._from_accumulator((rotl32(acc, ROT_U8) * PRIME_A) & U32_MASK)

    def eat(self, data: Union[int, np.integer, BytesLike]) -> "Hasher":
        """
        Eats one value, choosing the ingest variant from its type.

        ``bytes``-like objects are eaten byte by byte, ``numpy.uint8`` takes the
        byte path, every other integer is reduced modulo 2**32 and takes the
        32-bit path.
        """
        if isinstance(data, (bytes, bytearray, memoryview)):
            h = self
            for b in bytes(data):
                h = h.eat_u8(b)
            return h
        if isinstance(data, np.uint8):
            return self.eat_u8(int(data))
        if isinstance(data, (int, np.integer)):
            return self.eat_u32(int(data))
        raise TypeError(f"Unsupported data type for Hasher.eat: {type(data).__name__}")

    def eat_many(self, values: Iterable[int]) -> "Hasher":
        h = self
        for v in values:
            h = h.eat_u32(v)
        return h

    # --- finalise ---

    def avalanche(self) -> int:
        s1, s2, s3 = AVALANCHE_SHIFTS
        h = self._acc
        h ^= h >> s1
        h = (h * PRIME_B) & U32_MASK
        h ^= h >> s2
        h = (h * PRIME_C) & U32_MASK
        h ^= h >> s3
        return h

    def digest(self) -> int:
        return self.avalanche()

    def __int__(self) -> int:
        return self.avalanche()

    # --- value semantics ---

    def copy(self) -> "Hasher":
        return Hasher._from_accumulator(self._acc)

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hasher):
            return NotImplemented
        return self._acc == other._acc

    def __hash__(self) -> int:
        return hash(("Hasher", self._acc))

    def __repr__(self) -> str:
        return f"Hasher(accumulator=0x{self._acc:08X})"


def hash_u32(seed: int, *values: int) -> int:
    """Shorthand for ``Hasher(seed).eat_u32(v1)...eat_u32(vn).avalanche()``."""
    return Hasher(seed).eat_many(values).avalanche()
