# noise_rng/numerics/fast_hash_helpers.py
from __future__ import annotations
from numba import njit

from ..core.constants import PRIME_A, PRIME_B, PRIME_C, PRIME_D, PRIME_E, ROT_U32, ROT_U8

# Same arithmetic as core.hashing.Hasher, on int64 with a 32-bit mask after every step.
# Products may wrap past 2**63; only the low 32 bits are kept, so the digests match.


@njit(inline='always', cache=True)
def _u32(x: int) -> int: return x & 0xFFFFFFFF


@njit(inline='always', cache=True)
def _rotl32(x: int, r: int) -> int:
    x = _u32(x)
    return _u32((x << r) | (x >> (32 - r)))


@njit(inline='always', cache=True)
def _hasher_init(seed: int) -> int:
    return _u32(_u32(seed) + PRIME_E)


@njit(inline='always', cache=True)
def _eat_u32(acc: int, data: int) -> int:
    acc = _u32(acc + _u32(_u32(data) * PRIME_C))
    return _u32(_rotl32(acc, ROT_U32) * PRIME_D)


@njit(inline='always', cache=True)
def _eat_u8(acc: int, data: int) -> int:
    acc = _u32(acc + _u32((data & 0xFF) * PRIME_E))
    return _u32(_rotl32(acc, ROT_U8) * PRIME_A)


@njit(inline='always', cache=True)
def _avalanche(acc: int) -> int:
    h = _u32(acc)
    h ^= h >> 15
    h = _u32(h * PRIME_B)
    h ^= h >> 13
    h = _u32(h * PRIME_C)
    h ^= h >> 16
    return h
