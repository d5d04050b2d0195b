# noise_rng/numerics/fast_hash.py
from __future__ import annotations
import numpy as np
from numba import njit, prange

from .fast_hash_helpers import _avalanche, _eat_u32, _eat_u8, _hasher_init, _u32


@njit(cache=True, parallel=True)
def draw_block_kernel(seed: int, start: int, count: int) -> np.ndarray:
    """Digest of Hasher(seed).eat_u32(start + i) for i in [0, count)."""
    out = np.empty(count, dtype=np.uint32)
    base = _hasher_init(seed)
    for i in prange(count):
        out[i] = _avalanche(_eat_u32(base, _u32(start + i)))
    return out


@njit(cache=True, parallel=True)
def hash_rows_kernel(seed: int, values: np.ndarray) -> np.ndarray:
    rows, cols = values.shape
    out = np.empty(rows, dtype=np.uint32)
    base = _hasher_init(seed)
    for r in prange(rows):
        acc = base
        for c in range(cols):
            acc = _eat_u32(acc, values[r, c])
        out[r] = _avalanche(acc)
    return out


@njit(cache=True, parallel=True)
def hash_bytes_rows_kernel(seed: int, values: np.ndarray) -> np.ndarray:
    rows, cols = values.shape
    out = np.empty(rows, dtype=np.uint32)
    base = _hasher_init(seed)
    for r in prange(rows):
        acc = base
        for c in range(cols):
            acc = _eat_u8(acc, values[r, c])
        out[r] = _avalanche(acc)
    return out


@njit(cache=True, parallel=True)
def hash_grid_kernel(seed: int, xs: np.ndarray, zs: np.ndarray) -> np.ndarray:
    H, W = zs.shape[0], xs.shape[0]
    out = np.empty((H, W), dtype=np.uint32)
    base = _hasher_init(seed)
    for j in prange(H):
        for i in range(W):
            out[j, i] = _avalanche(_eat_u32(_eat_u32(base, xs[i]), zs[j]))
    return out
