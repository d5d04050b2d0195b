# ==============================================================================
# File: noise_rng/numerics/blocks.py
# Purpose: numpy-facing wrappers around the numba kernels. Every function
#          returns exactly what the scalar Hasher / SequenceGenerator would
#          produce element by element.
# ==============================================================================
from __future__ import annotations
import logging
from typing import Iterable, Union

import numpy as np

from ..core.constants import INV_U24_RANGE, INV_U32_RANGE, U32_MASK
from ..core.errors import InvalidArgument
from .fast_hash import (
    draw_block_kernel,
    hash_bytes_rows_kernel,
    hash_grid_kernel,
    hash_rows_kernel,
)

logger = logging.getLogger(__name__)

ArrayLike = Union[np.ndarray, Iterable[int]]


def _as_u32_lanes(values: ArrayLike, name: str) -> np.ndarray:
    """Reduce an integer array modulo 2**32 and widen it to int64 for the kernels."""
    arr = np.asarray(values)
    if arr.size and arr.dtype.kind not in "iu":
        raise InvalidArgument(f"{name} must be an integer array, got dtype {arr.dtype}")
    return (arr.astype(np.uint64) & np.uint64(U32_MASK)).astype(np.int64)


def draw_block(seed: int, start: int, count: int) -> np.ndarray:
    """Draws at positions ``start .. start + count - 1`` (wrapping) for ``seed``."""
    if count < 0:
        raise InvalidArgument(f"count must be >= 0, got {count}")
    logger.debug("draw_block seed=%d start=%d count=%d", seed, start, count)
    return draw_block_kernel(int(seed) & U32_MASK, int(start) & U32_MASK, int(count))


def hash_rows(seed: int, values: ArrayLike) -> np.ndarray:
    """One digest per row; each row is eaten left to right as 32-bit values."""
    arr = _as_u32_lanes(values, "values")
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    if arr.ndim != 2:
        raise InvalidArgument(f"values must be 1D or 2D, got shape {arr.shape}")
    logger.debug("hash_rows seed=%d shape=%s", seed, arr.shape)
    return hash_rows_kernel(int(seed) & U32_MASK, np.ascontiguousarray(arr))


def hash_byte_rows(seed: int, values: ArrayLike) -> np.ndarray:
    """One digest per row; each row is eaten left to right as bytes."""
    arr = np.asarray(values)
    if arr.ndim != 2:
        raise InvalidArgument(f"values must be 2D, got shape {arr.shape}")
    if arr.size and arr.dtype.kind not in "iu":
        raise InvalidArgument(f"values must be an integer array, got dtype {arr.dtype}")
    lanes = (arr.astype(np.uint64) & np.uint64(0xFF)).astype(np.int64)
    logger.debug("hash_byte_rows seed=%d shape=%s", seed, arr.shape)
    return hash_bytes_rows_kernel(int(seed) & U32_MASK, np.ascontiguousarray(lanes))


def hash_grid(seed: int, xs: ArrayLike, zs: ArrayLike) -> np.ndarray:
    """
    Digest of ``Hasher(seed).eat(x).eat(z)`` for every grid cell.

    Returns an array of shape (len(zs), len(xs)), rows indexed by z.
    """
    x_arr = _as_u32_lanes(xs, "xs").ravel()
    z_arr = _as_u32_lanes(zs, "zs").ravel()
    logger.debug("hash_grid seed=%d size=%dx%d", seed, z_arr.shape[0], x_arr.shape[0])
    return hash_grid_kernel(int(seed) & U32_MASK, x_arr, z_arr)


def to_unit_float64(block: np.ndarray) -> np.ndarray:
    """Same mapping as SequenceGenerator.next_double, element-wise."""
    return np.asarray(block, dtype=np.uint32).astype(np.float64) * INV_U32_RANGE


def to_unit_float32(block: np.ndarray) -> np.ndarray:
    """Same mapping as SequenceGenerator.next_float, element-wise."""
    top = np.asarray(block, dtype=np.uint32) >> np.uint32(8)
    return top.astype(np.float32) * np.float32(INV_U24_RANGE)
