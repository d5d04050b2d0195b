# ==============================================================================
# File: noise_rng/core/constants.py
# Purpose: Mixing constants and 32-bit integer helpers shared by the scalar
#          Hasher and the numba kernels. Changing any value here changes every
#          digest the package produces.
# ==============================================================================
from __future__ import annotations

U32_MASK = 0xFFFFFFFF
U8_MASK = 0xFF
U32_RANGE = 1 << 32

# --- xxHash32 primes (odd, fixed bit patterns) ---
PRIME_A = 0b10011110001101110111100110110001  # 0x9E3779B1
PRIME_B = 0b10000101111010111100101001110111  # 0x85EBCA77
PRIME_C = 0b11000010101100101010111000111101  # 0xC2B2AE3D
PRIME_D = 0b00100111110101001110101100101111  # 0x27D4EB2F
PRIME_E = 0b00010110010101100110011110110001  # 0x165667B1

# --- rotation / avalanche shift amounts ---
# Both ingests rotate LEFT; the C# library this derives from rotates right (math.ror),
# so digests are not bit-compatible with it.
ROT_U32 = 17
ROT_U8 = 11
AVALANCHE_SHIFTS = (15, 13, 16)

# --- bounds of the integer draw types (inclusive) ---
UINT_MIN, UINT_MAX = 0, U32_MASK
INT_MIN, INT_MAX = -(1 << 31), (1 << 31) - 1
BYTE_MIN, BYTE_MAX = 0, U8_MASK
SBYTE_MIN, SBYTE_MAX = -128, 127

# 1 / 2**32 and 1 / 2**24: unit-interval scales for double and single precision
INV_U32_RANGE = 1.0 / 4294967296.0
INV_U24_RANGE = 1.0 / 16777216.0


def u32(x: int) -> int:
    return x & U32_MASK


def rotl32(x: int, r: int) -> int:
    x &= U32_MASK
    return ((x << r) | (x >> (32 - r))) & U32_MASK


def to_i32(x: int) -> int:
    """Reinterpret the low 32 bits of ``x`` as a signed integer."""
    x &= U32_MASK
    return x - U32_RANGE if x > INT_MAX else x


def to_i8(x: int) -> int:
    """Reinterpret the low 8 bits of ``x`` as a signed integer."""
    x &= U8_MASK
    return x - 256 if x > SBYTE_MAX else x
