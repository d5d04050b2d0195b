"""Deterministic 32-bit hashing and the counter-based sequence generator built on it."""

from .core import (
    ConfigError,
    Hasher,
    InvalidArgument,
    NoiseRngError,
    SequenceGenerator,
    hash_u32,
)
from .core import easing
from .workers import draw_parallel, fork_generators

__all__ = [
    "ConfigError",
    "Hasher",
    "InvalidArgument",
    "NoiseRngError",
    "SequenceGenerator",
    "draw_parallel",
    "easing",
    "fork_generators",
    "hash_u32",
]
