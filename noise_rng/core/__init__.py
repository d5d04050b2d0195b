# ========================
# file: noise_rng/core/__init__.py
# ========================
from .errors import ConfigError, InvalidArgument, NoiseRngError
from .hashing import Hasher, hash_u32
from .sequence import SequenceGenerator

__all__ = [
    "ConfigError",
    "InvalidArgument",
    "NoiseRngError",
    "Hasher",
    "hash_u32",
    "SequenceGenerator",
]
