# ========================
# file: noise_rng/config/__init__.py
# ========================
from .defaults import DEFAULT_CONFIG
from .loader import deep_merge, load_config
from .model import RngConfig

__all__ = [
    "DEFAULT_CONFIG",
    "RngConfig",
    "deep_merge",
    "load_config",
]
