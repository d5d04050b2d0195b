# ========================
# file: noise_rng/config/defaults.py
# ========================
from typing import Any, Dict

DEFAULT_CONFIG: Dict[str, Any] = {
    "seed": 12345,
    "start_position": 0,
    "count": 16,
    "workers": 1,
    "block_size": 4096,
    "logging": {
        "level": "INFO",
        "file": None,
    },
}
