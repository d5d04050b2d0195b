# ========================
# file: noise_rng/config/validators.py
# ========================
from __future__ import annotations
from typing import Any, Dict

from ..core.constants import U32_MASK
from ..core.errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigError(msg)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Raises ConfigError on the first failing check."""
    _require(_is_int(cfg.get("seed")), "seed must be an integer")
    _require(0 <= cfg["seed"] <= U32_MASK, "seed must fit in 32 unsigned bits")
    _require(_is_int(cfg.get("start_position")), "start_position must be an integer")
    _require(
        0 <= cfg["start_position"] <= U32_MASK,
        "start_position must fit in 32 unsigned bits",
    )
    _require(_is_int(cfg.get("count")) and cfg["count"] >= 0, "count must be >= 0")
    _require(_is_int(cfg.get("workers")) and cfg["workers"] >= 1, "workers must be >= 1")
    _require(
        _is_int(cfg.get("block_size")) and cfg["block_size"] >= 1,
        "block_size must be >= 1",
    )

    log = cfg.get("logging", {})
    _require(isinstance(log, dict), "logging must be a mapping")
    level = str(log.get("level", "")).upper()
    _require(level in LOG_LEVELS, f"logging.level must be one of {', '.join(LOG_LEVELS)}")
    _require(
        log.get("file") is None or isinstance(log.get("file"), str),
        "logging.file must be a path string or null",
    )
