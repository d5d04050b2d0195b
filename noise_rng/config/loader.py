# ========================
# file: noise_rng/config/loader.py
# ========================
from __future__ import annotations
import copy
import json
import logging
import os
from typing import Any, Dict, Mapping, Optional, Union

from ..core.errors import ConfigError
from .defaults import DEFAULT_CONFIG
from .model import RngConfig
from .validators import validate_dict

logger = logging.getLogger(__name__)


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return data


def load_config(
    source: Union[str, Dict[str, Any], None] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> RngConfig:
    """Load a config from a JSON path, a dict or nothing, merged over the defaults.

    Args:
        source: path to a JSON file, a raw dict, or None for the defaults alone
        overrides: mapping of ad-hoc overrides (last layer), e.g. from the CLI
    Returns:
        RngConfig (immutable dataclass) ready for use
    """
    if source is None:
        data: Dict[str, Any] = {}
    elif isinstance(source, str):
        if not os.path.isfile(source):
            raise ConfigError(f"Config file not found: {source}")
        data = _load_json_file(source)
    elif isinstance(source, dict):
        data = source
    else:
        raise TypeError("source must be a str path, a dict or None")

    merged = deep_merge(DEFAULT_CONFIG, data)
    if overrides:
        merged = deep_merge(merged, overrides)

    validate_dict(merged)
    logger.debug("Resolved config: %s", merged)

    log = merged["logging"]
    return RngConfig(
        seed=int(merged["seed"]),
        start_position=int(merged["start_position"]),
        count=int(merged["count"]),
        workers=int(merged["workers"]),
        block_size=int(merged["block_size"]),
        log_level=str(log["level"]).upper(),
        log_file=log.get("file"),
    )
