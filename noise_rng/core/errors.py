# ========================
# file: noise_rng/core/errors.py
# ========================
class NoiseRngError(Exception):
    """Base error for the noise_rng package."""


class InvalidArgument(NoiseRngError, ValueError):
    """Raised when a caller breaks an argument precondition (e.g. min >= max)."""


class ConfigError(NoiseRngError):
    """Raised when a configuration fails validation."""
