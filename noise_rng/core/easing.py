# ==============================================================================
# File: noise_rng/core/easing.py
# Purpose: Stateless easing curves for a normalised t in [0, 1].
# ==============================================================================
from __future__ import annotations

from .errors import InvalidArgument

# --- utility ---


def lerp(a, b, t):
    return a + (b - a) * t


def pow2(value):
    """Raises the value to a power of 2."""
    return value * value


def pow3(value):
    """Raises the value to a power of 3."""
    return pow2(value) * value


def pow4(value):
    """Raises the value to a power of 4."""
    return pow3(value) * value


def flip(value: float) -> float:
    """Inverts a normalised number."""
    if not (0.0 <= value <= 1.0):
        raise InvalidArgument(f"flip expects a value in [0, 1], got {value}")
    return 1.0 - value


# --- smooth start (ease-in) ---


def smooth_start2(t: float) -> float:
    """Smooth start up to the 1st derivative (position). Also known as EaseInQuad."""
    return pow2(t)


def smooth_start3(t: float) -> float:
    """Smooth start up to the 2nd derivative (velocity). Also known as EaseInCubic."""
    return pow3(t)


def smooth_start4(t: float) -> float:
    """Smooth start up to the 3rd derivative (acceleration). Also known as EaseInQuartic."""
    return pow4(t)


# --- smooth stop (ease-out) ---


def smooth_stop2(t: float) -> float:
    """Linear start, smooth stop up to the 1st derivative. Also known as EaseOutQuad."""
    return flip(pow2(flip(t)))


def smooth_stop3(t: float) -> float:
    """Linear start, smooth stop up to the 2nd derivative. Also known as EaseOutCubic."""
    return flip(pow3(flip(t)))


def smooth_stop4(t: float) -> float:
    """Linear start, smooth stop up to the 3rd derivative. Also known as EaseOutQuartic."""
    return flip(pow4(flip(t)))


# --- smooth step (ease-in-out) ---


def smooth_step2(t: float) -> float:
    return lerp(smooth_start2(t), smooth_stop2(t), t)


def smooth_step3(t: float) -> float:
    return lerp(smooth_start3(t), smooth_stop3(t), t)


def smooth_step4(t: float) -> float:
    return lerp(smooth_start4(t), smooth_stop4(t), t)
