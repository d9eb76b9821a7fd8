"""
Color space conversion functions.

Bidirectional transforms between RGB and the cylindrical HLS and HSV models.
Scalar functions work on plain floats: RGB channels in [0, 255], hue in
degrees [0, 360), every other component as a percentage in [0, 100].
The ``*_array`` variants take channel-first arrays of shape (3, ...).

Hue is undefined for achromatic colors, so the RGB -> HLS/HSV direction
takes a ``previous_hue`` that is returned unchanged whenever the computed
saturation is zero.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

RGB_MAX = 255.0
HUE_RANGE = 360.0
PERCENT = 100.0

RGB = tuple[float, float, float]
HLS = tuple[float, float, float]
HSV = tuple[float, float, float]


def normalize_hue(hue: float) -> float:
    """Wrap a hue in degrees into [0, 360)."""
    hue = hue % HUE_RANGE
    # -1e-14 % 360 rounds to exactly 360.0
    if hue >= HUE_RANGE:
        hue -= HUE_RANGE
    return hue


def clamp_rgb(rgb: Sequence[float]) -> RGB:
    """Clamp each channel to [0, 255] without rounding."""
    r, g, b = (min(max(float(c), 0.0), RGB_MAX) for c in rgb)
    return (r, g, b)


def round_rgb(rgb: Sequence[float]) -> tuple[int, int, int]:
    """Clamp to [0, 255] and round half up."""
    r, g, b = (int(math.floor(c + 0.5)) for c in clamp_rgb(rgb))
    return (r, g, b)


def _sector_hue(r: float, g: float, b: float, _max: float, delta: float) -> float:
    """Hue in degrees from normalized channels, delta > 0."""
    if _max == r:
        hue = (g - b) / delta
    elif _max == g:
        hue = 2.0 + (b - r) / delta
    else:
        hue = 4.0 + (r - g) / delta
    return normalize_hue(hue * 60.0)


def _hue_to_channels(hue: float, chroma: float) -> RGB:
    """Piecewise-linear hue construction before the lightness offset."""
    h = normalize_hue(hue) / 60.0
    x = chroma * (1.0 - abs(h % 2.0 - 1.0))
    sector = int(h) % 6

    if sector == 0:
        return (chroma, x, 0.0)
    if sector == 1:
        return (x, chroma, 0.0)
    if sector == 2:
        return (0.0, chroma, x)
    if sector == 3:
        return (0.0, x, chroma)
    if sector == 4:
        return (x, 0.0, chroma)
    return (chroma, 0.0, x)


# =============================================================================
# RGB <-> HLS
# =============================================================================

def rgb_to_hls(r: float, g: float, b: float, previous_hue: float = 0.0) -> HLS:
    """
    Convert RGB to HLS.

    Args:
        r, g, b: Channels, nominally in [0, 255]
        previous_hue: Hue returned unchanged for achromatic input

    Returns:
        (hue, lightness, saturation) in degrees and percent
    """
    r, g, b = r / RGB_MAX, g / RGB_MAX, b / RGB_MAX

    _max = max(r, g, b)
    _min = min(r, g, b)
    delta = _max - _min

    lightness = (_max + _min) / 2.0
    denominator = 1.0 - abs(2.0 * lightness - 1.0)

    if delta == 0 or denominator == 0:
        return (previous_hue, lightness * PERCENT, 0.0)

    saturation = delta / denominator
    hue = _sector_hue(r, g, b, _max, delta)

    return (hue, lightness * PERCENT, saturation * PERCENT)


def hls_to_rgb(hue: float, lightness: float, saturation: float) -> RGB:
    """
    Convert HLS to RGB.

    Hue is wrapped into [0, 360). The result is unrounded; use
    :func:`round_rgb` for display.
    """
    lightness = lightness / PERCENT
    saturation = saturation / PERCENT

    # Achromatic: exact grey
    if saturation == 0:
        grey = lightness * RGB_MAX
        return (grey, grey, grey)

    chroma = (1.0 - abs(2.0 * lightness - 1.0)) * saturation
    m = lightness - chroma / 2.0
    r, g, b = _hue_to_channels(hue, chroma)

    return ((r + m) * RGB_MAX, (g + m) * RGB_MAX, (b + m) * RGB_MAX)


# =============================================================================
# RGB <-> HSV
# =============================================================================

def rgb_to_hsv(r: float, g: float, b: float, previous_hue: float = 0.0) -> HSV:
    """
    Convert RGB to HSV.

    Args:
        r, g, b: Channels, nominally in [0, 255]
        previous_hue: Hue returned unchanged for achromatic input

    Returns:
        (hue, saturation, value) in degrees and percent
    """
    r, g, b = r / RGB_MAX, g / RGB_MAX, b / RGB_MAX

    _max = max(r, g, b)
    _min = min(r, g, b)
    delta = _max - _min

    # Black or grey
    if _max == 0 or delta == 0:
        return (previous_hue, 0.0, _max * PERCENT)

    saturation = delta / _max
    hue = _sector_hue(r, g, b, _max, delta)

    return (hue, saturation * PERCENT, _max * PERCENT)


def hsv_to_rgb(hue: float, saturation: float, value: float) -> RGB:
    """Convert HSV to RGB (unrounded)."""
    saturation = saturation / PERCENT
    value = value / PERCENT

    chroma = value * saturation
    m = value - chroma
    r, g, b = _hue_to_channels(hue, chroma)

    return ((r + m) * RGB_MAX, (g + m) * RGB_MAX, (b + m) * RGB_MAX)


# =============================================================================
# Array variants
# =============================================================================

def _hue_array(
    r: NDArray, g: NDArray, b: NDArray, _max: NDArray, safe_delta: NDArray
) -> NDArray:
    """Vectorized sector hue in degrees."""
    hue = np.where(
        r == _max,
        (g - b) / safe_delta,
        np.where(g == _max, 2.0 + (b - r) / safe_delta, 4.0 + (r - g) / safe_delta),
    )
    hue = np.mod(hue * 60.0, HUE_RANGE)
    return np.where(hue >= HUE_RANGE, hue - HUE_RANGE, hue)


def _hue_to_channels_array(hue: NDArray, chroma: NDArray) -> NDArray:
    """Vectorized piecewise-linear hue construction, shape (3, ...)."""
    h = np.mod(hue, HUE_RANGE) / 60.0
    x = chroma * (1.0 - np.abs(np.mod(h, 2.0) - 1.0))
    sector = np.floor(h).astype(np.int32) % 6
    zero = np.zeros_like(chroma)

    r = np.select([sector == 0, sector == 1, sector == 4, sector == 5], [chroma, x, x, chroma], zero)
    g = np.select([sector == 0, sector == 1, sector == 2, sector == 3], [x, chroma, chroma, x], zero)
    b = np.select([sector == 2, sector == 3, sector == 4, sector == 5], [x, chroma, chroma, x], zero)

    return np.stack([r, g, b], axis=0)


def rgb_to_hls_array(rgb: ArrayLike, previous_hue: ArrayLike = 0.0) -> NDArray[np.float64]:
    """Convert a (3, ...) RGB array to (hue, lightness, saturation)."""
    rgb = np.asarray(rgb, dtype=np.float64) / RGB_MAX
    r, g, b = rgb[0], rgb[1], rgb[2]

    _max = np.maximum(np.maximum(r, g), b)
    _min = np.minimum(np.minimum(r, g), b)
    delta = _max - _min

    lightness = (_max + _min) / 2.0
    denominator = 1.0 - np.abs(2.0 * lightness - 1.0)
    chromatic = (delta != 0) & (denominator != 0)

    saturation = np.where(chromatic, delta / np.where(chromatic, denominator, 1.0), 0.0)
    safe_delta = np.where(chromatic, delta, 1.0)
    hue = np.where(
        chromatic,
        _hue_array(r, g, b, _max, safe_delta),
        np.broadcast_to(np.asarray(previous_hue, dtype=np.float64), r.shape),
    )

    return np.stack([hue, lightness * PERCENT, saturation * PERCENT], axis=0)


def hls_to_rgb_array(hls: ArrayLike) -> NDArray[np.float64]:
    """Convert a (3, ...) HLS array to unrounded RGB."""
    hls = np.asarray(hls, dtype=np.float64)
    hue = hls[0]
    lightness = hls[1] / PERCENT
    saturation = hls[2] / PERCENT

    chroma = (1.0 - np.abs(2.0 * lightness - 1.0)) * saturation
    m = lightness - chroma / 2.0
    rgb = _hue_to_channels_array(hue, chroma) + m

    # Achromatic override
    rgb = np.where(saturation == 0, lightness, rgb)
    return rgb * RGB_MAX


def rgb_to_hsv_array(rgb: ArrayLike, previous_hue: ArrayLike = 0.0) -> NDArray[np.float64]:
    """Convert a (3, ...) RGB array to (hue, saturation, value)."""
    rgb = np.asarray(rgb, dtype=np.float64) / RGB_MAX
    r, g, b = rgb[0], rgb[1], rgb[2]

    _max = np.maximum(np.maximum(r, g), b)
    _min = np.minimum(np.minimum(r, g), b)
    delta = _max - _min
    chromatic = (_max != 0) & (delta != 0)

    saturation = np.where(chromatic, delta / np.where(chromatic, _max, 1.0), 0.0)
    safe_delta = np.where(chromatic, delta, 1.0)
    hue = np.where(
        chromatic,
        _hue_array(r, g, b, _max, safe_delta),
        np.broadcast_to(np.asarray(previous_hue, dtype=np.float64), r.shape),
    )

    return np.stack([hue, saturation * PERCENT, _max * PERCENT], axis=0)


def hsv_to_rgb_array(hsv: ArrayLike) -> NDArray[np.float64]:
    """Convert a (3, ...) HSV array to unrounded RGB."""
    hsv = np.asarray(hsv, dtype=np.float64)
    saturation = hsv[1] / PERCENT
    value = hsv[2] / PERCENT

    chroma = value * saturation
    m = value - chroma
    return (_hue_to_channels_array(hsv[0], chroma) + m) * RGB_MAX


# =============================================================================
# Dispatcher
# =============================================================================

_TO_RGB = {
    "RGB": lambda a, b, c: (float(a), float(b), float(c)),
    "HLS": hls_to_rgb,
    "HSV": hsv_to_rgb,
}

_FROM_RGB = {
    "RGB": lambda r, g, b, previous_hue: (float(r), float(g), float(b)),
    "HLS": rgb_to_hls,
    "HSV": rgb_to_hsv,
}


def list_color_models() -> list[str]:
    """Return names of supported color models."""
    return list(_TO_RGB.keys())


def convert(
    values: Sequence[float],
    source: str,
    target: str,
    previous_hue: float = 0.0,
) -> tuple[float, float, float]:
    """
    Convert a triple between color models, going through RGB.

    Args:
        values: Component triple in the source model
        source: Source model name ("RGB", "HLS" or "HSV")
        target: Target model name
        previous_hue: Hue memory for achromatic results

    Returns:
        Component triple in the target model
    """
    source = source.upper()
    target = target.upper()

    if source not in _TO_RGB:
        raise ValueError(f"Unknown color model: {source}")
    if target not in _FROM_RGB:
        raise ValueError(f"Unknown color model: {target}")

    rgb = _TO_RGB[source](*values)
    return _FROM_RGB[target](*rgb, previous_hue=previous_hue)
