"""
Marker placement for the color space views.

Maps colors to positions inside the RGB cube, the HLS double cone and the
HSV cone. Components are normalized to [0, 1] (hue as a fraction of a full
turn). Scene construction and rendering live in the view layer.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from chromaspace.core.conversions import RGB_MAX, rgb_to_hls_array, rgb_to_hsv_array

# Shared cone layout
CONE_RADIUS = 0.62
CENTER_X = 0.5
CENTER_Z = 0.5
Y_POS_BOTTOM = 0.0
Y_POS_TOP = 1.0
HSV_Y_OFFSET = -0.2

Position = tuple[float, float, float]


def rgb_to_cartesian(r: float, g: float, b: float) -> Position:
    """Unit cube with black at the origin."""
    return (r, g, b)


def hls_to_cartesian(h: float, l: float, s: float) -> Position:
    """
    Position inside the HLS double cone.

    Red sits at 270 degrees and hue runs clockwise seen from above.
    Lightness maps linearly to height. The radius peaks at l = 0.5 and
    shrinks to zero at black and white.
    """
    angle = math.radians(270.0 - h * 360.0)
    y = Y_POS_BOTTOM + (Y_POS_TOP - Y_POS_BOTTOM) * l
    radius = CONE_RADIUS * s * (1.0 - abs(l - 0.5) * 2.0)

    return (
        CENTER_X + radius * math.cos(angle),
        y,
        CENTER_Z + radius * math.sin(angle),
    )


def hsv_to_cartesian(h: float, s: float, v: float) -> Position:
    """
    Position inside the HSV cone (apex at black).

    The radius scales with value so the cone narrows towards the apex.
    """
    angle = -h * 2.0 * math.pi - math.pi / 6.0
    y = Y_POS_BOTTOM + HSV_Y_OFFSET + (Y_POS_TOP - Y_POS_BOTTOM) * v
    radius = CONE_RADIUS * s * v

    return (
        CENTER_X + radius * math.cos(angle),
        y,
        CENTER_Z + radius * math.sin(angle),
    )


def marker_positions(
    rgbs: Sequence[Sequence[float]], model: str = "RGB"
) -> NDArray[np.float64]:
    """
    Positions for a batch of RGB colors.

    Args:
        rgbs: Colors with channels in [0, 255]
        model: View to place markers in ("RGB", "HLS" or "HSV")

    Returns:
        Array of shape (N, 3)
    """
    model = model.upper()
    if len(rgbs) == 0:
        return np.zeros((0, 3), dtype=np.float64)

    rgb = np.asarray(rgbs, dtype=np.float64).T

    if model == "RGB":
        return (rgb / RGB_MAX).T

    if model == "HLS":
        h, l, s = rgb_to_hls_array(rgb) / np.array([[360.0], [100.0], [100.0]])
        angle = np.radians(270.0 - h * 360.0)
        y = Y_POS_BOTTOM + (Y_POS_TOP - Y_POS_BOTTOM) * l
        radius = CONE_RADIUS * s * (1.0 - np.abs(l - 0.5) * 2.0)
    elif model == "HSV":
        h, s, v = rgb_to_hsv_array(rgb) / np.array([[360.0], [100.0], [100.0]])
        angle = -h * 2.0 * np.pi - np.pi / 6.0
        y = Y_POS_BOTTOM + HSV_Y_OFFSET + (Y_POS_TOP - Y_POS_BOTTOM) * v
        radius = CONE_RADIUS * s * v
    else:
        raise ValueError(f"Unknown color model: {model}")

    return np.stack(
        [CENTER_X + radius * np.cos(angle), y, CENTER_Z + radius * np.sin(angle)],
        axis=1,
    )
