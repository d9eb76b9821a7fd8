"""
chromaspace - interactive RGB / HLS / HSV color space explorer.

Converts colors between RGB and the cylindrical HLS and HSV models while
keeping hue stable across achromatic colors, and manages the saved colors
that the color space views display.
"""

__version__ = "0.1.0"

from chromaspace.core.conversions import (
    hls_to_rgb,
    hsv_to_rgb,
    rgb_to_hls,
    rgb_to_hsv,
)

__all__ = [
    "__version__",
    "rgb_to_hls",
    "hls_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
]
