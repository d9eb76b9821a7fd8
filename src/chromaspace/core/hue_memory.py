"""
Per-entity hue memory.

Keeps the last meaningful hue of a color so that readouts derived from RGB
do not snap to 0 when the color becomes achromatic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from chromaspace.core.conversions import HLS, HSV, rgb_to_hls, rgb_to_hsv


@dataclass
class HueMemory:
    """
    Remembered hue for one color entity.

    HLS and HSV keep separate cells; they are never shared between
    models or between entities.

    Attributes:
        hls: Last hue derived with a non-zero HLS saturation
        hsv: Last hue derived with a non-zero HSV saturation
    """

    hls: float = 0.0
    hsv: float = 0.0

    def derive_hls(self, rgb: Sequence[float]) -> HLS:
        """Derive HLS from RGB, then remember the hue if chromatic."""
        hue, lightness, saturation = rgb_to_hls(*rgb, previous_hue=self.hls)
        if saturation > 0:
            self.hls = hue
        return (hue, lightness, saturation)

    def derive_hsv(self, rgb: Sequence[float]) -> HSV:
        """Derive HSV from RGB, then remember the hue if chromatic."""
        hue, saturation, value = rgb_to_hsv(*rgb, previous_hue=self.hsv)
        if saturation > 0:
            self.hsv = hue
        return (hue, saturation, value)
