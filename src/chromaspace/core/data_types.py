"""
Core data types for chromaspace.

Provides SavedColor (a point entity in the saved colors list), ColorValues
(derived display values) and hex helpers used by the color picker.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Sequence

from chromaspace.core.conversions import HLS, HSV, RGB, clamp_rgb, round_rgb
from chromaspace.core.hue_memory import HueMemory

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")


def _round_cylindrical(values: Sequence[float]) -> tuple[int, int, int]:
    hue, a, b = (int(math.floor(v + 0.5)) for v in values)
    return (hue % 360, a, b)


def rgb_to_hex(rgb: Sequence[float]) -> str:
    """Format RGB as ``#rrggbb`` (clamped and rounded)."""
    return "#" + "".join(f"{c:02x}" for c in round_rgb(rgb))


def hex_to_rgb(value: str) -> RGB:
    """
    Parse ``#rrggbb`` (leading ``#`` optional).

    Raises:
        ValueError: If the string is not a six-digit hex color
    """
    match = _HEX_PATTERN.match(value.strip())
    if match is None:
        raise ValueError(f"Invalid hex color: {value!r}")

    digits = match.group(1)
    return (
        float(int(digits[0:2], 16)),
        float(int(digits[2:4], 16)),
        float(int(digits[4:6], 16)),
    )


@dataclass
class SavedColor:
    """
    A point color entity.

    Attributes:
        id: Unique identifier
        rgb: Authoritative color, clamped to [0, 255]
        interpolated: True for read-only points generated between user points
        hue_memory: Remembered hues for derived HLS/HSV readouts
    """

    id: str
    rgb: RGB
    interpolated: bool = False
    hue_memory: HueMemory = field(default_factory=HueMemory, compare=False)

    def __post_init__(self) -> None:
        """Normalize RGB to a clamped float triple."""
        if len(self.rgb) != 3:
            raise ValueError(f"RGB must have 3 channels, got {len(self.rgb)}")
        self.rgb = clamp_rgb(self.rgb)

    @property
    def hex(self) -> str:
        """Color as ``#rrggbb``."""
        return rgb_to_hex(self.rgb)

    def copy_with(self, new_id: str) -> SavedColor:
        """Independent user-point copy with a new id and fresh hue memory."""
        return SavedColor(id=new_id, rgb=self.rgb)


@dataclass(frozen=True)
class ColorValues:
    """
    Derived values of one color in every supported model.

    Attributes:
        rgb: Channels in [0, 255]
        hls: (hue, lightness, saturation)
        hsv: (hue, saturation, value)
    """

    rgb: RGB
    hls: HLS
    hsv: HSV

    @property
    def hex(self) -> str:
        return rgb_to_hex(self.rgb)

    def display(self) -> dict[str, tuple[int, int, int]]:
        """Rounded integers for labels and slider positions."""
        return {
            "rgb": round_rgb(self.rgb),
            "hls": _round_cylindrical(self.hls),
            "hsv": _round_cylindrical(self.hsv),
        }
