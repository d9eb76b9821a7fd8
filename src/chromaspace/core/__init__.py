"""Core color model components."""

from chromaspace.core.conversions import (
    clamp_rgb,
    convert,
    hls_to_rgb,
    hsv_to_rgb,
    list_color_models,
    normalize_hue,
    rgb_to_hls,
    rgb_to_hsv,
    round_rgb,
)
from chromaspace.core.hue_memory import HueMemory
from chromaspace.core.data_types import ColorValues, SavedColor, hex_to_rgb, rgb_to_hex
from chromaspace.core.interpolation import interpolate_path, interpolate_rgb
from chromaspace.core.config import EditorConfig
from chromaspace.core.collection import ColorCollection

__all__ = [
    "rgb_to_hls",
    "hls_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "convert",
    "list_color_models",
    "normalize_hue",
    "clamp_rgb",
    "round_rgb",
    "HueMemory",
    "SavedColor",
    "ColorValues",
    "rgb_to_hex",
    "hex_to_rgb",
    "interpolate_rgb",
    "interpolate_path",
    "EditorConfig",
    "ColorCollection",
]
