"""Marker placement for the RGB cube, HLS double cone and HSV cone."""

from chromaspace.visualization.geometry import (
    hls_to_cartesian,
    hsv_to_cartesian,
    marker_positions,
    rgb_to_cartesian,
)

__all__ = [
    "rgb_to_cartesian",
    "hls_to_cartesian",
    "hsv_to_cartesian",
    "marker_positions",
]
