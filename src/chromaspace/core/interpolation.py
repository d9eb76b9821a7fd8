"""
Linear RGB interpolation between saved points.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from chromaspace.core.conversions import RGB


def interpolate_rgb(start: Sequence[float], end: Sequence[float], steps: int) -> list[RGB]:
    """
    Evenly spaced colors strictly between two endpoints.

    ``steps`` samples are taken including both endpoints; the endpoints are
    then dropped, so ``steps - 2`` colors are returned.

    Args:
        start: First endpoint RGB
        end: Last endpoint RGB
        steps: Number of samples including endpoints (>= 2)

    Returns:
        Interior colors ordered from start to end
    """
    if steps < 2:
        raise ValueError(f"Interpolation needs at least 2 steps, got {steps}")

    samples = np.linspace(
        np.asarray(start, dtype=np.float64),
        np.asarray(end, dtype=np.float64),
        num=steps,
        axis=0,
    )[1:-1]

    return [(float(r), float(g), float(b)) for r, g, b in samples]


def interpolate_path(
    base_rgbs: Sequence[Sequence[float]], steps: int
) -> list[tuple[int, list[RGB]]]:
    """
    Interior colors for every consecutive pair of base colors.

    Returns:
        List of (index of segment start, interior colors)
    """
    return [
        (i, interpolate_rgb(base_rgbs[i], base_rgbs[i + 1], steps))
        for i in range(len(base_rgbs) - 1)
    ]
