# Copyright (c) 2026 Swatchmerge
# SPDX-License-Identifier: MIT

"""
Color distance.

Plain Euclidean distance in RGB with channels on the 0-255 scale. This is
not perceptually uniform; it is a cheap, predictable similarity measure for
grouping near-identical design colors.

Reference values:
- 0: identical channels (full float precision, not just same hex key)
- ~1.7: one step on every channel (FF0000 vs FE0101)
- 20: default grouping threshold
- ~441.7: black vs white (maximum possible)
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from swatchmerge.schema import Color


_SCALE = 255.0

# Largest possible distance between two in-gamut colors
MAX_DISTANCE = float(np.sqrt(3.0) * _SCALE)


def to_rgb_array(colors: Sequence[Color]) -> NDArray[np.float64]:
    """Stack colors into an (N, 3) array of normalized RGB."""
    if not colors:
        return np.empty((0, 3), dtype=np.float64)
    return np.array([[c.r, c.g, c.b] for c in colors], dtype=np.float64)


def _rgb_distance(
    rgb1: NDArray[np.float64],
    rgb2: NDArray[np.float64],
) -> NDArray[np.float64]:
    delta = (rgb1 - rgb2) * _SCALE
    # hypot does not underflow for tiny deltas, unlike sqrt(sum(delta**2))
    return np.hypot(np.hypot(delta[..., 0], delta[..., 1]), delta[..., 2])


def distance(a: Color, b: Color) -> float:
    """
    Distance between two colors on the 0-255 scale.

    Alpha is ignored. Symmetric, and zero only for identical channels.
    """
    return float(_rgb_distance(to_rgb_array([a]), to_rgb_array([b]))[0])


def distances_from(
    color: Color,
    candidates: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Vectorized distance from one color to many.

    Args:
        color: Reference color
        candidates: Array of shape (N, 3) with normalized RGB values

    Returns:
        Array of shape (N,) with distances, matching distance() exactly
    """
    return _rgb_distance(to_rgb_array([color]), candidates)
