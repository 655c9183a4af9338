"""
Pinhole-camera perspective projection.

Maps world-space lateral offsets onto normalized viewport coordinates where
the visible region is [-0.5, 0.5] on both axes. No clamping is done here: a
depth at or below zero yields inf, nan or negative values, and it is up to
the caller to reject them.
"""

from typing import Tuple

import numpy as np


def perspective(focal_length: float, value: float, depth: float) -> float:
    """Flattened perspective coordinate: value * focal_length / depth."""
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return float(np.float64(value) * focal_length / np.float64(depth))


def project_points(focal_length: float, point_size: float, x: np.ndarray,
                   y: np.ndarray, z: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Vectorized projection of a whole particle store.

    Returns:
        (pos_x, pos_y, size) arrays, each the same shape as z
    """
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        pos_x = x * focal_length / z
        pos_y = y * focal_length / z
        size = point_size * focal_length / z
    return pos_x, pos_y, size
