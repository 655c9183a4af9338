"""
Flat particle storage for the starfield.

Particles live in parallel numpy arrays indexed 0..num_points-1 so the
simulation can project and step all of them at once.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass
class Particle:
    x: float
    y: float
    z: float
    color: Any


class PointStore:
    """Fixed-capacity store of particles: lateral offset, depth and color."""

    def __init__(self, num_points: int):
        self.num_points = num_points
        self.x = np.zeros(num_points, dtype=np.float64)
        self.y = np.zeros(num_points, dtype=np.float64)
        self.z = np.zeros(num_points, dtype=np.float64)
        self.colors = np.empty(num_points, dtype=object)

    def __len__(self) -> int:
        return self.num_points

    def _check_index(self, i: int):
        # numpy would silently wrap negative indices
        if not 0 <= i < self.num_points:
            raise IndexError(f"particle index {i} out of range [0, {self.num_points})")

    def get(self, i: int) -> Particle:
        self._check_index(i)
        return Particle(
            x=float(self.x[i]),
            y=float(self.y[i]),
            z=float(self.z[i]),
            color=self.colors[i],
        )

    def set(self, i: int, particle: Particle):
        self._check_index(i)
        self.x[i] = particle.x
        self.y[i] = particle.y
        self.z[i] = particle.z
        self.colors[i] = particle.color

    def advance(self, distance: float):
        """Move every particle `distance` closer to the observer."""
        self.z -= distance
