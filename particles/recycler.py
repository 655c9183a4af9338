"""
Respawn policy for particles that leave the viewport.
"""

from typing import Optional, Tuple

import numpy as np

from config.starfield_config import StarfieldConfig
from .projection import perspective
from .store import Particle, PointStore

# Half extent of the normalized viewport
VIEWPORT_HALF = 0.5


def needs_recycle(pos_x: float, pos_y: float, size: float) -> bool:
    """True if a projected particle is off screen, negative or non-finite."""
    # Negated "inside" test so that nan never counts as visible
    inside = abs(pos_x) <= VIEWPORT_HALF and abs(pos_y) <= VIEWPORT_HALF and size >= 0
    return not (inside and np.isfinite(size))


def needs_recycle_mask(pos_x: np.ndarray, pos_y: np.ndarray, size: np.ndarray) -> np.ndarray:
    """Vectorized needs_recycle over whole projection arrays."""
    inside = (
        (np.abs(pos_x) <= VIEWPORT_HALF)
        & (np.abs(pos_y) <= VIEWPORT_HALF)
        & (size >= 0)
        & np.isfinite(size)
    )
    return ~inside


class Recycler:
    """
    Spawns fresh particles and replaces invalid ones.

    A fresh particle sits at start_distance with a lateral offset uniform in
    [-start_spread/2, start_spread/2] and a color drawn from the palette.
    """

    def __init__(self, config: StarfieldConfig, rng: Optional[np.random.Generator] = None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(config.random_seed)
        self.forced_respawns = 0
        self._warned = False

    def _random_color(self):
        colors = self.config.point_colors
        return colors[int(self.rng.integers(len(colors)))]

    def spawn(self) -> Particle:
        spread = self.config.start_spread
        return Particle(
            x=spread * (self.rng.random() - 0.5),
            y=spread * (self.rng.random() - 0.5),
            z=self.config.start_distance,
            color=self._random_color(),
        )

    def project(self, particle: Particle) -> Tuple[float, float, float]:
        f = self.config.focal_length
        return (
            perspective(f, particle.x, particle.z),
            perspective(f, particle.y, particle.z),
            perspective(f, self.config.point_size, particle.z),
        )

    def recycle(self, store: PointStore, i: int) -> Tuple[float, float, float]:
        """
        Respawn particle i until it projects inside the viewport.

        Gives up after max_respawn_attempts spawns and parks the particle at
        the viewport center instead.

        Returns:
            (pos_x, pos_y, size) of the particle now stored at i
        """
        projected = self.project(store.get(i))
        attempts = 0
        while needs_recycle(*projected):
            if attempts >= self.config.max_respawn_attempts:
                particle = Particle(
                    x=0.0, y=0.0,
                    z=self.config.start_distance,
                    color=self._random_color(),
                )
                store.set(i, particle)
                self._report_forced_respawn()
                return self.project(particle)

            particle = self.spawn()
            store.set(i, particle)
            projected = self.project(particle)
            attempts += 1

        return projected

    def _report_forced_respawn(self):
        self.forced_respawns += 1
        if not self._warned:
            self._warned = True
            print(
                f"Warning: no spawn point inside the viewport after "
                f"{self.config.max_respawn_attempts} attempts; "
                f"placing particles at the center. "
                f"Check start_spread, start_distance and focal_length."
            )
