"""
Configuration for the starfield simulation.
"""

import math
from dataclasses import dataclass
from typing import Any, Optional, Tuple

Color = Any  # hex string or (r, g, b[, a]) floats in [0, 1]

DEFAULT_POINT_COLORS: Tuple[Color, ...] = (
    # White, faint red, faint blue
    "#ffffff", "#ffcccc", "#ccccff",
)


@dataclass(frozen=True)
class StarfieldConfig:
    # Point sizes
    point_size: float = 20
    num_points: int = 2000

    # Spreads and distances
    focal_length: float = 0.01
    start_distance: float = 1
    start_spread: float = 60

    # Update rate and speeds
    velocity: float = 0.1
    time_step: float = 0.1
    step_interval: float = 40  # milliseconds between ticks

    # Colors
    bg_color: Color = "#000000"
    point_colors: Tuple[Color, ...] = DEFAULT_POINT_COLORS

    # Respawn loop bound before a particle is forced to the viewport center
    max_respawn_attempts: int = 100
    random_seed: Optional[int] = None

    def __post_init__(self):
        # JSON hands us lists; keep the palette hashable and immutable
        colors = tuple(
            tuple(c) if isinstance(c, list) else c for c in self.point_colors
        )
        object.__setattr__(self, 'point_colors', colors)
        if isinstance(self.bg_color, list):
            object.__setattr__(self, 'bg_color', tuple(self.bg_color))
        self.validate()

    def validate(self):
        if not self.point_colors:
            raise ValueError("point_colors must contain at least one color")
        if not isinstance(self.num_points, int) or isinstance(self.num_points, bool):
            raise ValueError(f"num_points must be an integer, got {self.num_points!r}")
        if self.num_points < 1:
            raise ValueError(f"num_points must be >= 1, got {self.num_points}")
        if not self.point_size > 0:
            raise ValueError(f"point_size must be > 0, got {self.point_size}")
        if not self.focal_length > 0:
            raise ValueError(f"focal_length must be > 0, got {self.focal_length}")
        if not self.start_distance > 0:
            raise ValueError(
                f"start_distance must be > 0, got {self.start_distance}"
            )
        # Size of a freshly spawned star; must stay finite to be drawable
        spawn_size = float(self.point_size) * self.focal_length / self.start_distance
        if not math.isfinite(spawn_size):
            raise ValueError(
                f"point_size * focal_length / start_distance must be finite, got {spawn_size} "
                f"(point_size={self.point_size}, focal_length={self.focal_length}, "
                f"start_distance={self.start_distance})"
            )
        if not self.start_spread >= 0:
            raise ValueError(f"start_spread must be >= 0, got {self.start_spread}")
        if not self.step_interval > 0:
            raise ValueError(
                f"step_interval must be > 0 milliseconds, got {self.step_interval}"
            )
        if self.max_respawn_attempts < 1:
            raise ValueError(
                f"max_respawn_attempts must be >= 1, got {self.max_respawn_attempts}"
            )
        for name in ('velocity', 'time_step'):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number, got {value}")

    @property
    def step_distance(self) -> float:
        """Depth travelled by every particle in one tick."""
        return self.velocity * self.time_step

    @property
    def ticks_per_second(self) -> float:
        return 1000.0 / self.step_interval
