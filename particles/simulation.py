"""
Starfield simulation loop.

One tick clears the surface, projects every particle, respawns the ones that
left the viewport, draws them in index order and moves them all one step
closer to the observer.
"""

import time
from typing import Callable, List, Optional

import numpy as np

from config.starfield_config import StarfieldConfig
from .projection import project_points
from .recycler import Recycler, needs_recycle_mask
from .store import PointStore

TickObserver = Callable[[int, float], None]


class StarfieldSimulation:
    def __init__(self, config: StarfieldConfig = None, renderer=None,
                 rng: Optional[np.random.Generator] = None):
        """
        Args:
            config: simulation parameters
            renderer: object with clear(ctx, w, h) and draw_point(ctx, x, y, size, color);
                defaults to a StarRenderer for this config
            rng: random generator, defaults to one seeded with config.random_seed
        """
        self.config = config or StarfieldConfig()
        if renderer is None:
            from rendering.star_renderer import StarRenderer
            renderer = StarRenderer(starfield=self.config)
        self.renderer = renderer
        self.rng = rng if rng is not None else np.random.default_rng(self.config.random_seed)
        self.recycler = Recycler(self.config, self.rng)
        self.observers: List[TickObserver] = []
        self.tick_count = 0

        # Initialize the points array, staggering depths so that
        # particles do not all arrive together
        self.store = PointStore(self.config.num_points)
        for i in range(self.config.num_points):
            self.store.set(i, self.recycler.spawn())
        self.store.z[:] = 1.0 - self.rng.random(self.config.num_points)

    def add_observer(self, observer: TickObserver):
        """Register a callback invoked after every tick with (tick_index, seconds)."""
        self.observers.append(observer)

    def project(self):
        return project_points(
            self.config.focal_length,
            self.config.point_size,
            self.store.x, self.store.y, self.store.z,
        )

    def tick(self, ctx, width: float, height: float):
        """Render the current state onto ctx, then step every particle forward."""
        start = time.perf_counter()

        self.renderer.clear(ctx, width, height)

        pos_x, pos_y, size = self.project()
        for i in np.flatnonzero(needs_recycle_mask(pos_x, pos_y, size)):
            pos_x[i], pos_y[i], size[i] = self.recycler.recycle(self.store, int(i))

        colors = self.store.colors
        for i in range(self.config.num_points):
            self.renderer.draw_point(
                ctx,
                self.renderer.to_canvas(pos_x[i], width),
                self.renderer.to_canvas(pos_y[i], height),
                size[i],
                colors[i],
            )

        self.store.advance(self.config.step_distance)

        elapsed = time.perf_counter() - start
        tick_index = self.tick_count
        self.tick_count += 1
        for observer in self.observers:
            observer(tick_index, elapsed)


class TickTimer:
    """Debug observer printing the mean tick duration every `interval` ticks."""

    def __init__(self, interval: int = 100):
        self.interval = interval
        self.total = 0.0
        self.count = 0

    def __call__(self, tick_index: int, elapsed: float):
        self.total += elapsed
        self.count += 1
        if self.count >= self.interval:
            mean_ms = 1000.0 * self.total / self.count
            print(f"[tick {tick_index + 1}] mean tick time: {mean_ms:.2f} ms over {self.count} ticks")
            self.total = 0.0
            self.count = 0
