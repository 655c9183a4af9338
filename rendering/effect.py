"""
Attaches a running starfield to a cairo surface.

Each effect owns its own simulation, point store and timer, so several
surfaces can carry independent starfields at once.
"""

import cairo
from typing import Callable, Iterable, List

from config.render_config import StarRenderConfig
from config.starfield_config import StarfieldConfig
from particles.simulation import StarfieldSimulation
from .scheduler import RepeatingTimer
from .star_renderer import StarRenderer

TimerFactory = Callable[[float, Callable[[], None]], RepeatingTimer]


class StarfieldEffect:
    """
    A starfield bound to one surface.

    The timer is started from the constructor, right after the particles are
    initialized, unless autostart is False. Whoever holds the effect is
    responsible for calling stop().
    """

    def __init__(self, surface: cairo.Surface, config: StarfieldConfig = None,
                 render_config: StarRenderConfig = None,
                 timer_factory: TimerFactory = RepeatingTimer,
                 autostart: bool = True):
        if not isinstance(surface, cairo.ImageSurface):
            print(f"Warning: starfield attached to something that is not a cairo ImageSurface: {surface!r}")

        self.config = config or StarfieldConfig()
        self.surface = surface
        self.renderer = StarRenderer(render_config, starfield=self.config)
        self.ctx = self.renderer._create_context(surface)

        if hasattr(surface, 'get_width'):
            self.width = surface.get_width()
            self.height = surface.get_height()
        else:
            self.width = self.renderer.config.output_width
            self.height = self.renderer.config.output_height

        self.simulation = StarfieldSimulation(self.config, renderer=self.renderer)
        self.timer = timer_factory(self.config.step_interval, self.step)
        self.running = False
        if autostart:
            self.start()

    def step(self):
        self.simulation.tick(self.ctx, self.width, self.height)
        self.surface.flush()

    def start(self):
        if self.running:
            return
        self.running = True
        self.timer.start()

    def stop(self):
        self.timer.cancel()
        self.running = False


def apply_starfield(surfaces: Iterable[cairo.Surface], config: StarfieldConfig = None,
                    **kwargs) -> List[StarfieldEffect]:
    """Attach an independent starfield to every surface."""
    return [StarfieldEffect(surface, config, **kwargs) for surface in surfaces]
