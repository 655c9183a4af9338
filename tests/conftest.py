"""Shared fixtures: a fake cairo context that records drawing calls."""

import pytest

from config.starfield_config import StarfieldConfig
from rendering.star_renderer import StarRenderer


class RecordingContext:
    """Stands in for cairo.Context and keeps every call in order."""

    def __init__(self):
        self.calls = []

    def _record(name):
        def method(self, *args):
            self.calls.append((name,) + args)
        return method

    new_path = _record('new_path')
    close_path = _record('close_path')
    rectangle = _record('rectangle')
    arc = _record('arc')
    set_source_rgba = _record('set_source_rgba')
    fill = _record('fill')
    set_antialias = _record('set_antialias')
    del _record

    def names(self):
        return [call[0] for call in self.calls]


class SpyRenderer(StarRenderer):
    """StarRenderer that also remembers each draw_point request."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.clears = 0
        self.draws = []
        self.on_first_draw = None

    def clear(self, ctx, width, height):
        self.clears += 1
        super().clear(ctx, width, height)

    def draw_point(self, ctx, x, y, size, color):
        if not self.draws and self.on_first_draw is not None:
            self.on_first_draw()
        self.draws.append((x, y, size, color))
        super().draw_point(ctx, x, y, size, color)


@pytest.fixture
def recording_ctx():
    return RecordingContext()


@pytest.fixture
def small_config():
    return StarfieldConfig(num_points=50, random_seed=1234)
