"""
Base renderer class defining the interface for all renderers.
"""

import cairo
import numpy as np
from abc import ABC, abstractmethod
from typing import Tuple

from config.render_config import StarRenderConfig


class Renderer(ABC):
    def __init__(self, config: StarRenderConfig):
        self.config = config

    def _create_surface(self) -> Tuple[cairo.ImageSurface, cairo.Context]:
        surface = cairo.ImageSurface(
            cairo.FORMAT_ARGB32,
            self.config.output_width,
            self.config.output_height
        )
        ctx = self._create_context(surface)
        return surface, ctx

    def _create_context(self, surface: cairo.Surface) -> cairo.Context:
        ctx = cairo.Context(surface)
        if getattr(self.config, 'antialiasing', True):
            ctx.set_antialias(cairo.ANTIALIAS_BEST)
        return ctx

    def _surface_to_numpy(self, surface: cairo.ImageSurface) -> np.ndarray:
        surface.flush()
        buf = surface.get_data()
        # Rows may be padded beyond width * 4 bytes
        stride = surface.get_stride()
        arr = np.ndarray(
            shape=(surface.get_height(), stride // 4, 4),
            dtype=np.uint8,
            buffer=buf
        )[:, :surface.get_width()]
        arr_copy = arr.copy()
        # cairo stores premultiplied BGRA on little-endian machines
        arr_rgba = np.zeros_like(arr_copy)
        arr_rgba[:, :, 0] = arr_copy[:, :, 2]  # R
        arr_rgba[:, :, 1] = arr_copy[:, :, 1]  # G
        arr_rgba[:, :, 2] = arr_copy[:, :, 0]  # B
        arr_rgba[:, :, 3] = arr_copy[:, :, 3]  # A
        return arr_rgba

    @abstractmethod
    def render_frame(self, *args, **kwargs) -> np.ndarray:
        pass

    @abstractmethod
    def render_animation(self, *args, **kwargs):
        pass
