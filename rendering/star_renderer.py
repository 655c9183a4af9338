"""
Starfield renderer using Cairo.
Draws projected stars with a size-based level of detail: tiny stars are
skipped, sub-pixel stars become squares and the rest are filled discs.
"""

import math
import cairo
import numpy as np
from tqdm import tqdm
from pathlib import Path

from config.render_config import StarRenderConfig
from config.starfield_config import StarfieldConfig
from .base import Renderer
from .exporters import open_video_writer, save_frame
from .utils import parse_color


class StarRenderer(Renderer):
    def __init__(self, config: StarRenderConfig = None, starfield: StarfieldConfig = None):
        super().__init__(config or StarRenderConfig())
        self.starfield = starfield or StarfieldConfig()

        # Parse colors once; the store keeps the palette values as given
        self.bg_rgba = parse_color(self.starfield.bg_color)
        self._palette = {color: parse_color(color) for color in self.starfield.point_colors}
        self._surface = None
        self._ctx = None

    def _rgba(self, color):
        rgba = self._palette.get(color)
        if rgba is None:
            rgba = self._palette[color] = parse_color(color)
        return rgba

    @staticmethod
    def to_canvas(value: float, extent: float) -> float:
        """Map a normalized [-0.5, 0.5] coordinate onto [0, extent] pixels."""
        return extent * value + 0.5 * extent

    def clear(self, ctx: cairo.Context, width: float, height: float):
        ctx.new_path()
        ctx.rectangle(0, 0, width, height)
        ctx.set_source_rgba(*self.bg_rgba)
        ctx.fill()

    def draw_point(self, ctx: cairo.Context, x: float, y: float, size: float, color):
        if size < self.config.min_point_size:
            return

        ctx.set_source_rgba(*self._rgba(color))
        if size < self.config.square_point_size:
            # A square is cheaper than an arc and looks the same at this scale
            ctx.rectangle(x - size, y - size, 2 * size, 2 * size)
        else:
            ctx.new_path()
            ctx.arc(x, y, size, 0, 2 * math.pi)
            ctx.close_path()
        ctx.fill()

    def render_frame(self, simulation) -> np.ndarray:
        """
        Advance the simulation by one tick, drawing onto the renderer's surface.

        Returns:
            RGBA numpy array of shape [output_height, output_width, 4]
        """
        if self._surface is None:
            self._surface, self._ctx = self._create_surface()
        simulation.tick(self._ctx, self.config.output_width, self.config.output_height)
        return self._surface_to_numpy(self._surface)

    def save_frame(self, simulation, output_path: str, warmup_ticks: int = 0):
        for _ in range(warmup_ticks):
            self.render_frame(simulation)
        save_frame(self.render_frame(simulation), output_path)

    def render_animation(self, simulation, output_path: str, num_frames: int, fps: float = 25):
        """
        Render num_frames consecutive ticks into a video or GIF.

        Args:
            simulation: StarfieldSimulation drawing through this renderer
            output_path: .mp4 or .gif path
            num_frames: number of ticks to record
            fps: playback frame rate
        """
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        writer = open_video_writer(
            output_path, fps, self.config.output_width, self.config.output_height
        )
        try:
            for _ in tqdm(range(num_frames), desc="Rendering starfield frames"):
                writer.append(self.render_frame(simulation))
        finally:
            writer.close()
        print(f"  Saved animation: {output_path}")
