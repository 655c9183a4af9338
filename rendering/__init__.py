"""
Rendering module for the starfield.
Uses Cairo for drawing; frames are exported with imageio and OpenCV.
"""

from config.render_config import StarRenderConfig
from .base import Renderer
from .star_renderer import StarRenderer
from .scheduler import RepeatingTimer
from .effect import StarfieldEffect, apply_starfield
from .exporters import save_frame, open_video_writer
from .utils import parse_color
