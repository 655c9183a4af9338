"""
Configuration for rendering module.
"""

from dataclasses import dataclass


@dataclass
class StarRenderConfig:
    output_width: int = 800
    output_height: int = 600

    # Below this projected size a star is not drawn at all
    min_point_size: float = 0.2
    # Below this projected size a star is drawn as a square instead of a disc
    square_point_size: float = 1.0

    antialiasing: bool = True
