"""
Configuration module.
"""

from .pipeline import PipelineConfig, load_config, save_config
from .starfield_config import StarfieldConfig, DEFAULT_POINT_COLORS
from .render_config import StarRenderConfig

__all__ = [
    'PipelineConfig',
    'load_config',
    'save_config',
    'StarfieldConfig',
    'DEFAULT_POINT_COLORS',
    'StarRenderConfig',
]
