"""
Unified configuration for the starfield renderer.

Output paths are derived from output_base and output_name.
This is the single source of truth for the CLI.
"""

from dataclasses import dataclass, field, asdict
from typing import Optional
from pathlib import Path
import json

from .starfield_config import StarfieldConfig
from .render_config import StarRenderConfig


@dataclass
class PipelineConfig:
    """
    Unified configuration for rendering a starfield.
    All output paths are derived from output_name.
    """

    # ==================== OUTPUT SETTINGS ====================
    output_base: str = 'outputs'
    output_name: str = 'starfield'

    # ==================== RENDERING SETTINGS ====================
    mode: str = 'video'  # 'frame', 'video' or 'live'
    render_width: int = 800
    render_height: int = 600
    render_fps: Optional[float] = None  # None = one frame per tick interval
    duration_seconds: float = 10.0
    video_format: str = 'mp4'  # 'mp4' or 'gif'
    antialiasing: bool = True

    # ==================== SIMULATION ====================
    starfield: StarfieldConfig = field(default_factory=StarfieldConfig)

    # ==================== MISC ====================
    debug: bool = False
    debug_interval: int = 100

    def __post_init__(self):
        if isinstance(self.starfield, dict):
            self.starfield = StarfieldConfig(**self.starfield)
        if self.render_fps is None:
            self.render_fps = self.starfield.ticks_per_second
        if not self.render_fps > 0:
            raise ValueError(f"render_fps must be > 0, got {self.render_fps}")
        if self.video_format not in ('mp4', 'gif'):
            raise ValueError(f"video_format must be 'mp4' or 'gif', got {self.video_format!r}")

    # ==================== DERIVED VALUES ====================
    @property
    def num_frames(self) -> int:
        return max(1, int(round(self.duration_seconds * self.render_fps)))

    @property
    def render_config(self) -> StarRenderConfig:
        return StarRenderConfig(
            output_width=self.render_width,
            output_height=self.render_height,
            antialiasing=self.antialiasing,
        )

    # ==================== DERIVED PATHS ====================
    @property
    def render_output_dir(self) -> Path:
        return Path(self.output_base) / 'rendering'

    @property
    def video_path(self) -> Path:
        return self.render_output_dir / f'{self.output_name}.{self.video_format}'

    @property
    def frame_path(self) -> Path:
        return self.render_output_dir / f'{self.output_name}_frame.png'

    # ==================== DIRECTORY CREATION ====================
    def create_output_dirs(self):
        """Create all output directories."""
        self.render_output_dir.mkdir(parents=True, exist_ok=True)


def load_config(path: str = 'config/starfield.json') -> PipelineConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return PipelineConfig()

    with open(config_path, 'r') as f:
        data = json.load(f)

    return PipelineConfig(**data)


def save_config(config: PipelineConfig, path: str = 'config/starfield.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = asdict(config)

    with open(config_path, 'w') as f:
        json.dump(data, f, indent=2)

    print(f"Saved config to {config_path}")
