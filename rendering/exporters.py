"""
Frame exporters: single PNG frames, MP4 video via OpenCV and GIF via imageio.
Keeps rendering decoupled from file formats.
"""

import cv2
import imageio
import numpy as np
from pathlib import Path


def save_frame(frame: np.ndarray, output_path: str):
    """Write one RGBA frame to an image file (format from the extension)."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    imageio.imwrite(output_path, frame)
    print(f"Saved frame to {output_path}")


class Mp4Writer:
    """Streams RGBA frames into an mp4 file with OpenCV."""

    def __init__(self, output_path: str, fps: float, width: int, height: int):
        fourcc = cv2.VideoWriter_fourcc(*'mp4v')
        self.out = cv2.VideoWriter(output_path, fourcc, fps, (width, height))
        if not self.out.isOpened():
            raise IOError(f"Could not open video writer for {output_path}")

    def append(self, frame: np.ndarray):
        self.out.write(cv2.cvtColor(frame, cv2.COLOR_RGBA2BGR))

    def close(self):
        self.out.release()


class GifWriter:
    """Collects frames and writes an endlessly looping GIF on close."""

    def __init__(self, output_path: str, fps: float):
        self.output_path = output_path
        self.fps = fps
        self.frames = []

    def append(self, frame: np.ndarray):
        self.frames.append(frame[..., :3].copy())

    def close(self):
        if not self.frames:
            return
        imageio.mimsave(self.output_path, self.frames, duration=1000.0 / self.fps, loop=0)


def open_video_writer(output_path: str, fps: float, width: int, height: int):
    suffix = Path(output_path).suffix.lower()
    if suffix == '.mp4':
        return Mp4Writer(output_path, fps, width, height)
    if suffix == '.gif':
        return GifWriter(output_path, fps)
    raise ValueError(f"Unsupported animation format: {suffix!r} (use .mp4 or .gif)")
