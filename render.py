"""
Rendering Script

Renders the starfield with Cairo.

Configuration is loaded from config/starfield.json (defaults if missing).
All output paths are derived from output_name.

Modes:
    frame - Render a single PNG after a short warm-up
    video - Render an mp4/gif of duration_seconds at render_fps
    live  - Show the starfield in an OpenCV window on a fixed-interval timer
"""

import argparse
import os
from dataclasses import replace
from pathlib import Path

import cv2

from config import load_config
from particles import StarfieldSimulation, TickTimer
from rendering import StarRenderer, RepeatingTimer


def remove_if_exists(path: str):
    """Remove file if it exists to ensure fresh write."""
    p = Path(path)
    if p.exists():
        try:
            os.remove(p)
            print(f"Removed existing file: {path}")
        except OSError as e:
            print(f"Error removing {path}: {e}")


def build_simulation(pipeline):
    renderer = StarRenderer(pipeline.render_config, starfield=pipeline.starfield)
    simulation = StarfieldSimulation(pipeline.starfield, renderer=renderer)
    if pipeline.debug:
        simulation.add_observer(TickTimer(pipeline.debug_interval))
    return renderer, simulation


def render_still(pipeline, warmup_ticks: int = 50):
    """Render one frame after letting the field settle."""
    renderer, simulation = build_simulation(pipeline)
    output_path = str(pipeline.frame_path)
    remove_if_exists(output_path)
    renderer.save_frame(simulation, output_path, warmup_ticks=warmup_ticks)
    return output_path


def render_video(pipeline):
    """Render a fixed number of ticks into a video file."""
    renderer, simulation = build_simulation(pipeline)
    output_path = str(pipeline.video_path)
    remove_if_exists(output_path)

    print(f"Rendering {pipeline.num_frames} frames at {pipeline.render_fps:g} fps...")
    renderer.render_animation(simulation, output_path, pipeline.num_frames, fps=pipeline.render_fps)
    return output_path


def render_live(pipeline, max_ticks: int = None):
    """Show the starfield in a window, ticking every step_interval milliseconds."""
    renderer, simulation = build_simulation(pipeline)
    window = "starfield"
    timer = None

    def on_tick():
        frame = renderer.render_frame(simulation)
        cv2.imshow(window, cv2.cvtColor(frame, cv2.COLOR_RGBA2BGR))
        key = cv2.waitKey(1) & 0xFF
        if key in (27, ord('q')):
            timer.cancel()

    timer = RepeatingTimer(pipeline.starfield.step_interval, on_tick)
    print("Press q or Esc in the window to quit.")
    try:
        timer.run(max_ticks=max_ticks)
    finally:
        cv2.destroyWindow(window)
    print(f"Rendered {timer.ticks} ticks")


def main():
    parser = argparse.ArgumentParser(description="Render a perspective starfield.")
    parser.add_argument(
        '--mode',
        type=str,
        choices=['frame', 'video', 'live'],
        default=None,
        help='Rendering mode: frame, video or live (default: from config)'
    )
    parser.add_argument('--config', type=str, default='config/starfield.json',
                        help='Path to the JSON config file')
    parser.add_argument('--output', type=str, default=None,
                        help='Output name (files go to <output_base>/rendering/)')
    parser.add_argument('--frames', type=int, default=None,
                        help='Number of frames for video mode / tick limit for live mode')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--debug', action='store_true', help='Print tick timings')
    args = parser.parse_args()

    pipeline = load_config(args.config)
    if args.mode is not None:
        pipeline.mode = args.mode
    if args.output is not None:
        pipeline.output_name = args.output
    if args.frames is not None:
        pipeline.duration_seconds = args.frames / pipeline.render_fps
    if args.seed is not None:
        pipeline.starfield = replace(pipeline.starfield, random_seed=args.seed)
    if args.debug:
        pipeline.debug = True

    pipeline.create_output_dirs()

    print(f"Starfield: {pipeline.starfield.num_points} points, "
          f"{pipeline.render_width}x{pipeline.render_height}")
    print(f"Output: {pipeline.render_output_dir}")
    print(f"Mode: {pipeline.mode}")
    print()

    if pipeline.mode == 'frame':
        render_still(pipeline)
    elif pipeline.mode == 'video':
        render_video(pipeline)
    elif pipeline.mode == 'live':
        render_live(pipeline, max_ticks=args.frames)
    else:
        raise ValueError(f"Unknown mode: {pipeline.mode!r}")


if __name__ == '__main__':
    main()
