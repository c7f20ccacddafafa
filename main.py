# main.py
"""
Main entry point for the landing page motion layer.

This script orchestrates the whole lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Opens the window and wires the page components.
4. Runs the frame loop that drives the scheduler.
5. Handles clean shutdown.
"""
import argparse
import logging
import cProfile
import pstats
import io
import pygame

from utils import setup_logging, load_config


def run(config_path: str = 'config.json') -> int:
    """
    Runs the application until the window is closed.

    Returns:
        int: Process exit code.
    """
    # Logging is not set up yet, so we use a print for this one error.
    try:
        raw_config = load_config(config_path)
    except Exception as e:
        print(f"FATAL: Could not load {config_path}. Error: {e}")
        return 1

    setup_logging(raw_config)
    logging.info("--- Landing Page Starting ---")

    from config import AppConfig
    from app import LandingApp
    from host import PointerState
    from scheduler import FrameScheduler
    from visualization import Visualizer

    try:
        config = AppConfig.from_dict(raw_config)
    except ValueError:
        return 1

    # --- Component Initialization ---
    # 1. The visualizer decides the real window size, so it comes first.
    visualizer = Visualizer(config.window)
    scheduler = FrameScheduler()
    pointer = PointerState()

    # 2. Wire the page onto the visualizer's render sinks.
    app = LandingApp(
        config, scheduler, visualizer.viewport, pointer,
        particle_surface=visualizer.particle_layer,
        headline_surface=visualizer.headline,
        toast_surface=visualizer.toast,
    )
    app.initialize_components()
    visualizer.bind_key(pygame.K_SPACE, app.toggle_typing)

    profiler = cProfile.Profile() if config.run.profile else None
    max_frames = config.run.max_frames
    frame_num = 0
    running = True

    if profiler is not None:
        profiler.enable()
    while running:
        elapsed_ms = visualizer.tick()
        running = visualizer.handle_events(pointer)

        # Timers first, then the frame callbacks requested last frame.
        scheduler.advance(elapsed_ms)
        scheduler.run_frame()
        visualizer.draw()
        frame_num += 1

        if max_frames and frame_num >= max_frames:
            logging.info(f"Reached max_frames ({max_frames}). Stopping.")
            running = False
    if profiler is not None:
        profiler.disable()

    app.destroy()
    visualizer.close()
    logging.info(f"Frame loop finished after {frame_num} frames.")

    if profiler is not None:
        logging.info("--- Performance Profile ---")
        s = io.StringIO()
        stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
        stats.print_stats(20)
        logging.info(f"\n{s.getvalue()}")

    logging.info("--- Landing Page Shutting Down ---")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Ambient particles and a rotating typewriter headline.")
    parser.add_argument('--config', default='config.json', help="Path to the JSON configuration file.")
    args = parser.parse_args()
    return run(args.config)


if __name__ == "__main__":
    raise SystemExit(main())
