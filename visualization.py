# visualization.py
"""
Handles the rendering of the landing page layers using Pygame.

The Visualizer owns the window and three render sinks that the engines
write into: a ParticleLayer for the background field, a TextLabel for
the typewriter headline and a ToastBanner for feedback messages. It also
turns pygame events into pointer, resize and key signals.
"""
import logging
import pygame
import numpy as np
from typing import Callable, Dict, List, Optional

from config import WindowConfig
from constants import (
    BACKGROUND_COLOR, PARTICLE_COLOR, TEXT_COLOR, MOTION_BLUR_ALPHA,
    HEADLINE_FONT_SIZE, TOAST_FONT_SIZE, TOAST_COLORS,
)
from host import Viewport, PointerState

# --- Data Contracts ---
#
# class ParticleLayer:
#   - add_particle(self, x, y, size, opacity) -> None
#   - move_particles(self, positions: np.ndarray) -> None
#     - Invariants: positions has shape (N, 2) where N is the number of
#       particles added.
#   - clear(self) -> None
#
# class TextLabel:
#   - set_text(self, text: str) -> None
#
# class ToastBanner:
#   - show(self, message: str, kind: str) -> None
#   - hide(self) -> None
#
# class Visualizer:
#   - __init__(self, window: WindowConfig)
#     - Side Effects: Initializes Pygame and creates a display surface.
#   - handle_events(self, pointer) -> bool
#     - Outputs: False if the user has quit, True otherwise.
#   - resize_window(self, width, height) -> None
#     - Invariants: the window keeps the flags it was opened with.
#   - draw(self) -> None


class ParticleLayer:
    """Render sink for the particle field."""

    def __init__(self):
        self._positions = np.zeros((0, 2), dtype=np.float64)
        # Initial positions collected by add_particle, stacked once on first read.
        self._added: List[List[float]] = []
        self.sprites: List[pygame.Surface] = []
        self.sizes: List[float] = []

    def __len__(self) -> int:
        return len(self.sprites)

    @property
    def positions(self) -> np.ndarray:
        if self._added:
            self._positions = np.vstack([self._positions, np.array(self._added, dtype=np.float64)])
            self._added = []
        return self._positions

    def add_particle(self, x: float, y: float, size: float, opacity: float) -> None:
        # Pre-render one alpha sprite per particle; size and opacity never change.
        radius = max(1, int(round(size / 2)))
        sprite = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        color = pygame.Color(*PARTICLE_COLOR, int(255 * opacity))
        pygame.draw.circle(sprite, color, (radius, radius), radius)
        self.sprites.append(sprite)
        self.sizes.append(size)
        self._added.append([x, y])

    def move_particles(self, positions: np.ndarray) -> None:
        self._positions = np.array(positions, dtype=np.float64, copy=True)
        self._added = []

    def clear(self) -> None:
        self._positions = np.zeros((0, 2), dtype=np.float64)
        self._added = []
        self.sprites = []
        self.sizes = []

    def draw(self, target: pygame.Surface) -> None:
        for sprite, (x, y) in zip(self.sprites, self.positions):
            half = sprite.get_width() // 2
            target.blit(sprite, (int(x) - half, int(y) - half))


class TextLabel:
    """Render sink for the typewriter headline."""

    def __init__(self):
        self.text = ""

    def set_text(self, text: str) -> None:
        self.text = text


class ToastBanner:
    """Render sink for toast notifications."""

    def __init__(self):
        self.message: Optional[str] = None
        self.kind = "success"

    def show(self, message: str, kind: str) -> None:
        self.message = message
        self.kind = kind

    def hide(self) -> None:
        self.message = None


class Visualizer:
    """
    Owns the Pygame window and draws every layer once per frame.
    """
    def __init__(self, window: WindowConfig):
        """
        Initializes Pygame and the display window.
        """
        pygame.init()
        pygame.font.init()

        if window.fullscreen:
            display_info = pygame.display.Info()
            width, height = display_info.current_w, display_info.current_h
            self.display_flags = pygame.FULLSCREEN
        else:
            width, height = window.width, window.height
            self.display_flags = pygame.RESIZABLE
        self.screen = pygame.display.set_mode((width, height), self.display_flags)

        pygame.display.set_caption(window.title)
        self.clock = pygame.time.Clock()
        self.fps = window.fps
        self.viewport = Viewport(width, height)
        self._make_blur_surface()

        self.particle_layer = ParticleLayer()
        self.headline = TextLabel()
        self.toast = ToastBanner()
        self.key_handlers: Dict[int, Callable[[], None]] = {}

        # Pygame falls back to its default font if 'Segoe UI' is not found.
        try:
            self.font_headline = pygame.font.SysFont("Segoe UI", HEADLINE_FONT_SIZE, bold=True)
            self.font_toast = pygame.font.SysFont("Segoe UI", TOAST_FONT_SIZE)
        except pygame.error:
            logging.warning("Segoe UI font not found, falling back to default sans-serif.")
            self.font_headline = pygame.font.SysFont(None, HEADLINE_FONT_SIZE + 8, bold=True)
            self.font_toast = pygame.font.SysFont(None, TOAST_FONT_SIZE + 4)

        logging.info(f"Visualizer initialized with Pygame display ({width}x{height}).")

    def _make_blur_surface(self) -> None:
        # Drawn over the previous frame each tick so particles leave fading trails.
        self.blur_surface = pygame.Surface(self.viewport.size, pygame.SRCALPHA)
        self.blur_surface.fill((*BACKGROUND_COLOR, MOTION_BLUR_ALPHA))

    def resize_window(self, width: int, height: int) -> None:
        # Re-open with the original flags so a fullscreen window stays fullscreen.
        self.screen = pygame.display.set_mode((width, height), self.display_flags)
        self.viewport.resize(width, height)
        self._make_blur_surface()
        logging.debug(f"Window resized to {width}x{height}.")

    def tick(self) -> int:
        """Waits for the next frame and returns the elapsed milliseconds."""
        return self.clock.tick(self.fps)

    def bind_key(self, key: int, handler: Callable[[], None]) -> None:
        self.key_handlers[key] = handler

    def handle_events(self, pointer: PointerState) -> bool:
        """
        Feeds pointer and resize signals to the host state.

        Returns:
            bool: False if the application should exit, True otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.info("Quit event received. Shutting down visualizer.")
                return False

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    logging.info("ESC key pressed. Shutting down visualizer.")
                    return False
                handler = self.key_handlers.get(event.key)
                if handler is not None:
                    handler()

            if event.type == pygame.MOUSEMOTION:
                pointer.update(*event.pos)

            if event.type == pygame.VIDEORESIZE:
                self.resize_window(event.w, event.h)
        return True

    def _draw_headline(self) -> None:
        if not self.headline.text:
            return
        text_surf = self.font_headline.render(self.headline.text, True, TEXT_COLOR)
        text_rect = text_surf.get_rect(center=(self.viewport.width // 2, self.viewport.height // 2))
        self.screen.blit(text_surf, text_rect)

        # Caret right after the last revealed character
        caret = pygame.Rect(text_rect.right + 4, text_rect.top + 6, 3, text_rect.height - 12)
        pygame.draw.rect(self.screen, TEXT_COLOR, caret)

    def _draw_toast(self) -> None:
        if self.toast.message is None:
            return
        text_surf = self.font_toast.render(self.toast.message, True, TEXT_COLOR)
        box = text_surf.get_rect()
        box.inflate_ip(32, 20)
        box.bottomright = (self.viewport.width - 24, self.viewport.height - 24)
        color = TOAST_COLORS.get(self.toast.kind, TOAST_COLORS["info"])
        pygame.draw.rect(self.screen, color, box, border_radius=8)
        self.screen.blit(text_surf, text_surf.get_rect(center=box.center))

    def draw(self) -> None:
        # 1. Fade the previous frame to leave short particle trails
        self.screen.blit(self.blur_surface, (0, 0))
        # 2. Background particles, then the headline and toast on top
        self.particle_layer.draw(self.screen)
        self._draw_headline()
        self._draw_toast()
        pygame.display.flip()

    def close(self):
        """Shuts down Pygame."""
        pygame.font.quit()
        pygame.quit()
