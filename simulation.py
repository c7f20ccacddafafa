# simulation.py
"""
Handles the ambient particle motion and its per-frame physics.

This module defines the MotionEngine class, which owns a ParticleSystem,
advances it once per animation frame, bounces particles off the viewport
edges, applies the pointer force field and pushes the new positions to
the render surface.
"""
import logging
import numpy as np
from typing import Optional, Any
from numba import jit

from config import ParticleConfig
from constants import (
    POINTER_INTERACTION_RADIUS, POINTER_FORCE_COEFFICIENT, RESIZE_DEBOUNCE_MS
)
from host import Viewport, PointerState
from particle import ParticleSystem
from scheduler import FrameScheduler, Debouncer, Handle

# --- Data Contracts ---
#
# class MotionEngine:
#   - __init__(self, surface, params, viewport, pointer, scheduler, reduced_motion):
#     - Inputs:
#       - surface: render sink with add_particle(x, y, size, opacity),
#         move_particles(positions) and clear(), or None.
#       - params: ParticleConfig (count, speed, size_min, size_max, seed).
#       - viewport: Viewport, consulted on creation, every tick and on resize.
#       - pointer: PointerState, read (never written) during each tick.
#       - scheduler: FrameScheduler providing request_frame/call_later.
#       - reduced_motion: bool, read once.
#     - Side Effects: With a surface and motion allowed, creates and renders
#       the particles and requests the first frame. Otherwise does nothing.
#
#   - tick(self) -> None:
#     - Side Effects: Advances positions/velocities in place, pushes them
#       to the surface, then requests the next frame.
#     - Invariants: positions stay inside the viewport after each tick.
#
#   - dispose(self) -> None:
#     - Side Effects: Cancels the pending frame and resize, clears the
#       surface, discards the particles. Idempotent.

@jit(nopython=True)
def _step_particles_numba(
    positions, velocities, width, height,
    pointer_x, pointer_y, radius, coefficient
):
    """
    Numba-jitted per-tick update for every particle.

    Moves each particle by its velocity, reflects it off the viewport
    edges and applies the pointer force. The force falls off linearly
    from the pointer to `radius` and is neither damped nor capped.
    """
    particle_count = positions.shape[0]
    for i in range(particle_count):
        positions[i, 0] += velocities[i, 0]
        positions[i, 1] += velocities[i, 1]

        # --- Boundary reflection ---
        x = positions[i, 0]
        if x <= 0.0 or x >= width:
            velocities[i, 0] = -velocities[i, 0]
            positions[i, 0] = min(max(x, 0.0), width)
        y = positions[i, 1]
        if y <= 0.0 or y >= height:
            velocities[i, 1] = -velocities[i, 1]
            positions[i, 1] = min(max(y, 0.0), height)

        # --- Pointer force ---
        dx = pointer_x - positions[i, 0]
        dy = pointer_y - positions[i, 1]
        distance = np.sqrt(dx * dx + dy * dy)
        if distance < radius:
            force = (radius - distance) / radius
            velocities[i, 0] -= dx * force * coefficient
            velocities[i, 1] -= dy * force * coefficient


class MotionEngine:
    """
    Drives the background particle field on the host's frame loop.
    """
    def __init__(
        self,
        surface: Optional[Any],
        params: ParticleConfig,
        viewport: Viewport,
        pointer: PointerState,
        scheduler: FrameScheduler,
        reduced_motion: bool = False,
        log_throttle_ticks: int = 600,
    ):
        self.surface = surface
        self.params = params
        self.viewport = viewport
        self.pointer = pointer
        self.scheduler = scheduler
        self.log_throttle_ticks = log_throttle_ticks

        self.particles: Optional[ParticleSystem] = None
        self.tick_count = 0
        self._frame_handle: Optional[Handle] = None
        self._resize_debouncer: Optional[Debouncer] = None
        self._disposed = False

        if surface is None:
            logging.info("No particle surface available. Motion engine stays inactive.")
            return
        if reduced_motion:
            logging.info("Reduced motion requested. Motion engine stays inactive.")
            return

        self._start()

    @property
    def active(self) -> bool:
        return self.particles is not None and not self._disposed

    def _start(self) -> None:
        width, height = self.viewport.size
        self.particles = ParticleSystem(
            count=self.params.count,
            speed=self.params.speed,
            size_min=self.params.size_min,
            size_max=self.params.size_max,
            width=width,
            height=height,
            seed=self.params.seed,
        )

        for i in range(self.particles.particle_count):
            x, y = self.particles.positions[i]
            self.surface.add_particle(
                float(x), float(y),
                float(self.particles.sizes[i]),
                float(self.particles.opacities[i]),
            )

        self._resize_debouncer = Debouncer(self.scheduler, RESIZE_DEBOUNCE_MS, self.handle_resize)
        self.viewport.add_listener(self._resize_debouncer)
        self._frame_handle = self.scheduler.request_frame(self.tick)
        logging.info(f"Motion engine started on a {width}x{height} viewport.")

    def tick(self) -> None:
        """
        Executes one animation frame of the particle field.
        """
        self._frame_handle = None
        if not self.active:
            return

        try:
            # 1. Physics: move, reflect, pointer force (all in place)
            _step_particles_numba(
                self.particles.positions, self.particles.velocities,
                float(self.viewport.width), float(self.viewport.height),
                float(self.pointer.x), float(self.pointer.y),
                POINTER_INTERACTION_RADIUS, POINTER_FORCE_COEFFICIENT
            )
            # 2. Render only after the whole field has been updated
            self.surface.move_particles(self.particles.positions)
            self.tick_count += 1

            # Hot loops throttle their logs.
            if self.log_throttle_ticks and self.tick_count % self.log_throttle_ticks == 0:
                logging.debug(
                    f"Motion tick {self.tick_count} | "
                    f"Average Speed: {self.particles.average_speed():.4f}"
                )
        except Exception:
            logging.exception("Motion tick failed. Skipping this frame.")

        # 3. Keep the chain going unless a callback above disposed us
        if self.active:
            self._frame_handle = self.scheduler.request_frame(self.tick)

    def handle_resize(self, width: Optional[int] = None, height: Optional[int] = None) -> None:
        """Clamps every particle into the current viewport bounds."""
        if not self.active:
            return
        width = self.viewport.width if width is None else width
        height = self.viewport.height if height is None else height
        self.particles.clamp_to(width, height)
        logging.debug(f"Particles clamped to resized viewport {width}x{height}.")

    def dispose(self) -> None:
        """Stops the frame chain and removes every rendered particle."""
        if self._disposed:
            return
        self._disposed = True

        if self._frame_handle is not None:
            self._frame_handle.cancel()
            self._frame_handle = None
        if self._resize_debouncer is not None:
            self._resize_debouncer.cancel()
            self.viewport.remove_listener(self._resize_debouncer)
            self._resize_debouncer = None

        if self.particles is not None:
            self.surface.clear()
            logging.info(f"Motion engine disposed after {self.tick_count} ticks.")
        self.particles = None
