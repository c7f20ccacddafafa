# particle.py
"""
Manages the state of all particles in the ambient background field.

This module defines the ParticleSystem class, which is responsible for
initializing and storing particle data (position, velocity, size and
opacity) in efficient NumPy arrays.
"""
import logging
import numpy as np
from typing import Optional

from constants import PARTICLE_OPACITY_MIN, PARTICLE_OPACITY_MAX

# --- Data Contracts ---
#
# class ParticleSystem:
#   - __init__(self, count, speed, size_min, size_max, width, height, seed=None):
#     - Inputs:
#       - count: int, number of particles (fixed for the system's life).
#       - speed: float, velocity components are drawn from [-speed, speed].
#       - size_min, size_max: float, size range in pixels.
#       - width, height: viewport dimensions at creation time.
#       - seed: Optional[int], seed for the dedicated RNG.
#     - Outputs: None
#     - Side Effects: Initializes internal NumPy arrays for particle state.
#     - Invariants:
#       - self.positions is a NumPy array of shape (N, 2) of dtype float64,
#         inside [0, width] x [0, height].
#       - self.velocities is a NumPy array of shape (N, 2) of dtype float64.
#       - self.sizes and self.opacities are arrays of shape (N,), fixed
#         after creation.

class ParticleSystem:
    """
    A container for all particles, managing their state via NumPy arrays.
    """
    def __init__(
        self,
        count: int,
        speed: float,
        size_min: float,
        size_max: float,
        width: float,
        height: float,
        seed: Optional[int] = None,
    ):
        """
        Initializes the particle system.

        Args:
            count (int): The number of particles.
            speed (float): Maximum magnitude of each initial velocity component.
            size_min (float): Smallest particle size.
            size_max (float): Largest particle size.
            width (float): The width of the viewport.
            height (float): The height of the viewport.
            seed (Optional[int]): Seed for reproducible layouts.
        """
        self.particle_count = count
        self.seed = seed

        # All randomness for this system comes from one dedicated RNG.
        self.rng = np.random.default_rng(seed)

        self.sizes = self.rng.uniform(size_min, size_max, size=count)
        self.positions = self.rng.uniform(
            low=[0.0, 0.0],
            high=[width, height],
            size=(count, 2)
        )
        self.velocities = self.rng.uniform(-speed, speed, size=(count, 2))
        self.opacities = self.rng.uniform(
            PARTICLE_OPACITY_MIN, PARTICLE_OPACITY_MAX, size=count
        )

        logging.info(f"ParticleSystem initialized with {self.particle_count} particles.")
        logging.debug(
            f"Particle data arrays created. "
            f"Positions shape: {self.positions.shape}, "
            f"Velocities shape: {self.velocities.shape}, "
            f"Sizes shape: {self.sizes.shape}"
        )

    def clamp_to(self, width: float, height: float) -> None:
        """Clamps every position into [0, width] x [0, height]."""
        np.clip(self.positions[:, 0], 0.0, width, out=self.positions[:, 0])
        np.clip(self.positions[:, 1], 0.0, height, out=self.positions[:, 1])

    def average_speed(self) -> float:
        if self.particle_count == 0:
            return 0.0
        return float(np.mean(np.linalg.norm(self.velocities, axis=1)))
