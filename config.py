# config.py
"""
Typed, immutable run configuration.

`utils.load_config` returns the raw JSON dictionary; `AppConfig.from_dict`
turns it into frozen dataclasses and validates it once at startup so the
engines never see malformed values.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from constants import (
    DEFAULT_PARTICLE_COUNT, DEFAULT_PARTICLE_SPEED,
    DEFAULT_PARTICLE_SIZE_MIN, DEFAULT_PARTICLE_SIZE_MAX,
    DEFAULT_TYPE_DELAY_MS, DEFAULT_DELETE_DELAY_MS, DEFAULT_PAUSE_DELAY_MS,
    DEFAULT_CYCLE_DELAY_MS, DEFAULT_TYPING_START_DELAY_MS, DEFAULT_PHRASES,
    DEFAULT_WINDOW_SIZE, FPS, FULLSCREEN,
)


def _reject(msg: str) -> None:
    logging.critical(f"Configuration error: {msg}")
    raise ValueError(msg)


@dataclass(frozen=True)
class ParticleConfig:
    count: int = DEFAULT_PARTICLE_COUNT
    speed: float = DEFAULT_PARTICLE_SPEED
    size_min: float = DEFAULT_PARTICLE_SIZE_MIN
    size_max: float = DEFAULT_PARTICLE_SIZE_MAX
    seed: Optional[int] = None

    def __post_init__(self):
        if self.count < 0:
            _reject(f"particle count must be non-negative, got {self.count}.")
        if self.speed < 0:
            _reject(f"particle speed must be non-negative, got {self.speed}.")
        if self.size_min < 0 or self.size_min > self.size_max:
            _reject(
                f"particle size range [{self.size_min}, {self.size_max}] is invalid. "
                f"The minimum must be non-negative and not exceed the maximum."
            )


@dataclass(frozen=True)
class TypingConfig:
    type_delay: float = DEFAULT_TYPE_DELAY_MS
    delete_delay: float = DEFAULT_DELETE_DELAY_MS
    pause_delay: float = DEFAULT_PAUSE_DELAY_MS
    cycle_delay: float = DEFAULT_CYCLE_DELAY_MS
    start_delay: float = DEFAULT_TYPING_START_DELAY_MS
    phrases: Tuple[str, ...] = DEFAULT_PHRASES

    def __post_init__(self):
        # Step delays must be positive or one advance() would never finish.
        for name in ("type_delay", "delete_delay", "pause_delay", "cycle_delay"):
            value = getattr(self, name)
            if value <= 0:
                _reject(f"typing {name} must be positive, got {value}.")
        if self.start_delay < 0:
            _reject(f"typing start_delay must be non-negative, got {self.start_delay}.")
        if not self.phrases:
            _reject("typing phrases must contain at least one phrase.")
        if any(not phrase for phrase in self.phrases):
            _reject("typing phrases must not contain empty strings.")


@dataclass(frozen=True)
class WindowConfig:
    width: int = DEFAULT_WINDOW_SIZE[0]
    height: int = DEFAULT_WINDOW_SIZE[1]
    fps: int = FPS
    fullscreen: bool = FULLSCREEN
    title: str = "Catalyst"

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            _reject(f"window size {self.width}x{self.height} must be positive.")
        if self.fps <= 0:
            _reject(f"fps must be positive, got {self.fps}.")


@dataclass(frozen=True)
class RunConfig:
    # 0 means run until the window is closed.
    max_frames: int = 0
    log_throttle_ticks: int = 600
    profile: bool = False


@dataclass(frozen=True)
class AppConfig:
    particles: ParticleConfig = field(default_factory=ParticleConfig)
    typing: TypingConfig = field(default_factory=TypingConfig)
    window: WindowConfig = field(default_factory=WindowConfig)
    run: RunConfig = field(default_factory=RunConfig)
    reduced_motion: bool = False

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "AppConfig":
        """
        Builds a validated configuration from the raw JSON dictionary.

        Missing sections and keys fall back to the defaults in constants.py.

        Raises:
            ValueError: If a section has an unknown key or an invalid value.
        """
        def section(name: str, factory):
            values = dict(raw.get(name, {}) or {})
            # JSON has no tuples; phrases must stay immutable.
            if "phrases" in values:
                values["phrases"] = tuple(values["phrases"])
            try:
                return factory(**values)
            except TypeError as e:
                _reject(f"invalid keys in '{name}' section: {e}")

        accessibility = raw.get("accessibility", {}) or {}
        config = cls(
            particles=section("particles", ParticleConfig),
            typing=section("typing", TypingConfig),
            window=section("window", WindowConfig),
            run=section("run_control", RunConfig),
            reduced_motion=bool(accessibility.get("reduced_motion", False)),
        )
        logging.info("Configuration validated.")
        return config
