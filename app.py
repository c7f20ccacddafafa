# app.py
"""
Application wiring.

LandingApp builds every component from the validated configuration and
the host state it is given. Each component is set up independently: a
failure is logged and the remaining components still start.
"""
import logging
from typing import Any, Callable, Dict, Optional

from config import AppConfig
from feedback import ToastManager, ContactForm
from host import Viewport, PointerState
from scheduler import FrameScheduler, Handle
from simulation import MotionEngine
from typewriter import TypewriterEngine


class LandingApp:
    """
    Owns the page components for the lifetime of the window.
    """
    def __init__(
        self,
        config: AppConfig,
        scheduler: FrameScheduler,
        viewport: Viewport,
        pointer: PointerState,
        particle_surface: Optional[Any] = None,
        headline_surface: Optional[Any] = None,
        toast_surface: Optional[Any] = None,
    ):
        self.config = config
        self.scheduler = scheduler
        self.viewport = viewport
        self.pointer = pointer
        self.particle_surface = particle_surface
        self.headline_surface = headline_surface
        self.toast_surface = toast_surface

        self.components: Dict[str, Any] = {}
        self._typing_start: Optional[Handle] = None

    def _initialize(self, name: str, factory: Callable[[], Any]) -> Optional[Any]:
        try:
            component = factory()
        except Exception:
            logging.exception(f"Failed to initialize component '{name}'.")
            return None
        self.components[name] = component
        return component

    def initialize_components(self) -> None:
        reduced_motion = self.config.reduced_motion

        toast_manager = self._initialize(
            "toast_manager", lambda: ToastManager(self.scheduler, self.toast_surface)
        )
        if toast_manager is not None:
            self._initialize("contact_form", lambda: ContactForm(toast_manager))

        self._initialize("motion_engine", lambda: MotionEngine(
            self.particle_surface,
            self.config.particles,
            self.viewport,
            self.pointer,
            self.scheduler,
            reduced_motion=reduced_motion,
            log_throttle_ticks=self.config.run.log_throttle_ticks,
        ))

        # The headline starts once the rest of the page has had time to render.
        self._typing_start = self.scheduler.call_later(
            self.config.typing.start_delay, self.initialize_typing_effect
        )
        logging.info("Landing page components initialized.")

    def initialize_typing_effect(self) -> None:
        self._typing_start = None
        if self.headline_surface is None:
            logging.info("No headline surface available. Typewriter stays inactive.")
            return
        self._initialize("typing_effect", lambda: TypewriterEngine(
            self.headline_surface,
            self.config.typing.phrases,
            self.config.typing,
            self.scheduler,
            reduced_motion=self.config.reduced_motion,
        ))

    def toggle_typing(self) -> None:
        """Pauses a running headline or resumes a paused one."""
        typing_effect = self.components.get("typing_effect")
        if typing_effect is None:
            return
        toast_manager = self.components.get("toast_manager")
        if typing_effect.paused:
            typing_effect.resume()
            message = "Headline resumed."
        else:
            typing_effect.pause()
            message = "Headline paused."
        if toast_manager is not None:
            toast_manager.show(message, "info", duration_ms=1500)

    def destroy(self) -> None:
        if self._typing_start is not None:
            self._typing_start.cancel()
            self._typing_start = None
        for name, component in self.components.items():
            try:
                if hasattr(component, "dispose"):
                    component.dispose()
                elif hasattr(component, "hide"):
                    component.hide()
            except Exception:
                logging.exception(f"Failed to tear down component '{name}'.")
        logging.info("Landing page components destroyed.")
