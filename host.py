# host.py
"""
Host environment state shared with the engines.

The viewport and pointer are explicit instances created by the
application wiring and handed to each engine, so there is no
process-wide mouse or window singleton.
"""
import logging
from typing import Callable, List, Tuple

ResizeListener = Callable[[int, int], None]


class Viewport:
    """
    The visible drawing area. Width and height are read by the engines on
    creation, every tick and on resize.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._listeners: List[ResizeListener] = []

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def add_listener(self, listener: ResizeListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ResizeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def resize(self, width: int, height: int) -> None:
        """Updates the size and notifies every resize listener."""
        if (width, height) == (self.width, self.height):
            return
        logging.debug(f"Viewport resized from {self.width}x{self.height} to {width}x{height}.")
        self.width = width
        self.height = height
        for listener in list(self._listeners):
            listener(width, height)


class PointerState:
    """Last known pointer coordinates. Only the latest value is kept."""

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = x
        self.y = y

    def update(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
