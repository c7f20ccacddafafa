# typewriter.py
"""
Rotating headline typewriter.

The engine reveals one character at a time, dwells on the completed
phrase, erases it one character at a time and moves on to the next
phrase, forever. The delay before each step depends on the transition
just taken, so every step re-arms a one-shot timer instead of using a
fixed-period one.
"""
import logging
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional, Sequence, Tuple

from config import TypingConfig
from scheduler import FrameScheduler, Handle

# --- Data Contracts ---
#
# class TypewriterEngine:
#   - __init__(self, surface, phrases, timing, scheduler, reduced_motion):
#     - Inputs:
#       - surface: render sink with set_text(text), or None.
#       - phrases: non-empty sequence of non-empty strings.
#       - timing: TypingConfig with the four step delays in ms.
#     - Side Effects: Under reduced motion, shows phrases[0] once and
#       schedules nothing. Otherwise performs the first step immediately.
#     - Raises: ValueError on an empty phrase list or an empty phrase.
#
#   - step(self) -> None
#     - Invariants: the rendered text is always
#       phrases[phrase_index][:char_count].
#
#   - pause(self), resume(self), dispose(self)


class Mode(Enum):
    TYPING = "typing"
    DELETING = "deleting"


class Delay(Enum):
    TYPE = "type_delay"
    DELETE = "delete_delay"
    PAUSE = "pause_delay"
    CYCLE = "cycle_delay"


class Transition(NamedTuple):
    next_mode: Mode
    delay: Delay
    advance_phrase: bool


# Keyed by (mode, boundary reached). The boundary is "phrase fully typed"
# while typing and "phrase fully erased" while deleting.
TRANSITIONS: Dict[Tuple[Mode, bool], Transition] = {
    (Mode.TYPING, False): Transition(Mode.TYPING, Delay.TYPE, False),
    (Mode.TYPING, True): Transition(Mode.DELETING, Delay.PAUSE, False),
    (Mode.DELETING, False): Transition(Mode.DELETING, Delay.DELETE, False),
    (Mode.DELETING, True): Transition(Mode.TYPING, Delay.CYCLE, True),
}


def next_transition(mode: Mode, char_count: int, phrase_length: int) -> Transition:
    """Looks up the transition for a step that just produced `char_count`."""
    if mode is Mode.TYPING:
        boundary = char_count >= phrase_length
    else:
        boundary = char_count <= 0
    return TRANSITIONS[(mode, boundary)]


class TypewriterEngine:
    """
    Types and erases a cyclic list of phrases onto a text surface.
    """
    def __init__(
        self,
        surface: Any,
        phrases: Sequence[str],
        timing: TypingConfig,
        scheduler: FrameScheduler,
        reduced_motion: bool = False,
    ):
        if not phrases:
            raise ValueError("TypewriterEngine requires at least one phrase.")
        if any(not phrase for phrase in phrases):
            raise ValueError("TypewriterEngine phrases must be non-empty strings.")

        self.surface = surface
        self.phrases = tuple(phrases)
        self.timing = timing
        self.scheduler = scheduler

        self.phrase_index = 0
        self.char_count = 0
        self.mode = Mode.TYPING
        self.paused = False
        self.step_count = 0
        self._handle: Optional[Handle] = None
        self._disposed = False

        if surface is None:
            logging.info("No headline surface available. Typewriter stays inactive.")
            return
        if reduced_motion:
            logging.info("Reduced motion requested. Showing the first phrase statically.")
            self.char_count = len(self.phrases[0])
            self.surface.set_text(self.phrases[0])
            return

        logging.info(f"Typewriter started with {len(self.phrases)} phrases.")
        self.step()

    @property
    def text(self) -> str:
        return self.phrases[self.phrase_index][:self.char_count]

    def delay_for(self, delay: Delay) -> float:
        return getattr(self.timing, delay.value)

    def step(self) -> None:
        """Reveals or removes one character and re-arms the next step."""
        self._handle = None
        if self._disposed or self.paused or self.surface is None:
            return

        phrase = self.phrases[self.phrase_index]
        char_count = self.char_count + (1 if self.mode is Mode.TYPING else -1)
        try:
            self.surface.set_text(phrase[:char_count])
        except Exception:
            # State is committed only after a successful render.
            logging.exception("Typewriter step failed. Retrying after the typing delay.")
            self._handle = self.scheduler.call_later(self.timing.type_delay, self.step)
            return

        transition = next_transition(self.mode, char_count, len(phrase))
        self.char_count = char_count
        self.step_count += 1
        self.mode = transition.next_mode
        if transition.advance_phrase:
            self.phrase_index = (self.phrase_index + 1) % len(self.phrases)
            logging.debug(f"Typewriter moving to phrase {self.phrase_index}.")

        self._handle = self.scheduler.call_later(self.delay_for(transition.delay), self.step)

    def pause(self) -> None:
        """The pending step will observe the flag and end the chain."""
        if self._disposed:
            return
        self.paused = True
        logging.info("Typewriter paused.")

    def resume(self) -> None:
        """Clears the pause flag and performs one step right away."""
        if self._disposed or not self.paused:
            return
        self.paused = False
        # A step armed before pause() may not have fired yet.
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        logging.info("Typewriter resumed.")
        self.step()

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        logging.info(f"Typewriter disposed after {self.step_count} steps.")
