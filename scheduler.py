# scheduler.py
"""
Cooperative, single-threaded scheduling substrate.

The main loop owns one FrameScheduler. Every frame it advances the
scheduler's millisecond clock by the time the pygame clock reports,
which fires any due one-shot timers, and then runs the frame callbacks
that were requested during the previous frame. Nothing here blocks and
nothing runs concurrently: callbacks interleave on the loop's thread.
"""
import heapq
import itertools
import logging
from typing import Callable, List, Optional, Tuple

# --- Data Contracts ---
#
# class Handle:
#   - cancel(self) -> None: marks the callback as revoked. Idempotent.
#   - cancelled: bool
#
# class FrameScheduler:
#   - request_frame(self, callback) -> Handle
#     - Side Effects: callback runs once on the next run_frame().
#   - call_later(self, delay_ms: float, callback) -> Handle
#     - Side Effects: callback runs once advance() has moved now_ms
#       to or past now_ms + delay_ms.
#   - advance(self, elapsed_ms: float) -> int
#     - Outputs: number of timers fired.
#     - Invariants: timers fire in due-time order, ties in the order
#       they were scheduled.
#   - run_frame(self) -> int
#     - Outputs: number of frame callbacks run.
#     - Invariants: callbacks requested while a frame runs are deferred
#       to the next frame.

Callback = Callable[[], None]


class Handle:
    """A revocable reference to one scheduled callback."""

    def __init__(self, callback: Callback):
        self._callback = callback
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def _run(self) -> None:
        if self._cancelled:
            return
        # A handle fires at most once.
        self._cancelled = True
        self._callback()


class FrameScheduler:
    """
    Host scheduling primitives: "run on next frame" and "run after delay".
    """

    def __init__(self, start_ms: float = 0.0):
        self.now_ms = float(start_ms)
        self._frame_queue: List[Handle] = []
        self._timers: List[Tuple[float, int, Handle]] = []
        self._sequence = itertools.count()
        self.frame_count = 0

    @property
    def pending_frames(self) -> int:
        return sum(1 for handle in self._frame_queue if not handle.cancelled)

    @property
    def pending_timers(self) -> int:
        return sum(1 for _, _, handle in self._timers if not handle.cancelled)

    @property
    def next_timer_due(self) -> Optional[float]:
        """Due time of the earliest live timer, or None."""
        live = [due for due, _, handle in self._timers if not handle.cancelled]
        return min(live) if live else None

    def request_frame(self, callback: Callback) -> Handle:
        handle = Handle(callback)
        self._frame_queue.append(handle)
        return handle

    def call_later(self, delay_ms: float, callback: Callback) -> Handle:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}.")
        handle = Handle(callback)
        due = self.now_ms + delay_ms
        heapq.heappush(self._timers, (due, next(self._sequence), handle))
        return handle

    def advance(self, elapsed_ms: float) -> int:
        """
        Moves the clock forward and fires every timer that became due.

        Timers armed by a firing callback fire in the same call if their
        due time has also been reached.
        """
        target = self.now_ms + max(0.0, float(elapsed_ms))
        fired = 0
        while self._timers and self._timers[0][0] <= target:
            due, _, handle = heapq.heappop(self._timers)
            if handle.cancelled:
                continue
            # Callbacks observe the clock at their own due time.
            self.now_ms = max(self.now_ms, due)
            self._invoke(handle, "timer")
            fired += 1
        self.now_ms = target
        return fired

    def run_frame(self) -> int:
        """Runs the callbacks requested since the previous frame."""
        queue, self._frame_queue = self._frame_queue, []
        ran = 0
        for handle in queue:
            if handle.cancelled:
                continue
            self._invoke(handle, "frame")
            ran += 1
        self.frame_count += 1
        return ran

    def _invoke(self, handle: Handle, kind: str) -> None:
        try:
            handle._run()
        except Exception:
            logging.exception(f"Unhandled error in scheduled {kind} callback.")


class Debouncer:
    """
    Delays `func` until calls have been quiet for `wait_ms`.

    Each call re-arms the timer; only the arguments of the last call
    before the quiet period are passed on.
    """

    def __init__(self, scheduler: FrameScheduler, wait_ms: float, func: Callable[..., None]):
        self.scheduler = scheduler
        self.wait_ms = wait_ms
        self.func = func
        self._handle: Optional[Handle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None and not self._handle.cancelled

    def __call__(self, *args, **kwargs) -> None:
        self.cancel()

        def later():
            self._handle = None
            self.func(*args, **kwargs)

        self._handle = self.scheduler.call_later(self.wait_ms, later)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
