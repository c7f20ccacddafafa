# feedback.py
"""
User feedback: transient toast messages and the contact form that
reports through them. Submission is simulated; nothing leaves the
process.
"""
import logging
import re
from typing import Any, Dict, Optional

from constants import DEFAULT_TOAST_DURATION_MS, EMAIL_PATTERN
from scheduler import FrameScheduler, Handle

REQUIRED_FIELDS = ("firstName", "lastName", "email", "message")
EMAIL_RE = re.compile(EMAIL_PATTERN)


class ToastManager:
    """
    Shows one toast at a time on a surface exposing show(message, kind)
    and hide(). A new toast replaces the visible one and restarts its timer.
    """
    def __init__(self, scheduler: FrameScheduler, surface: Optional[Any]):
        self.scheduler = scheduler
        self.surface = surface
        self.message: Optional[str] = None
        self.kind: Optional[str] = None
        self._handle: Optional[Handle] = None

    @property
    def visible(self) -> bool:
        return self.message is not None

    def show(self, message: str, kind: str = "success", duration_ms: float = DEFAULT_TOAST_DURATION_MS) -> None:
        if self.surface is None:
            return
        if self._handle is not None:
            self._handle.cancel()

        self.message = message
        self.kind = kind
        self.surface.show(message, kind)
        self._handle = self.scheduler.call_later(duration_ms, self.hide)
        logging.info(f"Toast ({kind}): {message}")

    def hide(self) -> None:
        if self.surface is None:
            return
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self.message = None
        self.kind = None
        self.surface.hide()


class ContactForm:
    """Validates contact submissions and reports the outcome as a toast."""

    def __init__(self, toast_manager: ToastManager):
        self.toast_manager = toast_manager
        self.submissions = 0

    def submit(self, data: Dict[str, Any]) -> bool:
        """
        Validates `data` and simulates sending it.

        Returns:
            bool: True if the submission was accepted.
        """
        fields = {name: (data.get(name) or "").strip() for name in REQUIRED_FIELDS}

        missing = [name for name, value in fields.items() if not value]
        if missing:
            logging.warning(f"Contact form rejected. Missing fields: {', '.join(missing)}.")
            self.toast_manager.show("Please fill in all required fields.", "error")
            return False

        if not EMAIL_RE.match(fields["email"]):
            logging.warning("Contact form rejected. Invalid email address.")
            self.toast_manager.show("Please enter a valid email address.", "error")
            return False

        self.submissions += 1
        logging.info(f"Contact form accepted (simulated) for company '{data.get('company') or '-'}'.")
        self.toast_manager.show(
            "Thank you for your message! We will get back to you soon.",
            "success"
        )
        return True
