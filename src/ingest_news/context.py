"""Deadline and cancellation handling for a refresh run."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field


@dataclass
class RefreshContext:
    """Carries a deadline and a cancel flag through a refresh.

    Fetches check the context before starting and bound their request
    timeout by the remaining time.
    """
    deadline: float | None = None
    cancel_event: threading.Event = field(default_factory=threading.Event)

    @classmethod
    def background(cls) -> RefreshContext:
        return cls()

    @classmethod
    def with_timeout(
        cls,
        seconds: float | None,
        cancel_event: threading.Event | None = None,
    ) -> RefreshContext:
        deadline = time.monotonic() + seconds if seconds is not None else None
        if cancel_event is None:
            cancel_event = threading.Event()
        return cls(deadline=deadline, cancel_event=cancel_event)

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None when there is none."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def done(self) -> bool:
        return self.cancelled() or self.expired()

    def cancel(self) -> None:
        self.cancel_event.set()
