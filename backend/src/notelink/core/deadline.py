"""Per-request deadline shared between the HTTP layer and storage calls."""

import time
from contextvars import ContextVar
from typing import Optional

# Monotonic timestamp after which storage calls must give up
request_deadline: ContextVar[Optional[float]] = ContextVar("request_deadline", default=None)


def set_deadline(seconds: float):
    """Start a deadline for the current context, returns the reset token."""
    return request_deadline.set(time.monotonic() + seconds)


def remaining_time(default: float) -> float:
    """Seconds left before the current deadline, or ``default`` if none is set."""
    deadline = request_deadline.get()
    if deadline is None:
        return default
    return deadline - time.monotonic()
