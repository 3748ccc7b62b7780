"""Exceptions raised by Event mutators.

Mutators never modify the Event they are called on, so when one of these is
raised the caller's original Event is still valid and unchanged.
"""

from datetime import datetime


class EventError(ValueError):
    """Base class for rejected event time spans.

    Args:
        start: Start of the rejected candidate span.
        end: End of the rejected candidate span.
        message: Human-readable description of the problem.
    """

    def __init__(self, start: datetime, end: datetime, message: str):
        self.start = start
        self.end = end
        self.message = message
        super().__init__(message)


class InvalidStartTimeError(EventError):
    """Raised when a new start is not strictly before the current end."""

    def __init__(self, start: datetime, end: datetime):
        super().__init__(
            start,
            end,
            f"Start time {start.isoformat()} must be before end time {end.isoformat()}",
        )


class InvalidEndTimeError(EventError):
    """Raised when a new end is not strictly after the current start."""

    def __init__(self, start: datetime, end: datetime):
        super().__init__(
            start,
            end,
            f"End time {end.isoformat()} must be after start time {start.isoformat()}",
        )
