"""Core fixtures."""

from tests.fixtures.core.events import (
    create_event,
    STANDUP_DATE,
    STANDUP_EVENT,
)
from tests.fixtures.core.calendars import (
    create_calendar,
    EMPTY_CALENDAR,
)

__all__ = [
    "create_event",
    "STANDUP_DATE",
    "STANDUP_EVENT",
    "create_calendar",
    "EMPTY_CALENDAR",
]
