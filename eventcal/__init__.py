"""eventcal package.

An in-process calendar of named, time-bounded events with validated
mutation and chronologically ordered queries.
"""

from eventcal.config import CalendarSettings, configure_logging, get_settings
from eventcal.errors import EventError, InvalidEndTimeError, InvalidStartTimeError
from eventcal.event import Event
from eventcal.event_calendar import EventCalendar
from eventcal.identifiers import to_uuid

__all__ = [
    "CalendarSettings",
    "configure_logging",
    "get_settings",
    "EventError",
    "InvalidStartTimeError",
    "InvalidEndTimeError",
    "Event",
    "EventCalendar",
    "to_uuid",
]
