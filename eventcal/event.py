"""Calendar event model."""

from datetime import date, datetime, time, timedelta
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, model_validator

from eventcal.config import CalendarSettings
from eventcal.errors import InvalidEndTimeError, InvalidStartTimeError


class Event(BaseModel):
    """A named, time-bounded entry on a calendar.

    Events are ordered by (start, end, name, id), which is also the field
    declaration order. ``start``, ``end`` and ``id`` are frozen: the set_*
    mutators validate the new span and return a new Event, leaving the
    original untouched. ``name`` is the only field that may change in place.

    Args:
        start: When the event begins.
        end: When the event ends (strictly after start).
        name: Display name of the event.
        id: Unique identifier of the event.
    """

    start: datetime = Field(frozen=True, description="When the event begins")
    end: datetime = Field(frozen=True, description="When the event ends")
    name: str = Field(description="Display name of the event")
    id: UUID = Field(
        default_factory=uuid4, frozen=True, description="Unique identifier"
    )

    @model_validator(mode="after")
    def check_span(self) -> "Event":
        """Reject spans whose end is not strictly after their start.

        Returns:
            The validated Event.

        Raises:
            ValueError: If the duration is not at least one whole second.
        """
        if not self.times_valid(self.start, self.end):
            raise ValueError(
                f"end ({self.end.isoformat()}) must be after start ({self.start.isoformat()})"
            )
        return self

    @staticmethod
    def times_valid(start: datetime, end: datetime) -> bool:
        """Check whether (start, end) would form a valid span.

        The duration is truncated toward zero to whole seconds, so a span
        shorter than one second is invalid.

        Args:
            start: Candidate start.
            end: Candidate end.

        Returns:
            True if end is strictly after start.
        """
        return int((end - start).total_seconds()) > 0

    @classmethod
    def new(
        cls,
        name: str,
        on_date: date,
        settings: Optional[CalendarSettings] = None,
    ) -> "Event":
        """Create a full-day event with a fresh identifier.

        By default the event runs from 00:00:00 to 23:59:59 on ``on_date``;
        the bounds come from ``settings.day_start`` and ``settings.day_end``.

        Args:
            name: Display name of the event.
            on_date: Day the event takes place on.
            settings: Settings supplying the day bounds (defaults to 00:00:00-23:59:59).

        Returns:
            A new Event.
        """
        if settings is None:
            settings = CalendarSettings()

        if isinstance(on_date, datetime):
            on_date = on_date.date()

        return cls(
            start=datetime.combine(on_date, settings.day_start),
            end=datetime.combine(on_date, settings.day_end),
            name=name,
        )

    @property
    def duration(self) -> timedelta:
        """Length of the event."""
        return self.end - self.start

    @property
    def sort_key(self) -> tuple[datetime, datetime, str, UUID]:
        """Key defining the chronological order of events."""
        return (self.start, self.end, self.name, self.id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def set_start(self, start: datetime) -> "Event":
        """Return a copy of this event with a new start.

        Args:
            start: New start date and time.

        Returns:
            A new Event with the same end, name and id.

        Raises:
            InvalidStartTimeError: If start is not strictly before end.
        """
        if not self.times_valid(start, self.end):
            raise InvalidStartTimeError(start, self.end)
        return self.model_copy(update={"start": start})

    def set_start_time(self, start_time: time) -> "Event":
        """Return a copy of this event starting at a new time on the same day.

        Raises:
            InvalidStartTimeError: If the new start is not strictly before end.
        """
        return self.set_start(datetime.combine(self.start.date(), start_time))

    def set_start_date(self, start_date: date) -> "Event":
        """Return a copy of this event starting on a new day at the same time.

        Raises:
            InvalidStartTimeError: If the new start is not strictly before end.
        """
        return self.set_start(datetime.combine(start_date, self.start.time()))

    def set_end(self, end: datetime) -> "Event":
        """Return a copy of this event with a new end.

        Args:
            end: New end date and time.

        Returns:
            A new Event with the same start, name and id.

        Raises:
            InvalidEndTimeError: If end is not strictly after start.
        """
        if not self.times_valid(self.start, end):
            raise InvalidEndTimeError(self.start, end)
        return self.model_copy(update={"end": end})

    def set_end_time(self, end_time: time) -> "Event":
        """Return a copy of this event ending at a new time on the same day.

        Raises:
            InvalidEndTimeError: If the new end is not strictly after start.
        """
        return self.set_end(datetime.combine(self.end.date(), end_time))

    def set_end_date(self, end_date: date) -> "Event":
        """Return a copy of this event ending on a new day at the same time.

        Raises:
            InvalidEndTimeError: If the new end is not strictly after start.
        """
        return self.set_end(datetime.combine(end_date, self.end.time()))

    def set_name(self, name: str) -> None:
        """Rename this event in place."""
        self.name = name

    def serialize(self) -> str:
        """Encode this event as a JSON object.

        Keys appear in field order: start, end, name, id.

        Returns:
            JSON text.
        """
        return self.model_dump_json()

    @classmethod
    def deserialize(cls, data: str | bytes) -> "Event":
        """Decode an event produced by serialize().

        Args:
            data: JSON text.

        Returns:
            The decoded Event.

        Raises:
            pydantic.ValidationError: If the JSON is malformed or the span is invalid.
        """
        return cls.model_validate_json(data)

    def get_summary(self) -> str:
        """One-line description of the span and name, used in log messages.

        Format: "[{start} - {end}] {name}"
        """
        start_str = self.start.strftime("%Y-%m-%d %H:%M:%S")
        end_str = self.end.strftime("%Y-%m-%d %H:%M:%S")
        return f"[{start_str} - {end_str}] {self.name}"
