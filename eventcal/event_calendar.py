"""Event calendar container."""

import bisect
import logging
from collections.abc import Iterator
from datetime import datetime
from itertools import groupby, islice
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, Field, PrivateAttr, TypeAdapter

from eventcal.event import Event
from eventcal.identifiers import to_uuid

logger = logging.getLogger(__name__)

IndexKey = tuple[datetime, datetime, UUID]

_event_list_adapter = TypeAdapter(list[Event])


class EventCalendar(BaseModel):
    """Holds events, indexed by identifier and by chronological order.

    ``events`` is the canonical store. A private index of (start, end, id)
    keys, kept sorted with bisect, refers back into it. Start and end are
    frozen on Event, so index keys stay valid for as long as the event is
    stored. Events sharing (start, end) are ordered by their current name and
    id when iterated, so renaming a stored event in place keeps iteration
    ordered by (start, end, name, id).

    Lookups hand back the stored Event objects themselves: renaming one
    obtained from get() is visible through events_in_range() and vice versa.

    Events must be added through add_event(); writing to ``events`` directly
    bypasses the chronological index.

    Args:
        events: Dict mapping event id to Event.
    """

    events: dict[UUID, Event] = Field(
        default_factory=dict, description="Event objects by ID"
    )

    _index: list[IndexKey] = PrivateAttr(default_factory=list)

    def model_post_init(self, __context: Any) -> None:
        """Key stored events by their own id and build the chronological index.

        Args:
            __context: Pydantic context (unused).
        """
        self.events = {event.id: event for event in self.events.values()}
        self._index = sorted(self._key_for(event) for event in self.events.values())

    @staticmethod
    def _key_for(event: Event) -> IndexKey:
        return (event.start, event.end, event.id)

    @property
    def event_count(self) -> int:
        """Number of events in the calendar."""
        return len(self.events)

    def __contains__(self, event_id: Any) -> bool:
        return to_uuid(event_id) in self.events

    def add_event(self, event: Event) -> bool:
        """Insert an event into the calendar.

        If an event with the same id is already stored it is replaced in both
        the id lookup and the chronological index.

        Args:
            event: Event to store. The calendar keeps this exact object.

        Returns:
            True if the id was new to the calendar, False if it replaced an
            existing event.
        """
        previous = self.events.get(event.id)
        if previous is not None:
            self._remove_key(self._key_for(previous))
            logger.info(f"Replacing event {event.id} ({previous.name!r} -> {event.name!r})")
        else:
            logger.debug(f"Adding event {event.id}: {event.get_summary()}")

        self.events[event.id] = event
        bisect.insort(self._index, self._key_for(event))
        return previous is None

    def _remove_key(self, key: IndexKey) -> None:
        """Remove one key from the chronological index.

        Raises:
            KeyError: If the key is not indexed.
        """
        position = bisect.bisect_left(self._index, key)
        if position == len(self._index) or self._index[position] != key:
            raise KeyError(f"Event {key[2]} missing from chronological index")
        del self._index[position]

    def _iter_ordered(self, stop: Optional[int] = None) -> Iterator[Event]:
        """Yield stored events in (start, end, name, id) order.

        Args:
            stop: Only consider the first ``stop`` index entries (None = all).
        """
        keys = islice(self._index, stop)
        for _, tied in groupby(keys, key=lambda k: (k[0], k[1])):
            group = [self.events[k[2]] for k in tied]
            if len(group) > 1:
                group.sort(key=lambda e: (e.name, e.id))
            yield from group

    def all_events(self) -> Iterator[Event]:
        """Iterate over every stored event in chronological order."""
        return self._iter_ordered()

    def events_in_range(self, start: datetime, end: datetime) -> Iterator[Event]:
        """Iterate over events with an endpoint inside [start, end].

        An event is included if its start OR its end falls within the window,
        both bounds inclusive. Events that begin before and end after the
        window are not included.

        Nothing is read until the first event is requested, so events added
        between the call and the start of iteration are included. Call again
        to iterate again. The calendar must not be modified once iteration
        has begun.

        Args:
            start: Beginning of the window.
            end: End of the window.

        Yields:
            Stored events in chronological order.
        """
        # Events starting after the window cannot end inside it either.
        stop = bisect.bisect_right(self._index, end, key=lambda k: k[0])
        for event in self._iter_ordered(stop):
            if start <= event.start <= end or start <= event.end <= end:
                yield event

    def first_event(self) -> Optional[Event]:
        """Return the chronologically earliest event, or None if empty."""
        return next(self._iter_ordered(), None)

    def get(self, event_id: Any) -> Optional[Event]:
        """Look up an event by identifier.

        Args:
            event_id: A UUID or anything to_uuid() accepts.

        Returns:
            The stored Event, or None if no event has that id.

        Raises:
            TypeError: If event_id cannot represent an identifier.
            ValueError: If event_id is a malformed identifier.
        """
        return self.events.get(to_uuid(event_id))

    def validate_state(self) -> list[str]:
        """Check that the id lookup and chronological index agree.

        Returns:
            List of validation error messages (empty list if valid).
        """
        errors = []

        indexed_ids = [key[2] for key in self._index]
        if len(indexed_ids) != len(set(indexed_ids)):
            duplicates = {i for i in indexed_ids if indexed_ids.count(i) > 1}
            errors.append(f"Duplicate ids in chronological index: {duplicates}")

        missing = set(self.events) - set(indexed_ids)
        if missing:
            errors.append(f"Events missing from chronological index: {missing}")

        dangling = set(indexed_ids) - set(self.events)
        if dangling:
            errors.append(f"Index references unknown events: {dangling}")

        if any(a > b for a, b in zip(self._index, self._index[1:])):
            errors.append("Chronological index is not sorted")

        for event_id, event in self.events.items():
            if event.id != event_id:
                errors.append(f"Event {event.id} stored under id {event_id}")
            if not Event.times_valid(event.start, event.end):
                errors.append(
                    f"Event {event_id} has invalid time range: {event.start} to {event.end}"
                )
            elif event_id not in missing and self._key_for(event) not in self._index:
                errors.append(f"Index key for event {event_id} is out of date")

        return errors

    def serialize(self) -> str:
        """Encode all events, in chronological order, as a JSON array."""
        return _event_list_adapter.dump_json(list(self.all_events())).decode()
