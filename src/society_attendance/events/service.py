from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import NotFoundError, ValidationError
from .model import Event, EventInput
from .repository import EventRepository

logger = logging.getLogger(__name__)


def validate_event_form(form: Mapping[str, str]) -> EventInput:
    name = (form.get("name") or "").strip()
    event_date_s = (form.get("event_date") or "").strip()
    if not name or not event_date_s:
        raise ValidationError("Please fill in required fields")
    if len(name) > 200:
        raise ValidationError("Event name is too long")
    try:
        event_date = parse_iso_date(event_date_s)
    except ValueError:
        raise ValidationError("Invalid event date")

    description = (form.get("description") or "").strip() or None
    return EventInput(name=name, description=description, event_date=event_date)


class EventService:
    def __init__(self, events: EventRepository):
        self._events = events

    def list_events(self) -> Sequence[Event]:
        return self._events.list_all()

    def get_event(self, event_id: int) -> Event:
        event = self._events.get_by_id(event_id)
        if not event:
            raise NotFoundError("Event not found")
        return event

    def create_event(self, form: Mapping[str, str], *, created_by: Optional[int]) -> int:
        data = validate_event_form(form)
        event_id = self._events.create_event(data, created_by=created_by)
        logger.info("Created event %r on %s (id=%s)", data.name, data.event_date, event_id)
        return event_id

    def update_event(self, event_id: int, form: Mapping[str, str]) -> None:
        data = validate_event_form(form)
        self.get_event(event_id)
        self._events.update_event(event_id, data)

    def delete_event(self, event_id: int) -> None:
        self.get_event(event_id)
        if not self._events.delete_by_id(event_id):
            raise ValidationError("Failed to delete event")
        logger.info("Deleted event id=%s", event_id)
