from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Event, EventInput


class EventRepository(Protocol):
    def list_all(self) -> Sequence[Event]:
        """Events ordered by ``event_date`` descending."""

        raise NotImplementedError

    def get_by_id(self, event_id: int) -> Optional[Event]:
        raise NotImplementedError

    def create_event(self, data: EventInput, *, created_by: Optional[int]) -> int:
        raise NotImplementedError

    def update_event(self, event_id: int, data: EventInput) -> bool:
        raise NotImplementedError

    def delete_by_id(self, event_id: int) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def count_on(self, day: date) -> int:
        raise NotImplementedError
