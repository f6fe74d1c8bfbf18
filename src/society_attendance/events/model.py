from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Event:
    """Domain entity: a dated activity attendance is recorded for."""

    event_id: int
    name: str
    description: Optional[str]
    event_date: date
    created_by: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return f"{self.name} - {self.event_date.strftime('%m/%d/%Y')}"


@dataclass(frozen=True)
class EventInput:
    name: str
    description: Optional[str]
    event_date: date
