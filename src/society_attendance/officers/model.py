from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Officer:
    """An operator of the dashboard. Plain data, no DB access."""

    officer_id: int
    full_name: str
    email: str
    password_hash: str
    is_active: bool = True
    created_at: Optional[datetime] = None
