from __future__ import annotations

from enum import Enum


class Program(str, Enum):
    """Degree programs accepted on the roster."""

    BSCS = "BSCS"
    BSIT = "BSIT"
    BSIS = "BSIS"
    BTVTED_CSS = "BTVTED-CSS"

    @classmethod
    def values(cls) -> list[str]:
        return [p.value for p in cls]


class AttendanceSession(str, Enum):
    """Time-of-day partition; each allows one time-in/time-out cycle per event."""

    MORNING = "morning"
    AFTERNOON = "afternoon"

    @classmethod
    def for_hour(cls, hour: int, *, afternoon_start_hour: int) -> "AttendanceSession":
        return cls.MORNING if hour < afternoon_start_hour else cls.AFTERNOON


class ScanAction(str, Enum):
    TIMED_IN = "TIMED IN"
    TIMED_OUT = "TIMED OUT"
