from __future__ import annotations

from enum import Enum


class ShiftType(str, Enum):
    """Shift category derived from shift start/end times."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    NIGHT = "night"
    FLEXIBLE = "flexible"


class ScheduleSource(str, Enum):
    """Where a resolved shift came from."""

    TEAM_LEADER = "team_leader"
    NONE = "none"


class Readiness(str, Enum):
    """Self-reported readiness submitted with a daily check-in."""

    GREEN = "Green"
    YELLOW = "Yellow"
    RED = "Red"


class ExceptionType(str, Enum):
    """Reason category of an exception (excused absence) period."""

    TRANSFER = "transfer"
    ACCIDENT = "accident"
    INJURY = "injury"
    MEDICAL_LEAVE = "medical_leave"
    OTHER = "other"
