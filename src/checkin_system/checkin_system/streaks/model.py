from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


def _iso(d: Optional[date]) -> Optional[str]:
    return d.strftime("%Y-%m-%d") if d else None


@dataclass(frozen=True)
class StreakSummary:
    """Read-model: attendance streak of one worker as of `as_of`."""

    as_of: date
    current_streak: int
    longest_streak: int
    completed_days: int
    past_scheduled_days: int
    total_scheduled_days: int
    missed_schedule_dates: list[date] = field(default_factory=list)
    exception_dates: list[date] = field(default_factory=list)
    today_check_in_completed: bool = False
    today_check_in_pending: bool = False
    next_check_in_date: Optional[date] = None
    next_milestone: Optional[int] = None
    has_seven_day_badge: bool = False

    @property
    def missed_schedule_count(self) -> int:
        return len(self.missed_schedule_dates)

    @property
    def days_until_next_milestone(self) -> Optional[int]:
        if self.next_milestone is None:
            return None
        return self.next_milestone - self.current_streak

    def to_dict(self) -> dict:
        return {
            "currentStreak": self.current_streak,
            "longestStreak": self.longest_streak,
            "todayCheckInCompleted": self.today_check_in_completed,
            "todayCheckInPending": self.today_check_in_pending,
            "nextMilestone": self.next_milestone,
            "daysUntilNextMilestone": self.days_until_next_milestone,
            "hasSevenDayBadge": self.has_seven_day_badge,
            "totalScheduledDays": self.total_scheduled_days,
            "pastScheduledDays": self.past_scheduled_days,
            "completedDays": self.completed_days,
            "missedScheduleDates": [_iso(d) for d in self.missed_schedule_dates],
            "missedScheduleCount": self.missed_schedule_count,
            "exceptionDates": [_iso(d) for d in self.exception_dates],
            "nextCheckInDate": _iso(self.next_check_in_date),
        }
