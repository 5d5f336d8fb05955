from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Sequence

from ...absences.model import ExceptionPeriod, excused_dates
from ...core.constants import (
    BADGE_STREAK_DAYS,
    STREAK_LOOKBACK_DAYS,
    STREAK_MILESTONES,
    UPCOMING_SCHEDULE_DAYS,
)
from ...schedules.matching import find_next_scheduled_date, scheduled_dates_in_range
from ...schedules.model import ScheduleEntry
from ..model import StreakSummary
from .base import StreakCalculator


class StandardStreakCalculator(StreakCalculator):
    """Consecutive scheduled days with a check-in, scanned backward from today.

    Days without a schedule and excused days (in-effect exception periods)
    are transparent: they neither extend nor break a streak. A scheduled day
    without a check-in breaks it. Today, while still awaiting its check-in,
    is left out and reported as pending.
    """

    def __init__(
        self,
        *,
        lookback_days: int = STREAK_LOOKBACK_DAYS,
        upcoming_days: int = UPCOMING_SCHEDULE_DAYS,
        milestones: Sequence[int] = STREAK_MILESTONES,
    ):
        self._lookback_days = int(lookback_days)
        self._upcoming_days = int(upcoming_days)
        self._milestones = tuple(sorted(milestones))

    def calculate(
        self,
        *,
        entries: Sequence[ScheduleEntry],
        check_in_dates: Iterable[date],
        exceptions: Sequence[ExceptionPeriod],
        today: date,
    ) -> StreakSummary:
        checked_in = set(check_in_dates)
        scheduled = scheduled_dates_in_range(entries, today - timedelta(days=self._lookback_days), today)
        excused = excused_dates(scheduled, exceptions)

        today_pending = today in scheduled and today not in excused and today not in checked_in

        current_streak = 0
        longest_streak = 0
        run = 0
        anchored = False
        current_open = False

        for offset in range(self._lookback_days + 1):
            day = today - timedelta(days=offset)
            if day not in scheduled or day in excused:
                continue
            if day == today and today_pending:
                continue

            if day in checked_in:
                run += 1
                if not anchored:
                    anchored = True
                    current_open = True
                if current_open:
                    current_streak = run
                longest_streak = max(longest_streak, run)
            else:
                run = 0
                if anchored:
                    current_open = False

        countable = [d for d in scheduled if d not in excused]
        completed_days = sum(1 for d in countable if d in checked_in)
        missed = sorted((d for d in countable if d not in checked_in and d != today), reverse=True)

        # Starts tomorrow: a scheduled today is already in the past count.
        upcoming = scheduled_dates_in_range(
            entries, today + timedelta(days=1), today + timedelta(days=self._upcoming_days)
        )

        if today_pending:
            next_check_in = today
        else:
            next_check_in = find_next_scheduled_date(entries, today, max_days=self._upcoming_days)

        return StreakSummary(
            as_of=today,
            current_streak=current_streak,
            longest_streak=longest_streak,
            completed_days=completed_days,
            past_scheduled_days=len(scheduled),
            total_scheduled_days=len(scheduled) + len(upcoming),
            missed_schedule_dates=missed,
            exception_dates=sorted(excused),
            today_check_in_completed=today in scheduled and today in checked_in,
            today_check_in_pending=today_pending,
            next_check_in_date=next_check_in,
            next_milestone=next((m for m in self._milestones if m > current_streak), None),
            has_seven_day_badge=current_streak >= BADGE_STREAK_DAYS,
        )
