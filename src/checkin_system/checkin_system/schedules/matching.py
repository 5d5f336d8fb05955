"""Pure schedule-matching rules shared by the resolver, next-shift search and streaks.

Precedence for a given date: an active date-scoped entry for that exact date
wins; otherwise an active recurring entry for the weekday that is valid on
the date. Ties go to the earliest start time.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import day_of_week, iter_days
from .model import ScheduleEntry


def _earliest(entries: Iterable[ScheduleEntry]) -> Optional[ScheduleEntry]:
    return min(entries, key=lambda e: e.start_minutes, default=None)


def pick_date_scoped(entries: Iterable[ScheduleEntry], target: date) -> Optional[ScheduleEntry]:
    return _earliest(e for e in entries if e.is_active and not e.is_recurring and e.scheduled_date == target)


def pick_recurring(entries: Iterable[ScheduleEntry], target: date) -> Optional[ScheduleEntry]:
    weekday = day_of_week(target)
    return _earliest(
        e for e in entries if e.is_active and e.is_recurring and e.day_of_week == weekday and e.is_valid_on(target)
    )


def pick_entry_for_date(entries: Sequence[ScheduleEntry], target: date) -> Optional[ScheduleEntry]:
    return pick_date_scoped(entries, target) or pick_recurring(entries, target)


def scheduled_dates_in_range(entries: Sequence[ScheduleEntry], start: date, end: date) -> set[date]:
    """Every date in [start, end] on which some entry applies."""
    if not entries:
        return set()
    return {d for d in iter_days(start, end) if pick_entry_for_date(entries, d) is not None}


def find_next_occurrence(
    entries: Sequence[ScheduleEntry],
    from_date: date,
    *,
    max_days: int,
) -> Optional[tuple[date, ScheduleEntry]]:
    """Next (date, entry) at or after `from_date`, from entries already fetched in bulk.

    Date-scoped entries are checked first: when any exist on or after
    `from_date`, the earliest of them is returned. Otherwise recurring entries
    are scanned day by day for up to `max_days` days.
    """
    upcoming: list[ScheduleEntry] = []
    recurring_by_day: dict[int, list[ScheduleEntry]] = defaultdict(list)

    for entry in entries:
        if not entry.is_active:
            continue
        if entry.is_recurring:
            recurring_by_day[entry.day_of_week].append(entry)
        elif entry.scheduled_date >= from_date:
            upcoming.append(entry)

    if upcoming:
        first = min(upcoming, key=lambda e: (e.scheduled_date, e.start_minutes))
        return first.scheduled_date, first

    for offset in range(max_days + 1):
        check_date = from_date + timedelta(days=offset)
        candidates = recurring_by_day.get(day_of_week(check_date))
        if not candidates:
            continue

        entry = _earliest(e for e in candidates if e.is_valid_on(check_date))
        if entry is not None:
            return check_date, entry

    return None


def find_next_scheduled_date(entries: Sequence[ScheduleEntry], after: date, *, max_days: int) -> Optional[date]:
    """First date strictly after `after` (within `max_days`) on which some entry applies."""
    for offset in range(1, max_days + 1):
        check_date = after + timedelta(days=offset)
        if pick_entry_for_date(entries, check_date) is not None:
            return check_date
    return None
