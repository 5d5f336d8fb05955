from __future__ import annotations

from dataclasses import dataclass

from .absences.mysql_exception_repository import MySQLExceptionRepository
from .absences.repository import ExceptionRepository
from .checkins.mysql_checkin_repository import MySQLCheckInRepository
from .checkins.repository import CheckInRepository
from .checkins.service import CheckInService
from .core.constants import NEXT_SHIFT_MAX_DAYS, STREAK_LOOKBACK_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.repository import ScheduleRepository
from .schedules.service import ShiftService
from .streaks.service import StreakService


@dataclass(frozen=True)
class Container:
    schedules_repo: ScheduleRepository
    checkins_repo: CheckInRepository
    exceptions_repo: ExceptionRepository

    shift_service: ShiftService
    checkin_service: CheckInService
    streak_service: StreakService


def build_services(
    *,
    schedules_repo: ScheduleRepository,
    checkins_repo: CheckInRepository,
    exceptions_repo: ExceptionRepository,
    max_days_ahead: int = NEXT_SHIFT_MAX_DAYS,
    lookback_days: int = STREAK_LOOKBACK_DAYS,
) -> Container:
    """Wire services over any repository implementations (MySQL or in-memory)."""
    shift_service = ShiftService(schedules_repo, max_days_ahead=max_days_ahead)
    checkin_service = CheckInService(checkins_repo, schedules_repo, shift_service, exceptions_repo)
    streak_service = StreakService(schedules_repo, checkins_repo, exceptions_repo, lookback_days=lookback_days)

    return Container(
        schedules_repo=schedules_repo,
        checkins_repo=checkins_repo,
        exceptions_repo=exceptions_repo,
        shift_service=shift_service,
        checkin_service=checkin_service,
        streak_service=streak_service,
    )


def build_container(*, db_config: dict, **tuning) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return build_services(
        schedules_repo=MySQLScheduleRepository(conn),
        checkins_repo=MySQLCheckInRepository(conn),
        exceptions_repo=MySQLExceptionRepository(conn),
        **tuning,
    )
