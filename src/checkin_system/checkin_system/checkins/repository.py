from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import CheckInPayload, CheckInRecord, ShiftSnapshot


class CheckInRepository(Protocol):
    def list_dates(self, *, worker_id: str, start: date, end: date) -> Sequence[date]:
        """Dates in [start, end] on which the worker checked in."""

        raise NotImplementedError

    def get_for_worker_and_date(self, *, worker_id: str, check_in_date: date) -> Optional[CheckInRecord]:
        raise NotImplementedError

    def upsert(
        self,
        *,
        worker_id: str,
        check_in_date: date,
        check_in_time: str,
        payload: CheckInPayload,
        shift: ShiftSnapshot,
    ) -> CheckInRecord:
        """Create the day's check-in, or overwrite it on re-submission."""

        raise NotImplementedError
