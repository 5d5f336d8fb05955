from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import ScheduleEntry


class ScheduleRepository(Protocol):
    def list_active_for_worker(
        self,
        *,
        worker_id: str,
        scheduled_date: Optional[date] = None,
        day_of_week: Optional[int] = None,
    ) -> Sequence[ScheduleEntry]:
        """Active entries of a worker, ordered by start_time.

        `scheduled_date` restricts to date-scoped entries on that date,
        `day_of_week` to recurring entries on that weekday. With neither,
        every active entry is returned (bulk read).
        Raises PersistenceError when the store fails.
        """

        raise NotImplementedError

    def deactivate_all_for_worker(self, *, worker_id: str) -> int:
        """Deactivate every active entry of a worker. Returns the count."""

        raise NotImplementedError
