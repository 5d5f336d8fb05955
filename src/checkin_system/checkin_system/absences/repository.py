from __future__ import annotations

from typing import Protocol, Sequence

from .model import ExceptionPeriod


class ExceptionRepository(Protocol):
    def list_for_worker(self, *, worker_id: str) -> Sequence[ExceptionPeriod]:
        """Every exception period of a worker, active or not."""

        raise NotImplementedError
