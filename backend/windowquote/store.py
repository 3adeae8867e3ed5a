"""In-memory estimate store and job schedule.

These are the thin state containers the pricing engine runs against: an
ordered list of saved estimates per estimator source (with undo by
position) and the calendar of scheduled jobs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING

from windowquote.exceptions import EstimateNotFoundError, InvalidScheduleError
from windowquote.models.enums import EstimatorSource
from windowquote.models.schedule import ScheduledJob

if TYPE_CHECKING:
    from uuid import UUID

    from windowquote.models.estimate import Estimate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemovedEstimate:
    """An estimate captured at deletion time so it can be put back."""

    index: int
    estimate: Estimate


class EstimateStore:
    """Ordered estimate lists, one per :class:`EstimatorSource`."""

    def __init__(self) -> None:
        self._estimates: dict[EstimatorSource, list[Estimate]] = {
            source: [] for source in EstimatorSource
        }

    def estimates(self, source: EstimatorSource) -> list[Estimate]:
        return list(self._estimates[source])

    def get(self, estimate_id: UUID, source: EstimatorSource) -> Estimate:
        """Look up an estimate by id.

        Raises:
            EstimateNotFoundError: If no estimate has that id.
        """
        index = self._index_of(estimate_id, source)
        if index is None:
            msg = f"No {source} estimate with id {estimate_id}"
            raise EstimateNotFoundError(msg)
        return self._estimates[source][index]

    def add(self, estimate: Estimate, source: EstimatorSource) -> None:
        self._estimates[source].append(estimate)
        logger.info("Added %s estimate %s (%s)", source, estimate.id, estimate.job_name)

    def append(self, estimate: Estimate, source: EstimatorSource) -> None:
        self._estimates[source].append(estimate)

    def update(
        self, estimate_id: UUID, updated: Estimate, source: EstimatorSource
    ) -> Estimate | None:
        """Replace an estimate's contents, keeping its id and created_at.

        Returns the stored estimate, or None if the id is unknown (nothing
        is changed in that case).
        """
        index = self._index_of(estimate_id, source)
        if index is None:
            logger.warning("Update skipped: no %s estimate %s", source, estimate_id)
            return None
        preserved = self._estimates[source][index]
        stored = updated.model_copy(
            update={"id": preserved.id, "created_at": preserved.created_at}
        )
        self._estimates[source][index] = stored
        return stored

    def remove(
        self, estimate_id: UUID, source: EstimatorSource
    ) -> RemovedEstimate | None:
        """Delete an estimate, returning its position for undo."""
        index = self._index_of(estimate_id, source)
        if index is None:
            return None
        estimate = self._estimates[source].pop(index)
        logger.info("Removed %s estimate %s at index %d", source, estimate_id, index)
        return RemovedEstimate(index=index, estimate=estimate)

    def insert(self, estimate: Estimate, index: int, source: EstimatorSource) -> None:
        """Insert at ``index``, clamped to the current list bounds."""
        estimates = self._estimates[source]
        safe_index = max(0, min(index, len(estimates)))
        estimates.insert(safe_index, estimate)

    def undo(self, removed: RemovedEstimate, source: EstimatorSource) -> None:
        """Put a removed estimate back where it was."""
        self.insert(removed.estimate, removed.index, source)

    def clear_all(self, source: EstimatorSource) -> None:
        self._estimates[source].clear()

    def _index_of(self, estimate_id: UUID, source: EstimatorSource) -> int | None:
        for index, estimate in enumerate(self._estimates[source]):
            if estimate.id == estimate_id:
                return index
        return None


class JobSchedule:
    """Calendar of estimates booked as jobs."""

    def __init__(self) -> None:
        self._jobs: list[ScheduledJob] = []

    def schedule(
        self,
        estimate_id: UUID,
        start: datetime,
        end: datetime,
        notes: str | None = None,
    ) -> ScheduledJob:
        """Book an estimate onto the calendar.

        Raises:
            InvalidScheduleError: If ``end`` is before ``start``.
        """
        if end < start:
            msg = f"Job end {end.isoformat()} is before start {start.isoformat()}"
            raise InvalidScheduleError(msg)
        job = ScheduledJob(
            estimate_id=estimate_id, start_date=start, end_date=end, notes=notes
        )
        self._jobs.append(job)
        logger.info("Scheduled estimate %s on %s", estimate_id, start.date())
        return job

    def unschedule(self, job_id: UUID) -> bool:
        for index, job in enumerate(self._jobs):
            if job.id == job_id:
                del self._jobs[index]
                return True
        return False

    def jobs_on(self, day: date) -> list[ScheduledJob]:
        """Jobs whose date span includes ``day``, earliest start first."""
        return sorted(
            (job for job in self._jobs if job.covers(day)),
            key=lambda job: job.start_date,
        )

    def jobs_for(self, estimate_id: UUID) -> list[ScheduledJob]:
        return [job for job in self._jobs if job.estimate_id == estimate_id]
