"""Scheduled job model linking an estimate to calendar dates."""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, model_validator


class ScheduledJob(BaseModel):
    """A saved estimate booked onto the calendar."""

    id: UUID = Field(default_factory=uuid4)
    estimate_id: UUID
    start_date: datetime
    end_date: datetime
    notes: str | None = None

    @model_validator(mode="after")
    def start_le_end(self) -> ScheduledJob:
        if self.end_date < self.start_date:
            msg = (
                f"end_date must not precede start_date, "
                f"got {self.start_date.isoformat()} > {self.end_date.isoformat()}"
            )
            raise ValueError(msg)
        return self

    def covers(self, day: date) -> bool:
        """Whether the job's date span includes ``day``."""
        return self.start_date.date() <= day <= self.end_date.date()
