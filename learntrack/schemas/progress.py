"""
Progress tracking schemas for the learning tracker.

Defines Pydantic models for:
- Progress status of a single resource
- Partial changes applied through the progress store
- Aggregate statistics derived from all records
"""

from pydantic import BaseModel, Field, computed_field, model_validator
from typing import Any, Optional
from datetime import datetime
from enum import Enum


class ProgressStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        """Human-readable label ("in_progress" -> "In Progress")."""
        return self.value.replace("_", " ").title()


class ProgressRecord(BaseModel):
    """
    Progress of the current learner against one resource.

    Invariants (checked on every construction):
    - completed   => progress_percent == 100 and completed_at is set
    - not_started => progress_percent == 0 and completed_at is None
    - in_progress => completed_at is None
    """
    resource_id: str
    status: ProgressStatus = ProgressStatus.NOT_STARTED
    progress_percent: int = Field(default=0, ge=0, le=100)
    notes: Optional[str] = None
    time_spent_minutes: int = Field(default=0, ge=0)
    completed_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_status_consistency(self):
        if self.status == ProgressStatus.COMPLETED:
            if self.progress_percent != 100:
                raise ValueError("completed progress must be at 100%")
            if self.completed_at is None:
                raise ValueError("completed progress requires completed_at")
        else:
            if self.completed_at is not None:
                raise ValueError(f"{self.status.value} progress cannot have completed_at")
            if self.status == ProgressStatus.NOT_STARTED and self.progress_percent != 0:
                raise ValueError("not_started progress must be at 0%")
        return self


# Fields a change may explicitly reset to None
NULLABLE_FIELDS = {"notes", "completed_at"}


class ProgressChange(BaseModel):
    """Partial change to a ProgressRecord; only explicitly set fields apply."""
    status: Optional[ProgressStatus] = None
    progress_percent: Optional[int] = Field(default=None, ge=0, le=100)
    notes: Optional[str] = None
    time_spent_minutes: Optional[int] = Field(default=None, ge=0)
    completed_at: Optional[datetime] = None

    def changed_fields(self) -> dict[str, Any]:
        """Fields set by the caller, ready for a field-wise overwrite."""
        return {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None or name in NULLABLE_FIELDS
        }


class ProgressStats(BaseModel):
    """Counts and totals derived from the progress store."""
    completed: int = 0
    in_progress: int = 0
    not_started: int = 0
    total_time_minutes: int = 0

    @computed_field
    @property
    def total(self) -> int:
        return self.completed + self.in_progress + self.not_started

    @computed_field
    @property
    def completion_percent(self) -> float:
        if self.total == 0:
            return 0.0
        return round(self.completed / self.total * 100, 1)
