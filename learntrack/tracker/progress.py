"""
ProgressStore - Session-local progress against catalog resources.

Holds one ProgressRecord per resource ID:
- Seeded once at session start
- Mutated only through update()
- Never persisted; discarded with the session
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Union

from learntrack.schemas import (
    ProgressStatus,
    ProgressRecord,
    ProgressChange,
    ProgressStats,
)
from learntrack.utils import load_progress

logger = logging.getLogger(__name__)


class ProgressStore:
    """
    In-memory progress store with a single mutation entry point.

    The store is owned by the session and passed by reference to the views
    and cards that read or change it.
    """

    def __init__(
        self,
        records: Iterable[ProgressRecord],
        now: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize progress store.

        Args:
            records: Starting records, one per resource ID
            now: Clock used to stamp completions
        """
        self._now = now
        self._records: dict[str, ProgressRecord] = {}
        for record in records:
            if record.resource_id in self._records:
                raise ValueError(f"Duplicate progress record for resource {record.resource_id}")
            self._records[record.resource_id] = record

    @classmethod
    def from_seed(
        cls,
        seed_path: Optional[Path] = None,
        now: Callable[[], datetime] = datetime.now,
    ) -> "ProgressStore":
        """Build the store from the seed YAML."""
        return cls(load_progress(seed_path), now=now)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ProgressRecord]:
        return iter(self._records.values())

    def __contains__(self, resource_id: str) -> bool:
        return resource_id in self._records

    def get(self, resource_id: str) -> Optional[ProgressRecord]:
        """Get the progress record for a resource, or None."""
        return self._records.get(resource_id)

    def records(self) -> list[ProgressRecord]:
        return list(self._records.values())

    def resource_ids(self) -> list[str]:
        return list(self._records.keys())

    def stats(self) -> ProgressStats:
        """Aggregate statistics, recomputed from the current records."""
        return compute_stats(self._records.values())

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def update(self, resource_id: str, change: Union[ProgressChange, dict]):
        """
        Apply a partial change to the record for resource_id.

        Fields not present in the change are retained. A change carrying
        status=completed forces 100% and stamps completed_at with the current
        time, replacing any supplied or earlier value. Other changes to a
        completed record keep its completion time. Unknown resource IDs are
        ignored; updates never create records.
        """
        current = self._records.get(resource_id)
        if current is None:
            logger.debug(f"Ignoring progress update for unknown resource {resource_id}")
            return

        if not isinstance(change, ProgressChange):
            change = ProgressChange.model_validate(change)

        fields = change.changed_fields()
        merged = current.model_dump()
        merged.update(fields)

        status = ProgressStatus(merged["status"])
        if status == ProgressStatus.COMPLETED:
            merged["progress_percent"] = 100
            if fields.get("status") == ProgressStatus.COMPLETED or merged["completed_at"] is None:
                merged["completed_at"] = self._now()
        else:
            if status == ProgressStatus.NOT_STARTED:
                merged["progress_percent"] = 0
            merged["completed_at"] = None

        self._records[resource_id] = ProgressRecord.model_validate(merged)
        logger.info(
            f"Progress updated for resource {resource_id}: "
            f"{status.value} ({merged['progress_percent']}%)"
        )


# -----------------------------------------------------------------------------
# Statistics
# -----------------------------------------------------------------------------

def compute_stats(records: Iterable[ProgressRecord]) -> ProgressStats:
    """
    Count records per status and total the time spent.

    Args:
        records: Progress records to summarize

    Returns:
        ProgressStats whose counts sum to the number of records
    """
    counts = {status: 0 for status in ProgressStatus}
    total_time = 0
    for record in records:
        counts[record.status] += 1
        total_time += record.time_spent_minutes

    return ProgressStats(
        completed=counts[ProgressStatus.COMPLETED],
        in_progress=counts[ProgressStatus.IN_PROGRESS],
        not_started=counts[ProgressStatus.NOT_STARTED],
        total_time_minutes=total_time,
    )
