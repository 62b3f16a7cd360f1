"""
ProgressCard - View/edit state for one resource's progress card.

A card starts in VIEWING. Entering EDITING copies the record into a typed
draft; Save commits the draft to the store, Cancel throws it away.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from learntrack.schemas import ProgressStatus, ProgressRecord, ProgressChange

from .progress import ProgressStore


class CardMode(str, Enum):
    VIEWING = "viewing"
    EDITING = "editing"


class CardStateError(RuntimeError):
    """Raised for an operation the card's current mode does not allow."""


@dataclass
class ProgressDraft:
    """Uncommitted copy of a record's editable fields."""
    status: ProgressStatus
    progress_percent: int
    notes: str = ""

    @classmethod
    def from_record(cls, record: ProgressRecord) -> "ProgressDraft":
        return cls(
            status=record.status,
            progress_percent=record.progress_percent,
            notes=record.notes or "",
        )

    def to_change(self) -> ProgressChange:
        return ProgressChange(
            status=self.status,
            progress_percent=self.progress_percent,
            notes=self.notes,
        )


class ProgressCard:
    """Edit-state machine for the progress card of one resource."""

    def __init__(self, resource_id: str):
        self.resource_id = resource_id
        self.mode = CardMode.VIEWING
        self.draft: Optional[ProgressDraft] = None

    @property
    def is_editing(self) -> bool:
        return self.mode == CardMode.EDITING

    @property
    def shows_progress_control(self) -> bool:
        """The 0-100 control is only offered while the draft is in progress."""
        return self.is_editing and self.draft.status == ProgressStatus.IN_PROGRESS

    def _require_editing(self):
        if not self.is_editing:
            raise CardStateError(f"Card {self.resource_id} is not being edited")

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def begin_edit(self, record: ProgressRecord):
        """VIEWING -> EDITING with a fresh draft of the record."""
        if self.is_editing:
            raise CardStateError(f"Card {self.resource_id} is already being edited")
        self.draft = ProgressDraft.from_record(record)
        self.mode = CardMode.EDITING

    def save(self, store: ProgressStore):
        """Commit the draft to the store, then return to VIEWING."""
        self._require_editing()
        store.update(self.resource_id, self.draft.to_change())
        self._close()

    def cancel(self):
        """Discard the draft; the store is not touched."""
        self._require_editing()
        self._close()

    def _close(self):
        self.draft = None
        self.mode = CardMode.VIEWING

    # -------------------------------------------------------------------------
    # Draft edits
    # -------------------------------------------------------------------------

    def set_status(self, status):
        self._require_editing()
        status = ProgressStatus(status)
        self.draft.status = status
        if status == ProgressStatus.COMPLETED:
            self.draft.progress_percent = 100
        elif status == ProgressStatus.NOT_STARTED:
            self.draft.progress_percent = 0

    def set_progress(self, percent: int):
        self._require_editing()
        if self.draft.status != ProgressStatus.IN_PROGRESS:
            raise CardStateError("Progress can only be adjusted while in progress")
        percent = int(percent)
        if not 0 <= percent <= 100:
            raise ValueError(f"Progress must be between 0 and 100, got {percent}")
        self.draft.progress_percent = percent

    def set_notes(self, notes: str):
        self._require_editing()
        self.draft.notes = notes or ""
