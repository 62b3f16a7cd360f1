"""
Learning tracker core - Runtime components for resources and progress.

This module provides:
- ResourceCatalog: Read-only learning resources
- ProgressStore: Session-local progress with a single update entry point
- ProgressCard: View/edit state machine for one progress card
"""

from .catalog import (
    ResourceCatalog,
    ALL_CATEGORIES,
)

from .progress import (
    ProgressStore,
    compute_stats,
)

from .card import (
    ProgressCard,
    ProgressDraft,
    CardMode,
    CardStateError,
)

__all__ = [
    # Catalog
    "ResourceCatalog",
    "ALL_CATEGORIES",
    # Progress
    "ProgressStore",
    "compute_stats",
    # Card
    "ProgressCard",
    "ProgressDraft",
    "CardMode",
    "CardStateError",
]
