"""Shared fixtures for the learning tracker tests."""

from datetime import datetime

import pytest

from learntrack.schemas import ProgressRecord
from learntrack.tracker import ProgressStore, ResourceCatalog


class FakeClock:
    """Settable clock; each call returns the current value."""

    def __init__(self, start: datetime):
        self.value = start

    def __call__(self) -> datetime:
        return self.value


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 3, 1, 12, 0, 0))


@pytest.fixture
def seed_records():
    return [
        ProgressRecord(
            resource_id="1",
            status="completed",
            progress_percent=100,
            notes="Great introduction to Claude capabilities!",
            time_spent_minutes=120,
            completed_at=datetime(2024, 1, 16),
        ),
        ProgressRecord(
            resource_id="2",
            status="in_progress",
            progress_percent=60,
            notes="Halfway through the advanced sections",
            time_spent_minutes=180,
        ),
        ProgressRecord(resource_id="3", status="not_started", progress_percent=0),
    ]


@pytest.fixture
def store(seed_records, clock):
    return ProgressStore(seed_records, now=clock)


@pytest.fixture
def catalog():
    return ResourceCatalog.from_seed()
