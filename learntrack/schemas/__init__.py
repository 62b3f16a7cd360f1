"""
Learning tracker schemas - Pydantic models for resources and progress.

This module exports all schema classes for:
- Resource: catalog entries and form submissions
- Progress: per-resource progress, partial changes, aggregate stats
- Profile: user profile rows from the hosted backend
"""

# Resource schemas
from .resource import (
    ResourceCategory,
    DifficultyLevel,
    Resource,
    ResourceSubmission,
    REQUIRED_SUBMISSION_FIELDS,
    missing_required_fields,
    normalize_tags,
)

# Progress schemas
from .progress import (
    ProgressStatus,
    ProgressRecord,
    ProgressChange,
    ProgressStats,
)

# Profile schemas
from .profile import (
    ExperienceLevel,
    Profile,
)

__all__ = [
    # Resource
    'ResourceCategory',
    'DifficultyLevel',
    'Resource',
    'ResourceSubmission',
    'REQUIRED_SUBMISSION_FIELDS',
    'missing_required_fields',
    'normalize_tags',
    # Progress
    'ProgressStatus',
    'ProgressRecord',
    'ProgressChange',
    'ProgressStats',
    # Profile
    'ExperienceLevel',
    'Profile',
]
