"""
Resource schemas for the learning tracker.

Defines Pydantic models for:
- Catalog resources (read-only, seeded at startup)
- Resource submissions from the Add Resource form
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from typing import Optional
from datetime import date
from enum import Enum


class ResourceCategory(str, Enum):
    TUTORIAL = "tutorial"
    DOCUMENTATION = "documentation"
    VIDEO = "video"
    COURSE = "course"
    TOOL = "tool"
    BOOK = "book"
    ARTICLE = "article"
    PODCAST = "podcast"
    COMMUNITY = "community"


class DifficultyLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


def normalize_tags(tags: list[str]) -> list[str]:
    """Strip whitespace, drop empties and duplicates, keep first-seen order."""
    seen = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


class Resource(BaseModel):
    """A learning resource in the catalog. Immutable once created."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    description: str
    url: str
    category: ResourceCategory
    tags: list[str] = Field(default_factory=list)
    difficulty: DifficultyLevel
    added_by: str = "System"
    date_added: Optional[date] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)

    @field_validator('tags')
    @classmethod
    def tags_unique(cls, v):
        return normalize_tags(v)


# Form fields that must be filled in before a submission is accepted
REQUIRED_SUBMISSION_FIELDS = ("title", "description", "url", "category", "difficulty")


def missing_required_fields(error: ValidationError) -> list[str]:
    """Required fields that failed validation, in form order."""
    failed = {str(err["loc"][0]) for err in error.errors() if err["loc"]}
    return [name for name in REQUIRED_SUBMISSION_FIELDS if name in failed]


class ResourceSubmission(BaseModel):
    """Payload of the Add Resource form."""
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    category: ResourceCategory
    difficulty: DifficultyLevel
    tags: list[str] = Field(default_factory=list)
    notes: Optional[str] = None

    @field_validator('title', 'description', 'url', mode='before')
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator('tags', mode='before')
    @classmethod
    def split_tags(cls, v):
        # The form sends tags as one comma separated string
        if isinstance(v, str):
            v = v.split(",")
        return normalize_tags(v or [])

    @field_validator('notes', mode='before')
    @classmethod
    def empty_notes(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v
