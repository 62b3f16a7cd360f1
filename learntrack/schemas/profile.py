"""
Profile schema, mirroring the `profiles` table of the hosted backend.

Every field is optional; the dashboard renders only what is present.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime
from enum import Enum


class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class Profile(BaseModel):
    # Rows may carry columns the dashboard does not show
    model_config = ConfigDict(extra="ignore")

    user_id: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    experience_level: Optional[ExperienceLevel] = None
    learning_goals: list[str] = Field(default_factory=list)
    ai_tools_used: list[str] = Field(default_factory=list)
    website_url: Optional[str] = None
    location: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator('learning_goals', 'ai_tools_used', mode='before')
    @classmethod
    def null_list(cls, v):
        return v or []

    @property
    def display_name(self) -> Optional[str]:
        return self.full_name or self.email
