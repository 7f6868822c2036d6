"""
Engagement preferences: the persisted state the gate and selector read.

Owned by a PreferencesStore. The launch observer increments app_launch_count;
the engine only writes next_reminder_date and the completed/skipped id sets.
"""

from datetime import datetime, timezone
from typing import Optional, Set

from pydantic import BaseModel, Field, field_validator


class EngagementPreferences(BaseModel):
    """Snapshot of a rider's survey engagement state."""

    # Master switch; False suppresses every prompt.
    is_survey_enabled: bool = True

    # Cold starts seen so far. Never decreases; never written by the engine.
    app_launch_count: int = Field(default=0, ge=0)

    # Prompts are suppressed while this is in the future.
    next_reminder_date: Optional[datetime] = None

    # Independent sets; an id may appear in both.
    completed_survey_ids: Set[int] = Field(default_factory=set)
    skipped_survey_ids: Set[int] = Field(default_factory=set)

    # Opaque rider id sent to the survey backend; assigned once by the store.
    user_identifier: Optional[str] = None

    @field_validator("next_reminder_date")
    @classmethod
    def reminder_is_utc_aware(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Naive timestamps are read as UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


DEFAULT_PREFERENCES = EngagementPreferences()
