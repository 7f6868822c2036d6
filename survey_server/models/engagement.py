"""Request/response models for engagement endpoints."""

from datetime import datetime
from typing import List, Literal, Optional, Set, Union

from pydantic import BaseModel, Field

from survey_engine import MapOverview, Stop, StopDetail, Survey


class StopPayload(BaseModel):
    id: str
    route_ids: Set[str] = Field(default_factory=set)


class ContextPayload(BaseModel):
    """Where the rider is: {"type": "map"} or {"type": "stop", "stop": {...}}."""

    type: Literal["map", "stop"] = "map"
    stop: Optional[StopPayload] = None

    def to_context(self) -> Union[MapOverview, StopDetail]:
        if self.type == "map":
            return MapOverview()
        stop = Stop(id=self.stop.id, route_ids=self.stop.route_ids) if self.stop else None
        return StopDetail(stop=stop)


class NextSurveyRequest(BaseModel):
    """Ask for the survey to show. surveys=None uses the configured catalog."""

    context: ContextPayload = Field(default_factory=ContextPayload)
    surveys: Optional[List[Survey]] = None
    ignore_gate: bool = False


class RankedCandidate(BaseModel):
    index: int
    survey_id: int
    classification: str


class NextSurveyResponse(BaseModel):
    should_show: bool
    index: Optional[int] = None
    survey_id: Optional[int] = None
    survey: Optional[Survey] = None
    candidates: List[RankedCandidate] = []


class PreferencesResponse(BaseModel):
    is_survey_enabled: bool
    app_launch_count: int
    next_reminder_date: Optional[datetime] = None
    completed_survey_ids: List[int] = []
    skipped_survey_ids: List[int] = []
    user_identifier: Optional[str] = None


class ReminderResponse(BaseModel):
    next_reminder_date: datetime


class LaunchResponse(BaseModel):
    app_launch_count: int
