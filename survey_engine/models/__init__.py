"""Data models for the survey engagement engine."""

from .config import DEFAULT_CONFIG, EngineConfig, resolve_config
from .context import MAP_OVERVIEW, MapOverview, PresentationContext, Stop, StopDetail
from .preferences import DEFAULT_PREFERENCES, EngagementPreferences
from .survey import (
    QuestionContent,
    Study,
    Survey,
    SurveyQuestion,
    SurveyRegion,
    SurveysResponse,
    ensure_surveys,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_PREFERENCES",
    "EngagementPreferences",
    "EngineConfig",
    "MAP_OVERVIEW",
    "MapOverview",
    "PresentationContext",
    "QuestionContent",
    "Stop",
    "StopDetail",
    "Study",
    "Survey",
    "SurveyQuestion",
    "SurveyRegion",
    "SurveysResponse",
    "ensure_surveys",
    "resolve_config",
]
