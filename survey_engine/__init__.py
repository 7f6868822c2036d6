"""
Rider Survey Engagement Engine

Single entry point for the engine package:
- models/: Survey, PresentationContext, EngagementPreferences, EngineConfig
- stages/: eligibility (A-C), classification (D), selection (E-F)
- gate: launch cadence + reminder cooldown
- store: preference persistence; catalog: survey sources
"""

from .catalog import HttpSurveyCatalog, JsonSurveyCatalog, SurveyCatalog
from .engine import SurveyEngine
from .errors import SurveyCatalogError, SurveyEngineError
from .gate import EngagementGate
from .models import (
    DEFAULT_CONFIG,
    MAP_OVERVIEW,
    EngagementPreferences,
    EngineConfig,
    MapOverview,
    PresentationContext,
    Stop,
    StopDetail,
    Survey,
    SurveyQuestion,
    ensure_surveys,
)
from .stages import RankedSurvey, SurveyClassification, SurveyPrioritizer, rank_candidates
from .store import (
    InMemoryPreferencesStore,
    JsonPreferencesStore,
    PreferencesStore,
    record_app_launch,
)

__all__ = [
    "DEFAULT_CONFIG",
    "EngagementGate",
    "EngagementPreferences",
    "EngineConfig",
    "HttpSurveyCatalog",
    "InMemoryPreferencesStore",
    "JsonPreferencesStore",
    "JsonSurveyCatalog",
    "MAP_OVERVIEW",
    "MapOverview",
    "PreferencesStore",
    "PresentationContext",
    "RankedSurvey",
    "Stop",
    "StopDetail",
    "Survey",
    "SurveyCatalog",
    "SurveyCatalogError",
    "SurveyClassification",
    "SurveyEngine",
    "SurveyEngineError",
    "SurveyPrioritizer",
    "SurveyQuestion",
    "ensure_surveys",
    "rank_candidates",
    "record_app_launch",
]
