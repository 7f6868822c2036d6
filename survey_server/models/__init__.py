"""Pydantic request/response models for the API."""

from .engagement import (
    ContextPayload,
    LaunchResponse,
    NextSurveyRequest,
    NextSurveyResponse,
    PreferencesResponse,
    RankedCandidate,
    ReminderResponse,
    StopPayload,
)

__all__ = [
    "ContextPayload",
    "LaunchResponse",
    "NextSurveyRequest",
    "NextSurveyResponse",
    "PreferencesResponse",
    "RankedCandidate",
    "ReminderResponse",
    "StopPayload",
]
