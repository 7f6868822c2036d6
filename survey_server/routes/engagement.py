"""Engagement endpoints: gate checks, survey selection, and rider responses."""

import logging

from fastapi import APIRouter, HTTPException

from survey_engine import SurveyCatalogError, record_app_launch

from ..models import (
    LaunchResponse,
    NextSurveyRequest,
    NextSurveyResponse,
    PreferencesResponse,
    RankedCandidate,
    ReminderResponse,
)
from ..state import get_state

logger = logging.getLogger(__name__)

router = APIRouter()


def _preferences_response(prefs) -> PreferencesResponse:
    return PreferencesResponse(
        is_survey_enabled=prefs.is_survey_enabled,
        app_launch_count=prefs.app_launch_count,
        next_reminder_date=prefs.next_reminder_date,
        completed_survey_ids=sorted(prefs.completed_survey_ids),
        skipped_survey_ids=sorted(prefs.skipped_survey_ids),
        user_identifier=prefs.user_identifier,
    )


@router.get("/preferences", response_model=PreferencesResponse)
def get_preferences():
    return _preferences_response(get_state().store.preferences())


@router.get("/should-show")
def should_show():
    return {"should_show": get_state().engine.should_show_survey()}


@router.post("/next", response_model=NextSurveyResponse)
def next_survey(request: NextSurveyRequest):
    """
    Pick the survey to present in the given context.
    Consults the gate first unless ignore_gate is set; a closed gate returns should_show=false.
    """
    state = get_state()
    engine = state.engine
    if not request.ignore_gate and not engine.should_show_survey():
        return NextSurveyResponse(should_show=False)

    surveys = request.surveys
    if surveys is None:
        if state.catalog is None:
            raise HTTPException(
                status_code=400,
                detail="No surveys in request and no survey catalog configured.",
            )
        try:
            surveys = state.catalog.get_surveys(state.store.user_identifier())
        except SurveyCatalogError as e:
            logger.warning("[engagement] catalog fetch failed: %s", e)
            raise HTTPException(status_code=502, detail=str(e))

    ranked = engine.rank(surveys, request.context.to_context())
    candidates = [
        RankedCandidate(
            index=r.index,
            survey_id=r.survey.id,
            classification=r.classification.name,
        )
        for r in ranked
    ]
    if not ranked:
        return NextSurveyResponse(should_show=False, candidates=candidates)
    top = ranked[0]
    return NextSurveyResponse(
        should_show=True,
        index=top.index,
        survey_id=top.survey.id,
        survey=top.survey,
        candidates=candidates,
    )


@router.post("/surveys/{survey_id}/complete", response_model=PreferencesResponse)
def complete_survey(survey_id: int):
    state = get_state()
    state.engine.mark_completed(survey_id)
    return _preferences_response(state.store.preferences())


@router.post("/surveys/{survey_id}/skip", response_model=PreferencesResponse)
def skip_survey(survey_id: int):
    state = get_state()
    state.engine.mark_skipped(survey_id)
    return _preferences_response(state.store.preferences())


@router.post("/surveys/{survey_id}/later", response_model=ReminderResponse)
def remind_later(survey_id: int):
    """Remind me later: the survey stays eligible; prompting pauses for the cooldown."""
    reminder = get_state().engine.postpone()
    logger.info("[engagement] survey %d postponed until %s", survey_id, reminder.isoformat())
    return ReminderResponse(next_reminder_date=reminder)


@router.post("/launch", response_model=LaunchResponse)
def app_launch():
    """Record one cold start of the app. Call before asking the gate for that session."""
    return LaunchResponse(app_launch_count=record_app_launch(get_state().store))
