"""Root and health endpoints."""

from fastapi import APIRouter

from ..state import get_state

router = APIRouter()


@router.get("/")
def root():
    state = get_state()
    return {
        "status": "ok",
        "preferences_store": type(state.store).__name__,
        "survey_catalog": type(state.catalog).__name__ if state.catalog else None,
        "reminder_launch_interval": state.engine.config.reminder_launch_interval,
        "reminder_cooldown_days": state.engine.config.reminder_cooldown_days,
    }
