"""
Stages A-C: Eligibility

Filters candidate surveys down to the ones that may appear in this context:
context applicability (map vs stop), optional validity window, stop/route
targeting (stop context only), and non-empty content.

Indices into the caller's list are preserved; the public entry point is
filter_eligible_candidates.
"""

from datetime import datetime
from typing import List, Optional, Tuple

from ..models.config import EngineConfig, DEFAULT_CONFIG
from ..models.context import MapOverview, PresentationContext, Stop, StopDetail
from ..models.survey import Survey


def _passes_context_filter(survey: Survey, context: PresentationContext) -> bool:
    """Stage A: map context needs show_on_map; stop context needs show_on_stops."""
    if isinstance(context, MapOverview):
        return survey.show_on_map
    return survey.show_on_stops


def _within_validity_window(
    survey: Survey,
    config: EngineConfig,
    now: Optional[datetime],
) -> bool:
    """Stage A': only enforced when config.enforce_validity_window is set."""
    if not config.enforce_validity_window:
        return True
    return survey.is_active(now)


def _matches_targeting(survey: Survey, stop: Stop) -> bool:
    """
    Stage B: True if no allow-list is declared, or the stop id is listed,
    or any route serving the stop is listed.
    """
    if not survey.has_targeting:
        return True
    if survey.visible_stops_list and stop.id in survey.visible_stops_list:
        return True
    if survey.visible_routes_list and stop.route_ids & survey.visible_routes_list:
        return True
    return False


def _has_questions(survey: Survey) -> bool:
    """Stage C: a survey without questions is never eligible."""
    return bool(survey.questions)


def filter_eligible_candidates(
    surveys: List[Survey],
    context: PresentationContext,
    config: EngineConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> List[Tuple[int, Survey]]:
    """
    Return (index, survey) pairs that pass Stages A-C, in input order.

    A StopDetail context without a stop yields no candidates.
    Targeting is skipped entirely in MapOverview.
    """
    stop: Optional[Stop] = None
    if isinstance(context, StopDetail):
        if context.stop is None:
            return []
        stop = context.stop

    candidates = []
    for index, survey in enumerate(surveys):
        if not _passes_context_filter(survey, context):
            continue
        if not _within_validity_window(survey, config, now):
            continue
        if stop is not None and not _matches_targeting(survey, stop):
            continue
        if not _has_questions(survey):
            continue
        candidates.append((index, survey))
    return candidates
