"""
Stages E-F: Completion filter and priority selection.

Runs eligibility (A-C), classifies (D), drops handled one-shot surveys (E),
then orders survivors by class priority and original index (F).
The public entry points are rank_candidates and SurveyPrioritizer.next_survey_index.
"""

import logging
from datetime import datetime
from typing import List, NamedTuple, Optional, Set

from ..models.config import EngineConfig, DEFAULT_CONFIG, resolve_config
from ..models.context import PresentationContext
from ..models.survey import Survey
from ..store import PreferencesStore
from .classification import SurveyClassification, classify, passes_completion_filter
from .eligibility import filter_eligible_candidates

logger = logging.getLogger(__name__)


class RankedSurvey(NamedTuple):
    index: int
    survey: Survey
    classification: SurveyClassification


def rank_candidates(
    surveys: List[Survey],
    context: PresentationContext,
    handled_ids: Set[int],
    config: EngineConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> List[RankedSurvey]:
    """
    Every surviving candidate in selection order: class priority first,
    then position in the input list. handled_ids = completed | skipped.
    """
    ranked = []
    for index, survey in filter_eligible_candidates(surveys, context, config, now):
        classification = classify(survey)
        if not passes_completion_filter(survey, classification, handled_ids):
            continue
        ranked.append(RankedSurvey(index, survey, classification))
    ranked.sort(key=lambda r: (r.classification, r.index))
    return ranked


class SurveyPrioritizer:
    """Chooses the single survey to show, reading completion history from the store."""

    def __init__(self, store: PreferencesStore, config: Optional[EngineConfig] = None):
        self.store = store
        self.config = resolve_config(config)

    def _handled_survey_ids(self) -> Set[int]:
        prefs = self.store.preferences()
        return prefs.completed_survey_ids | prefs.skipped_survey_ids

    def rank(
        self,
        surveys: List[Survey],
        context: PresentationContext,
        now: Optional[datetime] = None,
    ) -> List[RankedSurvey]:
        if not surveys:
            return []
        return rank_candidates(surveys, context, self._handled_survey_ids(), self.config, now)

    def next_survey_index(
        self,
        surveys: List[Survey],
        context: PresentationContext,
        now: Optional[datetime] = None,
    ) -> Optional[int]:
        """
        Index into surveys of the survey to present, or None when nothing qualifies.

        Priority: ALWAYS_VISIBLE > NOT_ALWAYS_VISIBLE > MULTIPLE_RESPONSES;
        first-declared wins within a class.
        """
        ranked = self.rank(surveys, context, now)
        logger.debug(
            "[selector] context=%s candidates=%d eligible=%d",
            context.type, len(surveys), len(ranked),
        )
        if not ranked:
            return None
        return ranked[0].index
