"""
Survey Engagement Engine facade over the gate and the prioritizer.

Typical screen flow:
    if engine.should_show_survey():
        survey = engine.next_survey(surveys, StopDetail(stop=stop))
    ...
    engine.mark_completed(survey.id)  # or mark_skipped / postpone
"""

import logging
from datetime import datetime
from typing import List, Optional

from .gate import Clock, EngagementGate
from .models.config import EngineConfig, resolve_config
from .models.context import PresentationContext
from .models.survey import Survey
from .stages.selection import RankedSurvey, SurveyPrioritizer
from .store import PreferencesStore

logger = logging.getLogger(__name__)


class SurveyEngine:
    """Caller-facing engine API. The store is owned by the caller."""

    def __init__(
        self,
        store: PreferencesStore,
        config: Optional[EngineConfig] = None,
        clock: Optional[Clock] = None,
    ):
        self.store = store
        self.config = resolve_config(config)
        self.gate = EngagementGate(store, self.config, clock)
        self.prioritizer = SurveyPrioritizer(store, self.config)

    # Gate

    def should_show_survey(self) -> bool:
        return self.gate.should_show_survey()

    def set_next_reminder_date(self) -> datetime:
        return self.gate.set_next_reminder_date()

    def postpone(self) -> datetime:
        """Remind me later: start the cooldown without marking the survey handled."""
        return self.gate.set_next_reminder_date()

    # Selection

    def next_survey_index(
        self,
        surveys: List[Survey],
        context: PresentationContext,
    ) -> Optional[int]:
        return self.prioritizer.next_survey_index(surveys, context, self._now())

    def next_survey(
        self,
        surveys: List[Survey],
        context: PresentationContext,
    ) -> Optional[Survey]:
        index = self.next_survey_index(surveys, context)
        return surveys[index] if index is not None else None

    def rank(
        self,
        surveys: List[Survey],
        context: PresentationContext,
    ) -> List[RankedSurvey]:
        return self.prioritizer.rank(surveys, context, self._now())

    # Write-back

    def mark_completed(self, survey_id: int) -> None:
        self.store.update(
            lambda p: p.model_copy(
                update={"completed_survey_ids": p.completed_survey_ids | {survey_id}}
            )
        )
        logger.debug("[engine] survey %d completed", survey_id)

    def mark_skipped(self, survey_id: int) -> None:
        self.store.update(
            lambda p: p.model_copy(
                update={"skipped_survey_ids": p.skipped_survey_ids | {survey_id}}
            )
        )
        logger.debug("[engine] survey %d skipped", survey_id)

    def _now(self) -> datetime:
        return self.gate.now()
