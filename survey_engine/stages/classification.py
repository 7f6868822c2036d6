"""
Stage D: Classification

Every eligible survey gets exactly one class. Lower value = higher priority,
so selection is a plain comparison on the enum.
"""

from enum import IntEnum
from typing import Set

from ..models.survey import Survey


class SurveyClassification(IntEnum):
    ALWAYS_VISIBLE = 0        # allows_visible, single response
    NOT_ALWAYS_VISIBLE = 1    # default one-time survey
    MULTIPLE_RESPONSES = 2    # allows_multiple_responses, regardless of allows_visible

    @property
    def is_one_shot(self) -> bool:
        """One-shot classes are never offered again once completed or skipped."""
        return self is not SurveyClassification.MULTIPLE_RESPONSES


def classify(survey: Survey) -> SurveyClassification:
    """Classify a survey by its visibility and repetition flags."""
    if survey.allows_multiple_responses:
        return SurveyClassification.MULTIPLE_RESPONSES
    if survey.allows_visible:
        return SurveyClassification.ALWAYS_VISIBLE
    return SurveyClassification.NOT_ALWAYS_VISIBLE


def passes_completion_filter(
    survey: Survey,
    classification: SurveyClassification,
    handled_ids: Set[int],
) -> bool:
    """Stage E: one-shot classes drop when the id was completed or skipped."""
    if not classification.is_one_shot:
        return True
    return survey.id not in handled_ids
