"""Pipeline stages: eligibility (A-C), classification (D), selection (E-F)."""

from .classification import SurveyClassification, classify
from .eligibility import filter_eligible_candidates
from .selection import RankedSurvey, SurveyPrioritizer, rank_candidates

__all__ = [
    "RankedSurvey",
    "SurveyClassification",
    "SurveyPrioritizer",
    "classify",
    "filter_eligible_candidates",
    "rank_candidates",
]
