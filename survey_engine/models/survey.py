"""
Survey model: typed representation of a survey definition from the catalog.

Built from backend dicts via Survey.model_validate(d) or ensure_surveys().
Wire keys are snake_case (show_on_map, visible_stop_list, always_visible, ...);
attribute names follow the engine's vocabulary (allows_visible, visible_stops_list).
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Set, Union

from pydantic import BaseModel, ConfigDict, Field


QUESTION_TYPES = ("label", "radio", "checkbox", "text", "external_survey")


class QuestionContent(BaseModel):
    """Display content of one question. Carried as-is; answers are not validated here."""

    model_config = ConfigDict(extra="allow")

    type: str = "text"
    label_text: str = ""
    options: Optional[List[str]] = None
    url: Optional[str] = None


class SurveyQuestion(BaseModel):
    """A single question in a survey; position 1 is the hero question."""

    model_config = ConfigDict(extra="allow")

    id: int
    position: int = 0
    required: bool = False
    content: QuestionContent = Field(default_factory=QuestionContent)

    @property
    def is_hero_question(self) -> bool:
        return self.position == 1

    @property
    def can_be_skipped(self) -> bool:
        return not self.required


class Study(BaseModel):
    """Research study a survey belongs to."""

    id: int
    name: str = ""
    description: str = ""


class Survey(BaseModel):
    """
    Candidate survey passed to the engine per invocation.

    visible_stops_list / visible_routes_list: None means "no restriction declared".
    allows_visible: wire name always_visible; together with allows_multiple_responses
    it decides the survey's classification (see stages.classification).
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int
    name: str = ""
    show_on_map: bool = False
    show_on_stops: bool = False
    visible_stops_list: Optional[Set[str]] = Field(default=None, alias="visible_stop_list")
    visible_routes_list: Optional[Set[str]] = Field(default=None, alias="visible_route_list")
    allows_visible: bool = Field(default=False, alias="always_visible")
    allows_multiple_responses: bool = False
    questions: List[SurveyQuestion] = Field(default_factory=list)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    study: Optional[Study] = None

    @property
    def has_targeting(self) -> bool:
        """True if either allow-list is declared (even when empty)."""
        return self.visible_stops_list is not None or self.visible_routes_list is not None

    @property
    def hero_question(self) -> Optional[SurveyQuestion]:
        """First answerable (non-label) question, shown inline before the full form."""
        for question in self.questions:
            if question.content.type != "label":
                return question
        return None

    @property
    def remaining_questions(self) -> List[SurveyQuestion]:
        """All questions except the hero question."""
        hero = self.hero_question
        if hero is None:
            return list(self.questions)
        return [q for q in self.questions if q.id != hero.id]

    def is_active(self, now: Optional[datetime] = None) -> bool:
        """True if now falls inside [start_date, end_date]; open ends are unbounded."""
        now = now or datetime.now(timezone.utc)
        if self.start_date is not None and now < _aware(self.start_date):
            return False
        if self.end_date is not None and now > _aware(self.end_date):
            return False
        return True


class SurveyRegion(BaseModel):
    id: int
    name: str = ""


class SurveysResponse(BaseModel):
    """Catalog payload: {"surveys": [...], "region": {...}}."""

    surveys: List[Survey] = Field(default_factory=list)
    region: Optional[SurveyRegion] = None


def _aware(dt: datetime) -> datetime:
    """Treat naive datetimes from the backend as UTC."""
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


def ensure_surveys(items: List[Union[Dict[str, Any], "Survey"]]) -> List["Survey"]:
    """Convert list of dicts or Surveys to list of Survey models for the pipeline."""
    return [
        Survey.model_validate(s) if isinstance(s, dict) else s
        for s in items
    ]
