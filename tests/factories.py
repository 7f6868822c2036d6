"""Builders shared by the test suites."""

from datetime import datetime, timezone
from typing import Iterable, List, Optional

from survey_engine import Survey, SurveyQuestion

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_questions(count: int = 2) -> List[SurveyQuestion]:
    questions = [
        SurveyQuestion(
            id=100 + i,
            position=i + 1,
            required=i == 0,
            content={"type": "radio", "label_text": f"Question {i + 1}", "options": ["Yes", "No"]},
        )
        for i in range(count)
    ]
    return questions


def make_survey(
    id: int,
    *,
    show_on_map: bool = True,
    show_on_stops: bool = True,
    allows_visible: bool = False,
    allows_multiple_responses: bool = False,
    visible_stops: Optional[Iterable[str]] = None,
    visible_routes: Optional[Iterable[str]] = None,
    questions: Optional[List[SurveyQuestion]] = None,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
) -> Survey:
    """Survey with questions by default; pass questions=[] for an empty one."""
    return Survey(
        id=id,
        name=f"Survey {id}",
        show_on_map=show_on_map,
        show_on_stops=show_on_stops,
        allows_visible=allows_visible,
        allows_multiple_responses=allows_multiple_responses,
        visible_stops_list=set(visible_stops) if visible_stops is not None else None,
        visible_routes_list=set(visible_routes) if visible_routes is not None else None,
        questions=make_questions() if questions is None else questions,
        start_date=start_date,
        end_date=end_date,
    )
