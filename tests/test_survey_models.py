"""Survey model and engine config tests: wire decoding, question helpers, validity window."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from survey_engine import EngineConfig, Survey, SurveyClassification
from survey_engine.stages import classify

from factories import NOW, make_questions, make_survey

BACKEND_SURVEY = {
    "id": 12,
    "name": "Rider satisfaction",
    "created_at": "2026-01-05T10:00:00Z",
    "updated_at": "2026-01-06T10:00:00Z",
    "show_on_map": False,
    "show_on_stops": True,
    "start_date": "2026-01-01T00:00:00Z",
    "end_date": None,
    "visible_stop_list": ["1_75403"],
    "visible_route_list": None,
    "allows_multiple_responses": False,
    "always_visible": True,
    "study": {"id": 3, "name": "Spring study", "description": "Service quality"},
    "questions": [
        {"id": 1, "position": 1, "required": False, "content": {"type": "label", "label_text": "Welcome"}},
        {"id": 2, "position": 2, "required": True,
         "content": {"type": "radio", "label_text": "How was your trip?", "options": ["Good", "Bad"]}},
        {"id": 3, "position": 3, "required": False, "content": {"type": "text", "label_text": "Anything else?"}},
    ],
}


class TestSurveyDecoding:

    def test_wire_keys_map_to_model_fields(self):
        survey = Survey.model_validate(BACKEND_SURVEY)
        assert survey.allows_visible is True
        assert survey.visible_stops_list == {"1_75403"}
        assert survey.visible_routes_list is None
        assert survey.has_targeting is True
        assert survey.study.name == "Spring study"
        assert survey.questions[1].content.options == ["Good", "Bad"]

    def test_field_names_also_accepted(self):
        survey = Survey(id=1, allows_visible=True, visible_routes_list={"r"})
        assert survey.allows_visible is True
        assert survey.visible_routes_list == {"r"}

    def test_missing_id_rejected(self):
        with pytest.raises(ValidationError):
            Survey.model_validate({"name": "no id"})


class TestQuestionHelpers:

    def test_hero_question_skips_labels(self):
        survey = Survey.model_validate(BACKEND_SURVEY)
        assert survey.hero_question.id == 2
        assert [q.id for q in survey.remaining_questions] == [1, 3]

    def test_no_hero_when_only_labels(self):
        survey = Survey.model_validate(
            {"id": 1, "questions": [{"id": 9, "position": 1, "content": {"type": "label"}}]}
        )
        assert survey.hero_question is None
        assert len(survey.remaining_questions) == 1

    def test_question_flags(self):
        first, second = make_questions(2)
        assert first.is_hero_question and not first.can_be_skipped
        assert not second.is_hero_question and second.can_be_skipped


class TestValidityWindow:

    def test_open_window_is_active(self):
        assert make_survey(1).is_active(NOW)

    def test_before_start_and_after_end(self):
        assert not make_survey(1, start_date=NOW + timedelta(seconds=1)).is_active(NOW)
        assert not make_survey(1, end_date=NOW - timedelta(seconds=1)).is_active(NOW)

    def test_naive_dates_read_as_utc(self):
        survey = Survey.model_validate({"id": 1, "end_date": "2026-03-01T11:00:00"})
        assert not survey.is_active(NOW)


class TestClassification:

    @pytest.mark.parametrize(
        "allows_visible, multiple, expected",
        [
            (True, False, SurveyClassification.ALWAYS_VISIBLE),
            (False, False, SurveyClassification.NOT_ALWAYS_VISIBLE),
            (True, True, SurveyClassification.MULTIPLE_RESPONSES),
            (False, True, SurveyClassification.MULTIPLE_RESPONSES),
        ],
    )
    def test_classify(self, allows_visible, multiple, expected):
        survey = make_survey(1, allows_visible=allows_visible, allows_multiple_responses=multiple)
        assert classify(survey) is expected

    def test_priority_order(self):
        assert (
            SurveyClassification.ALWAYS_VISIBLE
            < SurveyClassification.NOT_ALWAYS_VISIBLE
            < SurveyClassification.MULTIPLE_RESPONSES
        )


class TestEngineConfig:

    def test_defaults(self):
        config = EngineConfig()
        assert config.reminder_launch_interval == 3
        assert config.reminder_cooldown_days == 3
        assert config.enforce_validity_window is False

    def test_from_sectioned_dict(self):
        config = EngineConfig.from_dict(
            {"gate": {"launch_interval": 4, "cooldown_days": 7}, "selector": {"enforce_validity_window": True}}
        )
        assert config.reminder_launch_interval == 4
        assert config.reminder_cooldown_days == 7
        assert config.enforce_validity_window is True

    def test_from_flat_dict_ignores_unknown_keys(self):
        config = EngineConfig.from_dict({"reminder_cooldown_days": 1, "unrelated": "x"})
        assert config.reminder_cooldown_days == 1

    def test_zero_interval_rejected(self):
        with pytest.raises(ValidationError):
            EngineConfig(reminder_launch_interval=0)
