"""Preference Store Tests: snapshots, atomic updates, JSON persistence and fallback."""

import json
import threading
from datetime import timedelta

from survey_engine import (
    EngagementPreferences,
    InMemoryPreferencesStore,
    JsonPreferencesStore,
    SurveyEngine,
    record_app_launch,
)

from factories import NOW


class TestInMemoryStore:

    def test_defaults(self, store):
        prefs = store.preferences()
        assert prefs.is_survey_enabled is True
        assert prefs.app_launch_count == 0
        assert prefs.next_reminder_date is None
        assert store.completed_surveys() == set()
        assert store.skipped_surveys() == set()

    def test_set_preferences_replaces_wholesale(self, store):
        store.set_preferences(EngagementPreferences(completed_survey_ids={8}))
        store.set_preferences(EngagementPreferences(skipped_survey_ids={9}))
        assert store.completed_surveys() == set()
        assert store.skipped_surveys() == {9}

    def test_snapshot_is_independent_copy(self, store):
        snapshot = store.preferences()
        snapshot.completed_survey_ids.add(42)
        assert store.completed_surveys() == set()

    def test_update_returns_new_value(self, store):
        updated = store.update(lambda p: p.model_copy(update={"is_survey_enabled": False}))
        assert updated.is_survey_enabled is False
        assert store.preferences().is_survey_enabled is False

    def test_concurrent_marks_are_not_lost(self, store):
        engine = SurveyEngine(store)

        def mark(offset):
            for i in range(100):
                engine.mark_completed(offset + i)

        threads = [threading.Thread(target=mark, args=(n * 1000,)) for n in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(store.completed_surveys()) == 200

    def test_user_identifier_is_stable(self, store):
        first = store.user_identifier()
        assert first
        assert store.user_identifier() == first
        assert store.preferences().user_identifier == first

    def test_record_app_launch_increments(self, store):
        assert record_app_launch(store) == 1
        assert record_app_launch(store) == 2
        assert store.preferences().app_launch_count == 2


class TestJsonStore:

    def test_missing_file_starts_with_defaults(self, tmp_path):
        store = JsonPreferencesStore(tmp_path / "nested" / "preferences.json")
        assert store.preferences() == EngagementPreferences()

    def test_state_survives_reload(self, tmp_path):
        path = tmp_path / "preferences.json"
        store = JsonPreferencesStore(path)
        engine = SurveyEngine(store, clock=lambda: NOW)
        engine.mark_completed(3)
        engine.mark_completed(1)
        engine.mark_skipped(7)
        engine.set_next_reminder_date()
        record_app_launch(store)

        reloaded = JsonPreferencesStore(path).preferences()
        assert reloaded.completed_survey_ids == {1, 3}
        assert reloaded.skipped_survey_ids == {7}
        assert reloaded.next_reminder_date == NOW + timedelta(days=3)
        assert reloaded.app_launch_count == 1

    def test_file_lists_ids_sorted(self, tmp_path):
        path = tmp_path / "preferences.json"
        store = JsonPreferencesStore(path)
        store.set_preferences(EngagementPreferences(completed_survey_ids={9, 2, 5}))
        with open(path) as f:
            assert json.load(f)["completed_survey_ids"] == [2, 5, 9]

    def test_corrupt_file_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "preferences.json"
        path.write_text("{not json")
        assert JsonPreferencesStore(path).preferences() == EngagementPreferences()

    def test_non_utf8_file_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "preferences.json"
        path.write_bytes(b'{"app_launch_count": "\xff\xfe"}')
        store = JsonPreferencesStore(path)
        assert store.preferences() == EngagementPreferences()
        record_app_launch(store)
        assert JsonPreferencesStore(path).preferences().app_launch_count == 1

    def test_invalid_schema_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "preferences.json"
        path.write_text(json.dumps({"app_launch_count": -4}))
        assert JsonPreferencesStore(path).preferences() == EngagementPreferences()

    def test_naive_reminder_read_as_utc(self, tmp_path):
        path = tmp_path / "preferences.json"
        path.write_text(json.dumps({"next_reminder_date": "2026-03-04T12:00:00"}))
        prefs = JsonPreferencesStore(path).preferences()
        assert prefs.next_reminder_date == NOW + timedelta(days=3)

    def test_user_identifier_survives_reload(self, tmp_path):
        path = tmp_path / "preferences.json"
        first = JsonPreferencesStore(path).user_identifier()
        assert JsonPreferencesStore(path).user_identifier() == first


class TestInMemoryStoreSeed:

    def test_seed_is_copied(self):
        seed = EngagementPreferences(skipped_survey_ids={1})
        store = InMemoryPreferencesStore(seed)
        seed.skipped_survey_ids.add(2)
        assert store.skipped_surveys() == {1}
