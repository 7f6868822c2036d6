"""
Preference Store abstraction.

Holds the rider's EngagementPreferences and persists them. Implementations:
in-memory (tests, ephemeral sessions), JSON file (single-device persistence).
Swap via config. Every store serializes access with a lock so a read never sees
a half-written snapshot and concurrent read-modify-write calls never lose an update.
"""

import json
import logging
import os
import threading
import uuid
from pathlib import Path
from typing import Callable, Optional, Protocol, Set, Union

from pydantic import ValidationError

from .models.preferences import EngagementPreferences

logger = logging.getLogger(__name__)

PreferencesUpdate = Callable[[EngagementPreferences], EngagementPreferences]


class PreferencesStore(Protocol):
    """Protocol for engagement preference read/write. Implement for memory, file, or a remote store."""

    def preferences(self) -> EngagementPreferences:
        """Return an independent copy of the current snapshot. No side effects."""
        ...

    def set_preferences(self, preferences: EngagementPreferences) -> None:
        """Replace the stored snapshot wholesale."""
        ...

    def update(self, fn: PreferencesUpdate) -> EngagementPreferences:
        """
        Atomic read-modify-write: fn receives a copy of the current snapshot and
        returns the new one, which is stored and returned.
        """
        ...

    def completed_surveys(self) -> Set[int]:
        ...

    def skipped_surveys(self) -> Set[int]:
        ...

    def user_identifier(self) -> str:
        """Return the rider's survey id, generating and persisting one on first use."""
        ...


class InMemoryPreferencesStore:
    """
    Preference store that keeps state in process memory only.
    Used for tests and when no preferences path is configured.
    """

    def __init__(self, preferences: Optional[EngagementPreferences] = None):
        self._lock = threading.RLock()
        if preferences is None:
            preferences = EngagementPreferences()
        self._preferences = preferences.model_copy(deep=True)

    def _persist(self, preferences: EngagementPreferences) -> None:
        pass

    def preferences(self) -> EngagementPreferences:
        with self._lock:
            return self._preferences.model_copy(deep=True)

    def set_preferences(self, preferences: EngagementPreferences) -> None:
        with self._lock:
            snapshot = preferences.model_copy(deep=True)
            self._persist(snapshot)
            self._preferences = snapshot

    def update(self, fn: PreferencesUpdate) -> EngagementPreferences:
        with self._lock:
            updated = fn(self._preferences.model_copy(deep=True))
            self.set_preferences(updated)
            return updated.model_copy(deep=True)

    def completed_surveys(self) -> Set[int]:
        return self.preferences().completed_survey_ids

    def skipped_surveys(self) -> Set[int]:
        return self.preferences().skipped_survey_ids

    def user_identifier(self) -> str:
        with self._lock:
            existing = self._preferences.user_identifier
            if existing:
                return existing
            updated = self.update(
                lambda p: p.model_copy(update={"user_identifier": str(uuid.uuid4())})
            )
            return updated.user_identifier


class JsonPreferencesStore(InMemoryPreferencesStore):
    """
    Preference store backed by one JSON document (e.g. data/preferences.json).

    A missing file starts from defaults. A corrupt or schema-invalid file is
    logged and replaced by defaults on the next write. Write errors propagate.
    """

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(self._load())

    def _load(self) -> EngagementPreferences:
        if not self._path.exists():
            return EngagementPreferences()
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
            return EngagementPreferences.model_validate(data)
        except (ValueError, ValidationError, OSError) as e:
            logger.warning(
                "[store] PREFERENCES_UNREADABLE path=%s error=%s; using defaults",
                self._path, e,
            )
            return EngagementPreferences()

    def _persist(self, preferences: EngagementPreferences) -> None:
        out = preferences.model_dump(mode="json")
        # Stable order on disk.
        out["completed_survey_ids"] = sorted(out["completed_survey_ids"])
        out["skipped_survey_ids"] = sorted(out["skipped_survey_ids"])
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(out, f, indent=2)
        os.replace(tmp_path, self._path)

    @property
    def path(self) -> Path:
        return self._path


def record_app_launch(store: PreferencesStore) -> int:
    """Increment app_launch_count once. Called by the app lifecycle on cold start, before the gate."""
    updated = store.update(
        lambda p: p.model_copy(update={"app_launch_count": p.app_launch_count + 1})
    )
    logger.info("[store] app launch recorded count=%d", updated.app_launch_count)
    return updated.app_launch_count
