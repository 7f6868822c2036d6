"""Application state: the preferences store and survey catalog behind the engine."""

import logging
from typing import Optional

from survey_engine import (
    HttpSurveyCatalog,
    InMemoryPreferencesStore,
    JsonPreferencesStore,
    JsonSurveyCatalog,
    PreferencesStore,
    SurveyCatalog,
    SurveyEngine,
)

from .config import ServerConfig, get_config

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(
        self,
        config: ServerConfig,
        store: Optional[PreferencesStore] = None,
        catalog: Optional[SurveyCatalog] = None,
    ):
        self.config = config

        # Preferences store: JSON file when a path is set, else in-memory
        self.store = store if store is not None else self._create_store(config)
        logger.info("[startup] Preferences store: %s", type(self.store).__name__)

        # Survey catalog: file, HTTP backend, or none (requests must carry surveys)
        self.catalog = catalog if catalog is not None else self._create_catalog(config)
        logger.info(
            "[startup] Survey catalog: %s",
            type(self.catalog).__name__ if self.catalog else "none",
        )

        self.engine = SurveyEngine(self.store, config.engine_config())

    def _create_store(self, config: ServerConfig) -> PreferencesStore:
        if config.preferences_path:
            return JsonPreferencesStore(config.preferences_path)
        return InMemoryPreferencesStore()

    def _create_catalog(self, config: ServerConfig) -> Optional[SurveyCatalog]:
        if config.catalog_path:
            try:
                return JsonSurveyCatalog(config.catalog_path)
            except FileNotFoundError as e:
                logger.warning("[startup] Survey catalog file skipped: %s", e)
        if config.survey_api_url:
            return HttpSurveyCatalog(
                config.survey_api_url,
                config.survey_region_id,
                timeout=config.survey_api_timeout,
            )
        return None


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState(get_config())
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace the global state (tests, embedding the app with custom collaborators)."""
    global _state
    _state = state
