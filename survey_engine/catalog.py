"""
Survey Catalog abstraction.

Supplies candidate surveys to the engine. Implementations: JSON file (local
testing, fixtures) and HTTP (survey backend). The engine never fetches on its
own; callers fetch, then pass the list in. No retries.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Protocol, Union

import requests
from pydantic import ValidationError

from .errors import SurveyCatalogError
from .models.survey import Survey, SurveysResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class SurveyCatalog(Protocol):
    """Protocol for survey catalog access."""

    def get_surveys(self, user_id: Optional[str] = None) -> List[Survey]:
        """Return all surveys currently offered to this rider, in backend order."""
        ...


def _parse_catalog(payload) -> List[Survey]:
    """Accept either {"surveys": [...], "region": {...}} or a bare list of surveys."""
    if isinstance(payload, list):
        payload = {"surveys": payload}
    return SurveysResponse.model_validate(payload).surveys


class JsonSurveyCatalog:
    """Survey catalog backed by a JSON file (e.g. data/surveys.json)."""

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        if not self._path.exists():
            raise FileNotFoundError(f"Surveys JSON not found: {self._path}")

    def get_surveys(self, user_id: Optional[str] = None) -> List[Survey]:
        try:
            with open(self._path, encoding="utf-8") as f:
                return _parse_catalog(json.load(f))
        except (OSError, ValueError, ValidationError) as e:
            raise SurveyCatalogError(f"Unreadable surveys file {self._path}: {e}") from e


class HttpSurveyCatalog:
    """
    Survey catalog fetched from the survey backend:
    GET {base_url}/api/v1/regions/{region_id}/surveys.json?user_id=...
    """

    def __init__(
        self,
        base_url: str,
        region_id: int,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._region_id = region_id
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self._base_url}/api/v1/regions/{self._region_id}/surveys.json"

    def get_surveys(self, user_id: Optional[str] = None) -> List[Survey]:
        params = {"user_id": user_id} if user_id else None
        try:
            response = self._session.get(self.url, params=params, timeout=self._timeout)
            response.raise_for_status()
            surveys = _parse_catalog(response.json())
        except requests.exceptions.RequestException as e:
            raise SurveyCatalogError(f"Survey fetch failed: {e}") from e
        except (ValueError, ValidationError) as e:
            raise SurveyCatalogError(f"Survey payload invalid: {e}") from e
        logger.info("[catalog] fetched %d surveys for region %s", len(surveys), self._region_id)
        return surveys
