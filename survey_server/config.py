"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from survey_engine import EngineConfig

# Single .env at the project root
root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)


def _bool_env(key: str, default: bool = False) -> bool:
    v = os.getenv(key)
    if v is None or not v.strip():
        return default
    return v.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Preferences: JSON file when set, otherwise in-memory only
    preferences_path: Optional[Path] = None

    # Survey catalog: JSON file takes precedence over the HTTP backend
    catalog_path: Optional[Path] = None
    survey_api_url: Optional[str] = None
    survey_region_id: int = 1
    survey_api_timeout: float = 10.0

    # Engine tuning
    reminder_launch_interval: int = 3
    reminder_cooldown_days: int = 3
    enforce_validity_window: bool = False

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            preferences_path=_path_env("SURVEY_PREFERENCES_PATH"),
            catalog_path=_path_env("SURVEY_CATALOG_PATH"),
            survey_api_url=os.getenv("SURVEY_API_URL") or None,
            survey_region_id=int(os.getenv("SURVEY_REGION_ID", "1")),
            survey_api_timeout=float(os.getenv("SURVEY_API_TIMEOUT", "10")),
            reminder_launch_interval=int(os.getenv("SURVEY_REMINDER_INTERVAL", "3")),
            reminder_cooldown_days=int(os.getenv("SURVEY_COOLDOWN_DAYS", "3")),
            enforce_validity_window=_bool_env("SURVEY_ENFORCE_VALIDITY_WINDOW"),
        )

    def engine_config(self) -> EngineConfig:
        return EngineConfig.from_dict(
            {
                "gate": {
                    "launch_interval": self.reminder_launch_interval,
                    "cooldown_days": self.reminder_cooldown_days,
                },
                "selector": {"enforce_validity_window": self.enforce_validity_window},
            }
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []
        if self.catalog_path and not self.catalog_path.exists():
            errors.append(f"Survey catalog file not found: {self.catalog_path}")
        if not self.catalog_path and not self.survey_api_url:
            errors.append("No survey catalog configured (SURVEY_CATALOG_PATH or SURVEY_API_URL)")
        return len(errors) == 0, errors


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
