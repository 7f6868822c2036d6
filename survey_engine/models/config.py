"""
Engine configuration: gate cadence and selector options.

EngineConfig defaults are defined here. The server may pass a dict
(e.g. built from environment variables); from_dict() merges it with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, model_validator


class EngineConfig(BaseModel):
    """Configuration for the survey engagement engine."""

    # -------------------------------------------------------------------------
    # Engagement Gate
    # -------------------------------------------------------------------------

    # Prompt only on launches that are an exact multiple of this (3, 6, 9, ...).
    reminder_launch_interval: int = 3

    # "Remind me later" pushes next_reminder_date this many days past now.
    reminder_cooldown_days: int = 3

    # -------------------------------------------------------------------------
    # Priority Selector
    # -------------------------------------------------------------------------

    # Drop surveys outside their start_date/end_date window. Off: the window
    # is carried on the model but does not gate eligibility.
    enforce_validity_window: bool = False

    @model_validator(mode="after")
    def positive_intervals(self):
        if self.reminder_launch_interval < 1:
            raise ValueError(
                f"reminder_launch_interval must be >= 1, got {self.reminder_launch_interval}"
            )
        if self.reminder_cooldown_days < 0:
            raise ValueError(
                f"reminder_cooldown_days must be >= 0, got {self.reminder_cooldown_days}"
            )
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "EngineConfig":
        """Create config from dictionary (flat, or sectioned under "gate"/"selector")."""
        flat = {}
        if "gate" in config_dict:
            gate = config_dict["gate"]
            if "launch_interval" in gate:
                flat["reminder_launch_interval"] = gate["launch_interval"]
            if "cooldown_days" in gate:
                flat["reminder_cooldown_days"] = gate["cooldown_days"]
        if "selector" in config_dict:
            flat.update(config_dict["selector"])
        flat.update({k: v for k, v in config_dict.items() if k not in ("gate", "selector")})
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = EngineConfig()


def resolve_config(config: Optional["EngineConfig"]) -> "EngineConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
