"""
Engagement Gate: should the app try to show a survey prompt right now?

Reads the PreferencesStore; never mutates it except through set_next_reminder_date,
which owns the reminder cooldown.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from .models.config import EngineConfig, resolve_config
from .store import PreferencesStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


class EngagementGate:
    """Launch-cadence and cooldown gate over a preferences store."""

    def __init__(
        self,
        store: PreferencesStore,
        config: Optional[EngineConfig] = None,
        clock: Optional[Clock] = None,
    ):
        self.store = store
        self.config = resolve_config(config)
        self._clock = clock or utc_now

    def now(self) -> datetime:
        return self._clock()

    def should_show_survey(self, now: Optional[datetime] = None) -> bool:
        """
        True only if surveys are enabled, at least one launch was recorded, the
        launch count is a multiple of the reminder interval, and no reminder
        date lies strictly in the future. Checks run in that order.
        """
        prefs = self.store.preferences()
        if not prefs.is_survey_enabled:
            logger.debug("[gate] closed: surveys disabled")
            return False
        launches = prefs.app_launch_count
        if launches == 0:
            logger.debug("[gate] closed: no app launches recorded")
            return False
        if launches % self.config.reminder_launch_interval != 0:
            logger.debug(
                "[gate] closed: launch %d not on interval %d",
                launches, self.config.reminder_launch_interval,
            )
            return False
        reminder = prefs.next_reminder_date
        if reminder is not None:
            reminder = as_utc(reminder)
            now = as_utc(now or self.now())
            if reminder > now:
                logger.debug("[gate] closed: cooling down until %s", reminder.isoformat())
                return False
        return True

    def set_next_reminder_date(self, now: Optional[datetime] = None) -> datetime:
        """Set next_reminder_date to now + cooldown, overwriting any previous value."""
        now = as_utc(now or self.now())
        reminder = now + timedelta(days=self.config.reminder_cooldown_days)
        self.store.update(
            lambda p: p.model_copy(update={"next_reminder_date": reminder})
        )
        logger.debug("[gate] next reminder set to %s", reminder.isoformat())
        return reminder
