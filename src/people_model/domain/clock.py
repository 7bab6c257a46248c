"""Reference clock used for birth/death validation and age computation."""

from datetime import UTC, date, datetime
from typing import Protocol

from dateutil.relativedelta import relativedelta  # type: ignore[import-untyped]

from people_model.config import get_settings


def normalize_instant(value: datetime | date | None) -> datetime | None:
    """Coerce a date or datetime into a naive UTC datetime.

    Plain dates become midnight. Aware datetimes are converted to UTC and
    stripped of their tzinfo so every comparison happens on one timeline.
    """
    if value is None:
        return None
    if not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day)
    if value.tzinfo is not None:
        return value.astimezone(UTC).replace(tzinfo=None)
    return value


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Reads the platform clock."""

    def now(self) -> datetime:
        return datetime.now(UTC).replace(tzinfo=None)

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """A clock pinned to one instant until moved explicitly."""

    def __init__(self, instant: datetime | date) -> None:
        self._instant = normalize_instant(instant)

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime | date) -> "FixedClock":
        self._instant = normalize_instant(instant)
        return self

    def advance(self, **kwargs: int) -> "FixedClock":
        """Move the clock forward by relativedelta arguments (years=1, days=2...)."""
        self._instant = self._instant + relativedelta(**kwargs)
        return self

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"


_SYSTEM_CLOCK = SystemClock()


def get_clock() -> Clock:
    """Return the default clock, pinned when Settings.frozen_now is set."""
    frozen_now = get_settings().frozen_now
    if frozen_now is not None:
        return FixedClock(frozen_now)
    return _SYSTEM_CLOCK
