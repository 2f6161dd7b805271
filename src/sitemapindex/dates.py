"""Date normalization.

Every timestamp the index stores or emits goes through here: values are
parsed with python-dateutil, naive results are taken as UTC, and absent or
unparseable input falls back to the current time.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, date, datetime

import structlog
from dateutil import parser as date_parser

log = structlog.get_logger()

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(UTC)


def format_timestamp(moment: datetime) -> str:
    """Render as ISO-8601 in UTC with millisecond precision and explicit offset."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds")


def first_present(*values: object) -> object | None:
    """Return the first truthy value, or None."""
    for value in values:
        if value:
            return value
    return None


class DateutilNormalizer:
    """Default DateNormalizer backed by ``dateutil.parser``."""

    def __init__(self, clock: Clock = utcnow) -> None:
        self._clock = clock

    def now(self) -> datetime:
        return self._clock().astimezone(UTC)

    def normalize(self, value: object) -> datetime:
        if value is None or (isinstance(value, str) and not value.strip()):
            return self.now()

        try:
            moment = _coerce(value)
            if moment.tzinfo is None:
                moment = moment.replace(tzinfo=UTC)
            return moment.astimezone(UTC)
        except (ValueError, OverflowError, OSError, TypeError):
            log.warning("date_parse_failed", value=repr(value))
            return self.now()


def _coerce(value: object) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool):
        raise TypeError(f"Not a date-like value: {value!r}")
    if isinstance(value, int | float):
        return datetime.fromtimestamp(value, UTC)
    if isinstance(value, str):
        return date_parser.parse(value.strip())
    raise TypeError(f"Not a date-like value: {value!r}")
