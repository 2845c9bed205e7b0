"""Day-of-week helpers used by the greeting."""

from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from hello_common.exceptions import ConfigurationError
from hello_common.observability import tracer

_WEEKDAYS = ('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday')


def _resolve_timezone(tz_name: Optional[str]):
    if not tz_name or tz_name.upper() == 'UTC':
        return timezone.utc
    try:
        return ZoneInfo(tz_name)
    # A tzdata directory key such as "America" surfaces as IsADirectoryError
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ConfigurationError(f'Unknown timezone: {tz_name}') from exc


@tracer.capture_method
def day_of_week(now: Optional[datetime] = None, tz_name: Optional[str] = None) -> str:
    """
    Return the English weekday name for ``now`` in ``tz_name``.

    Args:
        now: Moment to evaluate, defaults to the current time. Naive values are treated as UTC.
        tz_name: IANA timezone name, defaults to UTC.

    Returns:
        Weekday name such as ``"Tuesday"``

    Raises:
        ConfigurationError: If ``tz_name`` is not a known timezone
    """
    tz = _resolve_timezone(tz_name)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    # strftime('%A') depends on the process locale
    return _WEEKDAYS[now.astimezone(tz).weekday()]


def greeting_message(weekday: str) -> str:
    return f'hello world, happy {weekday}!'
