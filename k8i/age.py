"""Human-readable node ages."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

_MISSING = "x"
_ZERO_TIME = datetime(1, 1, 1)
_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)


def _is_zero(moment: datetime) -> bool:
    offset = moment.utcoffset() or timedelta(0)
    try:
        return moment.replace(tzinfo=None) - offset == _ZERO_TIME
    except OverflowError:
        return False


def _as_aware(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def format_age(creation_time: datetime | None, now: datetime) -> str:
    """Format the time since creation_time as "5d12h", "3h45m" or "12m".

    A missing or zero creation time gives "x".
    """
    if creation_time is None or _is_zero(creation_time):
        return _MISSING

    elapsed = max(_as_aware(now) - _as_aware(creation_time), timedelta(0))
    total_minutes = elapsed // timedelta(minutes=1)
    total_hours = total_minutes // 60
    days, hours = divmod(total_hours, 24)
    minutes = total_minutes % 60

    if days >= 1:
        return f"{days}d{hours}h"
    if total_hours >= 1:
        return f"{total_hours}h{minutes}m"
    return f"{total_minutes}m"


def _parse_rfc3339(text: str) -> datetime | None:
    match = _RFC3339.fullmatch(text)
    if match is None:
        return None
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    fraction = match.group(7) or ""
    microsecond = int((fraction + "000000")[:6])
    zone = match.group(8)
    try:
        if zone == "Z":
            tz = timezone.utc
        else:
            sign = -1 if zone[0] == "-" else 1
            hh, mm = int(zone[1:3]), int(zone[4:6])
            tz = timezone(sign * timedelta(hours=hh, minutes=mm))
        return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tz)
    except ValueError:
        return None


def format_age_from_string(timestamp: str) -> str:
    """Format the age of an RFC 3339 timestamp relative to now.

    Empty, unparseable or zero timestamps give "x".
    """
    if not timestamp:
        return _MISSING
    moment = _parse_rfc3339(timestamp)
    if moment is None or _is_zero(moment):
        return _MISSING
    return format_age(moment, datetime.now(timezone.utc))