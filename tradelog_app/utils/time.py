"""
Time utilities for message timestamps and run metadata.

Message timestamps come from the export as RFC 3339 strings and always carry
an offset. Wall-clock time is only used to stamp the report.
"""

import re
import time
from datetime import datetime, timedelta, timezone
from typing import Optional


_RFC3339_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(?:([Zz])|([+-])(\d{2}):(\d{2}))"
)


def parse_rfc3339(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an RFC 3339 date-time with offset.

    The full ``date-time`` production is required: seconds, an optional
    dot-separated fraction and either ``Z`` or a ``+HH:MM``/``-HH:MM`` offset.
    Surrounding whitespace is not accepted.

    Args:
        value: Raw timestamp text, e.g. ``2024-05-01T12:30:00+00:00`` or ``...Z``

    Returns:
        Timezone-aware datetime, or None if the text is empty or malformed
    """
    if not value:
        return None

    match = _RFC3339_RE.fullmatch(value)
    if match is None:
        return None

    (year, month, day, hour, minute, second, fraction,
     zulu, sign, offset_hours, offset_minutes) = match.groups()

    # Sub-microsecond digits are truncated
    microsecond = int((fraction or "0")[:6].ljust(6, "0"))

    try:
        if zulu:
            tz = timezone.utc
        else:
            if int(offset_minutes) > 59:
                return None
            offset = timedelta(hours=int(offset_hours), minutes=int(offset_minutes))
            tz = timezone(-offset if sign == "-" else offset)

        return datetime(int(year), int(month), int(day), int(hour), int(minute),
                        int(second), microsecond, tzinfo=tz)
    except ValueError:
        return None


def to_epoch_seconds(ts: datetime) -> int:
    """Whole seconds since the Unix epoch, truncated towards negative infinity."""
    return int(ts.timestamp() // 1)


def utc_now_epoch() -> int:
    """Current wall-clock time as Unix epoch seconds."""
    return to_epoch_seconds(datetime.now(timezone.utc))


def elapsed_ms(start: float, end: Optional[float] = None) -> int:
    """
    Whole milliseconds elapsed since a ``time.perf_counter()`` reading.

    Args:
        start: perf_counter value taken at the start
        end: perf_counter value taken at the end, defaults to now
    """
    if end is None:
        end = time.perf_counter()
    return int((end - start) * 1000)
