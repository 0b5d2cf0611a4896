"""Helpers shared by the provider parsers: line numbers and timestamps."""

import logging
import re
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

_TRAILING_DIGITS = re.compile(r"(\d+)$")
_ISO_DURATION = re.compile(r"^P(?:(\d+)D)?(?:T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?)?$")

# Line ids look like "tfs:02018: :R:y01": two digits of product group, then the line
LINE_ID_PREFIX = "tfs:"
LINE_ID_MIN_LENGTH = 10
LINE_ID_GROUP_DIGITS = 2


def strip_leading_zeros(value: str) -> str:
    """Drop leading zeros but keep at least one character."""
    return value.lstrip("0") or value[-1:]


def extract_trailing_number(text: str) -> str:
    """Trailing run of digits, e.g. "tunnelbanans gröna linje 18" -> "18"."""
    match = _TRAILING_DIGITS.search(text.rstrip(" "))
    if not match:
        return ""
    return strip_leading_zeros(match.group(1))


def extract_line_from_id(line_id: str) -> str:
    """Line number from a structured line id, e.g. "tfs:02018: :R:y01" -> "18"."""
    if len(line_id) < LINE_ID_MIN_LENGTH or not line_id.startswith(LINE_ID_PREFIX):
        return ""

    segment = line_id[len(LINE_ID_PREFIX) :].split(":", 1)[0]
    if not segment:
        return ""
    if segment.isdigit() and len(segment) > LINE_ID_GROUP_DIGITS + 1:
        segment = segment[LINE_ID_GROUP_DIGITS:]
    return strip_leading_zeros(segment)


def parse_iso_timestamp(value: str | None, tz: ZoneInfo) -> datetime | None:
    """Parse an ISO timestamp into the given timezone.

    Timestamps with a "Z" or an explicit offset are converted; naive ones are
    taken as wall-clock time in ``tz``. Returns None for missing or bad input.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"Unparseable timestamp: {value!r}")
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=tz)
    return parsed.astimezone(tz)


def parse_date_time(date_str: str | None, time_str: str | None, tz: ZoneInfo) -> datetime | None:
    """Parse separate "YYYY-MM-DD" and "HH:MM[:SS]" strings as local time in ``tz``."""
    if not date_str or not time_str:
        return None
    for fmt in ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M"):
        try:
            return datetime.strptime(f"{date_str} {time_str}", fmt).replace(tzinfo=tz)
        except ValueError:
            continue
    logger.debug(f"Unparseable date/time: {date_str!r} {time_str!r}")
    return None


def parse_iso_duration(value: str | None) -> timedelta:
    """Parse an ISO-8601 duration such as "PT1H30M"; zero when unparseable."""
    if not value:
        return timedelta(0)
    match = _ISO_DURATION.match(value.strip())
    if not match:
        logger.debug(f"Unparseable duration: {value!r}")
        return timedelta(0)
    days, hours, minutes, seconds = (int(part) if part else 0 for part in match.groups())
    return timedelta(days=days, hours=hours, minutes=minutes, seconds=seconds)
