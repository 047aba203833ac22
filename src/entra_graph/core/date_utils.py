"""
Date and timezone utilities.

Graph timestamps are ISO 8601 strings in UTC with a ``Z`` suffix and up to
seven fractional digits. All conversions go through here.
"""

import re
from datetime import datetime, timedelta

import pytz

_FRACTION_RE = re.compile(r"\.(\d+)")


class DateUtils:
    """Utilities for Graph timestamp handling."""

    @staticmethod
    def utc_now() -> datetime:
        """Current time as an aware UTC datetime."""
        return datetime.now(pytz.UTC)

    @staticmethod
    def days_from_now(days: int) -> datetime:
        """Aware UTC datetime ``days`` days from now (negative for the past)."""
        return DateUtils.utc_now() + timedelta(days=days)

    @staticmethod
    def to_utc(dt: datetime) -> datetime:
        """
        Convert datetime to UTC.

        Args:
            dt: Datetime object (can be naive or aware)

        Returns:
            Datetime in UTC (timezone-aware)
        """
        if dt.tzinfo is None:
            # Assume UTC if no timezone
            return pytz.UTC.localize(dt)
        return dt.astimezone(pytz.UTC)

    @staticmethod
    def parse_graph_datetime(value: str) -> datetime:
        """
        Parse a Graph timestamp into an aware UTC datetime.

        Accepts a trailing ``Z`` or an explicit offset. Fractional seconds
        longer than microsecond precision are truncated.

        Args:
            value: Timestamp string (e.g. '2021-06-01T10:15:30.1234567Z')

        Returns:
            Datetime in UTC (timezone-aware)

        Raises:
            ValueError: If the string is not an ISO 8601 timestamp
        """
        if not isinstance(value, str) or not value:
            raise ValueError(f"Invalid timestamp: {value!r}")

        text = value.strip()
        if text.endswith("Z") or text.endswith("z"):
            text = text[:-1] + "+00:00"

        # datetime.fromisoformat accepts at most six fractional digits
        text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)

        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValueError(f"Invalid timestamp: {value!r}")

        return DateUtils.to_utc(parsed)

    @staticmethod
    def format_graph_datetime(dt: datetime) -> str:
        """
        Format a datetime the way Graph expects it.

        Args:
            dt: Datetime object (naive values are taken as UTC)

        Returns:
            ISO 8601 string in UTC with a 'Z' suffix
        """
        return DateUtils.to_utc(dt).isoformat().replace("+00:00", "Z")
