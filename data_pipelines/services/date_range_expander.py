"""Service for expanding a date range into daily VPTS file references."""
from datetime import date, datetime, timedelta, timezone
from numbers import Number
from typing import Callable, List, Optional
import re
import pandas as pd

from data_pipelines.config import (
    DATE_STAMP_FORMAT,
    RELATIVE_DATE_KEYWORDS,
    VPTS_FILE_PREFIX,
    VPTS_FILE_SUFFIX,
)


class InvalidRangeError(ValueError):
    """Raised when the start of a date range falls after its end."""

    def __init__(self, start: date, end: date):
        super().__init__(f"Start date {start.isoformat()} is after end date {end.isoformat()}")
        self.start = start
        self.end = end


def to_utc_date(value) -> date:
    """
    Normalize a date-like value to its UTC calendar date.

    Accepts date, datetime (naive values are taken as UTC), pandas Timestamp,
    numpy datetime64 and any string pandas can parse as a timestamp.

    Raises:
        ValueError: If the value cannot be parsed, is a relative keyword such
            as "today", or is a bare number
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, Number):
        raise ValueError(f"Cannot parse date from a number: {value!r}")
    if isinstance(value, str) and value.strip().lower() in RELATIVE_DATE_KEYWORDS:
        raise ValueError(f"Relative dates are not supported: {value!r}")

    ts = pd.Timestamp(value)
    if pd.isna(ts):
        raise ValueError(f"Cannot parse date: {value!r}")
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC")
    return ts.date()


def date_stamp(day: date) -> str:
    """Format a date as the 8-digit YYYYMMDD stamp used in file names."""
    # strftime does not zero-pad years below 1000 on every platform
    return f"{day.year:04d}{day.month:02d}{day.day:02d}"


class DateRangeExpander:
    """
    Expands an inclusive date range into one file reference per day.

    Files are assumed to have daily frequency with the date in the file name,
    e.g. ``example_vpts_20160901.csv``.
    """

    def __init__(
        self,
        prefix: str = VPTS_FILE_PREFIX,
        suffix: str = VPTS_FILE_SUFFIX,
        on_date: Optional[Callable[[date], None]] = None,
    ):
        """
        Initialize the expander.

        Args:
            prefix: File name part before the date stamp
            suffix: File name part after the date stamp
            on_date: Optional observer called with each expanded date
        """
        self.prefix = prefix
        self.suffix = suffix
        self.on_date = on_date
        self._stamp_pattern = re.compile(
            re.escape(prefix) + r"(\d{8})" + re.escape(suffix) + "$"
        )

    def expand_dates(self, start, end) -> List[date]:
        """
        Get every calendar date from start to end, both inclusive.

        Raises:
            InvalidRangeError: If start is after end
        """
        current = to_utc_date(start)
        last = to_utc_date(end)

        if current > last:
            raise InvalidRangeError(current, last)

        dates = []
        while current <= last:
            if self.on_date is not None:
                self.on_date(current)
            dates.append(current)
            current += timedelta(days=1)
        return dates

    def file_name(self, day: date) -> str:
        """Get the file name (without directory) for a single day."""
        return f"{self.prefix}{date_stamp(day)}{self.suffix}"

    def expand(self, start, end, directory: str = "./") -> List[str]:
        """
        Compose the file references for every day in the range.

        Args:
            start: First day (date-like)
            end: Last day (date-like), inclusive
            directory: Prefix prepended verbatim to every file name

        Returns:
            File references in ascending date order

        Raises:
            InvalidRangeError: If start is after end
        """
        return [directory + self.file_name(day) for day in self.expand_dates(start, end)]

    def parse_date_stamp(self, reference: str) -> date:
        """
        Extract the date back out of a file reference.

        Raises:
            ValueError: If the reference does not follow the naming convention
        """
        match = self._stamp_pattern.search(reference)
        if match is None:
            raise ValueError(f"Not a VPTS file reference: {reference!r}")
        return datetime.strptime(match.group(1), DATE_STAMP_FORMAT).date()


_default_expander = DateRangeExpander()


def expand(start, end, directory: str = "./") -> List[str]:
    """Compose daily file references with the default naming convention."""
    return _default_expander.expand(start, end, directory)
