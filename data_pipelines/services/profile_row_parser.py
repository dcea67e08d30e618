"""Service for coercing raw VPTS table rows into typed profile rows."""
from datetime import datetime
from typing import Iterable, List, Mapping, Optional
import math
import pandas as pd

from data_pipelines.config import RELATIVE_DATE_KEYWORDS, VPTS_COLUMNS
from data_pipelines.models.profile import INVALID_NUMERIC, Numeric, ProfileRow


class MalformedRowError(ValueError):
    """Raised in strict mode when a row lacks required columns."""

    def __init__(self, missing: List[str]):
        super().__init__(f"Row is missing columns: {missing}")
        self.missing = missing


def parse_numeric(raw: Optional[str]) -> Numeric:
    """Coerce raw text to float, or INVALID_NUMERIC if it is not a number."""
    if raw is None:
        return INVALID_NUMERIC
    text = str(raw).strip()
    # float() accepts digit-group underscores, which are not numbers in VPTS text
    if "_" in text:
        return INVALID_NUMERIC
    try:
        value = float(text)
    except ValueError:
        return INVALID_NUMERIC
    if math.isnan(value):
        return INVALID_NUMERIC
    return value


def parse_utc_timestamp(raw: Optional[str]) -> Optional[datetime]:
    """
    Parse raw text into a tz-aware UTC datetime.

    Text with an explicit offset is converted to UTC; text without one is
    taken as UTC (radar timestamps are UTC regardless of the host timezone).
    Returns None when the text is absent, unparseable or a relative keyword
    such as "now".
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if text.lower() in RELATIVE_DATE_KEYWORDS:
        return None
    try:
        ts = pd.Timestamp(text)
    except (ValueError, TypeError):
        return None
    if pd.isna(ts):
        return None

    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    else:
        ts = ts.tz_convert("UTC")
    return ts.to_pydatetime()


class ProfileRowParser:
    """
    Parser turning a column-name -> raw-text mapping into a ProfileRow.

    A bad field never fails the row: numeric fields that cannot be coerced
    become INVALID_NUMERIC. Extra columns are ignored.
    """

    def __init__(self, strict: bool = False):
        """
        Initialize the parser.

        Args:
            strict: Raise MalformedRowError for rows missing any VPTS column
                    instead of filling the missing fields with sentinels
        """
        self.strict = strict

    def parse(self, row: Mapping[str, str]) -> ProfileRow:
        """
        Parse one row.

        Raises:
            MalformedRowError: Only in strict mode, if columns are missing
        """
        if self.strict:
            missing = [col for col in VPTS_COLUMNS if col not in row]
            if missing:
                raise MalformedRowError(missing)

        return ProfileRow(
            timestamp=parse_utc_timestamp(row.get("datetime")),
            height=parse_numeric(row.get("height")),
            direction=parse_numeric(row.get("dd")),
            speed=parse_numeric(row.get("ff")),
            density=parse_numeric(row.get("dens")),
            standard_deviation=row.get("sd_vvp"),
        )

    def parse_rows(self, rows: Iterable[Mapping[str, str]]) -> List[ProfileRow]:
        """Parse every row of an iterable."""
        return [self.parse(row) for row in rows]
