"""Service for reading daily VPTS files into profile rows."""
from pathlib import Path
from typing import List, Optional, Union
import numpy as np
import pandas as pd

from data_pipelines.config import NUM_HEADER_LINES, VPTS_COLUMNS
from data_pipelines.models.profile import ProfileRow, is_invalid
from data_pipelines.services.date_range_expander import DateRangeExpander
from data_pipelines.services.profile_row_parser import ProfileRowParser


class VptsReader:
    """
    Reader for VPTS CSV files.

    Each file starts with a fixed number of non-data header lines, followed
    by a comma-delimited table whose header names the columns. All cells are
    read as raw text and handed to the ProfileRowParser for coercion.
    """

    def __init__(
        self,
        num_header_lines: int = NUM_HEADER_LINES,
        parser: Optional[ProfileRowParser] = None,
        expander: Optional[DateRangeExpander] = None,
    ):
        """
        Initialize the reader.

        Args:
            num_header_lines: Leading lines to skip before the CSV header
            parser: Row parser (default: permissive ProfileRowParser)
            expander: Date range expander used by read_range
        """
        self.num_header_lines = num_header_lines
        self.parser = parser or ProfileRowParser()
        self.expander = expander or DateRangeExpander()

    def read_raw(self, path: Union[str, Path]) -> pd.DataFrame:
        """
        Read a file as a DataFrame of untouched text cells.

        Lines with more cells than the header are truncated to the header
        width; lines with fewer cells get empty text for the missing ones.
        """
        columns = pd.read_csv(path, skiprows=self.num_header_lines, nrows=0).columns
        return pd.read_csv(
            path,
            skiprows=self.num_header_lines,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            engine="python",
            on_bad_lines=lambda fields: fields[:len(columns)],
        ).fillna("")

    def read(self, path: Union[str, Path]) -> List[ProfileRow]:
        """Read and parse every row of a single file."""
        df = self.read_raw(path)
        return self.parser.parse_rows(df.to_dict("records"))

    def read_range(self, start, end, directory: str = "./") -> List[ProfileRow]:
        """
        Read all daily files from start to end (inclusive) in date order.

        Missing files are reported and skipped.

        Raises:
            InvalidRangeError: If start is after end
        """
        rows: List[ProfileRow] = []
        for reference in self.expander.expand(start, end, directory):
            path = Path(reference)
            if not path.exists():
                print(f"Warning: {reference} not found, skipping")
                continue
            rows.extend(self.read(path))
        return rows


def to_dataframe(rows: List[ProfileRow]) -> pd.DataFrame:
    """
    Convert profile rows to a DataFrame with the VPTS column names.

    Invalid numerics become NaN, missing timestamps NaT.
    """

    def _float(value) -> float:
        return np.nan if is_invalid(value) else value

    df = pd.DataFrame(
        {
            "datetime": pd.to_datetime([row.timestamp for row in rows], utc=True),
            "height": np.array([_float(row.height) for row in rows], dtype=np.float64),
            "dd": np.array([_float(row.direction) for row in rows], dtype=np.float64),
            "ff": np.array([_float(row.speed) for row in rows], dtype=np.float64),
            "dens": np.array([_float(row.density) for row in rows], dtype=np.float64),
            "sd_vvp": [row.standard_deviation for row in rows],
        },
        columns=VPTS_COLUMNS,
    )
    return df
