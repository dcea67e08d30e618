"""Repository for VPTS file access."""
import os
from pathlib import Path
from typing import List, Tuple

from backend.config import settings
from data_pipelines.models.profile import ProfileRow
from data_pipelines.services.date_range_expander import DateRangeExpander
from data_pipelines.services.vpts_reader import VptsReader


class VptsRepository:
    """Repository for reading daily VPTS files stored per radar under data_dir."""

    def __init__(self, data_dir: Path = None, num_header_lines: int = None):
        self.data_dir = Path(data_dir or settings.data_dir)
        self.expander = DateRangeExpander()
        self.reader = VptsReader(
            num_header_lines=(
                settings.num_header_lines if num_header_lines is None else num_header_lines
            ),
            expander=self.expander,
        )

    def get_directory(self, odim_code: str) -> str:
        """Get the directory prefix (with trailing separator) for a radar's files."""
        return str(self.data_dir / odim_code) + os.sep

    def list_files(self, odim_code: str, start, end) -> List[Tuple[str, bool]]:
        """
        Get the file references for a radar and date range.

        Returns:
            List of (reference, exists) in date order

        Raises:
            InvalidRangeError: If start is after end
        """
        references = self.expander.expand(start, end, self.get_directory(odim_code))
        return [(reference, Path(reference).exists()) for reference in references]

    def load_rows(self, odim_code: str, start, end) -> List[ProfileRow]:
        """
        Load all profile rows for a radar and date range.

        Raises:
            InvalidRangeError: If start is after end
        """
        return self.reader.read_range(start, end, self.get_directory(odim_code))
