"""Service for building height x time grids from profile rows."""
from typing import List, Tuple
import numpy as np

from data_pipelines.config import (
    AVAILABLE_HEIGHTS,
    HEIGHT_BIN_WIDTH,
    MS_TO_KMH,
    TEMPORAL_RESOLUTION,
)
from data_pipelines.models.grid import IntegratedProfile, ProfileGrid
from data_pipelines.models.profile import ProfileRow, is_invalid

# Grid variable (VPTS column) -> ProfileRow field
GRID_VARIABLES = {
    "dens": "density",
    "ff": "speed",
    "dd": "direction",
}


class ProfileGridBuilder:
    """
    Builds the gridded data behind the VP (height x time) and VPI charts.

    Rows are placed in the cell of their height bin and of their timestamp
    floored to the temporal resolution. The time axis runs without gaps from
    the first to the last observed step; cells without data hold NaN.
    """

    def __init__(
        self,
        heights: List[int] = AVAILABLE_HEIGHTS,
        temporal_resolution: int = TEMPORAL_RESOLUTION,
    ):
        """
        Initialize the builder.

        Args:
            heights: Height bin bottoms in metres, ascending and evenly spaced
            temporal_resolution: Time step in seconds
        """
        self.heights = list(heights)
        self.temporal_resolution = temporal_resolution
        self._height_to_idx = {float(h): i for i, h in enumerate(self.heights)}

        if len(self.heights) > 1:
            self.bin_width = float(self.heights[1] - self.heights[0])
        else:
            self.bin_width = float(HEIGHT_BIN_WIDTH)

    def _index_rows(
        self, rows: List[ProfileRow],
    ) -> Tuple[np.ndarray, List[Tuple[int, int, ProfileRow]]]:
        """
        Locate each usable row on the grid.

        Returns:
            (times, cells) where times is the datetime64[s] axis and cells is a
            list of (time_idx, height_idx, row). Rows without a timestamp or
            with a height outside the grid are left out.
        """
        step_seconds = []
        placed = []
        for row in rows:
            if row.timestamp is None or is_invalid(row.height):
                continue
            height_idx = self._height_to_idx.get(float(row.height))
            if height_idx is None:
                continue
            epoch_s = int(row.timestamp.timestamp())
            step_seconds.append(epoch_s - epoch_s % self.temporal_resolution)
            placed.append((height_idx, row))

        if not placed:
            return np.array([], dtype="datetime64[s]"), []

        first = min(step_seconds)
        last = max(step_seconds)
        n_steps = (last - first) // self.temporal_resolution + 1
        times = (
            np.arange(n_steps, dtype=np.int64) * self.temporal_resolution + first
        ).astype("datetime64[s]")

        cells = [
            ((s - first) // self.temporal_resolution, height_idx, row)
            for s, (height_idx, row) in zip(step_seconds, placed)
        ]
        return times, cells

    def _fill(
        self, times: np.ndarray, cells: List[Tuple[int, int, ProfileRow]], field: str,
    ) -> np.ndarray:
        values = np.full((len(self.heights), len(times)), np.nan, dtype=np.float64)
        for time_idx, height_idx, row in cells:
            value = getattr(row, field)
            values[height_idx, time_idx] = np.nan if is_invalid(value) else value
        return values

    def build_grid(self, rows: List[ProfileRow], variable: str = "dens") -> ProfileGrid:
        """
        Build a height x time grid of one variable.

        Args:
            rows: Parsed profile rows, any order
            variable: VPTS column to grid ("dens", "ff" or "dd")

        Returns:
            ProfileGrid; duplicate cells keep the value of the last row

        Raises:
            ValueError: If the variable is not supported
        """
        if variable not in GRID_VARIABLES:
            raise ValueError(
                f"Unknown variable {variable!r}, expected one of {sorted(GRID_VARIABLES)}"
            )

        times, cells = self._index_rows(rows)
        return ProfileGrid(
            variable=variable,
            heights=self.heights,
            times=times,
            values=self._fill(times, cells, GRID_VARIABLES[variable]),
        )

    def integrate(self, rows: List[ProfileRow]) -> IntegratedProfile:
        """
        Integrate density over height for every time step.

        vid = sum(dens * dh / 1000), mtr = sum(dens * ff * 3.6 * dh / 1000),
        with dh the height bin width in metres. Cells with invalid values are
        skipped; steps with no valid cell are NaN.
        """
        times, cells = self._index_rows(rows)
        dens = self._fill(times, cells, "density")
        speed = self._fill(times, cells, "speed")
        layer_km = self.bin_width / 1000.0

        vid_terms = dens * layer_km
        mtr_terms = dens * speed * MS_TO_KMH * layer_km

        vid = np.where(
            np.all(np.isnan(vid_terms), axis=0), np.nan, np.nansum(vid_terms, axis=0)
        )
        mtr = np.where(
            np.all(np.isnan(mtr_terms), axis=0), np.nan, np.nansum(mtr_terms, axis=0)
        )
        return IntegratedProfile(times=times, vid=vid, mtr=mtr)
