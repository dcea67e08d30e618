"""Gridded vertical profile data structures for the VP and VPI charts."""
from attrs import define
from typing import List
import numpy as np


def _nan_to_none(values: np.ndarray) -> list:
    """Convert a float array to a list with NaN replaced by None."""
    return [None if np.isnan(v) else float(v) for v in values]


def _times_to_epoch_ms(times: np.ndarray) -> List[int]:
    return times.astype("datetime64[ms]").astype(np.int64).tolist()


@define
class ProfileGrid:
    """One profile variable on a regular height x time grid."""

    variable: str  # Source column, e.g. "dens"
    heights: list  # Bin bottoms in metres (grid rows)
    times: np.ndarray  # datetime64, UTC (grid columns)
    # 2D array (heights x times), NaN where no data
    values: np.ndarray

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "variable": self.variable,
            "heights": self.heights,
            "times": _times_to_epoch_ms(self.times),
            "values": [_nan_to_none(row) for row in self.values],
        }


@define
class IntegratedProfile:
    """Vertically integrated profile time series."""

    times: np.ndarray  # datetime64, UTC
    vid: np.ndarray  # Vertically integrated density (birds/km^2)
    mtr: np.ndarray  # Migration traffic rate (birds/km/h)

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "times": _times_to_epoch_ms(self.times),
            "vid": _nan_to_none(self.vid),
            "mtr": _nan_to_none(self.mtr),
        }
