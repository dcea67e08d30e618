"""Repository for radar site data access."""
from typing import Dict, List, Optional

from data_pipelines.config import AVAILABLE_RADARS
from data_pipelines.models.radar import Radar


class RadarRepository:
    """Repository for accessing the static radar site list."""

    def __init__(self, radars: List[dict] = None):
        """Initialize repository with radar config entries (default: AVAILABLE_RADARS)."""
        entries = AVAILABLE_RADARS if radars is None else radars
        self._radars = sorted(
            (Radar.from_dict(entry) for entry in entries),
            key=lambda radar: radar.location,
        )
        self._by_code: Dict[str, Radar] = {radar.odim_code: radar for radar in self._radars}

    def get_all_radars(self) -> List[Radar]:
        """Get all radars sorted by location."""
        return list(self._radars)

    def get_radar_by_code(self, odim_code: str) -> Optional[Radar]:
        """Get a single radar by ODIM code (case-insensitive)."""
        return self._by_code.get(odim_code.lower())
