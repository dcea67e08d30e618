"""Service for radar site lookups."""
from typing import List, Optional

from backend.data.radar_repository import RadarRepository
from backend.schemas.radar import RadarBase
from data_pipelines.models.radar import Radar


def to_schema(radar: Radar) -> RadarBase:
    """Convert a Radar model to its API schema."""
    return RadarBase(
        odim_code=radar.odim_code,
        location=radar.location,
        country=radar.country,
        latitude=radar.latitude,
        longitude=radar.longitude,
        timezone=radar.timezone,
    )


class RadarService:
    """Service for radar operations."""

    def __init__(self, radar_repo: RadarRepository = None):
        """Initialize service with repository."""
        self.radar_repo = radar_repo or RadarRepository()

    def get_all_radars(self) -> List[RadarBase]:
        """Get all radars sorted by location."""
        return [to_schema(radar) for radar in self.radar_repo.get_all_radars()]

    def get_radar(self, odim_code: str) -> Optional[RadarBase]:
        """Get a single radar by ODIM code."""
        radar = self.radar_repo.get_radar_by_code(odim_code)
        if radar is None:
            return None
        return to_schema(radar)
