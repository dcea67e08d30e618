"""FastAPI dependencies for dependency injection."""
from functools import lru_cache

from backend.data.radar_repository import RadarRepository
from backend.data.vpts_repository import VptsRepository
from backend.services.radar_service import RadarService
from backend.services.vpts_service import VptsService
from data_pipelines.services.daylight_service import DaylightService


@lru_cache()
def get_radar_repository() -> RadarRepository:
    """Get cached radar repository instance."""
    return RadarRepository()


@lru_cache()
def get_vpts_repository() -> VptsRepository:
    """Get cached VPTS repository instance."""
    return VptsRepository()


@lru_cache()
def get_daylight_service() -> DaylightService:
    """Get cached daylight service instance (keeps its sun times cache)."""
    return DaylightService()


def get_radar_service() -> RadarService:
    """Get radar service instance."""
    return RadarService(
        radar_repo=get_radar_repository(),
    )


def get_vpts_service() -> VptsService:
    """Get VPTS service instance."""
    return VptsService(
        radar_repo=get_radar_repository(),
        vpts_repo=get_vpts_repository(),
        daylight_service=get_daylight_service(),
    )
