"""API routes for radars."""
from typing import List
from fastapi import APIRouter, Depends, HTTPException

from backend.schemas.radar import RadarBase
from backend.services.radar_service import RadarService
from backend.api.dependencies import get_radar_service

router = APIRouter(prefix="/radars", tags=["radars"])


@router.get("", response_model=List[RadarBase])
async def get_all_radars(
    radar_service: RadarService = Depends(get_radar_service),
) -> List[RadarBase]:
    """Get all radars, sorted by location."""
    return radar_service.get_all_radars()


@router.get("/{odim_code}", response_model=RadarBase)
async def get_radar(
    odim_code: str,
    radar_service: RadarService = Depends(get_radar_service),
) -> RadarBase:
    """Get a single radar by ODIM code."""
    radar = radar_service.get_radar(odim_code)
    if radar is None:
        raise HTTPException(status_code=404, detail="Radar not found")
    return radar
