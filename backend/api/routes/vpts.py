"""API routes for vertical profile time series."""
from fastapi import APIRouter, Depends, Query, HTTPException

from backend.schemas.vpts import (
    FileListResponse,
    IntegratedProfileResponse,
    ProfileGridResponse,
    TimelineResponse,
    VptsResponse,
)
from backend.services.vpts_service import RangeTooLongError, VptsService
from backend.api.dependencies import get_vpts_service
from data_pipelines.services.date_range_expander import InvalidRangeError

router = APIRouter(prefix="/radars/{odim_code}", tags=["vpts"])

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


def _call(method, *args, **kwargs):
    """Run a service method, mapping range errors to 400 and unknown radars to 404."""
    try:
        result = method(*args, **kwargs)
    except (InvalidRangeError, RangeTooLongError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if result is None:
        raise HTTPException(status_code=404, detail="Radar not found")
    return result


@router.get("/files", response_model=FileListResponse)
async def get_files(
    odim_code: str,
    start_date: str = Query(..., pattern=DATE_PATTERN, description="First day (YYYY-MM-DD)"),
    end_date: str = Query(..., pattern=DATE_PATTERN, description="Last day, inclusive (YYYY-MM-DD)"),
    vpts_service: VptsService = Depends(get_vpts_service),
) -> FileListResponse:
    """Get the daily file references of a radar for a date range."""
    return _call(vpts_service.get_files, odim_code, start_date, end_date)


@router.get("/vpts", response_model=VptsResponse)
async def get_vpts(
    odim_code: str,
    start_date: str = Query(..., pattern=DATE_PATTERN),
    end_date: str = Query(..., pattern=DATE_PATTERN),
    vpts_service: VptsService = Depends(get_vpts_service),
) -> VptsResponse:
    """
    Get parsed VPTS rows of a radar for a date range.

    Timestamps are epoch milliseconds (UTC). Numeric fields that could not be
    parsed are null; missing daily files are skipped.
    """
    return _call(vpts_service.get_rows, odim_code, start_date, end_date)


@router.get("/vp", response_model=ProfileGridResponse)
async def get_vertical_profile(
    odim_code: str,
    start_date: str = Query(..., pattern=DATE_PATTERN),
    end_date: str = Query(..., pattern=DATE_PATTERN),
    variable: str = Query("dens", pattern=r"^(dens|ff|dd)$"),
    vpts_service: VptsService = Depends(get_vpts_service),
) -> ProfileGridResponse:
    """Get the height x time grid of one variable for the VP chart."""
    return _call(
        vpts_service.get_profile_grid, odim_code, start_date, end_date, variable=variable,
    )


@router.get("/vpi", response_model=IntegratedProfileResponse)
async def get_integrated_profile(
    odim_code: str,
    start_date: str = Query(..., pattern=DATE_PATTERN),
    end_date: str = Query(..., pattern=DATE_PATTERN),
    vpts_service: VptsService = Depends(get_vpts_service),
) -> IntegratedProfileResponse:
    """Get vertically integrated density (vid) and migration traffic rate (mtr)."""
    return _call(vpts_service.get_integrated_profile, odim_code, start_date, end_date)


@router.get("/timeline", response_model=TimelineResponse)
async def get_timeline(
    odim_code: str,
    start_date: str = Query(..., pattern=DATE_PATTERN),
    end_date: str = Query(..., pattern=DATE_PATTERN),
    vpts_service: VptsService = Depends(get_vpts_service),
) -> TimelineResponse:
    """Get day/twilight/night segments at the radar site for the timeline chart."""
    return _call(vpts_service.get_timeline, odim_code, start_date, end_date)
