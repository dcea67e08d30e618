"""API routes for dashboard configuration."""
from fastapi import APIRouter

from backend.config import settings
from backend.schemas.chart_config import DashboardConfig, VptsFormat
from data_pipelines.config import (
    AVAILABLE_HEIGHTS,
    TIMELINE_CHART_STYLE,
    VP_CHART_STYLE,
    VPI_CHART_STYLE,
)

router = APIRouter(prefix="/config", tags=["config"])


@router.get("", response_model=DashboardConfig)
async def get_config() -> DashboardConfig:
    """Get the static dashboard configuration: defaults, VPTS format and chart styles."""
    return DashboardConfig(
        data_base_url=settings.data_base_url,
        initial_radar_odim_code=settings.initial_radar_odim_code,
        localized_date_format=settings.localized_date_format,
        vpts_format=VptsFormat(
            available_heights=AVAILABLE_HEIGHTS,
            temporal_resolution=settings.temporal_resolution,
            num_header_lines=settings.num_header_lines,
        ),
        vp_chart_style=VP_CHART_STYLE,
        vpi_chart_style=VPI_CHART_STYLE,
        timeline_chart_style=TIMELINE_CHART_STYLE,
    )
