"""Pydantic schemas for dashboard configuration."""
from pydantic import BaseModel
from typing import Any, Dict, List


class VptsFormat(BaseModel):
    """Layout of the VPTS data files."""

    available_heights: List[int]
    temporal_resolution: int  # seconds
    num_header_lines: int


class DashboardConfig(BaseModel):
    """Static configuration consumed by the dashboard."""

    data_base_url: str
    initial_radar_odim_code: str
    localized_date_format: str
    vpts_format: VptsFormat
    vp_chart_style: Dict[str, Any]
    vpi_chart_style: Dict[str, Any]
    timeline_chart_style: Dict[str, Any]
