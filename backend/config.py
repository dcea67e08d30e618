"""Backend configuration."""
from pathlib import Path
from pydantic_settings import BaseSettings

from data_pipelines.config import (
    DATA_BASE_URL,
    INITIAL_RADAR_ODIM_CODE,
    LOCALIZED_DATE_FORMAT,
    NUM_HEADER_LINES,
    TEMPORAL_RESOLUTION,
)


class Settings(BaseSettings):
    """Application settings."""

    # Data paths
    project_root: Path = Path(__file__).parent.parent
    data_dir: Path = project_root / "data"  # One subdirectory per ODIM code
    data_base_url: str = DATA_BASE_URL

    # VPTS format
    num_header_lines: int = NUM_HEADER_LINES
    temporal_resolution: int = TEMPORAL_RESOLUTION  # seconds
    max_range_days: int = 366  # Longest date range served per request

    # API settings
    api_title: str = "VPTS Dashboard API"
    api_version: str = "1.0.0"
    cors_origins: list = ["http://localhost:5173", "http://localhost:3000"]

    # Dashboard defaults
    initial_radar_odim_code: str = INITIAL_RADAR_ODIM_CODE
    localized_date_format: str = LOCALIZED_DATE_FORMAT

    class Config:
        env_prefix = "VPTS_"


settings = Settings()
