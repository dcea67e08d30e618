"""Service for VPTS files, rows and chart data of a radar."""
from datetime import timedelta
from typing import List, Optional
import pandas as pd

from backend.config import settings
from backend.data.radar_repository import RadarRepository
from backend.data.vpts_repository import VptsRepository
from backend.schemas.vpts import (
    FileListResponse,
    FileReference,
    IntegratedProfileResponse,
    ProfileGridResponse,
    ProfileRowSchema,
    TimelineResponse,
    TimelineSegment,
    VptsResponse,
)
from data_pipelines.services.date_range_expander import to_utc_date
from data_pipelines.services.daylight_service import DaylightService
from data_pipelines.services.profile_grid_builder import ProfileGridBuilder


class RangeTooLongError(ValueError):
    """Raised when a requested date range spans more days than allowed."""

    def __init__(self, days: int, max_days: int):
        super().__init__(f"Date range of {days} days exceeds the maximum of {max_days} days")
        self.days = days
        self.max_days = max_days


class VptsService:
    """
    Service for VPTS operations.

    Every method returns None for an unknown radar, lets InvalidRangeError
    propagate when start is after end and raises RangeTooLongError for ranges
    longer than max_range_days.
    """

    def __init__(
        self,
        radar_repo: RadarRepository = None,
        vpts_repo: VptsRepository = None,
        daylight_service: DaylightService = None,
        grid_builder: ProfileGridBuilder = None,
        max_range_days: int = None,
    ):
        self.radar_repo = radar_repo or RadarRepository()
        self.vpts_repo = vpts_repo or VptsRepository()
        self.daylight_service = daylight_service or DaylightService()
        self.grid_builder = grid_builder or ProfileGridBuilder(
            temporal_resolution=settings.temporal_resolution,
        )
        self.max_range_days = max_range_days or settings.max_range_days

    def _check_span(self, start_date: str, end_date: str) -> None:
        """Reject ranges longer than max_range_days before anything is expanded."""
        days = (to_utc_date(end_date) - to_utc_date(start_date)).days + 1
        if days > self.max_range_days:
            raise RangeTooLongError(days, self.max_range_days)

    def get_files(self, odim_code: str, start_date: str, end_date: str) -> Optional[FileListResponse]:
        """Get the daily file references for a date range."""
        radar = self.radar_repo.get_radar_by_code(odim_code)
        if radar is None:
            return None
        self._check_span(start_date, end_date)

        files = self.vpts_repo.list_files(radar.odim_code, start_date, end_date)
        parse_stamp = self.vpts_repo.expander.parse_date_stamp
        return FileListResponse(
            odim_code=radar.odim_code,
            files=[
                FileReference(
                    date=parse_stamp(reference).isoformat(),
                    path=reference,
                    exists=exists,
                )
                for reference, exists in files
            ],
        )

    def get_rows(self, odim_code: str, start_date: str, end_date: str) -> Optional[VptsResponse]:
        """Get all parsed rows for a date range."""
        radar = self.radar_repo.get_radar_by_code(odim_code)
        if radar is None:
            return None
        self._check_span(start_date, end_date)

        rows = self.vpts_repo.load_rows(radar.odim_code, start_date, end_date)
        return VptsResponse(
            odim_code=radar.odim_code,
            rows=[ProfileRowSchema(**row.to_dict()) for row in rows],
        )

    def get_profile_grid(
        self,
        odim_code: str,
        start_date: str,
        end_date: str,
        variable: str = "dens",
    ) -> Optional[ProfileGridResponse]:
        """Get the height x time grid of one variable for the VP chart."""
        radar = self.radar_repo.get_radar_by_code(odim_code)
        if radar is None:
            return None
        self._check_span(start_date, end_date)

        rows = self.vpts_repo.load_rows(radar.odim_code, start_date, end_date)
        grid = self.grid_builder.build_grid(rows, variable=variable)
        return ProfileGridResponse(odim_code=radar.odim_code, **grid.to_dict())

    def get_integrated_profile(
        self, odim_code: str, start_date: str, end_date: str,
    ) -> Optional[IntegratedProfileResponse]:
        """Get the vertically integrated series for the VPI chart."""
        radar = self.radar_repo.get_radar_by_code(odim_code)
        if radar is None:
            return None
        self._check_span(start_date, end_date)

        rows = self.vpts_repo.load_rows(radar.odim_code, start_date, end_date)
        integrated = self.grid_builder.integrate(rows)
        return IntegratedProfileResponse(odim_code=radar.odim_code, **integrated.to_dict())

    def get_timeline(self, odim_code: str, start_date: str, end_date: str) -> Optional[TimelineResponse]:
        """
        Get day/twilight/night segments covering the whole date range.

        Segments are sampled at the VPTS temporal resolution from 00:00 UTC of
        the first day to the last step of the last day.
        """
        radar = self.radar_repo.get_radar_by_code(odim_code)
        if radar is None:
            return None
        self._check_span(start_date, end_date)

        dates = self.vpts_repo.expander.expand_dates(start_date, end_date)
        timestamps = pd.date_range(
            start=pd.Timestamp(dates[0].isoformat(), tz="UTC"),
            end=pd.Timestamp((dates[-1] + timedelta(days=1)).isoformat(), tz="UTC"),
            freq=f"{settings.temporal_resolution}s",
            inclusive="left",
        )
        segments: List[dict] = self.daylight_service.build_timeline(
            radar.latitude, radar.longitude, timestamps,
        )
        return TimelineResponse(
            odim_code=radar.odim_code,
            segments=[TimelineSegment(**segment) for segment in segments],
        )
