"""Pydantic schemas for vertical profile time series data."""
from datetime import datetime
from pydantic import BaseModel
from typing import List, Optional


class FileReference(BaseModel):
    """A daily VPTS file and whether it is available."""

    date: str  # "YYYY-MM-DD"
    path: str
    exists: bool


class FileListResponse(BaseModel):
    """Response schema for the files of a date range."""

    odim_code: str
    files: List[FileReference]


class ProfileRowSchema(BaseModel):
    """A single parsed VPTS row; null marks an absent or unparseable value."""

    datetime: Optional[int]  # epoch milliseconds, UTC
    height: Optional[float]
    dd: Optional[float]
    ff: Optional[float]
    dens: Optional[float]
    sd_vvp: Optional[str]


class VptsResponse(BaseModel):
    """Response schema for VPTS rows."""

    odim_code: str
    rows: List[ProfileRowSchema]


class ProfileGridResponse(BaseModel):
    """Response schema for the VP chart grid."""

    odim_code: str
    variable: str
    heights: List[float]
    times: List[int]  # epoch milliseconds, UTC
    values: List[List[Optional[float]]]  # heights x times


class IntegratedProfileResponse(BaseModel):
    """Response schema for the VPI chart series."""

    odim_code: str
    times: List[int]  # epoch milliseconds, UTC
    vid: List[Optional[float]]  # birds/km^2
    mtr: List[Optional[float]]  # birds/km/h


class TimelineSegment(BaseModel):
    """A run of timestamps sharing one daylight class."""

    start: datetime
    end: datetime
    period: str  # "day", "twilight" or "night"


class TimelineResponse(BaseModel):
    """Response schema for the daylight timeline chart."""

    odim_code: str
    segments: List[TimelineSegment]
