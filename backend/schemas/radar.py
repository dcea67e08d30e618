"""Pydantic schemas for radars."""
from pydantic import BaseModel


class RadarBase(BaseModel):
    """Radar site schema."""

    odim_code: str
    location: str
    country: str
    latitude: float
    longitude: float
    timezone: str
