"""Radar model for weather radar sites."""
from attrs import define


@define
class Radar:
    """A weather radar site identified by its ODIM code."""

    odim_code: str
    location: str
    country: str
    latitude: float
    longitude: float
    timezone: str  # IANA name; data timestamps are UTC regardless

    @classmethod
    def from_dict(cls, data: dict) -> "Radar":
        """Create a Radar from a config entry."""
        return cls(
            odim_code=data["odim_code"],
            location=data["location"],
            country=data["country"],
            latitude=data["latitude"],
            longitude=data["longitude"],
            timezone=data["timezone"],
        )
