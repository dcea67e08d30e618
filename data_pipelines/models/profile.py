"""Vertical profile row model."""
from datetime import datetime
from typing import Optional, Union

from attrs import define


class InvalidNumeric:
    """Marker for a numeric field whose raw text could not be coerced."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INVALID_NUMERIC"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (InvalidNumeric, ())


INVALID_NUMERIC = InvalidNumeric()

Numeric = Union[float, InvalidNumeric]


def is_invalid(value) -> bool:
    """Check whether a coerced field holds the invalid-numeric marker."""
    return value is INVALID_NUMERIC


@define(frozen=True)
class ProfileRow:
    """One (time, height) measurement of a vertical profile time series."""

    timestamp: Optional[datetime]  # UTC, tz-aware
    height: Numeric  # m
    direction: Numeric  # degrees
    speed: Numeric  # m/s
    density: Numeric
    standard_deviation: Optional[str]  # raw sd_vvp text

    @property
    def epoch_ms(self) -> Optional[int]:
        """Timestamp as milliseconds since 1970-01-01 UTC."""
        if self.timestamp is None:
            return None
        return round(self.timestamp.timestamp() * 1000)

    def to_dict(self) -> dict:
        """Convert to serializable dictionary (invalid numerics become None)."""

        def _value(v):
            return None if is_invalid(v) else v

        return {
            "datetime": self.epoch_ms,
            "height": _value(self.height),
            "dd": _value(self.direction),
            "ff": _value(self.speed),
            "dens": _value(self.density),
            "sd_vvp": self.standard_deviation,
        }
