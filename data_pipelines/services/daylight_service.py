"""Service for classifying timestamps as day, twilight or night at a radar site."""
from datetime import date, datetime, timezone
from typing import Dict, Iterable, List, Optional
import pandas as pd
from astral import Observer
from astral.sun import sun

from data_pipelines.config import DAYLIGHT_DEPRESSION_ANGLE

DAY = "day"
TWILIGHT = "twilight"
NIGHT = "night"


class DaylightService:
    """
    Service for computing sun times and classifying timestamps by daylight.

    Uses the astral library to compute solar position based on geographic
    coordinates. VPTS timestamps are UTC, so sun times are computed in UTC too.
    """

    def __init__(self, depression_angle: float = DAYLIGHT_DEPRESSION_ANGLE):
        """
        Initialize the daylight service.

        Args:
            depression_angle: Sun depression angle bounding twilight.
                              6 = civil twilight
                             12 = nautical twilight
                             18 = astronomical twilight
        """
        self.depression_angle = depression_angle

        # Cache: (lat, lon, date) -> {"dawn", "sunrise", "sunset", "dusk"}
        self._cache: dict = {}

    def get_sun_times_utc(
        self,
        latitude: float,
        longitude: float,
        day: date,
    ) -> Dict[str, Optional[datetime]]:
        """
        Calculate dawn, sunrise, sunset and dusk in UTC for a location and date.

        Args:
            latitude: Latitude in degrees (-90 to 90)
            longitude: Longitude in degrees (-180 to 180)
            day: The date to calculate for (only the date part of a datetime is used)

        Returns:
            Dict of timezone-aware datetimes. All values are None for polar night;
            for polar day all values span the full UTC day.
        """
        date_key = day.date() if isinstance(day, datetime) else day
        cache_key = (round(latitude, 2), round(longitude, 2), date_key)
        if cache_key in self._cache:
            return self._cache[cache_key]

        observer = Observer(latitude=latitude, longitude=longitude)

        try:
            sun_times = sun(
                observer,
                date=date_key,
                tzinfo=timezone.utc,
                dawn_dusk_depression=self.depression_angle,
            )
            result = {
                "dawn": sun_times["dawn"],
                "sunrise": sun_times["sunrise"],
                "sunset": sun_times["sunset"],
                "dusk": sun_times["dusk"],
            }
        except ValueError:
            # Sun never crosses the horizon or the twilight angle on this date
            day_of_year = date_key.timetuple().tm_yday
            is_northern_summer = 80 < day_of_year < 265  # Roughly March-September
            is_polar_day = (latitude > 60 and is_northern_summer) or \
                           (latitude < -60 and not is_northern_summer)

            if is_polar_day:
                start = datetime.combine(date_key, datetime.min.time(), tzinfo=timezone.utc)
                end = datetime.combine(
                    date_key, datetime.max.time().replace(microsecond=0), tzinfo=timezone.utc,
                )
                result = {"dawn": start, "sunrise": start, "sunset": end, "dusk": end}
            else:
                result = {"dawn": None, "sunrise": None, "sunset": None, "dusk": None}

        self._cache[cache_key] = result
        return result

    def classify(
        self,
        latitude: float,
        longitude: float,
        timestamp_utc: datetime,
    ) -> str:
        """
        Classify a UTC timestamp as "day", "twilight" or "night" at the location.

        Naive timestamps are taken as UTC.
        """
        if timestamp_utc.tzinfo is None:
            timestamp_utc = timestamp_utc.replace(tzinfo=timezone.utc)
        else:
            timestamp_utc = timestamp_utc.astimezone(timezone.utc)

        times = self.get_sun_times_utc(latitude, longitude, timestamp_utc.date())
        if times["dawn"] is None:
            return NIGHT
        if times["sunrise"] <= timestamp_utc <= times["sunset"]:
            return DAY
        if times["dawn"] <= timestamp_utc <= times["dusk"]:
            return TWILIGHT
        return NIGHT

    def build_timeline(
        self,
        latitude: float,
        longitude: float,
        timestamps: Iterable,
    ) -> List[dict]:
        """
        Build day/twilight/night segments for the timeline chart.

        Consecutive timestamps with the same class are merged into one segment.

        Args:
            latitude: Latitude in degrees
            longitude: Longitude in degrees
            timestamps: Datetimes or datetime64 values (UTC), any order

        Returns:
            List of {"start", "end", "period"} dicts in time order
        """
        index = pd.to_datetime(list(timestamps), utc=True).sort_values()
        index = index[~index.isna()]

        segments: List[dict] = []
        for ts in index.to_pydatetime():
            period = self.classify(latitude, longitude, ts)
            if segments and segments[-1]["period"] == period:
                segments[-1]["end"] = ts
            else:
                segments.append({"start": ts, "end": ts, "period": period})
        return segments

    def clear_cache(self) -> None:
        """Clear the sun times cache."""
        self._cache.clear()
