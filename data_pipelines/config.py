"""Configuration constants for data pipelines."""
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"

# VPTS file naming: <directory>example_vpts_<YYYYMMDD>.csv
VPTS_FILE_PREFIX = "example_vpts_"
VPTS_FILE_SUFFIX = ".csv"
DATE_STAMP_FORMAT = "%Y%m%d"
RELATIVE_DATE_KEYWORDS = {"now", "today"}  # Words pandas resolves to the current time

# VPTS tabular format
NUM_HEADER_LINES = 4  # Non-data lines preceding the CSV header
VPTS_COLUMNS = ["datetime", "height", "dd", "ff", "dens", "sd_vvp"]
NUMERIC_COLUMNS = ["height", "dd", "ff", "dens"]
AVAILABLE_HEIGHTS = list(range(0, 5000, 200))  # metres, bottom of each bin
HEIGHT_BIN_WIDTH = 200  # metres
TEMPORAL_RESOLUTION = 5 * 60  # seconds

# Unit conversion
MS_TO_KMH = 3.6

# Daylight classification for the timeline chart
DAYLIGHT_DEPRESSION_ANGLE = 6.0  # Civil twilight

# Remote data source
DATA_BASE_URL = "https://crow.weernet.be"

# Radar metadata: https://www.eumetnet.eu/ (OPERA database)
# Timestamps in data files are always UTC; timezone is where the radar is located.
AVAILABLE_RADARS = sorted(
    [
        {"odim_code": "behel", "location": "Behel?", "country": "Belgium",
         "latitude": 51.069199, "longitude": 5.406138, "timezone": "Europe/Brussels"},
        {"odim_code": "bejab", "location": "Jabbeke", "country": "Belgium",
         "latitude": 51.1919, "longitude": 3.0641, "timezone": "Europe/Brussels"},
        {"odim_code": "bezav", "location": "Zaventem", "country": "Belgium",
         "latitude": 50.9054, "longitude": 4.4579, "timezone": "Europe/Brussels"},
        {"odim_code": "bewid", "location": "Wideumont", "country": "Belgium",
         "latitude": 49.9135, "longitude": 5.5044, "timezone": "Europe/Brussels"},
        {"odim_code": "nlhrw", "location": "Herwijnen", "country": "the Netherlands",
         "latitude": 51.83708, "longitude": 5.13797, "timezone": "Europe/Amsterdam"},
        {"odim_code": "deess", "location": "Essen", "country": "Germany",
         "latitude": 51.4055, "longitude": 6.9669, "timezone": "Europe/Berlin"},
        {"odim_code": "denhb", "location": "Neuheilenbach", "country": "Germany",
         "latitude": 50.1097, "longitude": 6.5483, "timezone": "Europe/Berlin"},
    ],
    key=lambda radar: radar["location"],
)
INITIAL_RADAR_ODIM_CODE = "behel"

# Date format returned by the browser's date input
LOCALIZED_DATE_FORMAT = "YYYY/MM/DD"

# Chart styling (d3-time-format axis labels)
TIME_AXIS_FORMAT = " %d-%m@%H:%M "

VP_CHART_STYLE = {
    "margin": {"top": 0, "right": 60, "bottom": 30, "left": 65},
    "width": 1100,
    "height": 300,
    "min_density_color": "#f0f0f0",
    "max_density_color": "#dc3545",
    "no_data_color": "white",
    "time_axis_format": TIME_AXIS_FORMAT,
}

VPI_CHART_STYLE = {
    "margin": {"top": 0, "right": 60, "bottom": 30, "left": 65},
    "width": 1100,
    "height": 300,
    "time_axis_format": TIME_AXIS_FORMAT,
}

TIMELINE_CHART_STYLE = {
    "margin": {"top": 0, "right": 60, "bottom": 5, "left": 65},
    "width": 1100,
    "height": 30,
    "show_x_axis": False,
    "show_tooltip": True,
    "day_color": "#dae9fe",
    "twilight_color": "#4771bb",
    "night_color": "#1e252d",
}
