"""Shared fixtures for data pipeline tests."""
from pathlib import Path
from typing import List, Optional
import pytest

HEADER_LINES = [
    "# radar: bejab",
    "# source: vol2bird",
    "# wavelength: 5.3",
    "# generated: 2016-09-02",
]
CSV_HEADER = "radar,datetime,height,u,v,w,ff,dd,sd_vvp,gap,dbz,eta,dens,dbz_all,n,n_dbz,n_all,n_dbz_all,rcs,sd_vvp_threshold,vcp,radar_longitude,radar_latitude,radar_height,radar_wavelength"


def vpts_line(datetime: str, height: int, ff="3.2", dd="45.0", sd_vvp="1.1", dens="12.5") -> str:
    """Compose one data line in the column order of CSV_HEADER."""
    return (
        f"bejab,{datetime},{height},1.0,2.0,0.1,{ff},{dd},{sd_vvp},FALSE,-10.5,100.0,{dens},"
        f"5.0,100,80,200,150,11,2,12,3.0641,51.1919,50,5.3"
    )


@pytest.fixture
def write_vpts_file():
    """Factory writing a VPTS file with the 4 standard header lines."""

    def _write(path: Path, lines: List[str], header_lines: Optional[List[str]] = None) -> Path:
        header_lines = HEADER_LINES if header_lines is None else header_lines
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(header_lines + [CSV_HEADER] + lines) + "\n")
        return path

    return _write


@pytest.fixture
def make_vpts_line():
    """Factory composing single VPTS data lines."""
    return vpts_line
