"""API endpoint tests using TestClient with a temporary data directory."""
import pytest
from fastapi.testclient import TestClient

from backend.main import app
from backend.api.dependencies import get_vpts_service
from backend.data.vpts_repository import VptsRepository
from backend.services.vpts_service import VptsService

CSV_HEADER = "radar,datetime,height,ff,dd,sd_vvp,dens"


def write_day(data_dir, odim_code: str, stamp: str, lines) -> None:
    """Write one daily VPTS file with 4 header lines."""
    radar_dir = data_dir / odim_code
    radar_dir.mkdir(parents=True, exist_ok=True)
    content = ["# header"] * 4 + [CSV_HEADER] + list(lines)
    (radar_dir / f"example_vpts_{stamp}.csv").write_text("\n".join(content) + "\n")


@pytest.fixture
def client(tmp_path):
    """TestClient whose VPTS service reads from a temporary data directory."""
    write_day(tmp_path, "bejab", "20160901", [
        "bejab,2016-09-01T00:00:00Z,0,5.0,180.0,1.1,10.0",
        "bejab,2016-09-01T00:00:00Z,200,5.0,180.0,NaN,10.0",
        "bejab,2016-09-01T00:05:00Z,0,N/A,190.0,1.2,4.0",
    ])
    write_day(tmp_path, "bejab", "20160903", [
        "bejab,2016-09-03T12:00:00Z,0,6.0,200.0,1.3,2.0",
    ])

    repo = VptsRepository(data_dir=tmp_path, num_header_lines=4)
    app.dependency_overrides[get_vpts_service] = lambda: VptsService(vpts_repo=repo)
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestGeneralEndpoints:
    """Tests for root, health and config endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["docs"] == "/docs"

    def test_health(self, client):
        response = client.get("/health")
        assert response.json() == {"status": "healthy"}

    def test_config(self, client):
        """Test the dashboard configuration is served."""
        response = client.get("/config")

        assert response.status_code == 200
        data = response.json()
        assert data["initial_radar_odim_code"] == "behel"
        assert data["vpts_format"]["num_header_lines"] == 4
        assert data["vpts_format"]["temporal_resolution"] == 300
        assert data["vpts_format"]["available_heights"][:3] == [0, 200, 400]
        assert data["vpts_format"]["available_heights"][-1] == 4800
        assert data["timeline_chart_style"]["night_color"] == "#1e252d"


class TestRadarEndpoints:
    """Tests for radar endpoints."""

    def test_radars_sorted_by_location(self, client):
        response = client.get("/radars")

        assert response.status_code == 200
        locations = [radar["location"] for radar in response.json()]
        assert len(locations) == 7
        assert locations == sorted(locations)

    def test_get_radar(self, client):
        response = client.get("/radars/bejab")

        assert response.status_code == 200
        assert response.json()["location"] == "Jabbeke"
        assert response.json()["timezone"] == "Europe/Brussels"

    def test_get_radar_case_insensitive(self, client):
        assert client.get("/radars/BEJAB").json()["odim_code"] == "bejab"

    @pytest.mark.parametrize("odim_code", ["xxxxx", "countries"])
    def test_unknown_radar(self, client, odim_code):
        assert client.get(f"/radars/{odim_code}").status_code == 404


class TestVptsEndpoints:
    """Tests for VPTS data endpoints."""

    def test_files(self, client, tmp_path):
        """Test every day of the range is listed with availability."""
        response = client.get(
            "/radars/bejab/files",
            params={"start_date": "2016-09-01", "end_date": "2016-09-03"},
        )

        assert response.status_code == 200
        files = response.json()["files"]
        assert [f["date"] for f in files] == ["2016-09-01", "2016-09-02", "2016-09-03"]
        assert [f["exists"] for f in files] == [True, False, True]
        assert files[0]["path"].endswith("example_vpts_20160901.csv")
        assert files[0]["path"].startswith(str(tmp_path / "bejab"))

    def test_reversed_range(self, client):
        """Test a start after the end is rejected with 400."""
        response = client.get(
            "/radars/bejab/files",
            params={"start_date": "2016-09-03", "end_date": "2016-09-01"},
        )
        assert response.status_code == 400

    @pytest.mark.parametrize("endpoint", ["files", "vpts", "vp", "vpi", "timeline"])
    def test_range_too_long(self, client, endpoint):
        """Test ranges longer than the configured maximum are rejected with 400."""
        response = client.get(
            f"/radars/bejab/{endpoint}",
            params={"start_date": "1990-01-01", "end_date": "2016-09-01"},
        )

        assert response.status_code == 400
        assert "exceeds the maximum" in response.json()["detail"]

    def test_range_limit_configurable(self, tmp_path):
        """Test the maximum span is taken from the service."""
        repo = VptsRepository(data_dir=tmp_path, num_header_lines=4)
        app.dependency_overrides[get_vpts_service] = lambda: VptsService(
            vpts_repo=repo, max_range_days=2,
        )
        try:
            client = TestClient(app)
            ok = client.get(
                "/radars/bejab/files",
                params={"start_date": "2016-09-01", "end_date": "2016-09-02"},
            )
            too_long = client.get(
                "/radars/bejab/files",
                params={"start_date": "2016-09-01", "end_date": "2016-09-03"},
            )
        finally:
            app.dependency_overrides.clear()

        assert ok.status_code == 200
        assert too_long.status_code == 400

    def test_bad_date_format(self, client):
        response = client.get(
            "/radars/bejab/vpts",
            params={"start_date": "01-09-2016", "end_date": "2016-09-01"},
        )
        assert response.status_code == 422

    def test_impossible_date(self, client):
        response = client.get(
            "/radars/bejab/vpts",
            params={"start_date": "2016-13-45", "end_date": "2016-09-01"},
        )
        assert response.status_code == 422

    def test_unknown_radar(self, client):
        response = client.get(
            "/radars/xxxxx/vpts",
            params={"start_date": "2016-09-01", "end_date": "2016-09-01"},
        )
        assert response.status_code == 404

    def test_vpts_rows(self, client):
        """Test rows come back with epoch ms timestamps and null for invalid values."""
        response = client.get(
            "/radars/bejab/vpts",
            params={"start_date": "2016-09-01", "end_date": "2016-09-03"},
        )

        assert response.status_code == 200
        rows = response.json()["rows"]
        assert len(rows) == 4
        assert rows[0] == {
            "datetime": 1472688000000,
            "height": 0.0,
            "dd": 180.0,
            "ff": 5.0,
            "dens": 10.0,
            "sd_vvp": "1.1",
        }
        assert rows[1]["sd_vvp"] == "NaN"
        assert rows[2]["ff"] is None
        assert rows[3]["datetime"] == 1472688000000 + 2 * 86400000 + 12 * 3600000

    def test_vertical_profile(self, client):
        response = client.get(
            "/radars/bejab/vp",
            params={"start_date": "2016-09-01", "end_date": "2016-09-01"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["variable"] == "dens"
        assert data["times"] == [1472688000000, 1472688300000]
        assert data["values"][0] == [10.0, 4.0]
        assert data["values"][1] == [10.0, None]

    def test_vertical_profile_unknown_variable(self, client):
        response = client.get(
            "/radars/bejab/vp",
            params={"start_date": "2016-09-01", "end_date": "2016-09-01", "variable": "eta"},
        )
        assert response.status_code == 422

    def test_integrated_profile(self, client):
        response = client.get(
            "/radars/bejab/vpi",
            params={"start_date": "2016-09-01", "end_date": "2016-09-01"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["vid"] == pytest.approx([4.0, 0.8])
        # Second step has no valid speed
        assert data["mtr"][0] == pytest.approx(72.0)
        assert data["mtr"][1] is None

    def test_timeline(self, client):
        response = client.get(
            "/radars/bejab/timeline",
            params={"start_date": "2016-09-01", "end_date": "2016-09-01"},
        )

        assert response.status_code == 200
        periods = [s["period"] for s in response.json()["segments"]]
        assert periods == ["night", "twilight", "day", "twilight", "night"]
