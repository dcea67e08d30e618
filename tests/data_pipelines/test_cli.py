"""Tests for the VPTS file command-line entry point."""
from data_pipelines.main import main


class TestCli:
    """Tests for main()."""

    def test_lists_file_references(self, capsys):
        """Test the references of the range are printed one per line."""
        exit_code = main([
            "--start-date", "2016-09-01",
            "--end-date", "2016-09-03",
            "--directory", "../public/data/",
        ])

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == [
            "../public/data/example_vpts_20160901.csv",
            "../public/data/example_vpts_20160902.csv",
            "../public/data/example_vpts_20160903.csv",
        ]

    def test_invalid_range(self, capsys):
        """Test a reversed range exits with status 1."""
        exit_code = main(["--start-date", "2016-09-03", "--end-date", "2016-09-01"])

        assert exit_code == 1
        assert "Error" in capsys.readouterr().out

    def test_invalid_date(self, capsys):
        """Test an unparseable date exits with status 1."""
        exit_code = main(["--start-date", "someday", "--end-date", "2016-09-01"])

        assert exit_code == 1
        assert "Invalid date" in capsys.readouterr().out

    def test_verbose_prints_dates(self, capsys):
        """Test --verbose reports each expanded date."""
        main(["--start-date", "2016-09-01", "--end-date", "2016-09-02", "--verbose"])

        out = capsys.readouterr().out
        assert "  2016-09-01" in out
        assert "  2016-09-02" in out

    def test_summarize(self, tmp_path, write_vpts_file, make_vpts_line, capsys):
        """Test --summarize counts rows and invalid fields per file."""
        write_vpts_file(tmp_path / "example_vpts_20160901.csv", [
            make_vpts_line("2016-09-01T00:00:00Z", 0),
            make_vpts_line("2016-09-01T00:00:00Z", 200, dens="N/A"),
        ])

        exit_code = main([
            "--start-date", "2016-09-01",
            "--end-date", "2016-09-02",
            "--directory", f"{tmp_path}/",
            "--summarize",
        ])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Files: 1 found, 1 missing" in out
        assert "Rows: 2" in out
        assert "Invalid numeric fields: 1" in out
