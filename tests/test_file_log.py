"""Tests for the file-based workout log adapter."""

import logging
from datetime import date
from pathlib import Path

import pytest

from lift.adapters.file_log import FileWorkoutLog, LogFileError
from lift.core.ranges import UNBOUNDED


@pytest.fixture
def today():
    return date(2024, 1, 5)


@pytest.fixture
def log_path(tmp_path):
    path = tmp_path / "log.md"
    path.write_text("# workouts\n")
    return path


@pytest.fixture
def log(log_path):
    return FileWorkoutLog(log_path)


class TestEnsureHeader:
    def test_appends_header_with_separator(self, log, log_path, today):
        assert log.ensure_header(today) is True
        assert log_path.read_text() == "# workouts\n\n2024-01-05\n"

    def test_idempotent_within_a_day(self, log, log_path, today):
        log.ensure_header(today)
        assert log.ensure_header(today) is False
        assert log_path.read_text().count("2024-01-05") == 1

    def test_new_day_gets_new_header(self, log, log_path, today):
        log.ensure_header(date(2024, 1, 4))
        log.append_entry("#max row: [225lbs]")
        log.ensure_header(today)
        assert log_path.read_text() == (
            "# workouts\n"
            "\n2024-01-04\n"
            "    #max row: [225lbs]\n"
            "\n2024-01-05\n"
        )

    def test_existing_header_anywhere_in_file(self, log_path, today):
        log_path.write_text("2024-01-05\n    #max row: [225lbs]\n\n2024-01-06\n")
        log = FileWorkoutLog(log_path)
        assert log.ensure_header(today) is False

    def test_missing_file_is_an_error(self, tmp_path, today):
        log = FileWorkoutLog(tmp_path / "missing.md")
        with pytest.raises(LogFileError, match="Could not read file"):
            log.ensure_header(today)
        assert not (tmp_path / "missing.md").exists()

    def test_invalid_utf8_is_an_error(self, log_path, today):
        log_path.write_bytes(b"\xff\xfe")
        log = FileWorkoutLog(log_path)
        with pytest.raises(LogFileError, match="Could not read file"):
            log.ensure_header(today)
        assert log_path.read_bytes() == b"\xff\xfe"

    def test_padded_date_line_gets_a_real_header(self, log_path, today):
        log_path.write_text("2024-01-04\n    #max row: [225lbs]\n2024-01-05 \n")
        log = FileWorkoutLog(log_path)

        assert log.ensure_header(today) is True
        log.append_entry("#max deadlift: [405lbs]")

        assert list(log.scan((today, today))) == [
            "2024-01-04",
            "2024-01-05",
            "    #max deadlift: [405lbs]",
        ]

    def test_failures_are_not_logged_as_errors(self, tmp_path, today, caplog):
        log = FileWorkoutLog(tmp_path / "missing.md")
        with pytest.raises(LogFileError):
            log.ensure_header(today)
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


class TestAppendEntry:
    def test_indents_entry(self, log, log_path, today):
        log.ensure_header(today)
        log.append_entry("#set bench: 3x8 [185lbs] (2 RIR)")
        assert log_path.read_text().endswith("2024-01-05\n    #set bench: 3x8 [185lbs] (2 RIR)\n")

    def test_preserves_existing_content(self, log, log_path):
        log.append_entry("#max row: [225lbs]")
        assert log_path.read_text() == "# workouts\n    #max row: [225lbs]\n"

    def test_missing_file_is_not_created(self, tmp_path):
        log = FileWorkoutLog(tmp_path / "missing.md")
        with pytest.raises(LogFileError, match="Could not open file"):
            log.append_entry("#max row: [225lbs]")
        assert not (tmp_path / "missing.md").exists()

    def test_utf8(self, log, log_path):
        log.append_entry("#max développé: [135lbs]")
        assert "développé" in log_path.read_text(encoding="utf-8")


class TestScan:
    def test_scans_written_log(self, log, today):
        log.ensure_header(date(2024, 1, 4))
        log.append_entry("#set bench: 3x8 [185lbs] (2 RIR)")
        log.ensure_header(today)
        log.append_entry("#max deadlift: [405lbs]")

        result = list(log.scan((today, today)))
        assert result == ["2024-01-04", "2024-01-05", "    #max deadlift: [405lbs]"]

    def test_pattern(self, log, today):
        log.ensure_header(today)
        log.append_entry("#set bench: 3x8 [185lbs] (2 RIR)")
        log.append_entry("#max deadlift: [405lbs]")

        assert list(log.scan(UNBOUNDED, "deadlift")) == ["2024-01-05", "    #max deadlift: [405lbs]"]

    def test_missing_file_fails_before_iteration(self, tmp_path):
        log = FileWorkoutLog(tmp_path / "missing.md")
        with pytest.raises(LogFileError):
            log.scan(UNBOUNDED)

    def test_invalid_utf8_is_an_error(self, log_path):
        log_path.write_bytes(b"2024-01-05\n\xff\xfe\n")
        log = FileWorkoutLog(log_path)
        with pytest.raises(LogFileError, match="Could not read file"):
            log.scan(UNBOUNDED)

    def test_windows_line_endings(self, log_path, today):
        log_path.write_bytes(b"2024-01-05\r\n    #max row: [225lbs]\r\n")
        log = FileWorkoutLog(log_path)
        assert list(log.scan(UNBOUNDED)) == ["2024-01-05", "    #max row: [225lbs]"]


class TestPath:
    def test_expands_user(self):
        log = FileWorkoutLog("~/lift/log.md")
        assert "~" not in str(log.path)
        assert log.path == Path.home() / "lift" / "log.md"
