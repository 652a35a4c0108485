"""
Unit tests for minute value intake.
"""

import logging
import os
import shutil
import tempfile

import pytest

from engagement_billing.core.engagement import ONE_MINUTE_MS
from engagement_billing.core.intake import (
    engagements_from_minutes,
    parse_minutes,
    read_minutes_file
)

SAMPLE_PATH = os.path.join(os.path.dirname(__file__), "assets", "sample")


class TestParseMinutes:
    """Test parsing of raw minute values."""

    def test_valid_values(self):
        assert parse_minutes(["400", "4000.5", " 12 ", "-3"]) == [400.0, 4000.5, 12.0, -3.0]

    def test_invalid_values_skipped_with_warning(self, caplog):
        caplog.set_level(logging.WARNING, logger="engagement_billing")

        result = parse_minutes(["400", "abc", "", "nan", "inf", "10"])

        assert result == [400.0, 10.0]
        warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 4
        assert "Unable to parse minutes from: 'abc'" in warnings[0]

    def test_empty_input(self):
        assert parse_minutes([]) == []


class TestReadMinutesFile:
    """Test reading minute values from files."""

    def setup_method(self):
        self.temp_dir = tempfile.mkdtemp()

    def teardown_method(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _write_file(self, content: str, filename: str = "minutes.txt") -> str:
        path = os.path.join(self.temp_dir, filename)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def test_sample_asset(self):
        assert read_minutes_file(SAMPLE_PATH) == [400.0, 4000.0, 400000.0]

    def test_one_value_per_line(self):
        path = self._write_file("1\n2.5\n3\n")
        assert read_minutes_file(path) == [1.0, 2.5, 3.0]

    def test_bad_lines_skipped(self):
        path = self._write_file("1\nnot a number\n3")
        assert read_minutes_file(path) == [1.0, 3.0]

    def test_undecodable_line_skipped(self, caplog):
        caplog.set_level(logging.WARNING, logger="engagement_billing")
        path = os.path.join(self.temp_dir, "minutes.txt")
        with open(path, 'wb') as f:
            f.write(b"400\n\xff\xfe\n4000\n")

        assert read_minutes_file(path) == [400.0, 4000.0]
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1

    def test_missing_file(self):
        missing = os.path.join(self.temp_dir, "missing")
        with pytest.raises(FileNotFoundError, match="Minutes file not found"):
            read_minutes_file(missing)

    def test_directory_is_not_a_file(self):
        with pytest.raises(FileNotFoundError):
            read_minutes_file(self.temp_dir)


class TestEngagementsFromMinutes:
    """Test conversion of minute counts to engagements."""

    def test_conversion(self):
        engagements = engagements_from_minutes([400.0, 1.9, -2.0])
        assert [e.length_ms for e in engagements] == [
            400 * ONE_MINUTE_MS, ONE_MINUTE_MS, -2 * ONE_MINUTE_MS
        ]
