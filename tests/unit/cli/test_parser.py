"""Tests for CLI argument parser functionality.

Tests cover parser creation and validation of the month/year positionals,
including the exact error messages shown to the user.
"""

import argparse
from pathlib import Path

import pytest

from termcal.cli.parser import CalendarConfig, create_parser, parse_calendar_args
from termcal.utils.exceptions import ConfigurationError


class TestCreateParser:
    """Test suite for create_parser function."""

    def test_create_parser_returns_argument_parser(self):
        """Test that create_parser returns a configured ArgumentParser."""
        parser = create_parser()

        assert isinstance(parser, argparse.ArgumentParser)
        assert "termcal" in parser.description
        assert parser.epilog is not None

    def test_no_arguments(self):
        """Test no positionals gives an empty calendar list."""
        args = create_parser().parse_args([])
        assert args.calendar == []
        assert args.no_colors is False

    def test_month_and_year_collected(self):
        """Test positionals are collected verbatim for later validation."""
        args = create_parser().parse_args(["2", "2024"])
        assert args.calendar == ["2", "2024"]

    def test_options_mixed_with_positionals(self):
        """Test display and logging options parse alongside the month and year."""
        args = create_parser().parse_args(
            ["--no-colors", "3", "1999", "--log-level", "DEBUG", "--log-dir", "/tmp/logs"]
        )
        assert args.calendar == ["3", "1999"]
        assert args.no_colors is True
        assert args.log_level == "DEBUG"
        assert args.log_dir == Path("/tmp/logs")

    def test_verbose_and_quiet_flags(self):
        """Test short logging flags."""
        args = create_parser().parse_args(["-v", "-q"])
        assert args.verbose is True
        assert args.quiet is True

    def test_version(self, capsys):
        """Test --version prints the version and exits."""
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert "termcal 1.0.0" in capsys.readouterr().out


class TestParseCalendarArgs:
    """Test validation of the month/year positionals."""

    def test_no_values_means_today(self):
        """Test an empty list starts at today."""
        assert parse_calendar_args([]) is None

    def test_valid_month_and_year(self):
        """Test a valid pair is converted to integers."""
        assert parse_calendar_args(["2", "2024"]) == CalendarConfig(2, 2024)

    def test_year_zero_and_leading_plus(self):
        """Test year 0 and a leading plus sign are accepted."""
        assert parse_calendar_args(["+12", "0"]) == CalendarConfig(12, 0)

    def test_extra_values_ignored(self):
        """Test values after the year are ignored."""
        assert parse_calendar_args(["1", "2000", "extra"]) == CalendarConfig(1, 2000)

    @pytest.mark.parametrize("month", ["abc", "-1", "1.5", "", " 3"])
    def test_month_not_integer(self, month):
        """Test a non-integer month is rejected."""
        with pytest.raises(ConfigurationError, match="^Month is expected as integer$"):
            parse_calendar_args([month, "2024"])

    @pytest.mark.parametrize("month", ["0", "13", "99"])
    def test_month_out_of_range(self, month):
        """Test months outside 1..12 are rejected."""
        with pytest.raises(ConfigurationError, match="^Month should be in range 1 to 12$"):
            parse_calendar_args([month, "2024"])

    def test_month_checked_before_year(self):
        """Test the month error wins when both values are bad."""
        with pytest.raises(ConfigurationError, match="^Month should be in range 1 to 12$"):
            parse_calendar_args(["13", "abc"])

    def test_year_missing(self):
        """Test a month without a year is rejected."""
        with pytest.raises(ConfigurationError, match="^Year not entered$"):
            parse_calendar_args(["5"])

    @pytest.mark.parametrize("year", ["-1", "twenty", "2024.0", "0x10"])
    def test_year_not_integer(self, year):
        """Test negative or non-integer years are rejected."""
        with pytest.raises(ConfigurationError, match="^Year is expected as positive integer$"):
            parse_calendar_args(["5", year])
