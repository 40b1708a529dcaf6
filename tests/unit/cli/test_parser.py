"""Tests for CLI argument parser functionality."""

import argparse
from pathlib import Path

import pytest

from holidaycal.cli.parser import MAX_YEAR, MIN_YEAR, create_parser, parse_province, parse_year


class TestCreateParser:

    def test_create_parser_returns_argument_parser(self):
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert "holidaycal" in parser.description

    def test_defaults(self):
        args = create_parser().parse_args([])
        assert args.province is None
        assert args.year is None
        assert args.calendar is False
        assert args.no_color is False
        assert args.config is None
        assert args.log_level is None

    def test_province_short_and_long(self):
        parser = create_parser()
        assert parser.parse_args(["--province", "ON"]).province == "ON"
        assert parser.parse_args(["-p", "qc"]).province == "QC"

    def test_year_short_and_long(self):
        parser = create_parser()
        assert parser.parse_args(["--year", "2025"]).year == 2025
        assert parser.parse_args(["-y", "1999"]).year == 1999

    def test_calendar_without_value(self):
        assert create_parser().parse_args(["--calendar"]).calendar is True

    def test_calendar_with_value(self):
        parser = create_parser()
        assert parser.parse_args(["--calendar", "yes"]).calendar is True
        assert parser.parse_args(["-c", "true", "-p", "AB"]).calendar is True

    def test_calendar_followed_by_option(self):
        args = create_parser().parse_args(["-c", "-y", "2024"])
        assert args.calendar is True
        assert args.year == 2024

    def test_invalid_province_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--province", "XX"])
        assert exc_info.value.code == 2
        assert "Invalid province 'XX'" in capsys.readouterr().err

    def test_invalid_year_exits(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--year", "next"])

    def test_output_and_logging_flags(self):
        args = create_parser().parse_args(
            ["--no-color", "--config", "cfg.yaml", "--log-level", "debug", "-v", "-q"]
        )
        assert args.no_color is True
        assert args.config == Path("cfg.yaml")
        assert args.log_level == "DEBUG"
        assert args.verbose is True
        assert args.quiet is True

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "holidaycal" in capsys.readouterr().out


class TestParseProvince:

    def test_normalizes_case_and_whitespace(self):
        assert parse_province(" nl ") == "NL"

    def test_rejects_unknown_code(self):
        with pytest.raises(argparse.ArgumentTypeError, match="Invalid province"):
            parse_province("Ontario")


class TestParseYear:

    def test_valid_year(self):
        assert parse_year("2024") == 2024

    def test_bounds(self):
        assert parse_year(str(MIN_YEAR)) == MIN_YEAR
        assert parse_year(str(MAX_YEAR)) == MAX_YEAR

    def test_not_a_number(self):
        with pytest.raises(argparse.ArgumentTypeError, match="Invalid year"):
            parse_year("20x4")

    def test_out_of_range(self):
        with pytest.raises(argparse.ArgumentTypeError, match="out of range"):
            parse_year(str(MAX_YEAR + 1))
