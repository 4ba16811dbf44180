"""
Tests for ien_reader.data.status — the connection/status log parser.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ien_reader.data.status import format_seconds, normalise_status_line, parse_status_log
from ien_reader.results import FailureKind


class TestParseValidLog:
    def test_records(self, valid_status_file: Path) -> None:
        result = parse_status_log(valid_status_file)
        assert result.success
        assert result.records == [
            "2024-01-01,00:00:05,Arcadia,1.5,0.25,200,118",
            "2024-01-01,00:00:10,LACO,2.0,0.5,200,4210",
        ]

    def test_records_have_seven_fields(self, valid_status_file: Path) -> None:
        for record in parse_status_log(valid_status_file).records:
            assert len(record.split(",")) == 7

    def test_header_only_file_is_empty(self, write_status) -> None:
        result = parse_status_log(write_status([]))
        assert result.success
        assert result.records == []

    def test_blank_lines_are_skipped(self, write_status) -> None:
        path = write_status(["", "d,t,h,1,s,2,X,0,3", ""])
        assert parse_status_log(path).records == ["d,t,LACO,1.0,2.0,0,3"]


class TestSecondsFormatting:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (2.0, "2.0"),
            (0.25, "0.25"),
            (0.001, "0.001"),
            (1234567.0, "1234567.0"),
            (12345678.0, "1.2345678E7"),
            (1e16, "1.0E16"),
            (0.0001, "1.0E-4"),
            (-0.0005, "-5.0E-4"),
            (0.0, "0.0"),
        ],
    )
    def test_format_seconds(self, value: float, expected: str) -> None:
        assert format_seconds(value) == expected

    def test_large_and_small_times_use_exponent_form(self) -> None:
        record = normalise_status_line("d,t,h,1e16,s,0.0001,X,200,5")
        assert record == "d,t,LACO,1.0E16,1.0E-4,200,5"

    def test_signed_numbers_accepted(self) -> None:
        record = normalise_status_line("d,t,h,+1.5,s,-.5,X,+200,-1")
        assert record == "d,t,LACO,1.5,-0.5,200,-1"


class TestOrganizationMapping:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("Arcadia 5:1", "Arcadia"),
            ("Arcadia", "LACO"),
            ("Arcadia 5:1 ", "LACO"),
            ("arcadia 5:1", "LACO"),
            ("", "LACO"),
        ],
    )
    def test_exact_match_only(self, token: str, expected: str) -> None:
        record = normalise_status_line(f"d,t,h,1,s,2,{token},200,5")
        assert record.split(",")[2] == expected

    def test_custom_mapping_and_default(self, write_status) -> None:
        path = write_status(["d,t,h,1,s,2,Pasadena 2:1,200,5", "d,t,h,1,s,2,Other,200,5"])
        result = parse_status_log(
            path, organizations={"Pasadena 2:1": "Pasadena"}, default_organization="Unknown"
        )
        assert [r.split(",")[2] for r in result.records] == ["Pasadena", "Unknown"]


class TestFailures:
    def test_missing_file(self, tmp_path: Path) -> None:
        result = parse_status_log(tmp_path / "missing.csv")
        assert not result.success
        assert result.records is None
        assert result.failure.kind is FailureKind.FILE_NOT_FOUND

    def test_directory_is_unreadable_failure(self, tmp_path: Path) -> None:
        result = parse_status_log(tmp_path)
        assert not result.success
        assert result.records is None
        assert result.failure.kind is FailureKind.UNREADABLE_FILE

    @pytest.mark.parametrize(
        "row",
        [
            "d,t,h,fast,s,2,X,200,5",
            "d,t,h,1,s,slow,X,200,5",
            "d,t,h,1,s,2,X,OK,5",
            "d,t,h,1,s,2,X,200,5.5",
            "d,t,h,1_000,s,2,X,200,5",
            "d,t,h,1,s,nan,X,200,5",
            "d,t,h,inf,s,2,X,200,5",
            "d,t,h,1e400,s,2,X,200,5",
            "d,t,h,1,s,2,X, 200 ,5",
            "d,t,h,1,s,2,X,2_00,5",
        ],
        ids=[
            "request_time",
            "process_time",
            "status",
            "detector_count",
            "underscore_float",
            "nan",
            "infinity",
            "float_overflow",
            "padded_int",
            "underscore_int",
        ],
    )
    def test_non_numeric_column_aborts(self, write_status, row: str) -> None:
        path = write_status(["d,t,h,1,s,2,X,200,5", row])
        result = parse_status_log(path)
        assert not result.success
        assert result.failure.kind is FailureKind.NUMBER_FORMAT
        assert result.failure.line == 4
        assert result.failure.content == row

    def test_short_line_is_malformed(self, write_status) -> None:
        result = parse_status_log(write_status(["d,t,h,1,s,2,X,200"]))
        assert result.failure.kind is FailureKind.MALFORMED_RECORD
