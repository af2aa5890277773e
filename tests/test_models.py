"""Tests for data models."""

from pathlib import Path

import pytest

from csvgate.models.config import RunConfig
from csvgate.models.result import DetectionSample, ExitStatus, ScanResult
from csvgate.models.row import Row, Verdict, strip_line_terminator
from csvgate.models.rules import ColumnCountRule, FirstColumnIntegerRule, is_plain_integer


def make_row(text: str, delimiter: str = ",", number: int = 1) -> Row:
    return Row.from_raw(number, (text + "\n").encode("utf-8"), delimiter)


class TestRow:
    """Test Row model."""

    def test_strips_line_terminators(self):
        assert strip_line_terminator(b"a,b\n") == b"a,b"
        assert strip_line_terminator(b"a,b\r\n") == b"a,b"
        assert strip_line_terminator(b"a,b") == b"a,b"
        assert strip_line_terminator(b"a,b\r") == b"a,b\r"

    def test_keeps_raw_bytes(self):
        row = Row.from_raw(7, b"a,b\r\n")
        assert row.number == 7
        assert row.raw == b"a,b\r\n"
        assert row.text == "a,b"

    def test_field_count(self):
        assert make_row("a,b,c").field_count == 3
        assert make_row("a").field_count == 1
        assert make_row("a,b,").field_count == 3
        assert make_row(",").field_count == 2

    def test_blank_line_has_no_fields(self):
        row = make_row("")
        assert row.is_blank
        assert row.field_count == 0
        assert row.fields == []
        assert row.first_field == ""

    def test_whitespace_line_is_not_blank(self):
        row = make_row("   ")
        assert not row.is_blank
        assert row.field_count == 1

    def test_split_ignores_quotes(self):
        row = make_row('"a,b",c')
        assert row.fields == ['"a', 'b"', "c"]
        assert row.field_count == 3

    def test_tab_and_multichar_delimiters(self):
        assert make_row("a\tb\tc", delimiter="\t").field_count == 3
        assert make_row("a::b::c", delimiter="::").fields == ["a", "b", "c"]

    def test_first_field(self):
        assert make_row("12,foo,bar").first_field == "12"
        assert make_row("only").first_field == "only"

    def test_undecodable_bytes_are_escaped(self):
        row = Row.from_raw(1, b"\xff\xfe,x\n")
        assert row.field_count == 2
        assert row.raw == b"\xff\xfe,x\n"
        assert row.text == "\udcff\udcfe,x"
        assert row.text.encode("utf-8", "surrogateescape") == b"\xff\xfe,x"


class TestColumnCountRule:
    """Test ColumnCountRule."""

    def test_matching_count_conforms(self):
        rule = ColumnCountRule(3)
        assert rule.check(make_row("a,b,c")) is Verdict.CONFORMING

    def test_mismatched_count_offends(self):
        rule = ColumnCountRule(3)
        assert rule.check(make_row("a,b")) is Verdict.OFFENDER
        assert rule.check(make_row("a,b,c,d")) is Verdict.OFFENDER

    def test_blank_line_offends_by_default(self):
        assert ColumnCountRule(2).check(make_row("")) is Verdict.OFFENDER

    def test_blank_line_passes_through_with_keep_blank(self):
        rule = ColumnCountRule(2, keep_blank=True)
        assert rule.check(make_row("")) is Verdict.PASSTHROUGH

    def test_single_column_rule(self):
        rule = ColumnCountRule(1)
        assert rule.check(make_row("abc")) is Verdict.CONFORMING
        assert rule.check(make_row("")) is Verdict.OFFENDER

    def test_rejects_non_positive_count(self):
        with pytest.raises(ValueError):
            ColumnCountRule(0)


class TestFirstColumnIntegerRule:
    """Test FirstColumnIntegerRule."""

    @pytest.mark.parametrize(
        "text", ["12,foo", "007,x", "0", " 42 ,x", "\t9\t,y", "123"]
    )
    def test_digit_first_fields_conform(self, text):
        assert FirstColumnIntegerRule().check(make_row(text)) is Verdict.CONFORMING

    @pytest.mark.parametrize(
        "text", ["bar,baz", "", "-1,x", "+1,x", "1.5,x", "1e3,x", " ,x", "١٢,x", "1 2,x"]
    )
    def test_other_first_fields_offend(self, text):
        assert FirstColumnIntegerRule().check(make_row(text)) is Verdict.OFFENDER

    def test_is_plain_integer_trims_cr(self):
        assert is_plain_integer("5\r")
        assert not is_plain_integer("")


class TestDetectionSample:
    """Test DetectionSample model."""

    def test_empty_sample(self):
        sample = DetectionSample()
        assert sample.is_empty
        assert sample.agreed_count is None

    def test_agreeing_sample(self):
        sample = DetectionSample()
        for number in (1, 2, 4):
            sample.add(number, 5)
        assert sample.agreed_count == 5
        assert sample.line_numbers == [1, 2, 4]

    def test_disagreeing_sample(self):
        sample = DetectionSample(counts=[3, 2, 3], line_numbers=[1, 2, 3])
        assert sample.agreed_count is None
        assert sample.distinct_counts == [3, 2]


class TestScanResult:
    """Test ScanResult model."""

    def test_clean_result(self):
        result = ScanResult(rule="column-count", lines_read=3, conforming_count=3)
        assert not result.has_offenders
        assert result.exit_status is ExitStatus.CLEAN
        assert int(result.exit_status) == 0

    def test_offenders_result(self):
        result = ScanResult(rule="column-count", lines_read=3, offender_count=1)
        assert result.has_offenders
        assert int(result.exit_status) == 1

    def test_written_count_includes_passthrough(self):
        result = ScanResult(rule="column-count", conforming_count=4, passthrough_count=2)
        assert result.written_count == 6

    def test_to_dict(self):
        result = ScanResult(
            rule="first-column-integer",
            lines_read=2,
            offender_count=1,
            conforming_count=1,
            output_path=Path("out.csv"),
        )
        data = result.to_dict()
        assert data["rule"] == "first-column-integer"
        assert data["output_path"] == "out.csv"
        assert data["exit_status"] == 1


class TestRunConfig:
    """Test RunConfig model."""

    def test_defaults(self):
        config = RunConfig(input_path=Path("data.csv"))
        assert config.delimiter == ","
        assert config.max_length == 200
        assert config.encoding == "utf-8"
        assert not config.clean
        assert config.validate()

    def test_clean_when_output_or_inplace(self):
        assert RunConfig(input_path=Path("a"), output_path=Path("b")).clean
        assert RunConfig(input_path=Path("a"), inplace=True).clean

    def test_validate_rejects_bad_values(self):
        assert not RunConfig(input_path=Path("a"), delimiter="").validate()
        assert not RunConfig(input_path=Path("a"), max_length=-1).validate()
        assert not RunConfig(input_path=Path("a"), required_columns=0).validate()
        assert not RunConfig(
            input_path=Path("a"), output_path=Path("b"), inplace=True
        ).validate()

    def test_to_dict(self):
        config = RunConfig(input_path=Path("a.csv"), required_columns=4)
        data = config.to_dict()
        assert data["input_path"] == "a.csv"
        assert data["required_columns"] == 4
        assert data["output_path"] is None
