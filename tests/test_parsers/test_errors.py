"""Tests for parse error reporting."""

import pytest

from metar_codec.errors import ErrorKind, MetarError, MetarParseError
from metar_codec.parsers import MetarParser


def parse_errors(text):
    with pytest.raises(MetarParseError) as exc_info:
        MetarParser.parse(text)
    return exc_info.value.errors


class TestParseErrors:

    def test_invalid_visibility_digits(self):
        text = "EDDM 222020Z 27008KT 9X99 FEW040 20/13 Q1017"
        errors = parse_errors(text)

        invalid = [e for e in errors if e.kind == ErrorKind.INVALID_NUMBER]
        assert invalid
        assert invalid[0].offset == text.index("9X99")
        assert invalid[0].length == 4
        assert invalid[0].span == "9X99"
        assert errors[0] is invalid[0]
        assert errors[0].message.startswith("visibility")

    def test_zero_denominator_reported_once(self):
        text = "EDDM 222020Z 27008KT 1/0SM FEW040 20/13 Q1017"
        errors = parse_errors(text)
        invalid = [e for e in errors if e.kind == ErrorKind.INVALID_NUMBER]
        assert len(invalid) == 1
        assert invalid[0].span == "1/0SM"

    def test_malformed_wind_direction(self):
        text = "EDDM 222020Z 1//08KT 9999 20/13 Q1017"
        errors = parse_errors(text)
        assert errors[0].kind == ErrorKind.INVALID_NUMBER
        assert errors[0].span == "1//"

    def test_unknown_wind_unit(self):
        text = "EDDM 222020Z 27008XX 9999 20/13 Q1017"
        errors = parse_errors(text)
        assert any(
            e.kind == ErrorKind.INVALID_VALUE and e.span == "XX" for e in errors
        )

    def test_out_of_range_time(self):
        errors = parse_errors("EDDM 322020Z 27008KT 9999 20/13 Q1017")
        assert errors[0].kind == ErrorKind.INVALID_VALUE
        assert errors[0].offset == 5

    def test_reserved_runway_contamination(self):
        text = "EDDM 222020Z 27008KT 9999 20/13 Q1017 R26/431293"
        errors = parse_errors(text)
        assert any(
            e.kind == ErrorKind.INVALID_VALUE and e.offset == text.index("31293")
            for e in errors
        )

    def test_missing_station(self):
        errors = parse_errors("")
        assert len(errors) == 1
        assert errors[0].kind == ErrorKind.EXPECTED
        assert "station" in errors[0].expected
        assert errors[0].offset == 0

    def test_expected_labels_are_merged(self):
        text = "EDSB 242150Z AUTO 18003KT 9999 NCD 20/14 Q1015 XYZZY"
        errors = parse_errors(text)
        expected = [e for e in errors if e.kind == ErrorKind.EXPECTED]
        assert len(expected) == 1
        assert "end of report" in expected[0].expected
        assert "RMK" in expected[0].expected
        assert expected[0].offset == text.index("XYZZY")

    def test_offsets_are_utf8_bytes(self):
        text = "EDDM 222020Z 27008KT 9999 20/13 Q1017 RMK °C ="
        text = text + " XYZ"
        errors = parse_errors(text)
        assert errors[0].offset == len(text[:text.index("XYZ")].encode('utf-8'))
        assert errors[0].span == "XYZ"

    def test_error_rendering(self):
        text = "EDDM 222020Z 27008KT 9X99"
        error = parse_errors(text)[0]
        rendered = str(error)
        lines = rendered.split("\n")
        assert lines[0] == text
        assert lines[1] == " " * text.index("9X99") + "^~~~"
        assert lines[2].startswith("invalid_number")

    def test_parse_error_exposes_text(self):
        with pytest.raises(MetarParseError) as exc_info:
            MetarParser.parse("NOT A METAR")
        assert exc_info.value.text == "NOT A METAR"

    def test_parse_error_requires_errors(self):
        with pytest.raises(ValueError):
            MetarParseError([])


class TestMetarError:

    def test_to_dict(self):
        error = MetarError(
            text="EDDM 222020Z",
            offset=5,
            length=7,
            kind=ErrorKind.EXPECTED,
            expected=("wind",),
        )
        assert error.to_dict() == {
            'offset': 5,
            'length': 7,
            'kind': 'expected',
            'expected': ['wind'],
            'message': '',
        }

    def test_describe_expected(self):
        error = MetarError("X", 0, 1, ErrorKind.EXPECTED, expected=("station", "METAR or SPECI"))
        assert error.describe() == "expected station | METAR or SPECI"
