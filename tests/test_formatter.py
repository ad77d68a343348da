"""Tests for formatting reports back to METAR text."""

import pytest

from metar_codec import format_metar, parse
from metar_codec.formatter import MetarFormatter
from metar_codec.models import (
    Known,
    Metar,
    ObservationTime,
    RunwayVisualRange,
    RvrReading,
    RvrTrend,
    RvrValue,
    UNKNOWN,
    Visibility,
)
from metar_codec.parsers import MetarParser
from tests.assets.canonical_reports import CANONICAL_REPORTS


class TestRoundTrip:
    """Canonical reports format back to the same text."""

    @pytest.mark.parametrize("text", CANONICAL_REPORTS)
    def test_round_trip(self, text):
        assert MetarFormatter.format(MetarParser.parse(text)) == text

    @pytest.mark.parametrize("text", CANONICAL_REPORTS)
    def test_idempotent(self, text):
        once = format_metar(parse(text))
        assert format_metar(parse(once)) == once

    def test_str_delegates_to_formatter(self, eddm_metar_text):
        assert str(parse(eddm_metar_text)) == eddm_metar_text


class TestCanonicalFolding:
    """Variant spellings format to their canonical form."""

    @pytest.mark.parametrize("text,expected", [
        (
            "KLAX 211253Z 25006KT 10SM CLR 18/11 A2992",
            "KLAX 211253Z 25006KT 10SM NCD 18/11 A2992",
        ),
        (
            "KLAX 211253Z 25006KT 10SM SKC 18/11 A2992",
            "KLAX 211253Z 25006KT 10SM NCD 18/11 A2992",
        ),
        (
            "LFPG 211230Z CCA 24015KT 9999 FEW040 18/09 Q1015",
            "LFPG 211230Z COR 24015KT 9999 FEW040 18/09 Q1015",
        ),
        (
            "AUTO LFPG 211230Z 24015KT 9999 FEW040 18/09 Q1015",
            "LFPG 211230Z AUTO 24015KT 9999 FEW040 18/09 Q1015",
        ),
        (
            "UUEE 211230Z 24015KPH 9999 18/09 Q1015",
            "UUEE 211230Z 24015KMH 9999 18/09 Q1015",
        ),
        (
            "EGPK 211220Z 28012KT 9999 08/03 Q1002 WS RWY12",
            "EGPK 211220Z 28012KT 9999 08/03 Q1002 WS R12",
        ),
        (
            "EGPK 211220Z 28012KT 9999 R12/1200/U 08/03 Q1002",
            "EGPK 211220Z 28012KT 9999 R12/1200U 08/03 Q1002",
        ),
        (
            "EDSB 242150Z AUTO 18003KT 9999 NCD 20/14 Q1015=",
            "EDSB 242150Z AUTO 18003KT 9999 NCD 20/14 Q1015",
        ),
        (
            "EDSB  242150Z AUTO\n18003KT 9999 NCD 20/14 Q1015",
            "EDSB 242150Z AUTO 18003KT 9999 NCD 20/14 Q1015",
        ),
        (
            "ENBO 211220Z 28012KT 9999 04/M01 Q1002 SNOCLO",
            "ENBO 211220Z 28012KT 9999 04/M01 Q1002 R/SNOCLO",
        ),
    ])
    def test_folding(self, text, expected):
        assert format_metar(parse(text)) == expected

    def test_missing_groups_render_as_placeholders(self):
        assert format_metar(parse("EDDM 222020Z")) == "EDDM 222020Z /////KT //// ///// Q////"

    def test_cavok_suppresses_cloud_state(self):
        metar = Metar(
            station="EDDM",
            time=ObservationTime(22, 20, 20),
            visibility=Known(Visibility.cavok()),
            temperature=Known(20.0),
            dewpoint=Known(13.0),
        )
        assert format_metar(metar) == "EDDM 222020Z /////KT CAVOK 20/13 Q////"


class TestFieldFormatting:

    def test_masked_width(self, masked_metar_text):
        metar = parse(masked_metar_text)
        assert MetarFormatter.format_wind(metar.wind) == "/////KT"
        assert MetarFormatter.format_visibility(metar.visibility) == "////"
        assert MetarFormatter.format_pressure(metar.pressure) == "Q////"
        assert MetarFormatter.format_cloud_layer(metar.cloud_layers[0]) == "//////"

    @pytest.mark.parametrize("temperature,expected", [
        (-0.0, "M00/M00"),
        (0.0, "00/00"),
        (-5.0, "M05/M05"),
        (12.0, "12/12"),
    ])
    def test_temperature_sign(self, temperature, expected):
        text = f"EDDM 222020Z 27008KT 9999 {expected} Q1017"
        metar = parse(text)
        assert metar.temperature == Known(temperature)
        assert format_metar(metar) == text

    def test_rvr(self):
        rvr = RunwayVisualRange("26", Known(RvrValue(RvrReading(800))), trend=RvrTrend.NO_CHANGE)
        assert MetarFormatter.format_rvr(rvr) == "R26/0800N"

    def test_masked_rvr(self):
        rvr = RunwayVisualRange("08L", UNKNOWN)
        assert MetarFormatter.format_rvr(rvr) == "R08L/////"

    def test_speed_greater_than(self):
        text = "LPMA 211220Z 270P49KT 9999 FEW020 18/12 Q1015"
        assert format_metar(parse(text)) == text

    @pytest.mark.parametrize("miles,expected", [
        (10.0, "10SM"),
        (0.75, "3/4SM"),
        (1.5, "1 1/2SM"),
        (0.0625, "1/16SM"),
    ])
    def test_statute_miles(self, miles, expected):
        assert MetarFormatter.format_visibility(Known(Visibility.statute_miles(miles))) == expected

    def test_empty_remarks(self):
        metar = parse("EDSB 242150Z AUTO 18003KT 9999 NCD 20/14 Q1015 RMK")
        assert metar.remarks == ""
        assert format_metar(metar).endswith("Q1015 RMK")
