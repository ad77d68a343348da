"""Tests for METAR parsing."""

import pytest

from metar_codec.errors import ErrorKind, MetarParseError
from metar_codec.models import (
    CloudDensity,
    CloudState,
    CloudType,
    ColourCode,
    Kind,
    Known,
    PressureUnit,
    ReportType,
    RvrTrend,
    TrendKind,
    UNKNOWN,
    VisibilityKind,
    WeatherCondition,
    WeatherIntensity,
    WindUnit,
)
from metar_codec.parsers import MetarParser


class TestParseMetar:
    """Test decoding of complete reports."""

    def test_basic_metar(self, eddm_metar_text):
        metar = MetarParser.parse(eddm_metar_text)

        assert metar.station == "EDDM"
        assert metar.time.day == 22
        assert metar.time.hour == 20
        assert metar.time.minute == 20
        assert metar.kind == Kind.AUTOMATIC
        assert metar.wind.direction.variable is True
        assert metar.wind.speed == Known(1)
        assert metar.wind.unit == WindUnit.KNOTS
        assert metar.is_cavok
        assert metar.temperature == Known(20.0)
        assert metar.dewpoint == Known(13.0)
        assert metar.pressure.unit == PressureUnit.HECTOPASCALS
        assert metar.pressure.value == Known(1017)
        assert len(metar.trends) == 1
        assert metar.trends[0].kind == TrendKind.NO_SIGNIFICANT_CHANGE
        assert metar.trends[0].conditions is None
        assert metar.report_type is None

    def test_fully_masked_metar(self, masked_metar_text):
        metar = MetarParser.parse(masked_metar_text)

        assert metar.station == "ETSB"
        assert metar.wind.direction.heading is UNKNOWN
        assert metar.wind.speed is UNKNOWN
        assert metar.visibility is UNKNOWN
        assert metar.weather is UNKNOWN
        assert len(metar.cloud_layers) == 1
        assert metar.cloud_layers[0].density is UNKNOWN
        assert metar.cloud_layers[0].height is UNKNOWN
        assert metar.temperature is UNKNOWN
        assert metar.dewpoint is UNKNOWN
        assert metar.pressure.value is UNKNOWN
        assert metar.colour_code is UNKNOWN

    def test_report_type_prefix(self):
        metar = MetarParser.parse("SPECI LFPG 211230Z 24015KT 9999 FEW040 18/09 Q1015")
        assert metar.report_type == ReportType.SPECI
        assert metar.station == "LFPG"

    def test_kind_before_station(self):
        metar = MetarParser.parse("COR LFPG 211230Z 24015KT 9999 FEW040 18/09 Q1015")
        assert metar.kind == Kind.CORRECTION

    def test_cca_is_correction(self):
        metar = MetarParser.parse("LFPG 211230Z CCA 24015KT 9999 FEW040 18/09 Q1015")
        assert metar.kind == Kind.CORRECTION

    def test_no_kind_marker(self):
        metar = MetarParser.parse("LFPG 211230Z 24015KT 9999 FEW040 18/09 Q1015")
        assert metar.kind == Kind.NORMAL

    def test_gusts_and_varying_wind(self):
        metar = MetarParser.parse("EDDM 231550Z AUTO 27010G25KT 240V300 9999 BKN///CB 24/19 Q1013")
        assert metar.wind.direction.heading == Known(270)
        assert metar.wind.speed == Known(10)
        assert metar.wind.gust == Known(25)
        assert metar.wind.varying == (Known(240), Known(300))

    def test_varying_pair_order_not_checked(self):
        metar = MetarParser.parse("EDDM 231550Z 27010KT 300V240 9999 24/19 Q1013")
        assert metar.wind.varying == (Known(300), Known(240))

    def test_masked_height_cloud_layer(self):
        metar = MetarParser.parse("EDDM 231550Z AUTO 27010KT 9999 TSRA BKN///CB 24/19 Q1013")
        layer = metar.cloud_layers[0]
        assert layer.density == Known(CloudDensity.BROKEN)
        assert layer.height is UNKNOWN
        assert layer.cloud_type == Known(CloudType.CUMULONIMBUS)

    def test_weather_groups(self):
        metar = MetarParser.parse("BGGH 232250Z 21007KT 0700 R22/P2000N -RA FG FEW002 05/05 Q1005")
        assert isinstance(metar.weather, Known)
        light_rain, fog = metar.weather.value
        assert light_rain.intensity == WeatherIntensity.LIGHT
        assert light_rain.conditions == (WeatherCondition.RAIN,)
        assert fog.intensity == WeatherIntensity.MODERATE
        assert fog.conditions == (WeatherCondition.FOG,)

    def test_rvr_groups(self):
        metar = MetarParser.parse(
            "EKVG 232250Z AUTO 31006KT 1000 R12/0800N R30/P1500D BR OVC001/// 09/09 Q0995"
        )
        assert [r.runway for r in metar.rvr] == ["12", "30"]
        assert metar.rvr[0].trend == RvrTrend.NO_CHANGE
        assert metar.rvr[1].trend == RvrTrend.DOWNWARD

    def test_vertical_visibility_unknown(self):
        metar = MetarParser.parse("LFVP 232230Z AUTO 24009KT 0450 R26/0800N FG VV/// 11/11 Q1015")
        assert metar.vertical_visibility is not None
        assert metar.vertical_visibility.distance is None
        assert metar.vertical_visibility.is_reduced_by_unknown_amount

    def test_negative_zero_temperature(self):
        metar = MetarParser.parse("EDLW 032220Z AUTO 23012KT 3900 // SCT006/// M00/M01 Q1005")
        assert metar.temperature == Known(-0.0)
        assert str(metar.temperature.value) == "-0.0"
        assert metar.dewpoint == Known(-1.0)

    def test_missing_dewpoint(self):
        metar = MetarParser.parse("EDDM 222020Z 27008KT 9999 20/ Q1017")
        assert metar.temperature == Known(20.0)
        assert metar.dewpoint is UNKNOWN

    def test_recent_weather(self):
        metar = MetarParser.parse(
            "ESSP 032220Z AUTO 02012KT 1200 -SN FEW003/// M02/M03 Q0990 RESHUP RESN"
        )
        assert metar.recent_weather == (
            Known((WeatherCondition.SHOWERS, WeatherCondition.UNKNOWN_PRECIPITATION)),
            Known((WeatherCondition.SNOW,)),
        )

    def test_colour_code_longest_match(self):
        metar = MetarParser.parse("ETSN 242120Z 30004KT 9999 FEW330 19/12 Q1016 BLU+")
        assert metar.colour_code == Known(ColourCode.BLUE_PLUS)

        metar = MetarParser.parse("ETSN 261720Z 32003KT 9999 FEW020 17/15 Q1014 BLU")
        assert metar.colour_code == Known(ColourCode.BLUE)

    def test_north_american_report(self):
        metar = MetarParser.parse("METAR KJFK 211200Z 18008KT 1 1/2SM BR OVC005 12/11 A2990")
        assert metar.report_type == ReportType.METAR
        assert isinstance(metar.visibility, Known)
        assert metar.visibility.value.kind == VisibilityKind.STATUTE_MILES
        assert metar.visibility.value.value == pytest.approx(1.5)
        assert metar.pressure.unit == PressureUnit.INCHES_OF_MERCURY
        assert metar.pressure.value.value == pytest.approx(29.90)
        assert metar.ceiling == 500

    def test_clr_is_no_cloud_detected(self):
        metar = MetarParser.parse("KLAX 211253Z 25006KT 10SM CLR 18/11 A2992")
        assert metar.clouds == CloudState.NO_CLOUD_DETECTED
        assert metar.cloud_layers == ()

    def test_kph_is_kilometres_per_hour(self):
        metar = MetarParser.parse("UUEE 211230Z 24015KPH 9999 18/09 Q1015")
        assert metar.wind.unit == WindUnit.KILOMETRES_PER_HOUR

    def test_remarks(self):
        metar = MetarParser.parse(
            "EKVG 232250Z AUTO 31006KT 1000 BR OVC001/// 09/09 Q0995 RMK OVC000/// WIND SKEID 29012KT"
        )
        assert metar.remarks == "OVC000/// WIND SKEID 29012KT"

    def test_terminator_and_whitespace(self):
        metar = MetarParser.parse("  EDSB 242150Z AUTO 18003KT 9999 NCD 20/14 Q1015=  ")
        assert metar.station == "EDSB"
        assert metar.clouds == CloudState.NO_CLOUD_DETECTED

    def test_missing_groups_get_masked_defaults(self):
        metar = MetarParser.parse("EDDM 222020Z")
        assert metar.wind.speed is UNKNOWN
        assert metar.wind.unit == WindUnit.KNOTS
        assert metar.visibility is UNKNOWN
        assert metar.weather == Known(())
        assert metar.clouds == CloudState.CLOUD_LAYERS
        assert metar.temperature is UNKNOWN
        assert metar.dewpoint is UNKNOWN
        assert metar.pressure.unit == PressureUnit.HECTOPASCALS
        assert metar.pressure.value is UNKNOWN

    def test_trailing_garbage_fails(self):
        with pytest.raises(MetarParseError) as exc_info:
            MetarParser.parse("EDSB 242150Z AUTO 18003KT 9999 NCD 20/14 Q1015 XYZZY")
        errors = exc_info.value.errors
        assert errors[-1].kind == ErrorKind.EXPECTED
        assert errors[-1].span == "XYZZY"

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            MetarParser.parse("")


class TestTryParse:
    """Test the lenient entry point."""

    def test_valid_report(self, eddm_metar_text):
        assert MetarParser.try_parse(eddm_metar_text) is not None

    def test_invalid_report_returns_none(self):
        assert MetarParser.try_parse("NOT A METAR") is None

    def test_empty_string_returns_none(self):
        assert MetarParser.try_parse("") is None

    def test_failure_is_logged(self, caplog):
        with caplog.at_level("DEBUG", logger="metar_codec.parsers.metar_parser"):
            MetarParser.try_parse("NOT A METAR")
        assert "Failed to parse METAR" in caplog.text


class TestParseMany:
    """Test parsing of multi-report feeds."""

    def test_line_separated(self, metar_feed):
        metars = MetarParser.parse_many(metar_feed)
        assert [m.station for m in metars] == ["EDDM", "EDSB", "ETSN"]

    def test_terminator_separated(self):
        text = (
            "EDDM 222020Z AUTO VRB01KT CAVOK 20/13 Q1017\n    NOSIG=\n"
            "EDSB 242150Z AUTO 18003KT 9999 NCD 20/14 Q1015="
        )
        metars = MetarParser.parse_many(text)
        assert [m.station for m in metars] == ["EDDM", "EDSB"]
        assert metars[0].trends[0].kind == TrendKind.NO_SIGNIFICANT_CHANGE

    def test_explicit_separator(self):
        text = "EDDM 222020Z 27008KT 9999 20/13 Q1017 | EDSB 242150Z 18003KT 9999 20/14 Q1015"
        metars = MetarParser.parse_many(text, separator="|")
        assert len(metars) == 2

    def test_empty_feed(self):
        assert MetarParser.parse_many("") == []
