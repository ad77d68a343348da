"""Tests for trend parsing."""

from metar_codec.models import (
    CloudDensity,
    CloudState,
    ColourCode,
    Known,
    TrendKind,
    Visibility,
    WeatherCondition,
)
from metar_codec.parsers import MetarParser
from metar_codec.parsers.scanner import Scanner
from metar_codec.parsers.trend import parse_trend


class TestParseTrend:

    def test_nosig(self):
        trend = parse_trend(Scanner("NOSIG"))
        assert trend.kind == TrendKind.NO_SIGNIFICANT_CHANGE
        assert trend.conditions is None

    def test_tempo_with_wind_visibility_and_weather(self):
        trend = parse_trend(Scanner("TEMPO 28020G35KT 3500 TSRA"))
        assert trend.kind == TrendKind.TEMPORARILY
        conditions = trend.conditions
        assert conditions.wind.speed == Known(20)
        assert conditions.wind.gust == Known(35)
        assert conditions.visibility == Visibility.metres(3500)
        assert conditions.weather[0].conditions == (
            WeatherCondition.THUNDERSTORM,
            WeatherCondition.RAIN,
        )
        assert conditions.clouds is None

    def test_becmg_with_change_times(self):
        trend = parse_trend(Scanner("BECMG FM1300 TL1400 NSW NSC"))
        conditions = trend.conditions
        assert trend.kind == TrendKind.BECOMING
        assert conditions.change_time.from_time == (13, 0)
        assert conditions.change_time.until_time == (14, 0)
        assert conditions.change_time.at_time is None
        assert conditions.no_significant_weather is True
        assert conditions.clouds == CloudState.NO_SIGNIFICANT_CLOUD

    def test_cloud_layers_and_colour(self):
        trend = parse_trend(Scanner("TEMPO BKN012 YLO"))
        conditions = trend.conditions
        assert conditions.clouds == CloudState.CLOUD_LAYERS
        assert conditions.cloud_layers[0].density == Known(CloudDensity.BROKEN)
        assert conditions.colour_code == Known(ColourCode.YELLOW)

    def test_bare_tempo(self):
        trend = parse_trend(Scanner("TEMPO"))
        assert trend.kind == TrendKind.TEMPORARILY
        assert trend.conditions.wind is None
        assert trend.conditions.visibility is None

    def test_not_a_trend(self):
        s = Scanner("RMK")
        assert parse_trend(s) is None
        assert s.pos == 0


class TestTrendsInReport:

    def test_multiple_trends(self):
        metar = MetarParser.parse(
            "EGPK 211220Z 28012KT 9999 SCT020 08/03 Q1002 BECMG 25015KT TEMPO 4000 SHRA BKN012"
        )
        assert [t.kind for t in metar.trends] == [TrendKind.BECOMING, TrendKind.TEMPORARILY]
        assert metar.trends[1].conditions.visibility == Visibility.metres(4000)
