"""Parser for trend blocks (``NOSIG``, ``TEMPO ...``, ``BECMG ...``)."""

from typing import Optional

from metar_codec.models.data import Known
from metar_codec.models.trend import ChangeTime, Trend, TrendKind, WeatherChangeConditions
from metar_codec.parsers.groups import (
    parse_atmosphere,
    parse_change_time,
    parse_colour_code,
    parse_visibility,
    parse_wind,
)
from metar_codec.parsers.scanner import Scanner, backtracking, repeated

TREND_KINDS = (
    ('NOSIG', TrendKind.NO_SIGNIFICANT_CHANGE),
    ('TEMPO', TrendKind.TEMPORARILY),
    ('BECMG', TrendKind.BECOMING),
)

CHANGE_TIME_FIELDS = {
    'FM': 'from_time',
    'TL': 'until_time',
    'AT': 'at_time',
}


def parse_trend_change_time(s: Scanner) -> Optional[ChangeTime]:
    """``FM1200 TL1400``; a repeated indicator keeps the last value."""
    times = repeated(s, parse_change_time)
    if not times:
        return None
    fields = {CHANGE_TIME_FIELDS[indicator]: value for indicator, value in times}
    return ChangeTime(**fields)


@backtracking
def parse_trend(s: Scanner) -> Optional[Trend]:
    kind = s.choice(TREND_KINDS, "trend")
    if kind is None or not s.separator():
        return None
    if kind is TrendKind.NO_SIGNIFICANT_CHANGE:
        return Trend.no_significant_change()

    change_time = parse_trend_change_time(s)
    wind = parse_wind(s)
    visibility = parse_visibility(s, in_trend=True)
    atmosphere = parse_atmosphere(s, in_trend=True)
    colour_code = parse_colour_code(s)

    conditions = WeatherChangeConditions(
        change_time=change_time,
        wind=wind,
        visibility=visibility.value if isinstance(visibility, Known) else None,
        weather=atmosphere.weather.value if isinstance(atmosphere.weather, Known) else (),
        no_significant_weather=atmosphere.no_significant_weather,
        vertical_visibility=atmosphere.vertical_visibility,
        clouds=atmosphere.clouds if atmosphere.clouds_given else None,
        cloud_layers=atmosphere.cloud_layers,
        colour_code=colour_code,
    )
    return Trend(kind, conditions)
