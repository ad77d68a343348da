"""
Render decoded reports back to canonical METAR text.

Formatting a parsed report gives back the input text when that text was
already canonical. Variant spellings fold to one form:

- ``CLR`` and ``SKC`` become ``NCD``
- ``CCA`` becomes ``COR`` and the kind marker follows the time group
- ``KPH`` becomes ``KMH``
- ``WS RWY26`` becomes ``WS R26``
- ``R26/1200/U`` becomes ``R26/1200U``
- the trailing ``=`` is dropped

Mandatory groups that were absent are rendered as their masked form
(``/////KT``, ``////``, ``/////``, ``Q////``).
"""

import math
from fractions import Fraction
from typing import List, Optional, Tuple

from metar_codec.models.clouds import CloudLayer, CloudsInVicinity, CloudState, VerticalVisibility
from metar_codec.models.colour_code import ColourCode
from metar_codec.models.data import Data, Known
from metar_codec.models.metar import Kind, Metar, ObservationTime
from metar_codec.models.pressure import Pressure, PressureUnit
from metar_codec.models.runway_condition import RunwayCondition
from metar_codec.models.rvr import RunwayVisualRange, RvrReading
from metar_codec.models.sea_condition import SeaCondition
from metar_codec.models.trend import ChangeTime, Trend, WeatherChangeConditions
from metar_codec.models.visibility import DirectionalVisibility, Visibility, VisibilityKind
from metar_codec.models.weather import Weather
from metar_codec.models.wind import Wind
from metar_codec.models.windshear import WindshearWarnings


def _digits(data: Data[int], width: int) -> str:
    """Zero-padded number, or a slash run of the same width when masked."""
    if isinstance(data, Known):
        return f"{data.value:0{width}d}"
    return '/' * width


def _temperature(data: Data[float]) -> str:
    if not isinstance(data, Known):
        return '//'
    value = data.value
    # M00 is -0.0, the sign survives
    prefix = 'M' if math.copysign(1.0, value) < 0 else ''
    return f"{prefix}{abs(value):02.0f}"


def _statute_miles(miles: float) -> str:
    fraction = Fraction(miles).limit_denominator(16)
    whole = fraction.numerator // fraction.denominator
    remainder = fraction - whole
    if remainder == 0:
        return f"{whole}SM"
    if whole:
        return f"{whole} {remainder.numerator}/{remainder.denominator}SM"
    return f"{remainder.numerator}/{remainder.denominator}SM"


class MetarFormatter:
    """
    Format Metar objects as METAR text.

    Example:
        text = MetarFormatter.format(metar)
    """

    @classmethod
    def format(cls, metar: Metar) -> str:
        """Render a report as a single line of space-separated groups."""
        parts: List[str] = []
        if metar.report_type is not None:
            parts.append(metar.report_type.value)
        parts.append(metar.station)
        parts.append(cls.format_time(metar.time))
        if metar.kind != Kind.NORMAL:
            parts.append(metar.kind.value)
        parts.append(cls.format_wind(metar.wind))
        parts.append(cls.format_visibility(metar.visibility))
        parts.extend(cls.format_directional_visibility(d) for d in metar.directional_visibilities)
        parts.extend(cls.format_rvr(r) for r in metar.rvr)

        if isinstance(metar.weather, Known):
            parts.extend(cls.format_weather(w) for w in metar.weather.value)
        else:
            parts.append('//')
        if metar.vertical_visibility is not None:
            parts.append(cls.format_vertical_visibility(metar.vertical_visibility))
        if not metar.is_cavok and metar.clouds != CloudState.CLOUD_LAYERS:
            parts.append(metar.clouds.value)
        parts.extend(cls.format_cloud_layer(layer) for layer in metar.cloud_layers)

        parts.append(f"{_temperature(metar.temperature)}/{_temperature(metar.dewpoint)}")
        parts.append(cls.format_pressure(metar.pressure))

        for block in metar.recent_weather:
            if isinstance(block, Known):
                parts.append('RE' + ''.join(c.value for c in block.value))
            else:
                parts.append('RE//')
        if metar.colour_code is not None:
            parts.append(cls.format_colour_code(metar.colour_code))
        if metar.windshear_warnings is not None:
            parts.append(cls.format_windshear(metar.windshear_warnings))
        parts.extend(cls.format_runway_condition(rc) for rc in metar.runway_conditions)
        if metar.sea_condition is not None:
            parts.append(cls.format_sea_condition(metar.sea_condition))
        parts.extend(cls.format_trend(t) for t in metar.trends)
        parts.extend(cls.format_clouds_in_vicinity(c) for c in metar.clouds_in_vicinity)
        if metar.remarks is not None:
            parts.append(f"RMK {metar.remarks}" if metar.remarks else 'RMK')
        return ' '.join(parts)

    @staticmethod
    def format_time(time: ObservationTime) -> str:
        return f"{time.day:02d}{time.hour:02d}{time.minute:02d}Z"

    @staticmethod
    def format_wind(wind: Wind) -> str:
        if wind.calm:
            return 'CALM'
        if wind.direction.variable:
            direction = 'VRB'
        else:
            direction = _digits(wind.direction.heading, 3)
        text = direction + ('P' if wind.speed_greater_than else '') + _digits(wind.speed, 2)
        if wind.gust is not None:
            text += 'G' + _digits(wind.gust, 2)
        text += wind.unit.value
        if wind.varying is not None:
            low, high = wind.varying
            text += f" {_digits(low, 3)}V{_digits(high, 3)}"
        return text

    @staticmethod
    def format_visibility(visibility: Data[Visibility]) -> str:
        if not isinstance(visibility, Known):
            return '////'
        vis = visibility.value
        if vis.kind == VisibilityKind.CAVOK:
            return 'CAVOK'
        if vis.kind == VisibilityKind.STATUTE_MILES:
            return _statute_miles(vis.value)
        return f"{int(vis.value):04d}"

    @classmethod
    def format_directional_visibility(cls, visibility: DirectionalVisibility) -> str:
        text = cls.format_visibility(visibility.visibility)
        if visibility.direction is not None:
            text += visibility.direction.value
        return text

    @staticmethod
    def format_rvr_reading(reading: RvrReading) -> str:
        return f"{reading.qualifier.value}{reading.distance:04d}"

    @classmethod
    def format_rvr(cls, rvr: RunwayVisualRange) -> str:
        text = f"R{rvr.runway}/"
        if isinstance(rvr.value, Known):
            text += cls.format_rvr_reading(rvr.value.value.low)
            if rvr.value.value.high is not None:
                text += 'V' + cls.format_rvr_reading(rvr.value.value.high)
        else:
            text += '////'
        text += rvr.unit.value
        if rvr.trend is not None:
            text += rvr.trend.value
        return text

    @staticmethod
    def format_weather(weather: Weather) -> str:
        return weather.intensity.value + ''.join(c.value for c in weather.conditions)

    @staticmethod
    def format_vertical_visibility(vv: VerticalVisibility) -> str:
        if vv.distance is None:
            return 'VV///'
        return f"VV{vv.distance:03d}"

    @staticmethod
    def format_cloud_layer(layer: CloudLayer) -> str:
        density = layer.density.value.value if isinstance(layer.density, Known) else '///'
        text = density + _digits(layer.height, 3)
        if layer.cloud_type is not None:
            text += layer.cloud_type.value.value if isinstance(layer.cloud_type, Known) else '///'
        return text

    @staticmethod
    def format_pressure(pressure: Pressure) -> str:
        if pressure.unit == PressureUnit.INCHES_OF_MERCURY:
            hundredths = pressure.value.map(lambda v: int(round(v * 100)))
            return 'A' + _digits(hundredths, 4)
        return 'Q' + _digits(pressure.value, 4)

    @staticmethod
    def format_colour_code(colour: Data[ColourCode]) -> str:
        return colour.value.value if isinstance(colour, Known) else '///'

    @staticmethod
    def format_windshear(warnings: WindshearWarnings) -> str:
        if warnings.all_runways:
            return 'WS ALL RWY'
        return ' '.join(f"WS R{runway}" for runway in warnings.runways)

    @staticmethod
    def format_runway_condition(condition: RunwayCondition) -> str:
        runway = condition.runway or ''
        if condition.snow_closed:
            return f"R{runway}/SNOCLO"
        if condition.cleared:
            return f"R{runway}/CLRD{_digits(condition.friction, 2)}"

        def code(data: Optional[Data], width: int) -> str:
            if isinstance(data, Known):
                value = data.value
                return f"{getattr(value, 'value', value):0{width}d}"
            return '/' * width

        return (
            f"R{runway}/"
            f"{code(condition.deposit, 1)}"
            f"{code(condition.contamination, 1)}"
            f"{code(condition.depth, 2)}"
            f"{code(condition.friction, 2)}"
        )

    @staticmethod
    def format_sea_condition(sea: SeaCondition) -> str:
        text = f"W{_temperature(sea.temperature)}/"
        if sea.state is not None:
            text += 'S' + (str(sea.state.value.value) if isinstance(sea.state, Known) else '/')
        elif sea.wave_height is not None:
            text += 'H' + _digits(sea.wave_height, 3)
        return text

    @staticmethod
    def format_change_time(change_time: ChangeTime) -> List[str]:
        indicators: List[Tuple[str, Optional[Tuple[int, int]]]] = [
            ('FM', change_time.from_time),
            ('TL', change_time.until_time),
            ('AT', change_time.at_time),
        ]
        return [f"{name}{t[0]:02d}{t[1]:02d}" for name, t in indicators if t is not None]

    @classmethod
    def format_trend_conditions(cls, conditions: WeatherChangeConditions) -> List[str]:
        parts: List[str] = []
        if conditions.change_time is not None:
            parts.extend(cls.format_change_time(conditions.change_time))
        if conditions.wind is not None:
            parts.append(cls.format_wind(conditions.wind))
        if conditions.visibility is not None:
            parts.append(cls.format_visibility(Known(conditions.visibility)))
        if conditions.no_significant_weather:
            parts.append('NSW')
        parts.extend(cls.format_weather(w) for w in conditions.weather)
        if conditions.vertical_visibility is not None:
            parts.append(cls.format_vertical_visibility(conditions.vertical_visibility))
        if conditions.clouds is not None and conditions.clouds != CloudState.CLOUD_LAYERS:
            parts.append(conditions.clouds.value)
        parts.extend(cls.format_cloud_layer(layer) for layer in conditions.cloud_layers)
        if conditions.colour_code is not None:
            parts.append(cls.format_colour_code(conditions.colour_code))
        return parts

    @classmethod
    def format_trend(cls, trend: Trend) -> str:
        parts = [trend.kind.value]
        if trend.conditions is not None:
            parts.extend(cls.format_trend_conditions(trend.conditions))
        return ' '.join(parts)

    @staticmethod
    def format_clouds_in_vicinity(clouds: CloudsInVicinity) -> str:
        cloud_type = clouds.cloud_type.value.value if isinstance(clouds.cloud_type, Known) else '///'
        return cloud_type + ''.join('/' + d.value for d in clouds.directions)
