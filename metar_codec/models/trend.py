"""Trend forecast models (``NOSIG``, ``TEMPO``, ``BECMG``)."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from metar_codec.models.clouds import CloudLayer, CloudState, VerticalVisibility
from metar_codec.models.colour_code import ColourCode
from metar_codec.models.data import Data, data_to_dict
from metar_codec.models.visibility import Visibility
from metar_codec.models.weather import Weather
from metar_codec.models.wind import Wind

HourMinute = Tuple[int, int]


class TrendKind(Enum):
    NO_SIGNIFICANT_CHANGE = "NOSIG"
    TEMPORARILY = "TEMPO"
    BECOMING = "BECMG"


@dataclass(frozen=True)
class ChangeTime:
    """Time indicators of a trend: ``FM1200``, ``TL1400``, ``AT1300``."""

    from_time: Optional[HourMinute] = None
    until_time: Optional[HourMinute] = None
    at_time: Optional[HourMinute] = None

    def to_dict(self) -> dict:
        def hhmm(t):
            return f"{t[0]:02d}{t[1]:02d}" if t else None

        return {
            'from': hhmm(self.from_time),
            'until': hhmm(self.until_time),
            'at': hhmm(self.at_time),
        }


@dataclass(frozen=True)
class WeatherChangeConditions:
    """
    The forecast conditions carried by a TEMPO or BECMG trend.

    Every field is optional: a trend lists only what changes.
    ``clouds`` is None when the trend says nothing about clouds.
    """

    change_time: Optional[ChangeTime] = None
    wind: Optional[Wind] = None
    visibility: Optional[Visibility] = None
    weather: Tuple[Weather, ...] = ()
    no_significant_weather: bool = False
    vertical_visibility: Optional[VerticalVisibility] = None
    clouds: Optional[CloudState] = None
    cloud_layers: Tuple[CloudLayer, ...] = ()
    colour_code: Optional[Data[ColourCode]] = None

    def to_dict(self) -> dict:
        return {
            'change_time': self.change_time.to_dict() if self.change_time else None,
            'wind': self.wind.to_dict() if self.wind else None,
            'visibility': self.visibility.to_dict() if self.visibility else None,
            'weather': [w.to_dict() for w in self.weather],
            'no_significant_weather': self.no_significant_weather,
            'vertical_visibility': self.vertical_visibility.to_dict() if self.vertical_visibility else None,
            'clouds': self.clouds.name.lower() if self.clouds else None,
            'cloud_layers': [layer.to_dict() for layer in self.cloud_layers],
            'colour_code': data_to_dict(self.colour_code, lambda c: c.value) if self.colour_code is not None else None,
        }


@dataclass(frozen=True)
class Trend:
    """One trend block; ``conditions`` is None for NOSIG."""

    kind: TrendKind
    conditions: Optional[WeatherChangeConditions] = None

    @classmethod
    def no_significant_change(cls) -> 'Trend':
        return cls(TrendKind.NO_SIGNIFICANT_CHANGE)

    def to_dict(self) -> dict:
        return {
            'kind': self.kind.value,
            'conditions': self.conditions.to_dict() if self.conditions else None,
        }
