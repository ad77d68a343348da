"""Present and recent weather phenomena."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class WeatherIntensity(Enum):
    """Intensity or proximity prefix of a weather group."""

    LIGHT = "-"
    MODERATE = ""
    HEAVY = "+"
    IN_VICINITY = "VC"
    RECENT = "RE"


class WeatherCondition(Enum):
    """
    Two-letter weather codes.

    Descriptors come first (MI to FZ), then precipitation (RA to UP),
    obscuration (FG to PY) and other phenomena (SQ to FC).
    """

    SHALLOW = "MI"
    PARTIAL = "PR"
    PATCHES = "BC"
    LOW_DRIFTING = "DR"
    BLOWING = "BL"
    SHOWERS = "SH"
    THUNDERSTORM = "TS"
    FREEZING = "FZ"
    RAIN = "RA"
    DRIZZLE = "DZ"
    SNOW = "SN"
    SNOW_GRAINS = "SG"
    ICE_CRYSTALS = "IC"
    ICE_PELLETS = "PL"
    HAIL = "GR"
    SNOW_PELLETS_OR_SMALL_HAIL = "GS"
    UNKNOWN_PRECIPITATION = "UP"
    FOG = "FG"
    VOLCANIC_ASH = "VA"
    MIST = "BR"
    HAZE = "HZ"
    WIDESPREAD_DUST = "DU"
    SMOKE = "FU"
    SAND = "SA"
    SPRAY = "PY"
    SQUALL = "SQ"
    DUST_WHIRLS = "PO"
    DUSTSTORM = "DS"
    SANDSTORM = "SS"
    FUNNEL_CLOUD = "FC"

    @property
    def is_descriptor(self) -> bool:
        return self in _DESCRIPTORS


_DESCRIPTORS = {
    WeatherCondition.SHALLOW,
    WeatherCondition.PARTIAL,
    WeatherCondition.PATCHES,
    WeatherCondition.LOW_DRIFTING,
    WeatherCondition.BLOWING,
    WeatherCondition.SHOWERS,
    WeatherCondition.THUNDERSTORM,
    WeatherCondition.FREEZING,
}


@dataclass(frozen=True)
class Weather:
    """One weather group, e.g. ``-TSRA`` is light, [thunderstorm, rain]."""

    intensity: WeatherIntensity = WeatherIntensity.MODERATE
    conditions: Tuple[WeatherCondition, ...] = ()

    def to_dict(self) -> dict:
        return {
            'intensity': self.intensity.name.lower(),
            'conditions': [c.value for c in self.conditions],
        }
