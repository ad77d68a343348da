"""Runway visual range models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from metar_codec.models.data import Data, data_to_dict


class RvrQualifier(Enum):
    """Whether a reading is exact or beyond the instrument range."""

    EXACTLY = ""
    GREATER_THAN = "P"
    LESS_THAN = "M"


class RvrUnit(Enum):
    METRES = ""
    FEET = "FT"


class RvrTrend(Enum):
    """Tendency of the RVR over the last 10 minutes."""

    UPWARD = "U"
    DOWNWARD = "D"
    NO_CHANGE = "N"


@dataclass(frozen=True)
class RvrReading:
    distance: int
    qualifier: RvrQualifier = RvrQualifier.EXACTLY

    def to_dict(self) -> dict:
        return {
            'distance': self.distance,
            'qualifier': self.qualifier.name.lower(),
        }


@dataclass(frozen=True)
class RvrValue:
    """A single reading, or the two extremes of a varying RVR (``1800V3000``)."""

    low: RvrReading
    high: Optional[RvrReading] = None

    @property
    def is_varying(self) -> bool:
        return self.high is not None

    def to_dict(self) -> dict:
        return {
            'low': self.low.to_dict(),
            'high': self.high.to_dict() if self.high else None,
        }


@dataclass(frozen=True)
class RunwayVisualRange:
    """
    Visual range along one runway, e.g. ``R26/0800N`` or ``R25L/1800V3000FT``.

    Attributes:
        runway: Runway designator (``26``, ``24L``)
        value: Reading, masked as ``////``
        unit: Metres unless ``FT`` was given
        trend: Tendency, None when not reported
    """

    runway: str
    value: Data[RvrValue]
    unit: RvrUnit = RvrUnit.METRES
    trend: Optional[RvrTrend] = None

    def to_dict(self) -> dict:
        return {
            'runway': self.runway,
            'value': data_to_dict(self.value, lambda v: v.to_dict()),
            'unit': self.unit.name.lower(),
            'trend': self.trend.name.lower() if self.trend else None,
        }
