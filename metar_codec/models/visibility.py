"""Horizontal visibility models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from metar_codec.models.data import Data, data_to_dict


class VisibilityKind(Enum):
    """How a visibility group was expressed."""

    CAVOK = "CAVOK"
    METRES = "M"
    STATUTE_MILES = "SM"


class CompassDirection(Enum):
    """Eight-point compass direction."""

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"


@dataclass(frozen=True)
class Visibility:
    """
    Prevailing horizontal visibility.

    Metres are whole numbers (``9999`` means 10 km or more). Statute miles
    keep their fractional value (``1 1/2SM`` is 1.5).
    """

    kind: VisibilityKind
    value: Optional[float] = None

    @classmethod
    def cavok(cls) -> 'Visibility':
        return cls(VisibilityKind.CAVOK)

    @classmethod
    def metres(cls, distance: int) -> 'Visibility':
        return cls(VisibilityKind.METRES, distance)

    @classmethod
    def statute_miles(cls, distance: float) -> 'Visibility':
        return cls(VisibilityKind.STATUTE_MILES, distance)

    @property
    def is_cavok(self) -> bool:
        return self.kind == VisibilityKind.CAVOK

    def to_dict(self) -> dict:
        return {
            'kind': self.kind.name.lower(),
            'value': self.value,
        }


@dataclass(frozen=True)
class DirectionalVisibility:
    """A visibility reduced further in one direction (``1500SW``)."""

    visibility: Data[Visibility]
    direction: Optional[CompassDirection] = None

    def to_dict(self) -> dict:
        return {
            'visibility': data_to_dict(self.visibility, lambda v: v.to_dict()),
            'direction': self.direction.value if self.direction else None,
        }
