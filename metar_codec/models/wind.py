"""Wind data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from metar_codec.models.data import Data, Known, UNKNOWN, data_to_dict


class WindUnit(Enum):
    """Unit shared by the speed and the gust of one wind group."""

    KNOTS = "KT"
    METRES_PER_SECOND = "MPS"
    KILOMETRES_PER_HOUR = "KMH"


@dataclass(frozen=True)
class WindDirection:
    """
    Direction the wind blows from.

    Either a heading in degrees (possibly masked as ``///``) or variable
    (``VRB``).
    """

    heading: Data[int] = UNKNOWN
    variable: bool = False

    @classmethod
    def from_heading(cls, degrees: int) -> 'WindDirection':
        return cls(heading=Known(degrees))

    @classmethod
    def variable_direction(cls) -> 'WindDirection':
        return cls(variable=True)

    def to_dict(self) -> dict:
        return {
            'heading': None if self.variable else data_to_dict(self.heading),
            'variable': self.variable,
        }


@dataclass(frozen=True)
class Wind:
    """
    Surface wind.

    Attributes:
        calm: ``CALM`` was reported, the other fields are meaningless
        direction: Direction the wind is from
        speed: Mean speed in ``unit``
        speed_greater_than: The speed is a lower bound (``P49KT``, more
            than 49 knots)
        gust: Gust speed in ``unit``, None when no gust group
        unit: Unit of speed and gust
        varying: Extremes of a varying direction (``240V300``), given as
            reported: no ordering is enforced
    """

    calm: bool = False
    direction: WindDirection = WindDirection()
    speed: Data[int] = UNKNOWN
    speed_greater_than: bool = False
    gust: Optional[Data[int]] = None
    unit: WindUnit = WindUnit.KNOTS
    varying: Optional[Tuple[Data[int], Data[int]]] = None

    @classmethod
    def calm_wind(cls) -> 'Wind':
        return cls(calm=True)

    @property
    def is_variable(self) -> bool:
        return not self.calm and (self.direction.variable or self.varying is not None)

    def to_dict(self) -> dict:
        if self.calm:
            return {'calm': True}
        return {
            'calm': False,
            'direction': self.direction.to_dict(),
            'speed': data_to_dict(self.speed),
            'speed_greater_than': self.speed_greater_than,
            'gust': data_to_dict(self.gust) if self.gust is not None else None,
            'unit': self.unit.value,
            'varying': [data_to_dict(v) for v in self.varying] if self.varying else None,
        }
