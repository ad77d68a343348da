"""Pressure models."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from metar_codec.models.data import Data, Known, UNKNOWN, data_to_dict


class PressureUnit(Enum):
    """QNH in hectopascals (``Q1013``) or inches of mercury (``A2992``)."""

    HECTOPASCALS = "Q"
    INCHES_OF_MERCURY = "A"


@dataclass(frozen=True)
class Pressure:
    """
    Altimeter setting.

    Hectopascals are whole numbers, inches of mercury keep two decimals
    (``A2992`` is 29.92).
    """

    unit: PressureUnit = PressureUnit.HECTOPASCALS
    value: Data[Union[int, float]] = UNKNOWN

    @classmethod
    def hectopascals(cls, value: int) -> 'Pressure':
        return cls(PressureUnit.HECTOPASCALS, Known(value))

    @classmethod
    def inches_of_mercury(cls, value: float) -> 'Pressure':
        return cls(PressureUnit.INCHES_OF_MERCURY, Known(value))

    def to_dict(self) -> dict:
        return {
            'unit': self.unit.name.lower(),
            'value': data_to_dict(self.value),
        }
