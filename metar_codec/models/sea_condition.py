"""Sea surface condition (``W15/S4``, ``WM01/H015``)."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from metar_codec.models.data import Data, data_to_dict


class SeaState(Enum):
    CALM_GLASSY = 0
    CALM_RIPPLED = 1
    SMOOTH = 2
    SLIGHT = 3
    MODERATE = 4
    ROUGH = 5
    VERY_ROUGH = 6
    HIGH = 7
    VERY_HIGH = 8
    PHENOMENAL = 9


@dataclass(frozen=True)
class SeaCondition:
    """
    Sea surface temperature with either the state of the sea or the
    significant wave height (decimetres).
    """

    temperature: Data[float]
    state: Optional[Data[SeaState]] = None
    wave_height: Optional[Data[int]] = None

    def to_dict(self) -> dict:
        return {
            'temperature': data_to_dict(self.temperature),
            'state': data_to_dict(self.state, lambda s: s.name.lower()) if self.state is not None else None,
            'wave_height': data_to_dict(self.wave_height) if self.wave_height is not None else None,
        }
