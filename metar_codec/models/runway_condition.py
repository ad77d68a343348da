"""
Runway state group (``R24/451293``).

The eight-figure group encodes, after the runway designator, one digit of
deposit type, one digit of contamination extent, two digits of deposit depth
and two digits of friction coefficient or braking action. Each part may be
masked with slashes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from metar_codec.models.data import Data, data_to_dict


class RunwayDeposit(Enum):
    CLEAR_AND_DRY = 0
    DAMP = 1
    WET = 2
    RIME_OR_FROST = 3
    DRY_SNOW = 4
    WET_SNOW = 5
    SLUSH = 6
    ICE = 7
    COMPACTED_SNOW = 8
    FROZEN_RUTS = 9


class RunwayContamination(Enum):
    """Share of the runway covered by the deposit."""

    UP_TO_10_PERCENT = 1
    UP_TO_25_PERCENT = 2
    UP_TO_50_PERCENT = 5
    OVER_50_PERCENT = 9


# Depth codes 91 and friction codes 96-98 are reserved
RESERVED_DEPTH_CODES = frozenset({91})
RESERVED_FRICTION_CODES = frozenset({96, 97, 98})


@dataclass(frozen=True)
class RunwayCondition:
    """
    State of one runway.

    Attributes:
        runway: Runway designator, None for aerodrome-wide ``R/SNOCLO``
        deposit: Deposit type, None when cleared or closed
        contamination: Extent of contamination, None when cleared or closed
        depth: Depth code (00-90 mm, 92-98 tens of cm, 99 not operational)
        friction: Friction code (01-90 coefficient x100, 91-95 braking
            action, 99 unreliable), None when closed
        cleared: Contamination has ceased (``CLRD``)
        snow_closed: Aerodrome closed by snow (``SNOCLO``)
    """

    runway: Optional[str] = None
    deposit: Optional[Data[RunwayDeposit]] = None
    contamination: Optional[Data[RunwayContamination]] = None
    depth: Optional[Data[int]] = None
    friction: Optional[Data[int]] = None
    cleared: bool = False
    snow_closed: bool = False

    @property
    def friction_coefficient(self) -> Optional[float]:
        """Measured coefficient (0.01-0.90), None for braking-action codes."""
        code = self.friction.as_optional() if self.friction is not None else None
        if code is None or code > 90:
            return None
        return code / 100

    def to_dict(self) -> dict:
        def optional(data, convert=None):
            return data_to_dict(data, convert) if data is not None else None

        return {
            'runway': self.runway,
            'deposit': optional(self.deposit, lambda d: d.name.lower()),
            'contamination': optional(self.contamination, lambda c: c.name.lower()),
            'depth': optional(self.depth),
            'friction': optional(self.friction),
            'cleared': self.cleared,
            'snow_closed': self.snow_closed,
        }
