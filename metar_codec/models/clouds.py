"""Cloud and vertical visibility models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from metar_codec.models.data import Data, Known, data_to_dict
from metar_codec.models.visibility import CompassDirection


class CloudState(Enum):
    """
    Overall cloud situation.

    NO_CLOUD_DETECTED is reported as ``NCD`` (also ``CLR`` and ``SKC``, which
    fold to ``NCD`` when formatting). CLOUD_LAYERS means the layers are listed
    explicitly.
    """

    NO_CLOUD_DETECTED = "NCD"
    NO_SIGNIFICANT_CLOUD = "NSC"
    CLOUD_LAYERS = ""


class CloudDensity(Enum):
    """Cloud amount in oktas."""

    FEW = "FEW"           # 1-2
    SCATTERED = "SCT"     # 3-4
    BROKEN = "BKN"        # 5-7
    OVERCAST = "OVC"      # 8

    @property
    def is_ceiling(self) -> bool:
        return self in (CloudDensity.BROKEN, CloudDensity.OVERCAST)


class CloudType(Enum):
    CUMULONIMBUS = "CB"
    TOWERING_CUMULUS = "TCU"


@dataclass(frozen=True)
class CloudLayer:
    """
    One cloud layer, e.g. ``BKN020CB``.

    Attributes:
        density: Amount, masked as ``///``
        height: Base in hundreds of feet, masked as ``///``
        cloud_type: Convective type; None when no type suffix was given,
            UNKNOWN when the suffix was ``///``
    """

    density: Data[CloudDensity]
    height: Data[int]
    cloud_type: Optional[Data[CloudType]] = None

    @property
    def height_ft(self) -> Optional[int]:
        if isinstance(self.height, Known):
            return self.height.value * 100
        return None

    def to_dict(self) -> dict:
        return {
            'density': data_to_dict(self.density, lambda d: d.value),
            'height': data_to_dict(self.height),
            'cloud_type': data_to_dict(self.cloud_type, lambda t: t.value) if self.cloud_type is not None else None,
        }


@dataclass(frozen=True)
class VerticalVisibility:
    """
    Vertical visibility into an obscured sky, in hundreds of feet.

    ``distance`` is None for ``VV///``: the visibility is reduced by an
    amount that could not be measured.
    """

    distance: Optional[int] = None

    @property
    def is_reduced_by_unknown_amount(self) -> bool:
        return self.distance is None

    def to_dict(self) -> dict:
        return {
            'distance': self.distance,
            'reduced_by_unknown_amount': self.distance is None,
        }


@dataclass(frozen=True)
class CloudsInVicinity:
    """Convective cloud seen in the given directions, e.g. ``CB/NE/E``."""

    directions: Tuple[CompassDirection, ...]
    cloud_type: Data[CloudType]

    def to_dict(self) -> dict:
        return {
            'directions': [d.value for d in self.directions],
            'cloud_type': data_to_dict(self.cloud_type, lambda t: t.value),
        }
