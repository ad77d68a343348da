"""Windshear warning model."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class WindshearWarnings:
    """
    Windshear in the take-off or approach paths.

    Either every runway (``WS ALL RWY``) or a list of runways
    (``WS R26 WS R08L``).
    """

    all_runways: bool = False
    runways: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            'all_runways': self.all_runways,
            'runways': list(self.runways),
        }
