"""Military aerodrome colour state."""

from enum import Enum


class ColourCode(Enum):
    """
    Colour state, from best to worst.

    Thresholds (cloud base / visibility):
        BLU+: 20000 ft / 8000 m
        BLU:  2500 ft / 8000 m
        WHT:  1500 ft / 5000 m
        GRN:  700 ft / 3700 m
        YLO:  300 ft / 1600 m
        AMB:  200 ft / 800 m
        RED:  below amber
    """

    BLUE_PLUS = "BLU+"
    BLUE = "BLU"
    WHITE = "WHT"
    GREEN = "GRN"
    YELLOW = "YLO"
    AMBER = "AMB"
    RED = "RED"
