"""METAR report data model."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional, Tuple

from dateutil.relativedelta import relativedelta

from metar_codec.models.clouds import CloudLayer, CloudsInVicinity, CloudState, VerticalVisibility
from metar_codec.models.colour_code import ColourCode
from metar_codec.models.data import Data, Known, UNKNOWN, data_to_dict
from metar_codec.models.pressure import Pressure
from metar_codec.models.runway_condition import RunwayCondition
from metar_codec.models.rvr import RunwayVisualRange
from metar_codec.models.sea_condition import SeaCondition
from metar_codec.models.trend import Trend
from metar_codec.models.visibility import DirectionalVisibility, Visibility
from metar_codec.models.weather import Weather, WeatherCondition
from metar_codec.models.wind import Wind
from metar_codec.models.windshear import WindshearWarnings


class ReportType(Enum):
    """Optional leading tag of a report."""

    METAR = "METAR"
    SPECI = "SPECI"


class Kind(Enum):
    NORMAL = ""
    AUTOMATIC = "AUTO"
    CORRECTION = "COR"


@dataclass(frozen=True)
class ObservationTime:
    """Day of month, hour and minute of the observation, UTC (``222020Z``)."""

    day: int
    hour: int
    minute: int

    def to_datetime(
        self,
        reference: datetime,
        tolerance: timedelta = timedelta(hours=1),
    ) -> datetime:
        """
        Resolve the observation to a full datetime.

        The report only carries the day of month, so the result is the latest
        matching date not after ``reference`` (plus ``tolerance`` for reports
        stamped slightly ahead of the reference clock). When the day is ahead
        of the reference, the previous month is used.

        Args:
            reference: Datetime the report was received, usually "now" in UTC
            tolerance: How far ahead of ``reference`` the report may be

        Returns:
            Datetime with the tzinfo of ``reference``

        Raises:
            ValueError: If no month close to ``reference`` has that day
        """
        month_start = reference.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        for months_back in range(3):
            start = month_start - relativedelta(months=months_back)
            try:
                candidate = start.replace(day=self.day, hour=self.hour, minute=self.minute)
            except ValueError:
                # Day does not exist in that month (e.g. 31 in April)
                continue
            if candidate <= reference + tolerance:
                return candidate
        raise ValueError(f"Cannot resolve day {self.day} relative to {reference.isoformat()}")

    def to_dict(self) -> dict:
        return {
            'day': self.day,
            'hour': self.hour,
            'minute': self.minute,
        }


@dataclass(frozen=True)
class Metar:
    """
    A decoded METAR.

    Built by one call to ``MetarParser.parse`` and never modified afterwards.
    Fields that the report masked with slashes hold ``UNKNOWN``; groups that
    were not in the report are None or empty tuples.

    Attributes:
        station: ICAO station code
        time: Observation time
        kind: Normal, automatic (AUTO) or correction (COR)
        wind: Surface wind
        visibility: Prevailing visibility
        directional_visibilities: Lower visibilities in given directions
        rvr: Runway visual ranges
        weather: Present weather groups, masked as ``//``
        vertical_visibility: Vertical visibility (``VV003``)
        clouds: Overall cloud state
        cloud_layers: Explicit cloud layers, lowest first as reported
        temperature: Air temperature, degrees Celsius
        dewpoint: Dewpoint, degrees Celsius
        pressure: Altimeter setting
        recent_weather: Recent weather blocks (``RERA``)
        colour_code: Military colour state
        windshear_warnings: Windshear warnings
        runway_conditions: Runway state groups
        sea_condition: Sea surface condition
        trends: Trend forecasts
        clouds_in_vicinity: Convective clouds around the aerodrome
        remarks: Free text after ``RMK``
        report_type: Leading METAR/SPECI tag, None when absent
    """

    station: str
    time: ObservationTime
    kind: Kind = Kind.NORMAL
    wind: Wind = Wind()
    visibility: Data[Visibility] = UNKNOWN
    directional_visibilities: Tuple[DirectionalVisibility, ...] = ()
    rvr: Tuple[RunwayVisualRange, ...] = ()
    weather: Data[Tuple[Weather, ...]] = Known(())
    vertical_visibility: Optional[VerticalVisibility] = None
    clouds: CloudState = CloudState.CLOUD_LAYERS
    cloud_layers: Tuple[CloudLayer, ...] = ()
    temperature: Data[float] = UNKNOWN
    dewpoint: Data[float] = UNKNOWN
    pressure: Pressure = Pressure()
    recent_weather: Tuple[Data[Tuple[WeatherCondition, ...]], ...] = ()
    colour_code: Optional[Data[ColourCode]] = None
    windshear_warnings: Optional[WindshearWarnings] = None
    runway_conditions: Tuple[RunwayCondition, ...] = ()
    sea_condition: Optional[SeaCondition] = None
    trends: Tuple[Trend, ...] = ()
    clouds_in_vicinity: Tuple[CloudsInVicinity, ...] = ()
    remarks: Optional[str] = None
    report_type: Optional[ReportType] = None

    @classmethod
    def parse(cls, text: str) -> 'Metar':
        """
        Parse a METAR string.

        Raises:
            MetarParseError: With every error found in the report
        """
        from metar_codec.parsers.metar_parser import MetarParser
        return MetarParser.parse(text)

    @classmethod
    def from_text(cls, text: str) -> Optional['Metar']:
        """Parse a METAR string, returning None if it cannot be decoded."""
        from metar_codec.parsers.metar_parser import MetarParser
        return MetarParser.try_parse(text)

    @property
    def is_cavok(self) -> bool:
        return isinstance(self.visibility, Known) and self.visibility.value.is_cavok

    @property
    def ceiling(self) -> Optional[int]:
        """
        Ceiling in feet: the lowest broken or overcast layer with a known
        height, or the vertical visibility when the sky is obscured.
        """
        heights = [
            layer.height_ft
            for layer in self.cloud_layers
            if isinstance(layer.density, Known)
            and layer.density.value.is_ceiling
            and layer.height_ft is not None
        ]
        if self.vertical_visibility is not None and self.vertical_visibility.distance is not None:
            heights.append(self.vertical_visibility.distance * 100)
        return min(heights) if heights else None

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON export."""
        return {
            'station': self.station,
            'report_type': self.report_type.value if self.report_type else None,
            'time': self.time.to_dict(),
            'kind': self.kind.name.lower(),
            'wind': self.wind.to_dict(),
            'visibility': data_to_dict(self.visibility, lambda v: v.to_dict()),
            'directional_visibilities': [d.to_dict() for d in self.directional_visibilities],
            'rvr': [r.to_dict() for r in self.rvr],
            'weather': data_to_dict(self.weather, lambda wx: [w.to_dict() for w in wx]),
            'vertical_visibility': self.vertical_visibility.to_dict() if self.vertical_visibility else None,
            'clouds': self.clouds.name.lower(),
            'cloud_layers': [layer.to_dict() for layer in self.cloud_layers],
            'temperature': data_to_dict(self.temperature),
            'dewpoint': data_to_dict(self.dewpoint),
            'pressure': self.pressure.to_dict(),
            'recent_weather': [
                data_to_dict(block, lambda conditions: [c.value for c in conditions])
                for block in self.recent_weather
            ],
            'colour_code': data_to_dict(self.colour_code, lambda c: c.value) if self.colour_code is not None else None,
            'windshear_warnings': self.windshear_warnings.to_dict() if self.windshear_warnings else None,
            'runway_conditions': [rc.to_dict() for rc in self.runway_conditions],
            'sea_condition': self.sea_condition.to_dict() if self.sea_condition else None,
            'trends': [t.to_dict() for t in self.trends],
            'clouds_in_vicinity': [c.to_dict() for c in self.clouds_in_vicinity],
            'remarks': self.remarks,
        }

    def __str__(self) -> str:
        from metar_codec.formatter import MetarFormatter
        return MetarFormatter.format(self)
