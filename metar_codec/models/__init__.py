from metar_codec.models.data import Data, Known, Unknown, UNKNOWN, of_optional
from metar_codec.models.wind import Wind, WindDirection, WindUnit
from metar_codec.models.visibility import (
    CompassDirection,
    DirectionalVisibility,
    Visibility,
    VisibilityKind,
)
from metar_codec.models.rvr import (
    RunwayVisualRange,
    RvrQualifier,
    RvrReading,
    RvrTrend,
    RvrUnit,
    RvrValue,
)
from metar_codec.models.weather import Weather, WeatherCondition, WeatherIntensity
from metar_codec.models.clouds import (
    CloudDensity,
    CloudLayer,
    CloudsInVicinity,
    CloudState,
    CloudType,
    VerticalVisibility,
)
from metar_codec.models.pressure import Pressure, PressureUnit
from metar_codec.models.colour_code import ColourCode
from metar_codec.models.windshear import WindshearWarnings
from metar_codec.models.runway_condition import (
    RunwayCondition,
    RunwayContamination,
    RunwayDeposit,
)
from metar_codec.models.sea_condition import SeaCondition, SeaState
from metar_codec.models.trend import ChangeTime, Trend, TrendKind, WeatherChangeConditions
from metar_codec.models.metar import Kind, Metar, ObservationTime, ReportType

__all__ = [
    'Data', 'Known', 'Unknown', 'UNKNOWN', 'of_optional',
    'Wind', 'WindDirection', 'WindUnit',
    'CompassDirection', 'DirectionalVisibility', 'Visibility', 'VisibilityKind',
    'RunwayVisualRange', 'RvrQualifier', 'RvrReading', 'RvrTrend', 'RvrUnit', 'RvrValue',
    'Weather', 'WeatherCondition', 'WeatherIntensity',
    'CloudDensity', 'CloudLayer', 'CloudsInVicinity', 'CloudState', 'CloudType', 'VerticalVisibility',
    'Pressure', 'PressureUnit',
    'ColourCode',
    'WindshearWarnings',
    'RunwayCondition', 'RunwayContamination', 'RunwayDeposit',
    'SeaCondition', 'SeaState',
    'ChangeTime', 'Trend', 'TrendKind', 'WeatherChangeConditions',
    'Kind', 'Metar', 'ObservationTime', 'ReportType',
]
