"""
Group-level parsers of the METAR grammar.

Each parser reads one group (and the whitespace that ends it) at the
scanner position and returns the decoded value, or None after rewinding the
scanner when the group is not there. Alternatives are tried in a fixed
order, longer literals before their prefixes.
"""

import re
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Tuple

from metar_codec.errors import ErrorKind
from metar_codec.models.clouds import (
    CloudDensity,
    CloudLayer,
    CloudsInVicinity,
    CloudState,
    CloudType,
    VerticalVisibility,
)
from metar_codec.models.colour_code import ColourCode
from metar_codec.models.data import Data, Known, UNKNOWN
from metar_codec.models.metar import Kind, ObservationTime, ReportType
from metar_codec.models.pressure import Pressure, PressureUnit
from metar_codec.models.runway_condition import (
    RESERVED_DEPTH_CODES,
    RESERVED_FRICTION_CODES,
    RunwayCondition,
    RunwayContamination,
    RunwayDeposit,
)
from metar_codec.models.rvr import RunwayVisualRange, RvrQualifier, RvrReading, RvrTrend, RvrUnit, RvrValue
from metar_codec.models.sea_condition import SeaCondition, SeaState
from metar_codec.models.visibility import CompassDirection, DirectionalVisibility, Visibility
from metar_codec.models.weather import Weather, WeatherCondition, WeatherIntensity
from metar_codec.models.wind import Wind, WindDirection, WindUnit
from metar_codec.models.windshear import WindshearWarnings
from metar_codec.parsers.scanner import Scanner, backtracking, repeated

# Literal tables, longest first where one literal prefixes another
REPORT_TYPES = (
    ('METAR', ReportType.METAR),
    ('SPECI', ReportType.SPECI),
)

KIND_MARKERS = (
    ('AUTO', Kind.AUTOMATIC),
    ('COR', Kind.CORRECTION),
    ('CCA', Kind.CORRECTION),
)

WIND_UNITS = {
    'KT': WindUnit.KNOTS,
    'MPS': WindUnit.METRES_PER_SECOND,
    'KMH': WindUnit.KILOMETRES_PER_HOUR,
    'KPH': WindUnit.KILOMETRES_PER_HOUR,
}

COMPASS_DIRECTIONS = (
    ('NE', CompassDirection.NE),
    ('NW', CompassDirection.NW),
    ('SE', CompassDirection.SE),
    ('SW', CompassDirection.SW),
    ('N', CompassDirection.N),
    ('E', CompassDirection.E),
    ('S', CompassDirection.S),
    ('W', CompassDirection.W),
)

WEATHER_INTENSITIES = (
    ('-', WeatherIntensity.LIGHT),
    ('+', WeatherIntensity.HEAVY),
    ('VC', WeatherIntensity.IN_VICINITY),
    ('RE', WeatherIntensity.RECENT),
)

WEATHER_CODES = {c.value: c for c in WeatherCondition}

CLOUD_STATES = (
    ('NCD', CloudState.NO_CLOUD_DETECTED),
    ('NSC', CloudState.NO_SIGNIFICANT_CLOUD),
    ('CLR', CloudState.NO_CLOUD_DETECTED),
    ('SKC', CloudState.NO_CLOUD_DETECTED),
)

NO_CLOUD_SHORTCUTS = (
    ('SKC', CloudState.NO_CLOUD_DETECTED),
    ('CLR', CloudState.NO_CLOUD_DETECTED),
)

CLOUD_DENSITIES = (
    ('FEW', Known(CloudDensity.FEW)),
    ('SCT', Known(CloudDensity.SCATTERED)),
    ('BKN', Known(CloudDensity.BROKEN)),
    ('OVC', Known(CloudDensity.OVERCAST)),
    ('///', UNKNOWN),
)

CLOUD_TYPES = (
    ('TCU', Known(CloudType.TOWERING_CUMULUS)),
    ('CB', Known(CloudType.CUMULONIMBUS)),
    ('///', UNKNOWN),
)

COLOUR_CODES = (
    ('///', UNKNOWN),
    ('BLU+', Known(ColourCode.BLUE_PLUS)),
    ('BLU', Known(ColourCode.BLUE)),
    ('WHT', Known(ColourCode.WHITE)),
    ('GRN', Known(ColourCode.GREEN)),
    ('YLO', Known(ColourCode.YELLOW)),
    ('AMB', Known(ColourCode.AMBER)),
    ('RED', Known(ColourCode.RED)),
)

RVR_QUALIFIERS = (
    ('P', RvrQualifier.GREATER_THAN),
    ('M', RvrQualifier.LESS_THAN),
)

RVR_TRENDS = (
    ('U', RvrTrend.UPWARD),
    ('D', RvrTrend.DOWNWARD),
    ('N', RvrTrend.NO_CHANGE),
)

# Regex patterns
STATION_PATTERN = re.compile(r'[A-Z0-9]{4}')
RUNWAY_PATTERN = re.compile(r'[0-9]{2}[LCR]?')
LETTERS_PATTERN = re.compile(r'[A-Z]+')
WIND_SPEED_PATTERN = re.compile(r'[0-9]{2,3}')
# Shapes of groups that are only tried when the next token looks like them
WIND_SHAPE = re.compile(r'(?:VRB|[0-9/]{3})P?[0-9/]{2,3}(?:G[0-9/]{2,3})?[A-Z]+(?=[\s=]|$)')
VARYING_SHAPE = re.compile(r'[0-9/]{3}V[0-9/]{3}(?=[\s=]|$)')
DIRECTIONAL_SHAPE = re.compile(r'[0-9/]{4}(?:NE|NW|SE|SW|N|E|S|W)?(?=[\s=]|$)')
TREND_VISIBILITY_SHAPE = re.compile(r'[0-9]{4}(?=[\s=]|$)')
WEATHER_CODES_PATTERN = re.compile(
    r'(?:' + '|'.join(sorted(WEATHER_CODES)) + r')+'
)
STATUTE_MILES_PATTERN = re.compile(
    r'(?:(?P<whole>[0-9]{1,2}) )?(?P<num>[0-9]{1,2})/(?P<den>[0-9]{1,2})SM'
    r'|(?P<miles>[0-9]{1,3})SM'
)
WINDSHEAR_RUNWAY_PATTERN = re.compile(r'WS R(?:WY)?([0-9]{2}[LCR]?)')
SNOW_CLOSED_PATTERN = re.compile(r'(?:R([0-9]{2}[LCR]?)?/)?SNOCLO')
CHANGE_TIME_PATTERN = re.compile(r'(FM|TL|AT)([0-9]{2})([0-9]{2})')
REMARKS_PATTERN = re.compile(r'RMK(?=[\s=]|$)([^=]*)')


@dataclass(frozen=True)
class AtmosphericConditions:
    """Result of the atmospheric block shared by the report body and trends."""

    weather: Data[Tuple[Weather, ...]] = Known(())
    no_significant_weather: bool = False
    vertical_visibility: Optional[VerticalVisibility] = None
    clouds: CloudState = CloudState.CLOUD_LAYERS
    cloud_layers: Tuple[CloudLayer, ...] = ()
    clouds_given: bool = False


# --- Identification ---

@backtracking
def parse_report_type(s: Scanner) -> Optional[ReportType]:
    report_type = s.choice(REPORT_TYPES, "METAR or SPECI")
    if report_type is None or not s.separator():
        return None
    return report_type


@backtracking
def parse_kind(s: Scanner) -> Optional[Kind]:
    kind = s.choice(KIND_MARKERS, "AUTO or COR")
    if kind is None or not s.separator():
        return None
    return kind


@backtracking
def parse_station(s: Scanner) -> Optional[str]:
    m = s.match(STATION_PATTERN, "station")
    if m is None or not s.separator():
        return None
    return m.group(0)


@backtracking
def parse_observation_time(s: Scanner) -> Optional[ObservationTime]:
    start = s.pos
    day = s.number(2, "day", masked=False)
    if day is None:
        return None
    hour = s.number(2, "hour", masked=False)
    if hour is None:
        return None
    minute = s.number(2, "minute", masked=False)
    if minute is None or not s.literal('Z'):
        return None
    if not (1 <= day.value <= 31 and hour.value <= 23 and minute.value <= 59):
        s.invalid_value(start, 7, f"observation time {s.text[start:s.pos]} is out of range")
        return None
    if not s.separator():
        return None
    return ObservationTime(day.value, hour.value, minute.value)


# --- Wind ---

@backtracking
def parse_wind_speed(s: Scanner, label: str) -> Optional[Data[int]]:
    m = WIND_SPEED_PATTERN.match(s.text, s.pos)
    if m:
        s.pos = m.end()
        return Known(int(m.group(0)))
    return s.number(2, label)


@backtracking
def parse_wind_unit(s: Scanner) -> Optional[WindUnit]:
    start = s.pos
    m = s.match(LETTERS_PATTERN, "wind unit")
    if m is None:
        return None
    unit = WIND_UNITS.get(m.group(0))
    if unit is None:
        s.invalid_value(start, len(m.group(0)), f"unknown wind unit {m.group(0)!r}")
    return unit


@backtracking
def parse_varying_directions(s: Scanner) -> Optional[Tuple[Data[int], Data[int]]]:
    if not s.peek(VARYING_SHAPE, "varying direction"):
        return None
    low = s.number(3, "varying direction")
    if low is None or not s.literal('V'):
        return None
    high = s.number(3, "varying direction")
    if high is None or not s.separator():
        return None
    return low, high


@backtracking
def parse_wind(s: Scanner) -> Optional[Wind]:
    """``CALM``, or direction, speed, optional gust and unit (``24015G25KT``)."""
    if s.text.startswith('CALM', s.pos):
        s.pos += 4
        if s.separator():
            return Wind.calm_wind()
        return None
    if not s.peek(WIND_SHAPE, "wind"):
        return None

    if s.text.startswith('VRB', s.pos):
        s.pos += 3
        direction = WindDirection.variable_direction()
    else:
        heading = s.number(3, "wind direction")
        if heading is None:
            return None
        direction = WindDirection(heading=heading)

    speed_greater_than = s.text.startswith('P', s.pos)
    if speed_greater_than:
        s.pos += 1
    speed = parse_wind_speed(s, "wind speed")
    if speed is None:
        return None

    gust = None
    if s.text.startswith('G', s.pos):
        s.pos += 1
        gust = parse_wind_speed(s, "gust speed")
        if gust is None:
            return None

    unit = parse_wind_unit(s)
    if unit is None or not s.separator():
        return None

    varying = parse_varying_directions(s)
    return Wind(
        direction=direction,
        speed=speed,
        speed_greater_than=speed_greater_than,
        gust=gust,
        unit=unit,
        varying=varying,
    )


# --- Visibility and RVR ---

@backtracking
def parse_statute_miles(s: Scanner) -> Optional[Visibility]:
    start = s.pos
    m = s.match(STATUTE_MILES_PATTERN, "statute miles")
    if m is None:
        return None
    if m.group('miles') is not None:
        return Visibility.statute_miles(float(m.group('miles')))
    denominator = int(m.group('den'))
    if denominator == 0:
        s.errors.invalid(ErrorKind.INVALID_NUMBER, start, s.pos - start, "fraction with a zero denominator")
        return None
    value = Fraction(int(m.group('num')), denominator) + int(m.group('whole') or 0)
    return Visibility.statute_miles(float(value))


@backtracking
def parse_visibility(s: Scanner, in_trend: bool = False) -> Optional[Data[Visibility]]:
    """
    ``CAVOK``, statute miles (``1 1/2SM``) or four-digit metres.

    In a trend the group is optional, so metres are only read from a token
    of four digits, and cannot be masked.
    """
    if s.text.startswith('CAVOK', s.pos):
        s.pos += 5
        return Known(Visibility.cavok()) if s.separator() else None

    miles = parse_statute_miles(s)
    if miles is not None:
        return Known(miles) if s.separator() else None

    if in_trend and not s.peek(TREND_VISIBILITY_SHAPE, "visibility"):
        return None
    metres = s.number(4, "visibility", masked=not in_trend)
    if metres is None or not s.separator():
        return None
    return metres.map(Visibility.metres)


@backtracking
def parse_directional_visibility(s: Scanner) -> Optional[DirectionalVisibility]:
    """A reduced visibility with an optional direction (``1500SW``)."""
    if not s.peek(DIRECTIONAL_SHAPE, "directional visibility"):
        return None
    metres = s.number(4, "directional visibility")
    if metres is None:
        return None
    direction = None
    if not s.at_boundary():
        direction = s.choice(COMPASS_DIRECTIONS, "compass direction")
        if direction is None:
            return None
    if not s.separator():
        return None
    return DirectionalVisibility(metres.map(Visibility.metres), direction)


@backtracking
def parse_rvr_reading(s: Scanner) -> Optional[RvrReading]:
    qualifier = RvrQualifier.EXACTLY
    for prefix, value in RVR_QUALIFIERS:
        if s.text.startswith(prefix, s.pos):
            s.pos += len(prefix)
            qualifier = value
            break
    distance = s.number(4, "RVR distance", masked=False)
    if distance is None:
        return None
    return RvrReading(distance.value, qualifier)


@backtracking
def parse_rvr(s: Scanner) -> Optional[RunwayVisualRange]:
    """``R26/0800N``, ``R24L/P1500``, ``R25L/1800V3000FT``, ``R26/////``."""
    if not s.literal('R', "RVR"):
        return None
    runway = s.match(RUNWAY_PATTERN, "runway")
    if runway is None or not s.literal('/'):
        return None

    if s.text.startswith('////', s.pos):
        s.pos += 4
        value = UNKNOWN
    else:
        low = parse_rvr_reading(s)
        if low is None:
            return None
        high = None
        if s.text.startswith('V', s.pos):
            s.pos += 1
            high = parse_rvr_reading(s)
            if high is None:
                return None
        value = Known(RvrValue(low, high))

    unit = RvrUnit.METRES
    if s.text.startswith('FT', s.pos):
        s.pos += 2
        unit = RvrUnit.FEET

    start = s.pos
    if s.text.startswith('/', s.pos):
        s.pos += 1
    trend = None
    for code, value_trend in RVR_TRENDS:
        if s.text.startswith(code, s.pos):
            s.pos += len(code)
            trend = value_trend
            break
    else:
        # A lone slash is only a trend separator when a trend follows
        s.pos = start

    if not s.separator():
        return None
    return RunwayVisualRange(runway.group(0), value, unit, trend)


# --- Present weather and clouds ---

@backtracking
def parse_weather_conditions(s: Scanner) -> Optional[Tuple[WeatherCondition, ...]]:
    m = s.match(WEATHER_CODES_PATTERN, "weather")
    if m is None:
        return None
    codes = m.group(0)
    return tuple(WEATHER_CODES[codes[i:i + 2]] for i in range(0, len(codes), 2))


@backtracking
def parse_weather(s: Scanner) -> Optional[Weather]:
    """One weather group: intensity prefix then two-letter codes (``-TSRA``)."""
    intensity = WeatherIntensity.MODERATE
    for prefix, value in WEATHER_INTENSITIES:
        if s.text.startswith(prefix, s.pos):
            s.pos += len(prefix)
            intensity = value
            break
    conditions = parse_weather_conditions(s)
    if conditions is None or not s.separator():
        return None
    return Weather(intensity, conditions)


@backtracking
def parse_masked(s: Scanner, width: int) -> Optional[Data]:
    """A placeholder run standing for a whole group (``//``, ``///``)."""
    if s.literal('/' * width) and s.separator():
        return UNKNOWN
    return None


@backtracking
def parse_vertical_visibility(s: Scanner) -> Optional[VerticalVisibility]:
    if not s.literal('VV', "vertical visibility"):
        return None
    distance = s.number(3, "vertical visibility")
    if distance is None or not s.separator():
        return None
    return VerticalVisibility(distance.as_optional())


@backtracking
def parse_cloud_state(s: Scanner) -> Optional[CloudState]:
    state = s.choice(CLOUD_STATES, "NCD or NSC")
    if state is None or not s.separator():
        return None
    return state


@backtracking
def parse_cloud_layer(s: Scanner) -> Optional[CloudLayer]:
    """``BKN020``, ``BKN///CB``, ``OVC001///``, ``//////``."""
    density = s.choice(CLOUD_DENSITIES, "cloud layer")
    if density is None:
        return None
    height = s.number(3, "cloud height")
    if height is None:
        return None
    cloud_type = None
    if not s.at_boundary():
        cloud_type = s.choice(CLOUD_TYPES, "cloud type")
        if cloud_type is None:
            return None
    if not s.separator():
        return None
    return CloudLayer(density, height, cloud_type)


@backtracking
def parse_no_cloud_shortcut(s: Scanner) -> Optional[CloudState]:
    state = s.choice(NO_CLOUD_SHORTCUTS, "SKC or CLR")
    if state is None or not s.separator():
        return None
    return state


def parse_atmosphere(s: Scanner, in_trend: bool = False) -> AtmosphericConditions:
    """
    Present weather, vertical visibility, cloud state and cloud layers.

    Shared by the report body and TEMPO/BECMG trends. In a trend, ``NSW``
    (no significant weather) is accepted and the weather cannot be masked.
    Always succeeds: every part is optional.
    """
    shortcut = parse_no_cloud_shortcut(s)
    if shortcut is not None:
        return AtmosphericConditions(clouds=shortcut, clouds_given=True)

    weather: Data[Tuple[Weather, ...]] = Known(())
    no_significant_weather = False
    masked = None if in_trend else parse_masked(s, 2)
    if masked is not None:
        weather = masked
    elif in_trend and s.text.startswith('NSW', s.pos) and _literal_group(s, 'NSW'):
        no_significant_weather = True
    else:
        weather = Known(repeated(s, parse_weather))

    vertical_visibility = parse_vertical_visibility(s)
    state = parse_cloud_state(s)
    layers = repeated(s, parse_cloud_layer)

    return AtmosphericConditions(
        weather=weather,
        no_significant_weather=no_significant_weather,
        vertical_visibility=vertical_visibility,
        clouds=state if state is not None else CloudState.CLOUD_LAYERS,
        cloud_layers=layers,
        clouds_given=state is not None or bool(layers),
    )


@backtracking
def _literal_group(s: Scanner, word: str) -> Optional[bool]:
    if s.literal(word) and s.separator():
        return True
    return None


# --- Temperature and pressure ---

@backtracking
def parse_temperature(s: Scanner, label: str) -> Optional[Data[float]]:
    """Two digits, ``M`` prefix for sub-zero values (``M00`` keeps its sign)."""
    if s.text.startswith('M', s.pos):
        s.pos += 1
        value = s.number(2, label, masked=False)
        if value is None:
            return None
        return Known(-float(value.value))
    value = s.number(2, label)
    if value is None:
        return None
    return value.map(float)


@backtracking
def parse_temperatures(s: Scanner) -> Optional[Tuple[Data[float], Data[float]]]:
    temperature = parse_temperature(s, "temperature")
    if temperature is None or not s.literal('/'):
        return None
    dewpoint = UNKNOWN
    if not s.at_boundary():
        dewpoint = parse_temperature(s, "dewpoint")
        if dewpoint is None:
            return None
    if not s.separator():
        return None
    return temperature, dewpoint


@backtracking
def parse_pressure(s: Scanner) -> Optional[Pressure]:
    """``Q1013`` (hPa) or ``A2992`` (inHg, hundredths), each maskable."""
    if s.text.startswith('Q', s.pos):
        s.pos += 1
        value = s.number(4, "pressure")
        if value is None or not s.separator():
            return None
        return Pressure(PressureUnit.HECTOPASCALS, value)
    if s.text.startswith('A', s.pos):
        s.pos += 1
        value = s.number(4, "pressure")
        if value is None or not s.separator():
            return None
        return Pressure(PressureUnit.INCHES_OF_MERCURY, value.map(lambda v: v / 100))
    s.errors.expected(s.pos, "pressure")
    return None


# --- Supplementary groups ---

@backtracking
def parse_recent_weather(s: Scanner) -> Optional[Data[Tuple[WeatherCondition, ...]]]:
    """``RERA``, ``RESHSN``, or ``RE//``."""
    if not s.literal('RE', "recent weather"):
        return None
    if s.text.startswith('//', s.pos):
        s.pos += 2
        return UNKNOWN if s.separator() else None
    conditions = parse_weather_conditions(s)
    if conditions is None or not s.separator():
        return None
    return Known(conditions)


@backtracking
def parse_colour_code(s: Scanner) -> Optional[Data[ColourCode]]:
    colour = s.choice(COLOUR_CODES, "colour code")
    if colour is None or not s.separator():
        return None
    return colour


@backtracking
def parse_windshear_runway(s: Scanner) -> Optional[str]:
    m = s.match(WINDSHEAR_RUNWAY_PATTERN, "windshear")
    if m is None or not s.separator():
        return None
    return m.group(1)


@backtracking
def parse_windshear(s: Scanner) -> Optional[WindshearWarnings]:
    """``WS ALL RWY`` or one or more ``WS R26``."""
    if s.text.startswith('WS ALL RWY', s.pos):
        s.pos += len('WS ALL RWY')
        return WindshearWarnings(all_runways=True) if s.separator() else None
    runways = repeated(s, parse_windshear_runway)
    if not runways:
        return None
    return WindshearWarnings(runways=runways)


@backtracking
def parse_runway_condition(s: Scanner) -> Optional[RunwayCondition]:
    """``R24/451293``, ``R24/CLRD70``, ``R/SNOCLO``."""
    m = SNOW_CLOSED_PATTERN.match(s.text, s.pos)
    if m is not None:
        s.pos = m.end()
        return RunwayCondition(runway=m.group(1), snow_closed=True) if s.separator() else None

    if not s.literal('R', "runway condition"):
        return None
    runway = s.match(RUNWAY_PATTERN, "runway")
    if runway is None or not s.literal('/'):
        return None

    if s.text.startswith('CLRD', s.pos):
        s.pos += 4
        friction = _runway_friction(s)
        if friction is None or not s.separator():
            return None
        return RunwayCondition(runway=runway.group(0), friction=friction, cleared=True)

    deposit = _coded_digit(s, RunwayDeposit, "runway deposit")
    if deposit is None:
        return None
    contamination = _coded_digit(s, RunwayContamination, "runway contamination")
    if contamination is None:
        return None

    start = s.pos
    depth = s.number(2, "deposit depth")
    if depth is None:
        return None
    if depth.as_optional() in RESERVED_DEPTH_CODES:
        s.invalid_value(start, 2, f"deposit depth code {depth.value:02d} is reserved")
        return None

    friction = _runway_friction(s)
    if friction is None or not s.separator():
        return None
    return RunwayCondition(
        runway=runway.group(0),
        deposit=deposit,
        contamination=contamination,
        depth=depth,
        friction=friction,
    )


def _coded_digit(s: Scanner, enum_cls, label: str) -> Optional[Data]:
    start = s.pos
    digit = s.number(1, label)
    if digit is None:
        return None
    if isinstance(digit, Known):
        try:
            return Known(enum_cls(digit.value))
        except ValueError:
            s.invalid_value(start, 1, f"{label} code {digit.value} is not defined")
            s.pos = start
            return None
    return digit


def _runway_friction(s: Scanner) -> Optional[Data[int]]:
    start = s.pos
    friction = s.number(2, "friction")
    if friction is None:
        return None
    if friction.as_optional() in RESERVED_FRICTION_CODES:
        s.invalid_value(start, 2, f"friction code {friction.value:02d} is reserved")
        return None
    return friction


@backtracking
def parse_sea_condition(s: Scanner) -> Optional[SeaCondition]:
    """``W15/S4`` (state of the sea) or ``WM01/H015`` (wave height)."""
    if not s.literal('W', "sea condition"):
        return None
    temperature = parse_temperature(s, "sea temperature")
    if temperature is None or not s.literal('/'):
        return None

    if s.text.startswith('S', s.pos):
        s.pos += 1
        state = _coded_digit(s, SeaState, "state of the sea")
        if state is None or not s.separator():
            return None
        return SeaCondition(temperature, state=state)
    if s.text.startswith('H', s.pos):
        s.pos += 1
        height = s.number(3, "wave height")
        if height is None or not s.separator():
            return None
        return SeaCondition(temperature, wave_height=height)
    s.errors.expected(s.pos, "S or H")
    return None


@backtracking
def parse_change_time(s: Scanner) -> Optional[Tuple[str, Tuple[int, int]]]:
    start = s.pos
    m = s.match(CHANGE_TIME_PATTERN, "change time")
    if m is None:
        return None
    hour, minute = int(m.group(2)), int(m.group(3))
    if hour > 24 or minute > 59:
        s.invalid_value(start, s.pos - start, f"change time {m.group(0)} is out of range")
        return None
    if not s.separator():
        return None
    return m.group(1), (hour, minute)


@backtracking
def parse_clouds_in_vicinity(s: Scanner) -> Optional[CloudsInVicinity]:
    """Convective cloud type and one or more directions (``CB/NE/E``)."""
    cloud_type = s.choice(CLOUD_TYPES, "clouds in vicinity")
    if cloud_type is None:
        return None
    directions = []
    while s.text.startswith('/', s.pos):
        s.pos += 1
        direction = s.choice(COMPASS_DIRECTIONS, "compass direction")
        if direction is None:
            return None
        directions.append(direction)
    if not directions:
        s.errors.expected(s.pos, "/ and compass direction")
        return None
    if not s.separator():
        return None
    return CloudsInVicinity(tuple(directions), cloud_type)


def parse_remarks(s: Scanner) -> Optional[str]:
    m = REMARKS_PATTERN.match(s.text, s.pos)
    if m is None:
        s.errors.expected(s.pos, "RMK")
        return None
    s.pos = m.end()
    return m.group(1).strip()
