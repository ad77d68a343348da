"""
Parser for METAR and SPECI reports.

Decodes the WMO/ICAO METAR text format, including the European and North
American variants (statute miles, altimeter in inHg, ``CLR``/``SKC``) and
the military colour codes.
"""

import logging
import re
from typing import List, Optional

from metar_codec.errors import MetarParseError
from metar_codec.models.data import UNKNOWN
from metar_codec.models.metar import Kind, Metar
from metar_codec.models.pressure import Pressure
from metar_codec.models.wind import Wind
from metar_codec.parsers.groups import (
    parse_atmosphere,
    parse_clouds_in_vicinity,
    parse_colour_code,
    parse_directional_visibility,
    parse_kind,
    parse_observation_time,
    parse_pressure,
    parse_recent_weather,
    parse_remarks,
    parse_report_type,
    parse_runway_condition,
    parse_rvr,
    parse_sea_condition,
    parse_station,
    parse_temperatures,
    parse_visibility,
    parse_wind,
    parse_windshear,
)
from metar_codec.parsers.scanner import Scanner, repeated
from metar_codec.parsers.trend import parse_trend

logger = logging.getLogger(__name__)


class MetarParser:
    """
    Parser for METAR reports.

    Groups are read in their fixed order. Each group is either present,
    masked with slashes (decoded as ``UNKNOWN``), or absent. Mandatory groups
    that are absent get a masked default so that every report formats back
    to a complete METAR.

    Example:
        metar = MetarParser.parse(
            "EDDM 222020Z 27008KT 9999 FEW040 20/13 Q1017 NOSIG"
        )
        metar.wind.speed  # Known(8)
    """

    REPORT_TERMINATOR = '='
    LINE_SPLIT_PATTERN = re.compile(r'\r?\n')

    @classmethod
    def parse(cls, text: str) -> Metar:
        """
        Parse one METAR report.

        Args:
            text: Report text, optionally prefixed with METAR/SPECI and
                terminated by ``=``

        Returns:
            Decoded Metar

        Raises:
            MetarParseError: With the errors found at the furthest position
                the grammar reached
        """
        s = Scanner(text)
        s.skip_whitespace()

        report_type = parse_report_type(s)
        early_kind = parse_kind(s)

        station = parse_station(s)
        if station is None:
            raise MetarParseError(s.errors.build())
        time = parse_observation_time(s)
        if time is None:
            raise MetarParseError(s.errors.build())

        late_kind = parse_kind(s)
        kind = early_kind or late_kind or Kind.NORMAL

        wind = parse_wind(s) or Wind()
        visibility = parse_visibility(s)
        if visibility is None:
            visibility = UNKNOWN
        directional_visibilities = repeated(s, parse_directional_visibility)
        rvr = repeated(s, parse_rvr)
        atmosphere = parse_atmosphere(s)

        temperatures = parse_temperatures(s)
        temperature, dewpoint = temperatures if temperatures else (UNKNOWN, UNKNOWN)
        pressure = parse_pressure(s) or Pressure()

        recent_weather = repeated(s, parse_recent_weather)
        colour_code = parse_colour_code(s)
        windshear_warnings = parse_windshear(s)
        runway_conditions = repeated(s, parse_runway_condition)
        sea_condition = parse_sea_condition(s)
        trends = repeated(s, parse_trend)
        clouds_in_vicinity = repeated(s, parse_clouds_in_vicinity)
        remarks = parse_remarks(s)

        cls._parse_end(s)

        return Metar(
            station=station,
            time=time,
            kind=kind,
            wind=wind,
            visibility=visibility,
            directional_visibilities=directional_visibilities,
            rvr=rvr,
            weather=atmosphere.weather,
            vertical_visibility=atmosphere.vertical_visibility,
            clouds=atmosphere.clouds,
            cloud_layers=atmosphere.cloud_layers,
            temperature=temperature,
            dewpoint=dewpoint,
            pressure=pressure,
            recent_weather=recent_weather,
            colour_code=colour_code,
            windshear_warnings=windshear_warnings,
            runway_conditions=runway_conditions,
            sea_condition=sea_condition,
            trends=trends,
            clouds_in_vicinity=clouds_in_vicinity,
            remarks=remarks,
            report_type=report_type,
        )

    @classmethod
    def _parse_end(cls, s: Scanner) -> None:
        """Accept trailing whitespace and one terminator, nothing else."""
        s.skip_whitespace()
        if s.text.startswith(cls.REPORT_TERMINATOR, s.pos):
            s.pos += len(cls.REPORT_TERMINATOR)
            s.skip_whitespace()
        if not s.at_end():
            s.errors.expected(s.pos, "end of report")
            raise MetarParseError(s.errors.build())

    @classmethod
    def try_parse(cls, text: str) -> Optional[Metar]:
        """Parse one report, returning None if it cannot be decoded."""
        try:
            return cls.parse(text)
        except MetarParseError as e:
            logger.debug("Failed to parse METAR: %s - %s", text[:80], e.errors[0].describe())
            return None

    @classmethod
    def parse_many(cls, text: str, separator: Optional[str] = None) -> List[Metar]:
        """
        Parse a feed of several reports.

        Reports are split on ``separator``; by default on ``=`` when the
        feed uses terminators, otherwise one report per line. Reports that
        cannot be decoded are skipped.

        Args:
            text: Text containing multiple reports
            separator: Report separator, None to detect

        Returns:
            List of decoded reports, in feed order
        """
        metars = []
        for chunk in cls._split_reports(text, separator):
            metar = cls.try_parse(chunk)
            if metar:
                metars.append(metar)
        return metars

    @classmethod
    def _split_reports(cls, text: str, separator: Optional[str]) -> List[str]:
        if separator is not None:
            parts = text.split(separator)
        elif cls.REPORT_TERMINATOR in text:
            parts = text.split(cls.REPORT_TERMINATOR)
        else:
            parts = cls.LINE_SPLIT_PATTERN.split(text)
        # Reports wrapped over several lines become one line
        return [' '.join(part.split()) for part in parts if part.strip()]
