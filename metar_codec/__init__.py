"""
METAR (Meteorological Aerodrome Report) decoding and encoding library.

This package decodes METAR and SPECI reports into immutable data objects and
renders them back to canonical METAR text.

The main public API includes:
- MetarParser: Decode one report, or a feed of reports
- MetarFormatter: Render a decoded report as METAR text
- Metar: Decoded report and its field types (see metar_codec.models)
- MetarParseError / MetarError: Structured parse errors with byte offsets

Example:
    from metar_codec import parse, format_metar

    metar = parse("EDDM 222020Z 27008KT 9999 FEW040 20/13 Q1017 NOSIG")
    format_metar(metar)  # 'EDDM 222020Z 27008KT 9999 FEW040 20/13 Q1017 NOSIG'
"""

from metar_codec.errors import ErrorKind, MetarError, MetarParseError, UnknownValueError
from metar_codec.formatter import MetarFormatter
from metar_codec.models import Data, Known, Metar, UNKNOWN, Unknown
from metar_codec.parsers import MetarParser

__version__ = '0.1.0'
__all__ = [
    'parse',
    'format_metar',
    'Metar',
    'MetarParser',
    'MetarFormatter',
    'MetarError',
    'MetarParseError',
    'ErrorKind',
    'UnknownValueError',
    'Data',
    'Known',
    'Unknown',
    'UNKNOWN',
]


def parse(text: str) -> Metar:
    """Parse one METAR report; raises MetarParseError on failure."""
    return MetarParser.parse(text)


def format_metar(metar: Metar) -> str:
    """Render a decoded report as canonical METAR text."""
    return MetarFormatter.format(metar)
