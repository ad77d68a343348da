"""
Parsers for METAR reports.

MetarParser is the entry point; groups and trend hold the sub-parsers of the
individual report groups.
"""

from metar_codec.parsers.metar_parser import MetarParser

__all__ = ['MetarParser']
