"""
Position tracking and error accumulation for the METAR grammar.

The grammar tries ordered alternatives at each position. A failing
alternative never raises: it records what it expected (or what was wrong
with the slot it recognised) and rewinds. When the report as a whole cannot
be consumed, the errors recorded at the furthest position any alternative
reached are the ones reported.
"""

import functools
import re
from typing import Callable, List, Optional, Pattern, Tuple, TypeVar

from metar_codec.errors import ErrorKind, MetarError
from metar_codec.models.data import Data, Known, UNKNOWN

T = TypeVar('T')

_WHITESPACE = re.compile(r'\s+')
_TOKEN = re.compile(r'[^\s=]*')
_DIGITS = '0123456789'


class ErrorAccumulator:
    """
    Keep the errors recorded at the furthest position reached.

    Errors at an earlier position are dropped as soon as any alternative
    gets further. All EXPECTED labels at the furthest position are merged
    into a single error. A malformed slot is reported once: the first
    group that reads it names it, later readers of the same position are
    ignored.
    """

    def __init__(self, text: str):
        self.text = text
        self.furthest = -1
        self._expected: List[str] = []
        self._invalid: List[Tuple[ErrorKind, int, str]] = []

    def _reach(self, pos: int) -> bool:
        if pos > self.furthest:
            self.furthest = pos
            self._expected = []
            self._invalid = []
        return pos == self.furthest

    def expected(self, pos: int, label: str) -> None:
        if self._reach(pos) and label not in self._expected:
            self._expected.append(label)

    def invalid(self, kind: ErrorKind, pos: int, length: int, message: str) -> None:
        if self._reach(pos) and not any(k == kind for k, _, _ in self._invalid):
            self._invalid.append((kind, length, message))

    def build(self) -> List[MetarError]:
        """Convert the recorded errors to byte-offset MetarErrors."""
        pos = max(self.furthest, 0)
        offset = len(self.text[:pos].encode('utf-8'))
        errors = []
        for kind, length, message in self._invalid:
            errors.append(MetarError(
                text=self.text,
                offset=offset,
                length=len(self.text[pos:pos + length].encode('utf-8')),
                kind=kind,
                message=message,
            ))
        if self._expected or not errors:
            token = _TOKEN.match(self.text, pos).group(0)
            errors.append(MetarError(
                text=self.text,
                offset=offset,
                length=len(token.encode('utf-8')),
                kind=ErrorKind.EXPECTED,
                expected=tuple(self._expected),
            ))
        return errors


class Scanner:
    """Cursor over one report, shared by all group parsers of one parse."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.errors = ErrorAccumulator(text)

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def at_boundary(self) -> bool:
        """True at the end of a token: end of input, whitespace or ``=``."""
        return self.at_end() or self.text[self.pos].isspace() or self.text[self.pos] == '='

    def skip_whitespace(self) -> None:
        m = _WHITESPACE.match(self.text, self.pos)
        if m:
            self.pos = m.end()

    def match(self, pattern: Pattern, label: str) -> Optional['re.Match']:
        """Match a compiled pattern here and advance past it."""
        m = pattern.match(self.text, self.pos)
        if m is None:
            self.errors.expected(self.pos, label)
            return None
        self.pos = m.end()
        return m

    def peek(self, pattern: Pattern, label: str) -> bool:
        """Check that the next token has the shape of a group, without advancing."""
        if pattern.match(self.text, self.pos):
            return True
        self.errors.expected(self.pos, label)
        return False

    def literal(self, word: str, label: Optional[str] = None) -> bool:
        if self.text.startswith(word, self.pos):
            self.pos += len(word)
            return True
        self.errors.expected(self.pos, label or word)
        return False

    def choice(self, table: Tuple[Tuple[str, T], ...], label: str) -> Optional[T]:
        """
        Try literals in order, first match wins.

        Tables list longer literals before their prefixes (``BLU+`` before
        ``BLU``).
        """
        for word, value in table:
            if self.text.startswith(word, self.pos):
                self.pos += len(word)
                return value
        self.errors.expected(self.pos, label)
        return None

    def separator(self) -> bool:
        """
        End the current group: consume whitespace, or accept end of input
        and the ``=`` terminator without consuming anything.
        """
        if self.at_end() or self.text[self.pos] == '=':
            return True
        m = _WHITESPACE.match(self.text, self.pos)
        if m is None:
            self.errors.expected(self.pos, "whitespace")
            return False
        self.pos = m.end()
        return True

    def number(self, width: int, label: str, masked: bool = True) -> Optional[Data[int]]:
        """
        Read a fixed-width numeric slot.

        Exactly ``width`` digits give a Known value, exactly ``width``
        slashes give UNKNOWN (when ``masked``). A slot that starts with a
        digit or a slash but is neither is an INVALID_NUMBER error.
        """
        chunk = self.text[self.pos:self.pos + width]
        if len(chunk) == width and all(c in _DIGITS for c in chunk):
            self.pos += width
            return Known(int(chunk))
        if masked and chunk == '/' * width:
            self.pos += width
            return UNKNOWN
        if chunk and (chunk[0] in _DIGITS or chunk[0] == '/'):
            span = _TOKEN.match(chunk).end() or 1
            placeholder = f" or {'/' * width}" if masked else ""
            self.errors.invalid(
                ErrorKind.INVALID_NUMBER,
                self.pos,
                span,
                f"{label}: expected {width} digits{placeholder}, got {chunk[:span]!r}",
            )
        else:
            self.errors.expected(self.pos, label)
        return None

    def invalid_value(self, pos: int, length: int, message: str) -> None:
        self.errors.invalid(ErrorKind.INVALID_VALUE, pos, length, message)


def backtracking(fn: Callable[..., Optional[T]]) -> Callable[..., Optional[T]]:
    """Rewind the scanner when a group parser fails (returns None)."""

    @functools.wraps(fn)
    def wrapper(scanner: Scanner, *args, **kwargs):
        start = scanner.pos
        result = fn(scanner, *args, **kwargs)
        if result is None:
            scanner.pos = start
        return result

    return wrapper


def repeated(scanner: Scanner, parser: Callable[[Scanner], Optional[T]]) -> Tuple[T, ...]:
    """Apply ``parser`` until it fails; zero matches is an empty tuple."""
    items = []
    while not scanner.at_end():
        start = scanner.pos
        item = parser(scanner)
        if item is None or scanner.pos == start:
            break
        items.append(item)
    return tuple(items)
