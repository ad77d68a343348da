"""Error types raised or returned while decoding METAR reports."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


class UnknownValueError(ValueError):
    """Raised when unwrapping a value that was masked in the report."""


class ErrorKind(Enum):
    """
    Kind of parse failure.

    EXPECTED:       the expected token or pattern was not found here
    INVALID_NUMBER: a fixed-width numeric slot holds neither digits nor the
                    exact placeholder run
    INVALID_VALUE:  a recognised slot holds a value outside its code set
    """

    EXPECTED = "expected"
    INVALID_NUMBER = "invalid_number"
    INVALID_VALUE = "invalid_value"


@dataclass(frozen=True)
class MetarError:
    """
    A single parse error.

    Attributes:
        text: The report text that was being parsed
        offset: Byte offset of the offending span
        length: Byte length of the offending span
        kind: What went wrong
        expected: Labels of the tokens that would have been accepted here
        message: Human readable detail
    """

    text: str
    offset: int
    length: int
    kind: ErrorKind
    expected: Tuple[str, ...] = ()
    message: str = ""

    @property
    def span(self) -> str:
        """The offending characters."""
        raw = self.text.encode('utf-8')
        return raw[self.offset:self.offset + self.length].decode('utf-8', errors='replace')

    def describe(self) -> str:
        if self.kind == ErrorKind.EXPECTED:
            return "expected " + " | ".join(self.expected) if self.expected else "unexpected input"
        return self.message or self.kind.value

    def to_dict(self) -> dict:
        return {
            'offset': self.offset,
            'length': self.length,
            'kind': self.kind.value,
            'expected': list(self.expected),
            'message': self.message,
        }

    def __str__(self) -> str:
        prefix = self.text.encode('utf-8')[:self.offset].decode('utf-8', errors='replace')
        caret = " " * len(prefix) + "^" + "~" * max(self.length - 1, 0)
        return f"{self.text}\n{caret}\n{self.kind.value}: {self.describe()}"


class MetarParseError(ValueError):
    """Raised when a report cannot be decoded; carries every error found."""

    def __init__(self, errors: List[MetarError]):
        if not errors:
            raise ValueError("MetarParseError needs at least one error")
        self.errors = list(errors)
        super().__init__("\n".join(str(e) for e in self.errors))

    @property
    def text(self) -> str:
        return self.errors[0].text
