"""
Known-or-masked values.

A METAR slot that is present in the report but whose content was replaced by
slashes (``////``) is *unknown*. That is different from a group that is not
in the report at all, which the models express with ``None`` or an empty
tuple instead.

Example:
    from metar_codec.models.data import Known, UNKNOWN

    speed = Known(12)
    speed.as_optional()    # 12
    UNKNOWN.as_optional()  # None
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from metar_codec.errors import UnknownValueError

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class Known(Generic[T]):
    """A value that was given in the report."""

    value: T

    @property
    def is_known(self) -> bool:
        return True

    @property
    def is_unknown(self) -> bool:
        return False

    def as_optional(self) -> Optional[T]:
        return self.value

    def unwrap(self) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> 'Known[U]':
        return Known(fn(self.value))

    def __repr__(self) -> str:
        return f"Known({self.value!r})"


@dataclass(frozen=True)
class Unknown:
    """A slot that is present in the report but masked with slashes."""

    @property
    def is_known(self) -> bool:
        return False

    @property
    def is_unknown(self) -> bool:
        return True

    def as_optional(self) -> None:
        return None

    def unwrap(self) -> Any:
        """
        Unwrap a masked value.

        Always raises: there is nothing to unwrap. Use ``as_optional()`` when
        the value may be masked.

        Raises:
            UnknownValueError
        """
        raise UnknownValueError("cannot unwrap unknown data")

    def map(self, fn: Callable[[Any], Any]) -> 'Unknown':
        return self

    def __repr__(self) -> str:
        return "UNKNOWN"


UNKNOWN = Unknown()

# Known(T) or Unknown
Data = Union[Known[T], Unknown]


def of_optional(value: Optional[T]) -> 'Data[T]':
    """Wrap an optional value: ``None`` becomes ``UNKNOWN``."""
    if value is None:
        return UNKNOWN
    return Known(value)


def data_to_dict(data: 'Data[Any]', convert: Optional[Callable[[Any], Any]] = None) -> Any:
    """Serialize a Data value: ``'unknown'`` when masked, else the (converted) value."""
    if isinstance(data, Unknown):
        return 'unknown'
    if convert is not None:
        return convert(data.value)
    return data.value
