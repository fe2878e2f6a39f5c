"""
Symbol type definitions.

A symbol is the value bound to a name in a name table. Two variants exist,
mirroring what a shell variable can hold: a scalar string and an ordered
array of strings.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Protocol, Tuple, Union


class SymbolType(str, Enum):
    """Kind of value a symbol holds."""
    SCALAR = "scalar"
    ARRAY = "array"


@dataclass(frozen=True)
class Scalar:
    """
    Scalar symbol.

    Attributes:
        text: The string value
    """
    text: str

    @property
    def type(self) -> SymbolType:
        return SymbolType.SCALAR


@dataclass(frozen=True)
class Array:
    """
    Array symbol.

    Attributes:
        values: Element strings, in order
    """
    values: Tuple[str, ...] = ()

    def __init__(self, values: Iterable[str] = ()):
        object.__setattr__(self, 'values', tuple(values))

    @property
    def type(self) -> SymbolType:
        return SymbolType.ARRAY


Symbol = Union[Scalar, Array]


class NameTable(Protocol):
    """Read-only view of a name table as consumed by the word parsers."""

    def lookup(self, name: str) -> Optional[Symbol]:
        ...
