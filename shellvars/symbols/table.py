"""
Symbol table.

A dict-backed name table that owns the name -> symbol bindings the word
parsers resolve against. The parsers only ever call lookup(); everything
else here is for the owner of the table.
"""

import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .types import Array, Scalar, Symbol


logger = logging.getLogger(__name__)


class SymbolTable:
    """
    Registry of named symbols.

    Names are non-empty runs of [A-Za-z0-9_], the same characters the
    substitution scanner accepts in a bare $name reference.
    """

    NAME_PATTERN = re.compile(r'^[A-Za-z0-9_]+$')

    def __init__(self, symbols: Optional[Mapping[str, Symbol]] = None):
        """
        Initialize the table.

        Args:
            symbols: Optional initial bindings
        """
        self._symbols: Dict[str, Symbol] = {}
        if symbols:
            for name, symbol in symbols.items():
                self.define(name, symbol)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> 'SymbolTable':
        """
        Build a table from plain Python values.

        Args:
            mapping: Names to str (scalar) or list/tuple of str (array) values

        Returns:
            New symbol table

        Raises:
            ValueError: If a name is invalid
            TypeError: If a value is neither a string nor a list/tuple
        """
        table = cls()
        for name, value in mapping.items():
            if isinstance(value, (Scalar, Array)):
                table.define(name, value)
            elif isinstance(value, str):
                table.set_scalar(name, value)
            elif isinstance(value, (list, tuple)):
                table.set_array(name, [str(item) for item in value])
            else:
                raise TypeError(
                    f"Cannot bind '{name}' to {type(value).__name__}; expected str or list"
                )
        return table

    @classmethod
    def is_valid_name(cls, name: Any) -> bool:
        """Check whether a name can be bound in a table."""
        return isinstance(name, str) and bool(cls.NAME_PATTERN.match(name))

    def define(self, name: str, symbol: Symbol) -> None:
        """
        Bind a name to a symbol, replacing any previous binding.

        Args:
            name: Symbol name
            symbol: Scalar or Array value

        Raises:
            ValueError: If the name is invalid
            TypeError: If symbol is not a Scalar or Array
        """
        if not self.is_valid_name(name):
            raise ValueError(f"Invalid symbol name: {name!r}")
        if not isinstance(symbol, (Scalar, Array)):
            raise TypeError(f"Invalid symbol for '{name}': {type(symbol).__name__}")

        self._symbols[name] = symbol
        logger.debug(f"Defined {symbol.type.value} symbol: {name}")

    def set_scalar(self, name: str, text: str) -> None:
        """Bind a name to a scalar value."""
        self.define(name, Scalar(text))

    def set_array(self, name: str, values: Iterable[str]) -> None:
        """Bind a name to an array value."""
        self.define(name, Array(values))

    def lookup(self, name: str) -> Optional[Symbol]:
        """
        Look up a symbol by name.

        Args:
            name: Symbol name

        Returns:
            The bound symbol, or None if the name is unbound
        """
        return self._symbols.get(name)

    def remove(self, name: str) -> bool:
        """
        Remove a binding.

        Returns:
            True if the name was bound
        """
        if name in self._symbols:
            del self._symbols[name]
            logger.debug(f"Removed symbol: {name}")
            return True
        return False

    def names(self) -> List[str]:
        """List bound names in definition order."""
        return list(self._symbols.keys())

    def snapshot(self) -> 'SymbolTable':
        """
        Copy the table.

        Symbols are immutable, so a shallow copy of the bindings is an
        independent, stable view for a parse call.
        """
        copy = SymbolTable()
        copy._symbols = dict(self._symbols)
        return copy

    def to_dict(self) -> Dict[str, Any]:
        """Plain-value view: str for scalars, list of str for arrays."""
        result: Dict[str, Any] = {}
        for name, symbol in self._symbols.items():
            if isinstance(symbol, Array):
                result[name] = list(symbol.values)
            else:
                result[name] = symbol.text
        return result

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"SymbolTable({self.to_dict()!r})"
