"""
Variable substitution implementation.
Replaces $name and ${name} references in a word with values from a name table.
"""

import logging
from typing import List, Optional, Set

from ..symbols.types import Array, NameTable, Scalar, Symbol
from .arrays import join_array
from .scanner import find_next_substitution


logger = logging.getLogger(__name__)


class WordSubstitutor:
    """
    Handles variable substitution in a single word.

    - Scalar symbols are replaced by their text
    - Array symbols are replaced by their elements joined with single spaces
    - Unbound names are replaced by nothing and recorded in unresolved_names

    Substituted values are copied into the result as-is; they are never
    scanned for further references.
    """

    def __init__(self):
        """Initialize the substitutor."""
        self.unresolved_names: Set[str] = set()

    def substitute(self, table: Optional[NameTable], text: str) -> str:
        """
        Substitute variables in a word.

        Args:
            table: Name table to resolve against; None skips substitution
            text: Word containing $name / ${name} references

        Returns:
            Word with references replaced
        """
        self.unresolved_names.clear()

        if table is None:
            return text

        site = find_next_substitution(text)
        if site is None:
            return text

        pieces: List[str] = []
        cursor = 0
        while site is not None:
            pieces.append(text[cursor:site.start])

            value = self.resolve(table, site.name)
            if value is None:
                self.unresolved_names.add(site.name)
                logger.debug(f"Unresolved reference '{text[site.start:site.end]}' removed")
            else:
                pieces.append(value)

            cursor = site.end
            site = find_next_substitution(text, cursor)

        pieces.append(text[cursor:])
        return ''.join(pieces)

    def resolve(self, table: NameTable, name: str) -> Optional[str]:
        """
        Resolve a name to the text that replaces its reference.

        Args:
            table: Name table
            name: Variable name

        Returns:
            Replacement text, or None if the name is unbound
        """
        symbol = table.lookup(name)
        if symbol is None:
            return None
        return self._render(name, symbol)

    def _render(self, name: str, symbol: Symbol) -> str:
        if isinstance(symbol, Scalar):
            return symbol.text
        elif isinstance(symbol, Array):
            # An empty array has no value, which substitutes as nothing
            return join_array(symbol.values) or ''
        else:
            raise TypeError(f"Unsupported symbol for '{name}': {type(symbol).__name__}")


def substitute_words(table: Optional[NameTable], text: str) -> str:
    """Substitute variables in a word with a throwaway WordSubstitutor."""
    return WordSubstitutor().substitute(table, text)
