"""
Word and array parsers.

These compose the pieces in the fixed order substitute-then-unquote, so the
only quotes removed are a word's own delimiting quotes, never quotes that
arrive inside a substituted value.
"""

from typing import List, Optional

from ..exceptions import NullInputError
from ..symbols.types import NameTable
from .arrays import tokenize_array
from .quoting import QUOTE_CHARS, unquote
from .substitution import substitute_words


def parse_word(table: Optional[NameTable], word: Optional[str]) -> str:
    """
    Fully resolve one word: substitute its references, then unquote it.

    Whether to unquote is decided from the raw word, so a word that only
    starts with a reference keeps any quotes its value brings along.

    Args:
        table: Name table; None skips substitution but still unquotes
        word: The raw word

    Returns:
        The resolved word

    Raises:
        NullInputError: If word is None
    """
    if word is None:
        raise NullInputError("Cannot parse a missing word")
    quoted = word[:1] in QUOTE_CHARS
    substituted = substitute_words(table, word)
    return unquote(substituted) if quoted else substituted


def parse_array(table: Optional[NameTable], literal: str) -> List[str]:
    """
    Fully resolve an array literal.

    Args:
        table: Name table; None skips substitution but still unquotes
        literal: Array literal such as "($foo 'bar baz')"

    Returns:
        Resolved element words, in order
    """
    return [parse_word(table, element) for element in tokenize_array(literal)]
