"""
shellvars - shell-style array tokenizing and variable substitution.

Splits array literals such as "(a 'b c' $d)" into words and resolves
$name / ${name} references in a word against a name table:

    from shellvars import SymbolTable, parse_array, parse_word

    table = SymbolTable.from_mapping({'pkgname': 'foo', 'arch': ['x86_64', 'i686']})
    parse_word(table, '"$pkgname-${arch}"')   # 'foo-x86_64 i686'
    parse_array(table, "($pkgname 'a b')")    # ['foo', 'a b']
"""

from .exceptions import NullInputError, SymbolTableValidationError, ValidationError
from .symbols import Array, NameTable, Scalar, Symbol, SymbolTable, SymbolType
from .words import (
    SubstitutionSite,
    WordSubstitutor,
    find_next_substitution,
    is_array_closed,
    join_array,
    parse_array,
    parse_word,
    substitute_words,
    tokenize_array,
    unquote,
)
from .loader import SymbolTableLoader, load_assignments, parse_assignments

__version__ = "0.1.0"

__all__ = [
    # Core entry points
    'tokenize_array', 'unquote', 'parse_word', 'parse_array',
    # Building blocks
    'join_array', 'is_array_closed', 'find_next_substitution', 'SubstitutionSite',
    'substitute_words', 'WordSubstitutor',
    # Symbols
    'Array', 'NameTable', 'Scalar', 'Symbol', 'SymbolTable', 'SymbolType',
    # Loaders
    'SymbolTableLoader', 'load_assignments', 'parse_assignments',
    # Exceptions
    'NullInputError', 'SymbolTableValidationError', 'ValidationError',
]
