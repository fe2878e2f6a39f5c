"""
Word-level parsing: array tokenizing, quote stripping and variable substitution.
"""

from .arrays import is_array_closed, join_array, tokenize_array
from .parser import parse_array, parse_word
from .quoting import unquote
from .scanner import SubstitutionSite, find_next_substitution
from .substitution import WordSubstitutor, substitute_words

__all__ = [
    'SubstitutionSite',
    'WordSubstitutor',
    'find_next_substitution',
    'is_array_closed',
    'join_array',
    'parse_array',
    'parse_word',
    'substitute_words',
    'tokenize_array',
    'unquote',
]
