"""
Symbol types and the in-memory symbol table.
"""

from .types import Array, NameTable, Scalar, Symbol, SymbolType
from .table import SymbolTable

__all__ = ['Array', 'NameTable', 'Scalar', 'Symbol', 'SymbolType', 'SymbolTable']
