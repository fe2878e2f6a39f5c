"""
Substitution scanner.

Finds $name and ${name} references in a word. The scanner keeps no state
between calls: each call starts fresh at the given offset, and callers walk
a string by restarting at the end of the previous site.
"""

import string
from dataclasses import dataclass
from typing import Optional


SIGIL = '$'
BRACE_OPEN = '{'
BRACE_CLOSE = '}'
LITERAL_QUOTE = "'"
ESCAPE_CHAR = '\\'
IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + '_')


@dataclass(frozen=True)
class SubstitutionSite:
    """
    One variable reference found in a string.

    Attributes:
        start: Offset of the '$' sigil
        end: Offset just past the reference, so text[start:end] is the whole reference
        name: Variable name without the '$', '${' or '}' markers
        braced: Whether the reference used the ${name} form
    """
    start: int
    end: int
    name: str
    braced: bool = False


def _read_reference(text: str, sigil: int) -> Optional[SubstitutionSite]:
    """Read the reference whose '$' is at offset sigil, if there is one."""
    name_start = sigil + 1

    if text.startswith(BRACE_OPEN, name_start):
        close = text.find(BRACE_CLOSE, name_start + 1)
        if close == -1:
            return None
        return SubstitutionSite(
            start=sigil,
            end=close + 1,
            name=text[name_start + 1:close],
            braced=True
        )

    end = name_start
    while end < len(text) and text[end] in IDENTIFIER_CHARS:
        end += 1
    if end == name_start:
        return None
    return SubstitutionSite(start=sigil, end=end, name=text[name_start:end])


def find_next_substitution(text: str, start: int = 0) -> Optional[SubstitutionSite]:
    """
    Locate the next variable reference in a string.

    A '$' starts a reference unless it is escaped with a backslash or sits
    inside a single-quoted region. ${...} runs to the next '}' whatever it
    contains; a bare $name runs over [A-Za-z0-9_]. A '$' with no name after
    it is ordinary text. An unterminated '${' hides every later reference.

    Args:
        text: String to search
        start: Offset to start scanning from

    Returns:
        The first reference at or after start, or None
    """
    escaped = False
    in_literal_quote = False

    pos = start
    while pos < len(text):
        char = text[pos]

        if escaped:
            escaped = False
        elif char == ESCAPE_CHAR:
            escaped = True
        elif char == LITERAL_QUOTE:
            in_literal_quote = not in_literal_quote
        elif char == SIGIL and not in_literal_quote:
            site = _read_reference(text, pos)
            if site is not None:
                return site
            if text.startswith(BRACE_OPEN, pos + 1):
                return None

        pos += 1

    return None
