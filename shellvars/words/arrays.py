"""
Array literal tokenizer and joiner.

An array literal is the parenthesized form a shell uses to assign arrays:

    (one 'two three' "four" five\\ six)

Tokenizing splits it into element words with their quotes and backslashes
left in place; unquoting is the word parser's job.
"""

from typing import List, Optional, Sequence, Tuple

from .quoting import QUOTE_CHARS


ARRAY_OPEN = '('
ARRAY_CLOSE = ')'
ARRAY_SEPARATORS = (' ', '\t', '\n')
ESCAPE_CHAR = '\\'


def _append_element(elements: List[str], element: str) -> None:
    # Runs of separators leave empty (or whitespace-only) slices behind
    if element.strip():
        elements.append(element)


def _split_array(raw: str) -> Tuple[List[str], bool]:
    """
    Scan an array literal.

    Returns:
        Tuple of (elements, closed) where closed tells whether an unquoted,
        unescaped ')' ended the scan
    """
    elements: List[str] = []
    in_quote = False
    quote_char = ''
    escaped = False

    pos = 1 if raw.startswith(ARRAY_OPEN) else 0
    start = pos

    while pos < len(raw):
        char = raw[pos]

        if escaped:
            escaped = False
        elif char == ESCAPE_CHAR:
            escaped = True
        elif char in QUOTE_CHARS:
            if not in_quote:
                in_quote = True
                quote_char = char
            elif char == quote_char:
                in_quote = False
            # A different quote char inside a quote is plain content
        elif not in_quote:
            if char in ARRAY_SEPARATORS:
                _append_element(elements, raw[start:pos])
                start = pos + 1
            elif char == ARRAY_CLOSE:
                _append_element(elements, raw[start:pos])
                return elements, True

        pos += 1

    _append_element(elements, raw[start:])
    return elements, False


def tokenize_array(raw: str) -> List[str]:
    """
    Split an array literal into its element words.

    The leading '(' and trailing ')' are both optional: a literal with no
    closing paren is read to the end of the string. Quotes, backslashes and
    '$' references are left untouched in the elements.

    Args:
        raw: Array literal such as "(a 'b c' d)"

    Returns:
        Element words in their original order
    """
    elements, _ = _split_array(raw)
    return elements


def is_array_closed(raw: str) -> bool:
    """Check whether an array literal contains its closing ')'."""
    _, closed = _split_array(raw)
    return closed


def join_array(values: Sequence[str]) -> Optional[str]:
    """
    Join array elements into one space-separated string.

    Args:
        values: Element strings

    Returns:
        The joined string, or None for an empty array
    """
    if not values:
        return None
    return ' '.join(values)
