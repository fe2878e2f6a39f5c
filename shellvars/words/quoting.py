"""Quote stripping for single words."""

from typing import Optional

from ..exceptions import NullInputError


QUOTE_CHARS = ("'", '"')


def unquote(text: Optional[str]) -> str:
    """
    Remove the surrounding quotes from a word.

    Only the first and last characters are dropped, and only when the word
    starts with a quote character. The last character is not checked against
    the first and escaped quotes inside the word are left as they are, so
    '"foo \\"bar\\""' becomes 'foo \\"bar\\"'.

    Args:
        text: The word to unquote

    Returns:
        The unquoted word, or the word unchanged if it does not start with a quote

    Raises:
        NullInputError: If text is None
    """
    if text is None:
        raise NullInputError("Cannot unquote a missing word")

    if text and text[0] in QUOTE_CHARS:
        return text[1:-1]
    return text
