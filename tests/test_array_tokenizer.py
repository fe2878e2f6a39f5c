"""
Tests for array literal tokenizing and joining.
"""

import pytest

from shellvars.words.arrays import is_array_closed, join_array, tokenize_array


class TestTokenizeArray:
    """Test tokenize_array()."""

    def test_simple_array(self):
        assert tokenize_array("(a b c)") == ["a", "b", "c"]

    def test_collapsed_separators(self):
        assert tokenize_array("(a   b)") == ["a", "b"]

    @pytest.mark.parametrize("literal", [
        "(a\tb)",
        "(a\nb)",
        "(a \t\n b)",
        "(  a b  )",
    ])
    def test_mixed_whitespace_separators(self, literal):
        assert tokenize_array(literal) == ["a", "b"]

    def test_quotes_preserved(self):
        assert tokenize_array("('a b' c)") == ["'a b'", "c"]

    def test_double_quotes_preserved(self):
        assert tokenize_array('("a b" c)') == ['"a b"', "c"]

    def test_missing_close_paren(self):
        assert tokenize_array("(a b") == ["a", "b"]

    def test_missing_open_paren(self):
        assert tokenize_array("a b)") == ["a", "b"]

    def test_no_parens(self):
        assert tokenize_array("a b c") == ["a", "b", "c"]

    def test_empty_array(self):
        assert tokenize_array("()") == []
        assert tokenize_array("(   )") == []
        assert tokenize_array("") == []

    def test_text_after_close_ignored(self):
        assert tokenize_array("(a b) c d") == ["a", "b"]

    def test_close_paren_inside_quotes(self):
        assert tokenize_array("('a)' b)") == ["'a)'", "b"]

    def test_mismatched_quote_is_content(self):
        """A double quote inside a single-quoted element does not end it."""
        assert tokenize_array("(\"it's\" x)") == ["\"it's\"", "x"]
        assert tokenize_array("('say \"hi there\"' y)") == ["'say \"hi there\"'", "y"]

    def test_escaped_separator(self):
        assert tokenize_array("(a\\ b c)") == ["a\\ b", "c"]

    def test_escaped_quote_does_not_open_quote(self):
        assert tokenize_array("(a\\'b c)") == ["a\\'b", "c"]

    def test_escaped_quote_inside_quotes(self):
        assert tokenize_array('("a\\" b" c)') == ['"a\\" b"', "c"]

    def test_escaped_close_paren(self):
        assert tokenize_array("(a\\) b)") == ["a\\)", "b"]

    def test_escaped_backslash_does_not_escape(self):
        assert tokenize_array("(a\\\\ b)") == ["a\\\\", "b"]

    def test_unterminated_quote_runs_to_end(self):
        assert tokenize_array("(a 'b c)") == ["a", "'b c)"]

    def test_variable_references_untouched(self):
        assert tokenize_array("($foo ${bar}baz)") == ["$foo", "${bar}baz"]

    def test_quoted_element_adjacent_to_text(self):
        assert tokenize_array("(pre'a b'post c)") == ["pre'a b'post", "c"]

    def test_order_preserved(self):
        words = [f"w{i}" for i in range(20)]
        assert tokenize_array("(" + " ".join(words) + ")") == words

    def test_no_whitespace_only_elements(self):
        elements = tokenize_array("( \t a \n\n b \t )")
        assert all(element.strip() for element in elements)
        assert elements == ["a", "b"]


class TestIsArrayClosed:
    """Test is_array_closed()."""

    def test_closed(self):
        assert is_array_closed("(a b)")

    def test_open(self):
        assert not is_array_closed("(a b")

    def test_paren_in_quotes_does_not_close(self):
        assert not is_array_closed("('a)' b")

    def test_multiline(self):
        assert not is_array_closed("(a\n'b")
        assert is_array_closed("(a\n'b'\n)")


class TestJoinArray:
    """Test join_array()."""

    def test_join(self):
        assert join_array(["x", "y", "z"]) == "x y z"

    def test_single_element(self):
        assert join_array(["x"]) == "x"

    def test_empty_is_no_value(self):
        assert join_array([]) is None
        assert join_array(()) is None

    def test_elements_with_spaces_kept(self):
        assert join_array(["a b", "c"]) == "a b c"

    def test_empty_string_elements(self):
        assert join_array(["", "a"]) == " a"
