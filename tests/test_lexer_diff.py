"""
Terminal output tests

Tests the Backlog Pygments lexer and reference comparison / diff rendering.
"""

from pygments.token import Generic, Keyword, Name, String

from md2backlog.lib.lexer import BacklogLexer, get_lexer
from md2backlog.lib.diff import comparison_make, diff_highlight, newlines_normalize


BACKLOG = "\n".join([
    "* Title",
    "- item",
    "{code}",
    "x = 1",
    "{/code}",
    "''b'' '''i''' %%s%%",
    "[[Ex>http://e.com]]",
    "| a |h",
    "line&br;",
])


def tokens_get(text):
    return list(BacklogLexer().get_tokens(text))


class TestBacklogLexer:
    """Test token types for Backlog constructs"""

    def test_heading(self):
        assert (Generic.Heading, "* Title") in tokens_get(BACKLOG)

    def test_list_marker(self):
        assert (Keyword, "-") in tokens_get(BACKLOG)

    def test_code_block(self):
        tokens = tokens_get(BACKLOG)
        assert (Keyword.Declaration, "{code}\n") in tokens
        assert (String, "x = 1\n") in tokens
        assert (Keyword.Declaration, "{/code}") in tokens

    def test_decorations(self):
        tokens = tokens_get(BACKLOG)
        assert (Generic.Strong, "''b''") in tokens
        assert (Generic.Emph, "'''i'''") in tokens
        assert (Generic.Deleted, "%%s%%") in tokens

    def test_link(self):
        tokens = tokens_get(BACKLOG)
        assert (String, "Ex") in tokens
        assert (Name.Attribute, "http://e.com") in tokens

    def test_table_header_and_break(self):
        tokens = tokens_get(BACKLOG)
        assert (Name.Decorator, "|h") in tokens
        assert (Name.Entity, "&br;") in tokens

    def test_code_content_not_highlighted(self):
        tokens = tokens_get("{code}\n* not heading\n{/code}")
        assert (String, "* not heading\n") in tokens
        assert (Generic.Heading, "* not heading") not in tokens

    def test_get_lexer(self):
        assert isinstance(get_lexer(), BacklogLexer)


class TestComparison:
    """Test expected-vs-result comparison"""

    def test_match(self):
        report = comparison_make("a\nb", "a\nb")
        assert report.matches is True
        assert report.patch == ""
        assert report.expected_lines == 2

    def test_crlf_reference_normalized(self):
        assert comparison_make("a\r\nb", "a\nb").matches is True

    def test_mismatch_patch(self):
        report = comparison_make("a\nb", "a\nc")
        assert report.matches is False
        lines = report.patch.split("\n")
        assert lines[0] == "--- expected.txt"
        assert lines[1] == "+++ result.txt"
        assert "-b" in lines
        assert "+c" in lines

    def test_custom_labels(self):
        report = comparison_make("a", "b", fromfile="ref.backlog", tofile="out.txt")
        assert report.patch.startswith("--- ref.backlog\n+++ out.txt")

    def test_newlines_normalize(self):
        assert newlines_normalize("a\r\nb\r\n") == "a\nb\n"


class TestDiffHighlight:
    """Test terminal colouring"""

    def test_empty_patch(self):
        assert diff_highlight("") == ""

    def test_coloured(self):
        patch = comparison_make("a\nb", "a\nc").patch
        assert "\x1b[" in diff_highlight(patch)
