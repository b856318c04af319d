"""
Reference comparison for converted documents

Compares converter output with a hand-written Backlog reference and renders
a git-style unified diff, optionally coloured for the terminal with
Pygments.
"""

import difflib

from pygments import highlight
from pygments.lexers import get_lexer_by_name
from pygments.formatters import TerminalFormatter

from ..models.report import ComparisonReport


def newlines_normalize(text: str) -> str:
    return text.replace("\r\n", "\n")


def comparison_make(
    expected: str,
    actual: str,
    fromfile: str = "expected.txt",
    tofile: str = "result.txt",
    context: int = 3,
) -> ComparisonReport:
    """
    Compare converted text against an expected reference

    Args:
        expected: Reference text (CRLF is normalized to LF first)
        actual: Converter output
        fromfile: Label for the expected side of the diff
        tofile: Label for the actual side of the diff
        context: Unchanged lines shown around each hunk

    Returns:
        ComparisonReport with the match flag and the unified diff
    """
    expected = newlines_normalize(expected)
    expected_lines = expected.split("\n")
    actual_lines = actual.split("\n")

    if expected == actual:
        patch = ""
    else:
        patch = "\n".join(difflib.unified_diff(
            expected_lines,
            actual_lines,
            fromfile=fromfile,
            tofile=tofile,
            n=context,
            lineterm="",
        ))

    return ComparisonReport(
        matches=expected == actual,
        patch=patch,
        expected_lines=len(expected_lines),
        actual_lines=len(actual_lines),
    )


def diff_highlight(patch: str, background: str = "dark") -> str:
    """Colour a unified diff with ANSI escapes for terminal display"""
    if not patch:
        return patch
    return highlight(patch, get_lexer_by_name("diff"), TerminalFormatter(bg=background))
