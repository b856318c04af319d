"""
Single-line rewrite rules

Each rule is a pure function of one line (or one line's worth of text) and
returns the line unchanged when its construct is absent. The document
passes in passes.py decide *which* lines a rule may see; the rules
themselves know nothing about code blocks, quotes or line position.

Example:
    >>> heading_convert("## Setup")
    '** Setup'
    >>> decorations_convert("**bold** and *italic*")
    "''bold'' and '''italic'''"
"""

from .patterns import (
    HEADING_SOURCE,
    HEADING_TARGET,
    HEADING_MARKER,
    LIST_TABS,
    LIST_SPACES,
    LIST_NUMBERED,
    LIST_MARKER,
    NUMBERED_MARKER,
    QUOTE_PREFIX,
    TABLE_ROW_END,
    TABLE_HEADER_SUFFIX,
    BOLD,
    ITALIC,
    STRIKETHROUGH,
    BOLD_MARKER,
    ITALIC_MARKER,
    STRIKE_MARKER,
    LINK_INLINE,
    URL_BARE,
    HTML_BREAK,
    CARRIAGE_RETURN,
    LINE_BREAK,
)


def heading_convert(line: str) -> str:
    """
    Rewrite a Markdown heading into a Backlog heading

    The run of leading '#' maps 1:1 onto a run of '*':
        "### Notes" → "*** Notes"

    Args:
        line: Single source line

    Returns:
        Rewritten heading, or the line unchanged if it is not a heading
    """
    match = HEADING_SOURCE.match(line)
    if not match:
        return line
    hashes, text = match.groups()
    return f"{HEADING_MARKER * len(hashes)} {text}"


def heading_is(line: str) -> bool:
    """Check whether a line already has Backlog heading shape ('*' run + whitespace)"""
    return HEADING_TARGET.match(line) is not None


def nestedList_convert(line: str, indent_size: int = 2) -> str:
    """
    Rewrite an indented bullet into a Backlog nested list item

    Tab indentation: one dash per tab, plus one.
    Space indentation: one dash per `indent_size` spaces (floored), plus one.
    Unindented bullets and mixed tab/space indentation are left alone.

    Args:
        line: Single source line
        indent_size: Number of spaces that make up one nesting level

    Returns:
        Rewritten list item, or the line unchanged
    """
    match = LIST_TABS.match(line)
    if match:
        tabs, text = match.groups()
        return f"{LIST_MARKER * (len(tabs) + 1)} {text}"

    match = LIST_SPACES.match(line)
    if match:
        spaces, text = match.groups()
        return f"{LIST_MARKER * (len(spaces) // indent_size + 1)} {text}"

    return line


def numberedList_convert(line: str) -> str:
    """Rewrite "1. item" into "+ item" (the number itself is dropped)"""
    match = LIST_NUMBERED.match(line)
    if not match:
        return line
    return f"{NUMBERED_MARKER} {match.group(1)}"


def bold_convert(text: str) -> str:
    return BOLD.sub(lambda m: f"{BOLD_MARKER}{m.group(1)}{BOLD_MARKER}", text)


def italic_convert(text: str) -> str:
    return ITALIC.sub(lambda m: f"{ITALIC_MARKER}{m.group(1)}{ITALIC_MARKER}", text)


def strikethrough_convert(text: str) -> str:
    return STRIKETHROUGH.sub(lambda m: f"{STRIKE_MARKER}{m.group(1)}{STRIKE_MARKER}", text)


def decorations_convert(text: str) -> str:
    """
    Apply bold, italic and strikethrough rewrites in that fixed order

    Bold has to consume '**' pairs before the italic rule sees the text,
    otherwise "**x**" would be read as two empty italic spans.
    """
    text = bold_convert(text)
    text = italic_convert(text)
    return strikethrough_convert(text)


def quoteContent_convert(line: str, indent_size: int = 2) -> str:
    """
    Strip the '>' prefix from a quoted line and rewrite its content

    At most one space after '>' is removed. The remaining content receives
    the nested-list rewrite followed by the emphasis rewrites.
    """
    content = QUOTE_PREFIX.sub("", line, count=1)
    content = nestedList_convert(content, indent_size)
    return decorations_convert(content)


def tableHeader_convert(line: str) -> str:
    """Replace a table row's trailing pipe (and surrounding blanks) with ' |h'"""
    return TABLE_ROW_END.sub(TABLE_HEADER_SUFFIX, line, count=1)


def links_convert(text: str) -> str:
    """
    Rewrite inline links, then wrap bare URLs

        [text](url)  → [[text>url]]
        https://x.io → [[https://x.io]]

    A URL directly preceded by '>' is the target of a link produced by the
    first substitution and is left alone.
    """
    text = LINK_INLINE.sub(lambda m: f"[[{m.group(1)}>{m.group(2)}]]", text)
    return URL_BARE.sub(lambda m: f"{m.group(1)}[[{m.group(2)}]]", text)


def htmlBreaks_convert(text: str) -> str:
    return text.replace(HTML_BREAK, LINE_BREAK)


def carriageReturn_strip(line: str) -> str:
    """Drop a single trailing CR left over from CRLF input"""
    return CARRIAGE_RETURN.sub("", line, count=1)
