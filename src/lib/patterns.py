"""
Pattern catalogue for Markdown → Backlog conversion

Holds every compiled regular expression the passes match against, plus the
literal Backlog markers they emit. Keeping both in one place lets each pass
stay a thin loop over lines while the syntax itself is auditable here.

Source (Markdown) patterns match a single line; none of them contain
newlines, so they are safe to apply per line after the document is split.
"""

import re


# Backlog markers
CODE_OPEN = "{code}"
CODE_CLOSE = "{/code}"
QUOTE_OPEN = "{quote}"
QUOTE_CLOSE = "{/quote}"
HEADING_MARKER = "*"
LIST_MARKER = "-"
NUMBERED_MARKER = "+"
TABLE_HEADER_SUFFIX = " |h"
BOLD_MARKER = "''"
ITALIC_MARKER = "'''"
STRIKE_MARKER = "%%"
LINE_BREAK = "&br;"

HTML_BREAK = "<br>"

# Code fences: tagged (```python) and bare (``` with optional trailing space)
FENCE_TAGGED = re.compile(r"^```(\w+)", re.ASCII)
FENCE_BARE = re.compile(r"^```\s*$")

# Headings
HEADING_SOURCE = re.compile(r"^(#+)\s+(.+)$")
HEADING_TARGET = re.compile(r"^\*+\s")

# Lists
LIST_TABS = re.compile(r"^(\t+)-\s(.+)$")
LIST_SPACES = re.compile(r"^( +)-\s(.+)$")
LIST_NUMBERED = re.compile(r"^\d+\.\s+(.+)$")

# Quotes
QUOTE_LINE = re.compile(r"^>")
QUOTE_PREFIX = re.compile(r"^>\s?")

# Tables
TABLE_SEPARATOR = re.compile(r"^\s*\|(\s*-+\s*\|)+\s*$")
TABLE_ROW = re.compile(r"^\s*\|.*\|\s*$")
TABLE_ROW_END = re.compile(r"\s*\|\s*$")

# Emphasis (non-greedy, bold must run before italic)
BOLD = re.compile(r"\*\*(.+?)\*\*")
ITALIC = re.compile(r"\*(.+?)\*")
STRIKETHROUGH = re.compile(r"~~(.+?)~~")

# Links
LINK_INLINE = re.compile(r"\[(.+?)\]\((.+?)\)")
URL_BARE = re.compile(r"(^|[^>])(https?://[^\s\[\]]+)")

# Line endings left over from CRLF input
CARRIAGE_RETURN = re.compile(r"\r$")
