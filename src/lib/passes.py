"""
Document passes for md2backlog

Each pass takes the whole document as a list of lines and returns a new
list. Passes run in a fixed order (see PassRegistry); the first one turns
Markdown fences into {code} / {/code} markers, and every later pass walks
the document with codeRegions_walk() so the markers and everything between
them stay opaque.

Block state (inside a code block, inside a quote) lives in local variables
of a single pass invocation and never escapes it.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..models.passes import PassSpec, PassCategory
from .patterns import (
    CODE_OPEN,
    CODE_CLOSE,
    QUOTE_OPEN,
    QUOTE_CLOSE,
    FENCE_TAGGED,
    FENCE_BARE,
    QUOTE_LINE,
    TABLE_SEPARATOR,
    TABLE_ROW,
)
from .rules import (
    heading_convert,
    heading_is,
    nestedList_convert,
    numberedList_convert,
    decorations_convert,
    quoteContent_convert,
    tableHeader_convert,
    links_convert,
    htmlBreaks_convert,
    carriageReturn_strip,
)


def codeRegions_walk(lines: Iterable[str]) -> Iterator[Tuple[str, bool]]:
    """
    Pair every line with an "opaque" flag

    Marker lines and lines between {code} and {/code} are opaque. A block
    that is never closed keeps the rest of the document opaque.

    Args:
        lines: Document lines, already fenced by codeBlocks_convert()

    Yields:
        (line, opaque) tuples in document order
    """
    in_code = False
    for line in lines:
        if line == CODE_OPEN:
            in_code = True
            yield line, True
        elif line == CODE_CLOSE:
            in_code = False
            yield line, True
        else:
            yield line, in_code


def codeBlocks_convert(lines: List[str], indent_size: int = 2) -> List[str]:
    """
    Replace Markdown fences with {code} / {/code} markers

    "```lang" opens a block and moves the language tag onto its own line.
    A bare "```" closes an open block or opens an untagged one. Blocks left
    open at the end of the document are not closed.
    """
    processed: List[str] = []
    in_code = False

    for line in lines:
        tagged = FENCE_TAGGED.match(line)
        if tagged and not in_code:
            in_code = True
            processed.append(CODE_OPEN)
            processed.append(tagged.group(1))
        elif FENCE_BARE.match(line):
            processed.append(CODE_CLOSE if in_code else CODE_OPEN)
            in_code = not in_code
        else:
            processed.append(line)

    return processed


def quotes_convert(lines: List[str], indent_size: int = 2) -> List[str]:
    """
    Wrap runs of '>' lines in {quote} / {/quote}

    Quoted content has its prefix stripped and receives the nested-list and
    emphasis rewrites here, since later passes see it as plain text. A quote
    still open at the end of the document is closed.
    """
    processed: List[str] = []
    in_quote = False

    for line, opaque in codeRegions_walk(lines):
        if not opaque and QUOTE_LINE.match(line):
            if not in_quote:
                in_quote = True
                processed.append(QUOTE_OPEN)
            processed.append(quoteContent_convert(line, indent_size))
            continue

        if in_quote:
            in_quote = False
            processed.append(QUOTE_CLOSE)
        processed.append(line)

    if in_quote:
        processed.append(QUOTE_CLOSE)

    return processed


def tables_convert(lines: List[str], indent_size: int = 2) -> List[str]:
    """
    Drop separator rows and mark the row before each one as a header

        | a | b |        →  | a | b |h
        | --- | --- |    →  (dropped)
        | 1 | 2 |        →  | 1 | 2 |
    """
    walked = list(codeRegions_walk(lines))
    processed: List[str] = []

    for index, (line, opaque) in enumerate(walked):
        if opaque:
            processed.append(line)
            continue

        if TABLE_SEPARATOR.match(line):
            continue

        next_index = index + 1
        if (
            TABLE_ROW.match(line)
            and next_index < len(walked)
            and not walked[next_index][1]
            and TABLE_SEPARATOR.match(walked[next_index][0])
        ):
            processed.append(tableHeader_convert(line))
        else:
            processed.append(line)

    return processed


def lines_convert(lines: List[str], indent_size: int = 2) -> List[str]:
    """
    Per-line structural rewrite: heading, nested list, numbered list

    Trailing carriage returns are stripped from every line, code included.
    """
    processed: List[str] = []
    cleaned = (carriageReturn_strip(line) for line in lines)

    for line, opaque in codeRegions_walk(cleaned):
        if opaque:
            processed.append(line)
            continue
        line = heading_convert(line)
        line = nestedList_convert(line, indent_size)
        line = numberedList_convert(line)
        processed.append(line)

    return processed


def decorations_pass(lines: List[str], indent_size: int = 2) -> List[str]:
    """Apply emphasis rewrites to every line that is neither code nor a heading"""
    return [
        line if opaque or heading_is(line) else decorations_convert(line)
        for line, opaque in codeRegions_walk(lines)
    ]


def links_pass(lines: List[str], indent_size: int = 2) -> List[str]:
    return [line if opaque else links_convert(line) for line, opaque in codeRegions_walk(lines)]


def html_pass(lines: List[str], indent_size: int = 2) -> List[str]:
    return [line if opaque else htmlBreaks_convert(line) for line, opaque in codeRegions_walk(lines)]


def headingBlankLines_remove(lines: List[str], indent_size: int = 2) -> List[str]:
    """
    Remove blank lines touching a heading

    All blank lines directly above a heading are dropped; at most one blank
    line directly below it is skipped. Blank lines elsewhere are kept.
    """
    walked = list(codeRegions_walk(lines))
    result: List[str] = []
    index = 0

    while index < len(walked):
        line, opaque = walked[index]
        if not opaque and heading_is(line):
            while result and result[-1] == "":
                result.pop()
            result.append(line)
            if index + 1 < len(walked) and walked[index + 1][0] == "":
                index += 1
        else:
            result.append(line)
        index += 1

    return result


class PassRegistry:
    """
    Registry of conversion passes

    Maps pass names to PassSpec objects. The pipeline order is the `order`
    field of each spec; the built-in passes occupy slots 10 through 80.
    """

    def __init__(self) -> None:
        """Initialize the registry and register all built-in passes"""
        self.specs: Dict[str, PassSpec] = {}
        self.blockPasses_register()
        self.linePasses_register()
        self.inlinePasses_register()
        self.cleanupPasses_register()

    def register(self, spec: PassSpec) -> None:
        """
        Register a pass specification

        Raises:
            ValueError: If the name or the order slot is already taken
        """
        if spec.name in self.specs:
            raise ValueError(f"Pass '{spec.name}' is already registered")
        for existing in self.specs.values():
            if existing.order == spec.order:
                raise ValueError(
                    f"Pass '{spec.name}' conflicts with '{existing.name}' at order {spec.order}"
                )
        self.specs[spec.name] = spec

    def get(self, name: str) -> Optional[PassSpec]:
        return self.specs.get(name)

    def passes_listOrdered(self) -> List[PassSpec]:
        """All registered passes in pipeline order"""
        return sorted(self.specs.values(), key=lambda spec: spec.order)

    def passes_listByCategory(self, category: PassCategory) -> List[PassSpec]:
        return [spec for spec in self.passes_listOrdered() if spec.category == category]

    def blockPasses_register(self) -> None:
        """Register passes that need to see more than one line at a time"""
        self.register(PassSpec(
            name="code_blocks",
            category=PassCategory.BLOCK,
            order=10,
            description="Turn ``` fences into {code} markers, language tag on its own line",
            handler=codeBlocks_convert,
            changes_line_count=True,
            examples=["```python → {code}\\npython", "``` → {/code}"],
        ))
        self.register(PassSpec(
            name="quotes",
            category=PassCategory.BLOCK,
            order=20,
            description="Wrap '>' runs in {quote} markers and rewrite quoted content",
            handler=quotes_convert,
            changes_line_count=True,
            examples=["> **hi** → {quote}\\n''hi''\\n{/quote}"],
        ))
        self.register(PassSpec(
            name="tables",
            category=PassCategory.BLOCK,
            order=30,
            description="Drop separator rows, suffix header rows with |h",
            handler=tables_convert,
            changes_line_count=True,
            examples=["| a | b | → | a | b |h"],
        ))

    def linePasses_register(self) -> None:
        """Register structural per-line passes"""
        self.register(PassSpec(
            name="lines",
            category=PassCategory.LINE,
            order=40,
            description="Headings, nested lists and numbered lists; strips trailing CR",
            handler=lines_convert,
            examples=["## Title → ** Title", "\\t- item → -- item", "1. item → + item"],
        ))

    def inlinePasses_register(self) -> None:
        """Register inline rewrite passes"""
        self.register(PassSpec(
            name="decorations",
            category=PassCategory.INLINE,
            order=50,
            description="Bold, italic and strikethrough outside code and headings",
            handler=decorations_pass,
            examples=["**b** → ''b''", "*i* → '''i'''", "~~s~~ → %%s%%"],
        ))
        self.register(PassSpec(
            name="links",
            category=PassCategory.INLINE,
            order=60,
            description="Inline links and bare URLs",
            handler=links_pass,
            examples=["[t](http://x) → [[t>http://x]]", "http://x → [[http://x]]"],
        ))
        self.register(PassSpec(
            name="html",
            category=PassCategory.INLINE,
            order=70,
            description="Raw <br> line breaks",
            handler=html_pass,
            examples=["<br> → &br;"],
        ))

    def cleanupPasses_register(self) -> None:
        """Register final whitespace cleanup"""
        self.register(PassSpec(
            name="heading_whitespace",
            category=PassCategory.CLEANUP,
            order=80,
            description="Remove blank lines directly around headings",
            handler=headingBlankLines_remove,
            changes_line_count=True,
        ))
