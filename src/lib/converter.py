"""
Converter for Markdown to Backlog wiki syntax

Threads a document through the registered passes in pipeline order.
"""

from typing import List, Optional

from .passes import PassRegistry
from .log import LOG
from ..models.passes import PassSpec


class Converter:
    """
    Converts Markdown text to Backlog wiki text

    Responsibilities:
    - Split the document into lines once
    - Apply each registered pass, in order, to the previous pass's output
    - Join the result with LF line breaks

    The converter holds no per-document state, so one instance can be reused
    for any number of documents.
    """

    def __init__(self, indent_size: int = 2, registry: Optional[PassRegistry] = None) -> None:
        """
        Initialize converter

        Args:
            indent_size: Spaces per nesting level for space-indented lists
            registry: Optional PassRegistry; defaults to the built-in passes

        Raises:
            ValueError: If indent_size is not a positive integer
        """
        if isinstance(indent_size, bool) or not isinstance(indent_size, int) or indent_size < 1:
            raise ValueError(f"indent_size must be a positive integer, got {indent_size!r}")

        self.indent_size = indent_size
        self.registry = registry or PassRegistry()

    def convert(self, markdown: str) -> str:
        """
        Convert a whole Markdown document

        Args:
            markdown: Source text, any line terminator mix

        Returns:
            Backlog wiki text with LF line breaks
        """
        lines = markdown.split("\n")
        LOG(f"Converting {len(lines)} lines (indent size {self.indent_size})", level=2)

        for spec in self.registry.passes_listOrdered():
            lines = self.pass_apply(spec, lines)

        return "\n".join(lines)

    def pass_apply(self, spec: PassSpec, lines: List[str]) -> List[str]:
        """Apply a single pass and trace the line count change"""
        before = len(lines)
        lines = spec.apply(lines, self.indent_size)
        LOG(f"Pass {spec.order:>3} {spec.name:<20} {before} → {len(lines)} lines", level=3)
        return lines

    def pass_run(self, name: str, text: str) -> str:
        """
        Run one named pass in isolation on raw text

        Args:
            name: Registered pass name (e.g., "tables")
            text: Input text

        Returns:
            Text after that pass only

        Raises:
            KeyError: If no pass with that name is registered
        """
        spec = self.registry.get(name)
        if spec is None:
            raise KeyError(f"Unknown pass: {name}")
        return "\n".join(self.pass_apply(spec, text.split("\n")))


def convert(document: str, indent_size: int = 2) -> str:
    """
    Convert Markdown to Backlog wiki syntax

    Example:
        >>> convert("# Title\\n\\n**bold**")
        "* Title\\n''bold''"
    """
    return Converter(indent_size=indent_size).convert(document)
