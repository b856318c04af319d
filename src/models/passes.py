"""
Pass specification and metadata models

Defines the structure and categories of conversion passes for ordering,
introspection and registry management.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Callable, List


PassHandler = Callable[[List[str], int], List[str]]


class PassCategory(Enum):
    """
    Categories of conversion passes

    Used for organization and for listing passes in the registry.
    """
    BLOCK = "block"        # code fences, quotes, tables (look across lines)
    LINE = "line"          # headings, nested / numbered lists
    INLINE = "inline"      # emphasis, links, HTML line breaks
    CLEANUP = "cleanup"    # blank lines around headings


@dataclass
class PassSpec:
    """
    Specification for a conversion pass

    Attributes:
        name: Unique pass name (e.g., "code_blocks")
        category: Category for organization
        order: Position in the pipeline; lower runs first
        description: Human-readable description
        handler: Pure function (lines, indent_size) -> lines
        changes_line_count: Whether the pass may insert or drop lines
        examples: Example "source → target" strings
    """
    name: str
    category: PassCategory
    order: int
    description: str
    handler: PassHandler
    changes_line_count: bool = False
    examples: List[str] = field(default_factory=list)

    def apply(self, lines: List[str], indent_size: int = 2) -> List[str]:
        """Run the handler on a line list and return the new list"""
        return self.handler(lines, indent_size)

    def precedes(self, other: "PassSpec") -> bool:
        """Check if this pass runs before another one"""
        return self.order < other.order
