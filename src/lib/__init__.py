"""
md2backlog - Markdown to Backlog wiki converter

Core library: pattern catalogue, rewrite rules, passes and the converter.
"""

__version__ = "1.0.0"
__author__ = "md2backlog contributors"

from .converter import Converter, convert
from .passes import PassRegistry
from .diff import comparison_make, diff_highlight
from .log import LOG, state_connectToLogger

__all__ = [
    "Converter",
    "convert",
    "PassRegistry",
    "comparison_make",
    "diff_highlight",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
