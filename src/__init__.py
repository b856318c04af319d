"""
md2backlog - Markdown to Backlog wiki converter

Rewrites Markdown documents into Backlog wiki syntax through an ordered
pipeline of text passes.
"""

__version__ = "1.0.0"
__author__ = "md2backlog contributors"

from .lib import Converter, convert, PassRegistry, LOG, state_connectToLogger

__all__ = ["Converter", "convert", "PassRegistry", "LOG", "state_connectToLogger", "__version__"]
