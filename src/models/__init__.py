"""
Models package for md2backlog

Contains data structures and type definitions for the conversion pipeline.
"""

from .state import ProgramState, pipeline
from .passes import PassSpec, PassCategory, PassHandler
from .report import ComparisonReport

__all__ = [
    "ProgramState",
    "pipeline",
    "PassSpec",
    "PassCategory",
    "PassHandler",
    "ComparisonReport",
]
