"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing CLI stages.
"""

import dataclasses
from functools import reduce
from pathlib import Path
from argparse import Namespace
from typing import Optional, Type, TypeVar, Callable
from dataclasses import dataclass, field

from .report import ComparisonReport


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the CLI pipeline (state bus pattern).

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, outputFile,
          expectedFile, indentSize, preview
        - env_check: inputSourceFile, expectedSourceFile, outputTargetFile, envOK
        - source_read: markdownSource
        - markdown_convert: backlogResult
        - results_write: (writes outputTargetFile)
        - comparison_report: comparison
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the Markdown source
        outputdir: Directory for the converted file
        verbosity: Logging verbosity level (1-3)
        inputFile: Markdown filename (relative to inputdir)
        outputFile: Output filename; derived from inputFile when empty
        expectedFile: Optional reference Backlog file (relative to inputdir)
        indentSize: Spaces per nesting level for space-indented lists
        preview: Print the highlighted result to stdout
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the Markdown source
        expectedSourceFile: Resolved path to the reference file, if any
        outputTargetFile: Resolved path of the file to write
        markdownSource: Raw source text
        backlogResult: Converted text
        comparison: Result of comparing backlogResult with the reference
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputFile: str = field(default="")
    expectedFile: Optional[str] = field(default=None)
    indentSize: int = field(default=2)
    preview: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    expectedSourceFile: Optional[Path] = field(default=None)
    outputTargetFile: Path = field(default=Path("/"))
    markdownSource: str = field(default="")
    backlogResult: Optional[str] = field(default=None)
    comparison: Optional[ComparisonReport] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Options without a matching field are ignored.

        Args:
            options: Parsed CLI arguments
            inputdir: Directory containing source files
            outputdir: Directory for conversion output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}
        return cls(**{**filtered_options, "inputdir": inputdir, "outputdir": outputdir})

    def copy(self: PS) -> PS:
        """Shallow copy of the state"""
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(initial_state, env_check, source_read, markdown_convert)

    This is equivalent to:
        markdown_convert(source_read(env_check(initial_state)))
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
