#!/usr/bin/env python3
"""
md2backlog - Markdown to Backlog wiki converter

Reads a Markdown document, converts it to Backlog wiki syntax and writes
the result. Optionally compares the result with a hand-written reference
and prints a git-style diff for inspection.

As with other ChRIS-style tools, the CLI is a chris_plugin taking an input
and an output directory; the conversion itself lives in md2backlog.lib.

Usage:
    md2backlog inputdir/ outputdir/ --inputFile notes.md

Examples:
    # Basic conversion (writes outputdir/notes.txt)
    md2backlog . out/ --inputFile notes.md

    # Four-space list indentation, check against a reference
    md2backlog . out/ --inputFile notes.md --indentSize 4 --expectedFile notes.backlog

    # Show the highlighted result and a per-pass trace
    md2backlog . out/ --inputFile notes.md --preview -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from pygments import highlight
from pygments.formatters import TerminalFormatter

from .config import appsettings
from .lib import Converter, __version__, LOG, state_connectToLogger
from .lib.diff import comparison_make, diff_highlight
from .lib.lexer import BacklogLexer
from .models import ProgramState, pipeline


parser = ArgumentParser(
    description="md2backlog - convert Markdown documents to Backlog wiki syntax",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Markdown file to convert (relative to inputdir)"
)

parser.add_argument(
    "--outputFile",
    default="",
    type=str,
    help="Output file name within outputdir. Derived from inputFile when empty",
)

parser.add_argument(
    "--expectedFile",
    default=None,
    type=str,
    help="Reference Backlog file (relative to inputdir) to diff the result against",
)

parser.add_argument(
    "--indentSize",
    default=appsettings.indent_size,
    type=int,
    help="Spaces per nesting level for space-indented lists",
)

parser.add_argument(
    "--preview",
    action="store_true",
    help="Print the converted document to stdout with syntax highlighting",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with inputSourceFile, expectedSourceFile,
        outputTargetFile and envOK set

    Exits:
        1 if the input or reference file is missing
    """
    state = inputstate.copy()
    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile
    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)
    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    if state.expectedFile:
        expected_file = state.inputdir / state.expectedFile
        if not expected_file.is_file():
            print(f"Error: Reference file not found: {expected_file}", file=sys.stderr)
            state.envOK = False
            sys.exit(1)
        state.expectedSourceFile = expected_file
        LOG(f"Reference file: {expected_file}", level=2)

    output_name = state.outputFile or appsettings.outputName_make(state.inputFile)
    state.outputdir.mkdir(parents=True, exist_ok=True)
    state.outputTargetFile = state.outputdir / output_name
    LOG(f"Output file: {state.outputTargetFile}", level=2)

    state.envOK = True
    return state


def source_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the Markdown source as UTF-8.

    Exits:
        1 if the file cannot be read
    """
    state = inputstate.copy()
    LOG("Reading source file...", level=1)

    try:
        state.markdownSource = state.inputSourceFile.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Read {len(state.markdownSource)} characters from {state.inputSourceFile.name}", level=2)
    return state


def markdown_convert(inputstate: ProgramState) -> ProgramState:
    """
    Convert the Markdown source to Backlog wiki text.

    Exits:
        1 if the indent size is not a positive integer
    """
    state = inputstate.copy()
    LOG("Converting to Backlog syntax...", level=1)

    try:
        converter = Converter(indent_size=state.indentSize)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    state.backlogResult = converter.convert(state.markdownSource)
    line_count = len(state.backlogResult.split("\n"))
    LOG(f"Produced {line_count} lines", level=2)
    return state


def results_write(inputstate: ProgramState) -> ProgramState:
    """
    Write the converted text to the output file.

    Exits:
        1 if there is no result or the file cannot be written
    """
    state = inputstate.copy()

    if state.backlogResult is None:
        print("Error: No conversion result available", file=sys.stderr)
        sys.exit(1)

    try:
        state.outputTargetFile.write_text(state.backlogResult, encoding="utf-8")
    except OSError as e:
        print(f"Error writing output file: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Wrote {state.outputTargetFile}", level=2)
    return state


def comparison_report(inputstate: ProgramState) -> ProgramState:
    """
    Compare the result with the reference file, if one was given.

    Prints the unified diff to stdout on mismatch.
    """
    state = inputstate.copy()
    if state.expectedSourceFile is None:
        return state

    expected = state.expectedSourceFile.read_text(encoding="utf-8")
    state.comparison = comparison_make(
        expected,
        state.backlogResult or "",
        fromfile=state.expectedSourceFile.name,
        tofile=state.outputTargetFile.name,
        context=appsettings.diff_context_lines,
    )
    LOG(f"Match: {state.comparison.matches}", level=1)

    if not state.comparison.matches:
        patch = state.comparison.patch
        if appsettings.color_output:
            patch = diff_highlight(patch, background=appsettings.terminal_background)
        print(patch)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Summarize the run; print the highlighted result when --preview is set.
    """
    state = inputstate.copy()

    if state.preview and state.backlogResult is not None:
        if appsettings.color_output:
            print(highlight(
                state.backlogResult,
                BacklogLexer(),
                TerminalFormatter(bg=appsettings.terminal_background),
            ))
        else:
            print(state.backlogResult)

    LOG(f"✓ Converted {state.inputSourceFile.name} → {state.outputTargetFile}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="md2backlog - Markdown to Backlog wiki converter",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - convert one Markdown file to Backlog wiki syntax.

    Orchestrates:
        1. env_check: Validate paths
        2. source_read: Read Markdown source
        3. markdown_convert: Run the conversion passes
        4. results_write: Write the Backlog text
        5. comparison_report: Diff against --expectedFile
        6. results_report: Summary and optional preview
    """
    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(
        state,
        env_check,
        source_read,
        markdown_convert,
        results_write,
        comparison_report,
        results_report,
    )


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
