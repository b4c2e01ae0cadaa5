#!/usr/bin/env python3
"""
shortcodes - Shortcode expansion for Markdown documents

Expands {{< name attrs >}} ... {{< /name >}} markers in every document of
an input directory and writes the results to an output directory, keeping
relative paths. This is the batch host around the Processor; a document
build tool can equally call Processor.process() on each document itself.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Supported shortcodes:
    - columns: side-by-side columns separated by <--->
    - hint:    callout block (info, ok, warning, danger)
    - tabs:    tabbed panels from nested {{< tab "Label" >}} markers
    - details: collapsible block with optional title and open flag

Usage:
    shortcodes inputdir/ outputdir/ [--pattern '**/*.md'] [-v]

Examples:
    # Transform every Markdown file under book/src
    shortcodes book/src/ build/src/

    # Only chapters, verbose
    shortcodes book/src/ build/src/ --pattern 'chapters/*.md' -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import Processor, ShortcodeError, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
       _                _                _
   ___| |__   ___  _ __| |_ ___ ___   __| | ___  ___
  / __| '_ \ / _ \| '__| __/ __/ _ \ / _` |/ _ \/ __|
  \__ \ | | | (_) | |  | || (_| (_) | (_| |  __/\__ \
  |___/_| |_|\___/|_|   \__\___\___/ \__,_|\___||___/

  Shortcode expansion for Markdown documents
"""

# Define CLI arguments
parser = ArgumentParser(
    description="shortcodes - expand {{< shortcode >}} markers in Markdown documents to HTML",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--pattern",
    default=None,
    type=str,
    help="Glob (relative to inputdir) selecting documents. Defaults to SHORTCODES_DOCUMENT_GLOB or **/*.md",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate the input directory and create the output directory.

    Returns:
        ProgramState with envOK set

    Exits:
        1 if inputdir does not exist or is not a directory
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if state.inputdir is None or not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Input directory: {state.inputdir}", level=2)
    LOG(f"Output directory: {state.outputdir}", level=2)

    state.envOK = True
    return state


def documents_discover(inputstate: ProgramState) -> ProgramState:
    """
    Collect the documents to transform.

    Returns:
        ProgramState with documentFiles: sorted paths relative to inputdir
    """
    state = inputstate.copy()

    pattern = state.pattern or appsettings.document_glob
    LOG(f"Discovering documents matching '{pattern}'...", level=1)

    state.documentFiles = sorted(
        path.relative_to(state.inputdir)
        for path in state.inputdir.glob(pattern)
        if path.is_file()
    )
    LOG(f"Found {len(state.documentFiles)} document(s)", level=2)
    return state


def documents_transform(inputstate: ProgramState) -> ProgramState:
    """
    Expand shortcodes in every discovered document.

    A document that fails to transform is reported and not written. In
    strict mode the first failure ends the run.

    Returns:
        ProgramState with transformResult:
            - transformed: int (documents written)
            - failed: List[str] (one message per failed document)

    Exits:
        1 on the first failure when SHORTCODES_STRICT_MODE is set
    """
    state = inputstate.copy()
    processor = Processor()
    encoding = appsettings.output_encoding

    transformed = 0
    failed = []

    for document in state.documentFiles:
        source_file = state.inputdir / document
        LOG(f"Transforming {document}", level=2)

        try:
            source = source_file.read_text(encoding=encoding)
            result = processor.process(source)
        except ShortcodeError as error:
            error.context_attach(document=str(document))
            failure: Exception = error
            message = str(error)
        except (OSError, UnicodeDecodeError) as error:
            failure = error
            message = f"Cannot read {document}: {error}"
        else:
            target_file = state.outputdir / document
            target_file.parent.mkdir(parents=True, exist_ok=True)
            target_file.write_text(result, encoding=encoding)
            transformed += 1
            continue

        print(f"Error: {message}", file=sys.stderr)
        if appsettings.debug_mode or state.verbosity >= 3:
            import traceback

            traceback.print_exception(failure)
        failed.append(message)
        if appsettings.strict_mode:
            sys.exit(1)

    state.transformResult = {"transformed": transformed, "failed": failed}
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display transformation results.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if transformResult is missing or any document failed
    """
    state: ProgramState = inputstate.copy()
    if state.transformResult is None:
        print("Error: Transformation did not run", file=sys.stderr)
        sys.exit(1)

    failed = state.transformResult["failed"]
    LOG(f"Transformed {state.transformResult['transformed']} document(s)", level=1)
    LOG(f"  Output: {state.outputdir}", level=1)

    if failed:
        LOG(f"{len(failed)} document(s) failed and were not written", level=1)
        sys.exit(1)
    return state


@chris_plugin(
    parser=parser,
    title="shortcodes - Shortcode expansion for Markdown documents",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - expand shortcodes in inputdir documents into outputdir.

    Orchestrates the pipeline:
        1. env_check: Validate directories
        2. documents_discover: Glob documents
        3. documents_transform: Expand shortcodes and write results
        4. results_report: Summarize and set exit status

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, documents_discover, documents_transform, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
