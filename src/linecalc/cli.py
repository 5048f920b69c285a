"""
Command-line entry point for linecalc.

With no arguments, runs an interactive prompt loop; with expressions as
arguments, evaluates each once and exits non-zero if any was rejected.

Division by zero and integer overflow are not caught here: they end the
process with a traceback.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from collections.abc import Callable
from typing import TextIO

from linecalc import __version__
from linecalc.config import LOG_LEVELS, Settings
from linecalc.core import calculate
from linecalc.exceptions import CalculatorError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="linecalc",
        description="Evaluate + - * / expressions over integers strictly left to right.",
    )
    parser.add_argument("expressions", nargs="*", metavar="EXPRESSION", help="Evaluate and exit")
    parser.add_argument("--prompt", help="Prompt shown before each line (env: LINECALC_PROMPT)")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level (env: LINECALC_LOG_LEVEL)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def report(line: str, out: TextIO, err: TextIO) -> bool:
    """Evaluate one line, print the result to out or the error to err."""
    try:
        result = calculate(line)
    except CalculatorError as e:
        logger.debug("rejected %r: %r", line, e)
        print(f"Error: {e}", file=err)
        return False
    print(result, file=out)
    return True


def prompt(
    text: str,
    read: Callable[[], str] | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> str | None:
    """
    Prompt until a non-empty line is read.

    Returns:
        The stripped line, or None at end of input
    """
    read = read or sys.stdin.readline
    out = out or sys.stdout
    err = err or sys.stderr

    while True:
        out.write(text)
        out.flush()

        try:
            line = read()
        except OSError as e:
            print(f"Error reading input: {e}. Please retry.", file=err)
            continue

        if not line:
            return None

        stripped = line.strip()
        if stripped:
            return stripped


def run_interactive(
    settings: Settings,
    read: Callable[[], str] | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Read, evaluate and print lines until end of input."""
    out = out or sys.stdout
    err = err or sys.stderr
    while True:
        line = prompt(settings.prompt, read, out, err)
        if line is None:
            out.write("\n")
            return 0
        report(line, out, err)


def run_once(expressions: list[str], out: TextIO | None = None, err: TextIO | None = None) -> int:
    """Evaluate each expression once; 1 if any was rejected."""
    out = out or sys.stdout
    err = err or sys.stderr
    ok = True
    for expression in expressions:
        ok = report(expression, out, err) and ok
    return 0 if ok else 1


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    args = build_parser().parse_args(argv)

    settings = Settings.from_env()
    if args.prompt is not None:
        settings = dataclasses.replace(settings, prompt=args.prompt)
    if args.log_level is not None:
        settings = dataclasses.replace(settings, log_level=args.log_level)

    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.expressions:
        return run_once(args.expressions)

    try:
        return run_interactive(settings)
    except KeyboardInterrupt:
        print()
        return 0
