"""Command-line entry point: `python -m toylisp [file]` or `toylisp [file]`.

Reads lines from `file`, or from standard input when no file is given, and
evaluates them in one session.
"""

from __future__ import annotations

import argparse
import logging
import sys

from toylisp import __version__
from toylisp.config import load_settings, resolve_log_level
from toylisp.interpreter import Interpreter
from toylisp.interpreter.shell import Shell


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="toylisp", description="Line-oriented toylisp interpreter")
    parser.add_argument("file", nargs="?", help="file to run line by line (default: standard input)")
    parser.add_argument("--trace", action="store_true", default=None,
                        help="echo tokens and parsed expressions before evaluating")
    parser.add_argument("--no-color", dest="color", action="store_false", default=None,
                        help="do not colour error messages")
    parser.add_argument("--log-level", help="logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    settings = load_settings()
    if args.trace is not None:
        settings.trace = args.trace
    if args.color is not None:
        settings.color = args.color
    if args.log_level:
        settings.log_level = args.log_level.upper()

    logging.basicConfig(
        level=resolve_log_level(settings.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    interp = Interpreter()
    if args.file is not None:
        with open(args.file, "r") as stream:
            shell = Shell(interp, stdin=stream, trace=settings.trace, color=settings.color)
            shell.use_rawinput = False
            shell.prompt = ""
            shell.cmdloop(intro="")
        return 0

    shell = Shell(interp, trace=settings.trace, color=settings.color)
    if not sys.stdin.isatty():
        shell.use_rawinput = False
        shell.prompt = ""
        shell.cmdloop(intro="")
    else:
        shell.prompt = settings.prompt
        shell.cmdloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
