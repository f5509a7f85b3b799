"""Line-reading front end for the toylisp interpreter. Uses cmd as backend.

Each input line is read, compiled and evaluated against the session's
environment. A value is printed as soon as its expression finishes; an error
is printed and ends that line, and the shell moves on to the next one.
"""

from __future__ import annotations

import cmd
import logging

from termcolor import colored

from toylisp.errors import ToyLispError
from toylisp.interpreter import Interpreter

logger = logging.getLogger(__name__)


class Shell(cmd.Cmd):
    """toylisp interpreter shell."""
    intro = "toylisp interpreter\nType an expression, or Ctrl-D to exit."
    prompt = "> "
    ERROR = "red"

    def __init__(self, interp: Interpreter, *args, trace: bool = False, color: bool = True, **kwargs):
        super().__init__(*args, **kwargs)
        self.interp = interp
        self.trace = trace
        self.color = color

    def _print(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def error(self, message: str) -> None:
        label = "error: "
        if self.color:
            label = colored(label, Shell.ERROR, attrs=["bold"])
        self._print(label + message)

    def feed(self, line: str) -> None:
        """Run one line of input, printing each result or the first error."""
        try:
            tokens = self.interp.tokenize(line)
            if self.trace:
                self._print(" ".join(str(t) for t in tokens))
            exprs = self.interp.parse(tokens)
            if self.trace:
                self._print(" ".join(str(e) for e in exprs))
            for expr in exprs:
                self._print(str(self.interp.eval_expr(expr)))
        except ToyLispError as exc:
            logger.debug("line %r failed: %s: %s", line, type(exc).__name__, exc)
            self.error(str(exc))
        except RecursionError:
            logger.debug("line %r exceeded the recursion limit", line)
            self.error("maximum recursion depth exceeded")

    def readline(self) -> str | None:
        """Next input line, or None once the input is exhausted."""
        if self.cmdqueue:
            return self.cmdqueue.pop(0)
        if self.use_rawinput:
            try:
                return input(self.prompt)
            except EOFError:
                return None
        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def cmdloop(self, intro=None):
        """Read lines until end of input; end of input is never a line of text."""
        self.preloop()
        if intro is not None:
            self.intro = intro
        if self.intro:
            self._print(str(self.intro))
        stop = False
        while not stop:
            line = self.readline()
            if line is None:
                stop = self.do_EOF("")
                continue
            line = self.precmd(line)
            stop = self.onecmd(line)
            stop = self.postcmd(stop, line)
        self.postloop()

    def onecmd(self, line: str):
        """Every line is code, including one that reads `EOF`."""
        if not line.strip():
            return self.emptyline()
        self.feed(line)
        return False

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        if self.use_rawinput:
            self._print("")
        return True
