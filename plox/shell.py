"""Handles interactive/command-line mode for the Lox interpreter. Uses cmd as backend."""

import cmd
import sys

from .errors import LoxError, ParseError, ScanError
from .interpreter import Interpreter
from .parser import parse
from .scanner import scan


class Shell(cmd.Cmd):
    """Lox interpreter shell.

    One interpreter lives for the whole session, so variables declared on
    one line are visible on the next. A runtime error is reported and the
    interpreter's error slot is reset so the session can go on.
    """
    intro = "Lox interpreter :: Python backend\nType 'help' for more information, 'exit' to leave."
    prompt = "> "

    def __init__(self, interpreter=None, lenient=False, single_statement=False, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter if interpreter is not None else Interpreter()
        self.lenient = lenient
        self.single_statement = single_statement

    def onecmd(self, line):
        # Lox statements end with ';' and shell commands never do, so
        # 'help;' or 'exit;' is code, not a command
        if line.rstrip().endswith(';'):
            self.default(line)
            return False
        return super().onecmd(line)

    def default(self, line):
        """Scans, parses and runs one line of Lox."""
        try:
            statements = parse(scan(line, lenient=self.lenient), single_statement=self.single_statement)
        except (ScanError, ParseError) as e:
            for err in e.errors:
                print(err, file=sys.stderr)
            return
        try:
            result = self.interpreter.run(statements)
        except LoxError as e:
            print(f"Runtime error: {e.err}", file=sys.stderr)
            self.interpreter.reset()
            return
        if result is not None:
            print(repr(result))

    def do_help(self, arg):
        """Prints a short intro."""
        print("Type Lox statements, one line at a time, for example:\n\n"
              "  var x = 5;\n"
              "  print x + 1;\n"
              "  x * 2;\n\n"
              "The value of a bare expression statement is echoed back. "
              "Type 'exit' or press Ctrl-D to leave.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
