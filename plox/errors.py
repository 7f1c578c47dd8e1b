from dataclasses import dataclass
from typing import List, Optional


@dataclass
class ErrorVal:
    """A single diagnostic produced by the scanner, parser or interpreter.

    `name` is the error kind: 'SyntaxError' for lexical problems,
    'ParseError' for grammar violations, 'TypeError' and
    'UndefinedVariable' for runtime failures.
    """
    name: str
    message: str
    line: Optional[int] = None

    def __str__(self) -> str:
        if self.line is None:
            return f"{self.name}: {self.message}"
        return f"[line {self.line}] {self.name}: {self.message}"


class LoxError(Exception):
    """Exception type used to propagate Lox runtime errors."""
    def __init__(self, err: ErrorVal):
        super().__init__(str(err))
        self.err = err


class ScanError(Exception):
    """Raised when scanning collected one or more lexical errors."""
    def __init__(self, errors: List[ErrorVal]):
        super().__init__(f"{len(errors)} lexical error(s)")
        self.errors = errors


class ParseError(Exception):
    """Raised when parsing collected one or more grammar errors."""
    def __init__(self, errors: List[ErrorVal]):
        super().__init__(f"{len(errors)} parse error(s)")
        self.errors = errors
