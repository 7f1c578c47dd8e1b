# Lox language package
# This package provides a scanner, parser and tree-walking interpreter for Lox.
from .errors import ErrorVal, LoxError, ParseError, ScanError
from .interpreter import Interpreter, run_program
from .parser import parse
from .scanner import scan

__all__ = [
    'run_program',
    'scan',
    'parse',
    'Interpreter',
    'ErrorVal',
    'LoxError',
    'ScanError',
    'ParseError',
]
