from pathlib import Path

import pytest

from plox.errors import LoxError
from plox.interpreter import Interpreter
from plox.parser import parse
from plox.scanner import scan

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_6_runtime_error_halts(capsys):
    with open(EXAMPLES / 'program_6.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse(scan(source))
    interp = Interpreter()
    with pytest.raises(LoxError) as excinfo:
        interp.run(statements)
    out = capsys.readouterr().out.strip()
    # the first print ran, the failing one and everything after it did not
    assert out == 'String("before")'
    assert excinfo.value.err.name == 'TypeError'
    assert excinfo.value.err.line == 2
    assert interp.halted
