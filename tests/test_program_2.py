from pathlib import Path

from plox.interpreter import Interpreter
from plox.parser import parse
from plox.scanner import scan

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_2_precedence(capsys):
    with open(EXAMPLES / 'program_2.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse(scan(source))
    interp = Interpreter()
    interp.run(statements)
    out = capsys.readouterr().out.strip()
    assert out == '\n'.join([
        'Number(7.0)',
        'Number(9.0)',
        'Number(2.5)',
        'Number(3.0)',
        'Number(-1.0)',
    ])
