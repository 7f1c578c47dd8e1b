from pathlib import Path

from plox.interpreter import Interpreter
from plox.parser import parse
from plox.scanner import scan

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_4_concatenation_and_coercion(capsys):
    with open(EXAMPLES / 'program_4.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse(scan(source))
    interp = Interpreter()
    interp.run(statements)
    out = capsys.readouterr().out.strip()
    assert out == '\n'.join([
        'String("n=1")',
        'String("1x")',
        'String("flag: true")',
        'String("nil!")',
        'Number(2.0)',
        'Number(0.0)',
        'String("1.5s")',
    ])
