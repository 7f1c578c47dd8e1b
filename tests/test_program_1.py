from pathlib import Path

from plox.interpreter import Interpreter
from plox.parser import parse
from plox.scanner import scan

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_1(capsys):
    with open(EXAMPLES / 'program_1.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse(scan(source))
    interp = Interpreter()
    interp.run(statements)
    out = capsys.readouterr().out.strip()
    assert out == 'String("Hello World!!")'
