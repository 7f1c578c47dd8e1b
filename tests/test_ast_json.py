import json

import pytest

from plox.ast_json import ast_from_obj, ast_to_obj, program_from_obj, program_to_obj
from plox.parser import parse
from plox.scanner import scan
from plox.interpreter import Interpreter
from plox.types import Number


SOURCE = '''
var x = 5;
var label;
print -x + (2 * 3) == 1;
label != "x" + true;
!nil;
'''


def test_program_survives_json_round_trip():
    statements = parse(scan(SOURCE))
    text = json.dumps(program_to_obj(statements))
    assert program_from_obj(json.loads(text)) == statements


def test_operator_token_is_preserved():
    [stmt] = parse(scan('1 <= 2;'))
    obj = ast_to_obj(stmt)
    assert obj['expr']['operator'] == {
        '__type__': 'Token',
        'value': {'type': 'LESSEQUAL', 'lexeme': '<=', 'line': 1, 'literal': None},
    }


def test_loaded_program_runs():
    obj = json.loads(json.dumps(program_to_obj(parse(scan('var a = 4; a / 2;')))))
    assert Interpreter().run(program_from_obj(obj)) == Number(2.0)


def test_unknown_node_type_is_rejected():
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'WhileStmt'})
    with pytest.raises(ValueError):
        program_from_obj({'type': 'Block', 'body': []})
