import json

import pytest

from plox.__main__ import main


def write_program(tmp_path, source, name='prog.lox'):
    path = tmp_path / name
    path.write_text(source, encoding='utf-8')
    return str(path)


def test_runs_program_file(tmp_path, capsys):
    path = write_program(tmp_path, 'var x = 5;\nprint x + 1;\n')
    main([path])
    assert capsys.readouterr().out == 'Number(6.0)\n'


def test_lark_frontend_runs_program_file(tmp_path, capsys):
    path = write_program(tmp_path, 'print "a" + 1;\n')
    main(['--frontend', 'lark', path])
    assert capsys.readouterr().out == 'String("a1")\n'


def test_runtime_error_exits_with_message(tmp_path, capsys):
    path = write_program(tmp_path, 'print 1;\nprint 1 < "2";\nprint 3;\n')
    with pytest.raises(SystemExit) as excinfo:
        main([path])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == 'Number(1.0)\n'
    assert captured.err.startswith('Runtime error: [line 2] TypeError')


def test_scan_errors_are_listed(tmp_path, capsys):
    path = write_program(tmp_path, 'print @;\nprint "open\n')
    with pytest.raises(SystemExit):
        main([path])
    err = capsys.readouterr().err.splitlines()
    assert err == [
        "[line 1] SyntaxError: Unexpected character '@'.",
        '[line 3] SyntaxError: Unterminated string.',
    ]


def test_lenient_scanning(tmp_path, capsys):
    path = write_program(tmp_path, 'print 1 @;\n')
    main(['--lenient', path])
    captured = capsys.readouterr()
    assert captured.out == 'Number(1.0)\n'
    assert "'@'" in captured.err


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit):
        main([str(tmp_path / 'nope.lox')])
    assert 'not found' in capsys.readouterr().err


def test_tokens_mode(tmp_path, capsys):
    path = write_program(tmp_path, 'var a = 1;')
    main(['--tokens', path])
    assert capsys.readouterr().out.splitlines() == [
        "Token(VAR, 'var', line=1)",
        "Token(IDENTIFIER, 'a', 'a', line=1)",
        "Token(EQUAL, '=', line=1)",
        "Token(NUMBER, '1', 1.0, line=1)",
        "Token(SEMICOLON, ';', line=1)",
        "Token(EOF, '', line=1)",
    ]


def test_print_ast_mode(tmp_path, capsys):
    path = write_program(tmp_path, 'print -3.14 * (52);\nvar x;')
    main(['--print-ast', path])
    assert capsys.readouterr().out.splitlines() == [
        '(print (* (- 3.14) (group 52)))',
        '(var x nil)',
    ]


def test_single_statement_flag(tmp_path, capsys):
    path = write_program(tmp_path, 'print 1;\nprint 2;\n')
    main(['--single-statement', path])
    assert capsys.readouterr().out == 'Number(1.0)\n'


def test_emit_and_run_ast(tmp_path, capsys):
    path = write_program(tmp_path, 'var a = "x";\nprint a + a;\n')
    main(['--emit-ast', path])
    out_path = capsys.readouterr().out.strip()
    assert out_path.endswith('prog.lox.ast.json')
    with open(out_path, 'r', encoding='utf-8') as f:
        assert json.load(f)['type'] == 'Program'
    main(['--ast', out_path])
    assert capsys.readouterr().out == 'String("xx")\n'


def test_verbose_writes_debug_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = write_program(tmp_path, 'var a = 1;\n')
    main(['-vv', path])
    trace = (tmp_path / 'debug.txt').read_text(encoding='utf-8')
    assert 'running 1 statement(s)' in trace
    assert 'define a: Number = Number(1.0)' in trace
