"""CLI entry point for the Lox interpreter.

Usage:
    python -m plox [-v|-vv|-vvv] [--lenient] [--single-statement] [--frontend F] [program_file]
    python -m plox --tokens <program_file>
    python -m plox --print-ast <program_file>
    python -m plox --emit-ast <program_file>
    python -m plox [-v...] --ast <ast_json_file>

Options:
  -v                  Increase debug verbosity (can be repeated)
  --lenient           Report unknown characters but do not fail scanning
  --single-statement  Parse only the first statement of the input
  --frontend F        'recursive' (hand-written parser, default) or 'lark'
  --tokens            Print the token stream of the given file
  --print-ast         Print the parse tree of each statement
  --emit-ast          Parse the given file and emit an AST JSON file
  --ast               Execute a previously emitted AST JSON file

Without a program file an interactive shell is started. Debug information
is written to `debug.txt` in the current directory when verbosity is
greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast_json import program_from_obj, program_to_obj
from .errors import LoxError, ParseError, ScanError
from .grammar import parse_with_grammar
from .interpreter import Interpreter
from .parser import parse
from .printer import print_stmt
from .scanner import scan
from .shell import Shell


def read_source(path: str) -> str:
    program_file = Path(path)
    if not program_file.exists():
        print(f"Error: file {program_file} not found", file=sys.stderr)
        sys.exit(1)
    with open(program_file, 'r', encoding='utf-8') as f:
        return f.read()


def parse_source(source: str, args):
    if args.frontend == 'lark':
        return parse_with_grammar(source)
    return parse(scan(source, lenient=args.lenient), single_statement=args.single_statement)


def execute(statements, args) -> None:
    interpreter = Interpreter(debug_level=args.v)
    interpreter.debug(f"running {len(statements)} statement(s)")
    try:
        interpreter.run(statements)
    except LoxError as e:
        print(f"Runtime error: {e.err}", file=sys.stderr)
        sys.exit(1)
    finally:
        interpreter.close()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Lox language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--lenient', action='store_true', help='do not fail scanning on unknown characters')
    parser.add_argument('--single-statement', action='store_true', help='parse only the first statement')
    parser.add_argument('--frontend', choices=('recursive', 'lark'), default='recursive',
                        help='parser frontend to use')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--tokens', metavar='LOX_FILE', help='print the tokens of the given .lox file')
    group.add_argument('--print-ast', metavar='LOX_FILE', help='print the parse tree of the given .lox file')
    group.add_argument('--emit-ast', metavar='LOX_FILE', help='emit AST JSON for the given .lox file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='Lox program file (.lox) to execute')
    args = parser.parse_args(argv)

    try:
        # Token dump mode
        if args.tokens:
            for token in scan(read_source(args.tokens), lenient=args.lenient):
                print(repr(token))
            return

        # Parse tree mode
        if args.print_ast:
            for stmt in parse_source(read_source(args.print_ast), args):
                print(print_stmt(stmt))
            return

        # Emit AST mode
        if args.emit_ast:
            program_file = Path(args.emit_ast)
            statements = parse_source(read_source(args.emit_ast), args)
            obj = program_to_obj(statements)
            out_path = program_file.with_name(program_file.name + '.ast.json')
            with open(out_path, 'w', encoding='utf-8') as out:
                json.dump(obj, out, ensure_ascii=False, indent=2)
            print(str(out_path))
            return

        # Execute from AST JSON
        if args.ast:
            data = json.loads(read_source(args.ast))
            execute(program_from_obj(data), args)
            return

        # No file: interactive shell
        if not args.program:
            interpreter = Interpreter(debug_level=args.v)
            try:
                Shell(interpreter, lenient=args.lenient, single_statement=args.single_statement).cmdloop()
            finally:
                interpreter.close()
            return

        # Default: execute source file
        execute(parse_source(read_source(args.program), args), args)
    except (ScanError, ParseError) as e:
        for err in e.errors:
            print(err, file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
