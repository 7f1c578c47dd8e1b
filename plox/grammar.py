"""Grammar-based Lox frontend built on Lark.

This is a second way to get from source text to the AST. The grammar
below describes the same language as the hand-written scanner and
recursive-descent parser; a Lark LALR parser produces a parse tree which a
custom transformer turns into exactly the node classes from `plox.ast`.
Operator tokens are converted into `plox.tokens.Token` objects so that the
interpreter cannot tell which frontend built a tree.

Unlike the hand-written parser this frontend does not recover from errors:
the first lexical problem raises ScanError and the first grammar problem
raises ParseError, each holding a single diagnostic.
"""

from __future__ import annotations

from typing import List

from lark import Lark, Transformer
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken

from .ast import (
    Binary, Unary, Grouping, Literal, Var,
    Stmt, ExprStatement, PrintStatement, VarDeclaration,
)
from .errors import ErrorVal, ParseError, ScanError
from .tokens import KEYWORDS, OPERATORS, Token
from .types import String, Number, NIL, TRUE, FALSE


_KEYWORD_ALTERNATION = '|'.join(sorted(KEYWORDS))

LOX_GRAMMAR = r"""
    ?start: program
    program: declaration*

    ?declaration: var_decl
                | statement

    var_decl: "var" IDENTIFIER ["=" expression] ";"

    ?statement: print_stmt
              | expr_stmt

    print_stmt: "print" expression ";"
    expr_stmt: expression ";"

    // Expressions, lowest precedence first
    ?expression: equality
    ?equality: comparison (EQUALITY_OP comparison)*
    ?comparison: term (COMPARISON_OP term)*
    ?term: factor (TERM_OP factor)*
    ?factor: unary (FACTOR_OP unary)*
    ?unary: UNARY_OP unary          -> unary_op
          | primary
    ?primary: "true"                -> true
            | "false"               -> false
            | "nil"                 -> nil
            | NUMBER                -> number
            | STRING                -> string
            | "(" expression ")"    -> grouping
            | IDENTIFIER            -> variable

    // Tokens
    EQUALITY_OP: "==" | "!="
    COMPARISON_OP: ">=" | "<=" | ">" | "<"
    TERM_OP: "+" | "-"
    FACTOR_OP: "*" | "/"
    UNARY_OP: "!" | "-"
    NUMBER: /[0-9]+(\.[0-9]+)?/
    STRING: /"[^"]*"/
    IDENTIFIER: /(?!(?:KEYWORDS)(?!\w))[^\W\d_]\w*/

    // Comments and whitespace
    COMMENT: /\/\/[^\n]*/
    %ignore COMMENT
    WS: /[ \t\r\n]+/
    %ignore WS
""".replace('KEYWORDS', _KEYWORD_ALTERNATION)


LOX_PARSER = Lark(
    LOX_GRAMMAR,
    parser='lalr',
    lexer='contextual',
    propagate_positions=True,
    maybe_placeholders=False,
)


def to_token(lark_token) -> Token:
    """Convert a Lark operator token into a Lox token."""
    lexeme = str(lark_token)
    return Token(OPERATORS[lexeme], lexeme, lark_token.line)


class ASTTransformer(Transformer):
    """Transforms the raw parse tree into an AST."""

    def program(self, items):
        return list(items)

    def var_decl(self, items):
        name = str(items[0])
        initializer = items[1] if len(items) > 1 else Literal(NIL)
        return VarDeclaration(name, initializer)

    def print_stmt(self, items):
        return PrintStatement(items[0])

    def expr_stmt(self, items):
        return ExprStatement(items[0])

    # Expressions
    def binary_chain(self, items):
        # items pattern: expr ( op expr )*, folded into a left-leaning chain
        left = items[0]
        i = 1
        while i < len(items):
            left = Binary(left, to_token(items[i]), items[i + 1])
            i += 2
        return left

    equality = comparison = term = factor = binary_chain

    def unary_op(self, items):
        return Unary(to_token(items[0]), items[1])

    def true(self, items):
        return Literal(TRUE)

    def false(self, items):
        return Literal(FALSE)

    def nil(self, items):
        return Literal(NIL)

    def number(self, items):
        return Literal(Number(float(items[0])))

    def string(self, items):
        # strip the surrounding quotes; Lox strings have no escapes
        return Literal(String(str(items[0])[1:-1]))

    def grouping(self, items):
        return Grouping(items[0])

    def variable(self, items):
        return Var(str(items[0]))


def _error_line(error: UnexpectedInput):
    line = getattr(error, 'line', None)
    if isinstance(line, int) and line > 0:
        return line
    return None


def parse_with_grammar(source: str) -> List[Stmt]:
    """Parse Lox source code into statements using the Lark grammar."""
    try:
        tree = LOX_PARSER.parse(source)
    except UnexpectedCharacters as e:
        raise ScanError([ErrorVal('SyntaxError', f"Unexpected character {e.char!r}.", _error_line(e))])
    except UnexpectedToken as e:
        if e.token.type == '$END':
            message = 'Unexpected end of input.'
        else:
            message = f"Unexpected token {str(e.token)!r}."
        raise ParseError([ErrorVal('ParseError', message, _error_line(e))])
    except UnexpectedInput as e:
        raise ParseError([ErrorVal('ParseError', 'Unexpected end of input.', _error_line(e))])
    return ASTTransformer().transform(tree)
