"""Recursive-descent parser for Lox.

Each grammar level is one method, lowest precedence first:

    program     -> declaration* EOF
    declaration -> "var" IDENTIFIER ( "=" expression )? ";" | statement
    statement   -> "print" expression ";" | expression ";"
    expression  -> equality
    equality    -> comparison ( ( "!=" | "==" ) comparison )*
    comparison  -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        -> factor ( ( "-" | "+" ) factor )*
    factor      -> unary ( ( "/" | "*" ) unary )*
    unary       -> ( "!" | "-" ) unary | primary
    primary     -> "true" | "false" | "nil" | NUMBER | STRING
                 | "(" expression ")" | IDENTIFIER

Errors are recorded and parsing carries on, so one pass reports as many
problems as possible. Only a token that cannot start an expression forces
the parser to skip ahead to the next statement boundary.
"""

from __future__ import annotations

from typing import List, Optional

from .ast import (
    Binary, Unary, Grouping, Literal, Var,
    Expr, Stmt, ExprStatement, PrintStatement, VarDeclaration,
)
from .errors import ErrorVal, ParseError
from .tokens import Token, TokenType
from .types import String, Number, NIL, TRUE, FALSE


EQUALITY_OPS = (TokenType.BANGEQUAL, TokenType.EQUALEQUAL)
COMPARISON_OPS = (TokenType.GREATER, TokenType.GREATEREQUAL, TokenType.LESS, TokenType.LESSEQUAL)
TERM_OPS = (TokenType.MINUS, TokenType.PLUS)
FACTOR_OPS = (TokenType.SLASH, TokenType.STAR)
UNARY_OPS = (TokenType.BANG, TokenType.MINUS)

STATEMENT_STARTS = (
    TokenType.CLASS, TokenType.FUN, TokenType.VAR, TokenType.FOR,
    TokenType.IF, TokenType.WHILE, TokenType.PRINT, TokenType.RETURN,
)


class _Unparsable(Exception):
    """Internal signal: the current declaration cannot be parsed further."""
    pass


class Parser:
    def __init__(self, tokens: List[Token], single_statement: bool = False):
        self.tokens = tokens
        self.single_statement = single_statement
        self.current = 0
        self.errors: List[ErrorVal] = []

    # Token stream helpers

    def peek(self) -> Token:
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        # tolerate token lists without a trailing EOF
        line = self.tokens[-1].line if self.tokens else 1
        return Token(TokenType.EOF, '', line)

    def previous(self) -> Token:
        return self.tokens[self.current - 1]

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def check(self, token_type: TokenType) -> bool:
        return self.peek().type == token_type

    def match(self, *token_types: TokenType) -> bool:
        for token_type in token_types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def consume(self, token_type: TokenType, message: str) -> Optional[Token]:
        """Consume the expected token, or record an error and return None."""
        if self.check(token_type):
            return self.advance()
        self.error(self.peek(), message)
        return None

    def error(self, token: Token, message: str):
        where = 'at end' if token.type == TokenType.EOF else f"at {token.lexeme!r}"
        self.errors.append(ErrorVal('ParseError', f"{message} ({where})", token.line))

    def synchronize(self):
        """Skip tokens until the start of the next statement."""
        while not self.is_at_end():
            if self.advance().type == TokenType.SEMICOLON:
                return
            if self.peek().type in STATEMENT_STARTS:
                return

    # Entry point

    def parse(self) -> List[Stmt]:
        statements: List[Stmt] = []
        while not self.is_at_end():
            stmt = self.declaration()
            if stmt is not None:
                statements.append(stmt)
            if self.single_statement:
                break
        if self.errors:
            raise ParseError(self.errors)
        return statements

    # Declarations and statements

    def declaration(self) -> Optional[Stmt]:
        try:
            if self.match(TokenType.VAR):
                return self.var_declaration()
            return self.statement()
        except _Unparsable:
            self.synchronize()
            return None

    def var_declaration(self) -> VarDeclaration:
        name_token = self.consume(TokenType.IDENTIFIER, 'Expect variable name.')
        name = name_token.lexeme if name_token is not None else ''
        initializer: Expr = Literal(NIL)
        if self.match(TokenType.EQUAL):
            initializer = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return VarDeclaration(name, initializer)

    def statement(self) -> Stmt:
        if self.match(TokenType.PRINT):
            value = self.expression()
            self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
            return PrintStatement(value)
        expr = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return ExprStatement(expr)

    # Expressions

    def expression(self) -> Expr:
        return self.equality()

    def binary_level(self, operators, operand) -> Expr:
        """Parse one left-associative binary level."""
        expr = operand()
        while self.match(*operators):
            operator = self.previous()
            right = operand()
            expr = Binary(expr, operator, right)
        return expr

    def equality(self) -> Expr:
        return self.binary_level(EQUALITY_OPS, self.comparison)

    def comparison(self) -> Expr:
        return self.binary_level(COMPARISON_OPS, self.term)

    def term(self) -> Expr:
        return self.binary_level(TERM_OPS, self.factor)

    def factor(self) -> Expr:
        return self.binary_level(FACTOR_OPS, self.unary)

    def unary(self) -> Expr:
        if self.match(*UNARY_OPS):
            operator = self.previous()
            operand = self.unary()
            return Unary(operator, operand)
        return self.primary()

    def primary(self) -> Expr:
        if self.match(TokenType.FALSE):
            return Literal(FALSE)
        if self.match(TokenType.TRUE):
            return Literal(TRUE)
        if self.match(TokenType.NIL):
            return Literal(NIL)
        if self.match(TokenType.NUMBER):
            return Literal(Number(self.previous().literal))
        if self.match(TokenType.STRING):
            return Literal(String(self.previous().literal))
        if self.match(TokenType.IDENTIFIER):
            return Var(self.previous().lexeme)
        if self.match(TokenType.LEFTPAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHTPAREN, "Expect ')' after expression.")
            return Grouping(expr)
        self.error(self.peek(), 'Expect expression.')
        raise _Unparsable()


def parse(tokens: List[Token], single_statement: bool = False) -> List[Stmt]:
    """Parse a token list into statements, raising ParseError on failure."""
    return Parser(tokens, single_statement=single_statement).parse()
