"""Lexical scanner for Lox.

The scanner makes a single left-to-right pass over the source with an
explicit cursor: `start` marks the first character of the lexeme being
scanned, `current` the next character to read, and `line` the source line
used for diagnostics. Lexical errors are collected rather than raised on
the spot, so a single pass reports every problem in the source.
"""

from __future__ import annotations

import sys
from typing import Any, List

from .errors import ErrorVal, ScanError
from .tokens import KEYWORDS, OPERATORS, Token, TokenType


SINGLE_CHAR_TOKENS = '(){},.-+;*'
# operators that become a two-character token when followed by '='
EQUAL_SUFFIX_TOKENS = '!=<>'


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def is_alpha(c: str) -> bool:
    return c.isalpha()


def is_alphanumeric(c: str) -> bool:
    return c.isalnum() or c == '_'


class Scanner:
    def __init__(self, source: str, lenient: bool = False):
        self.source = source
        self.lenient = lenient
        self.tokens: List[Token] = []
        self.errors: List[ErrorVal] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        return c

    def peek(self, offset: int = 0) -> str:
        index = self.current + offset
        if index >= len(self.source):
            return '\0'
        return self.source[index]

    def match(self, expected: str) -> bool:
        if self.peek() != expected:
            return False
        self.current += 1
        return True

    def add_token(self, token_type: TokenType, literal: Any = None):
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, lexeme, self.line, literal))

    def error(self, message: str):
        self.errors.append(ErrorVal('SyntaxError', message, self.line))

    def scan_tokens(self) -> List[Token]:
        """Scan the whole source.

        Returns the token list terminated by an EOF token, or raises
        ScanError carrying every lexical error found.
        """
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()
        self.tokens.append(Token(TokenType.EOF, '', self.line))
        if self.errors:
            raise ScanError(self.errors)
        return self.tokens

    def scan_token(self):
        c = self.advance()
        if c in SINGLE_CHAR_TOKENS:
            self.add_token(OPERATORS[c])
        elif c in EQUAL_SUFFIX_TOKENS:
            if self.match('='):
                self.add_token(OPERATORS[c + '='])
            else:
                self.add_token(OPERATORS[c])
        elif c == '/':
            if self.match('/'):
                # comment runs to end of line; the newline is scanned normally
                while self.peek() != '\n' and not self.is_at_end():
                    self.advance()
            else:
                self.add_token(TokenType.SLASH)
        elif c in ' \r\t':
            pass
        elif c == '\n':
            self.line += 1
        elif c == '"':
            self.string()
        elif is_digit(c):
            self.number()
        elif is_alpha(c):
            self.identifier()
        elif self.lenient:
            print(f"[line {self.line}] Unexpected character {c!r}", file=sys.stderr)
        else:
            self.error(f"Unexpected character {c!r}.")

    def string(self):
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == '\n':
                self.line += 1
            self.advance()
        if self.is_at_end():
            self.error('Unterminated string.')
            return
        self.advance()  # closing quote
        self.add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def number(self):
        while is_digit(self.peek()):
            self.advance()
        # a trailing '.' without a digit after it is left for the next token
        if self.peek() == '.' and is_digit(self.peek(1)):
            self.advance()
            while is_digit(self.peek()):
                self.advance()
        text = self.source[self.start:self.current]
        self.add_token(TokenType.NUMBER, float(text))

    def identifier(self):
        while is_alphanumeric(self.peek()):
            self.advance()
        text = self.source[self.start:self.current]
        token_type = KEYWORDS.get(text)
        if token_type is None:
            self.add_token(TokenType.IDENTIFIER, text)
        else:
            self.add_token(token_type)


def scan(source: str, lenient: bool = False) -> List[Token]:
    """Convert source code into a list of tokens ending with EOF."""
    return Scanner(source, lenient=lenient).scan_tokens()
