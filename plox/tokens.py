"""Token definitions shared by the scanner and both parser frontends."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict


class TokenType(Enum):
    # Single-character tokens
    LEFTPAREN = auto()
    RIGHTPAREN = auto()
    LEFTBRACE = auto()
    RIGHTBRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()
    # One or two character tokens
    BANG = auto()
    BANGEQUAL = auto()
    EQUAL = auto()
    EQUALEQUAL = auto()
    GREATER = auto()
    GREATEREQUAL = auto()
    LESS = auto()
    LESSEQUAL = auto()
    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()
    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()
    EOF = auto()


KEYWORDS: Dict[str, TokenType] = {
    'and': TokenType.AND,
    'class': TokenType.CLASS,
    'else': TokenType.ELSE,
    'false': TokenType.FALSE,
    'for': TokenType.FOR,
    'fun': TokenType.FUN,
    'if': TokenType.IF,
    'nil': TokenType.NIL,
    'or': TokenType.OR,
    'print': TokenType.PRINT,
    'return': TokenType.RETURN,
    'super': TokenType.SUPER,
    'this': TokenType.THIS,
    'true': TokenType.TRUE,
    'var': TokenType.VAR,
    'while': TokenType.WHILE,
}


OPERATORS: Dict[str, TokenType] = {
    '(': TokenType.LEFTPAREN,
    ')': TokenType.RIGHTPAREN,
    '{': TokenType.LEFTBRACE,
    '}': TokenType.RIGHTBRACE,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    '-': TokenType.MINUS,
    '+': TokenType.PLUS,
    ';': TokenType.SEMICOLON,
    '/': TokenType.SLASH,
    '*': TokenType.STAR,
    '!': TokenType.BANG,
    '!=': TokenType.BANGEQUAL,
    '=': TokenType.EQUAL,
    '==': TokenType.EQUALEQUAL,
    '>': TokenType.GREATER,
    '>=': TokenType.GREATEREQUAL,
    '<': TokenType.LESS,
    '<=': TokenType.LESSEQUAL,
}


@dataclass(frozen=True)
class Token:
    """A classified lexical unit.

    `literal` carries the payload of IDENTIFIER (the name), STRING (the
    contents without quotes) and NUMBER (a float) tokens and is None for
    every other kind.
    """
    type: TokenType
    lexeme: str
    line: int
    literal: Any = None

    def __repr__(self) -> str:
        if self.literal is None:
            return f"Token({self.type.name}, {self.lexeme!r}, line={self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line={self.line})"
