"""Abstract Syntax Tree (AST) definitions for Lox.

Two node families exist: expressions, which evaluate to an `Atom`, and
statements, which are executed for their effect. Nodes carry no behavior;
the interpreter, the tree printer and the JSON converter all dispatch on the
node class. Every node owns its children, so a parsed program is always a
tree.
"""

from __future__ import annotations

from dataclasses import dataclass

from .tokens import Token
from .types import Atom


@dataclass
class Expr:
    """Base class for expression nodes."""
    pass


@dataclass
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass
class Unary(Expr):
    operator: Token
    operand: Expr


@dataclass
class Grouping(Expr):
    inner: Expr


@dataclass
class Literal(Expr):
    value: Atom


@dataclass
class Var(Expr):
    name: str


@dataclass
class Stmt:
    """Base class for statement nodes."""
    pass


@dataclass
class ExprStatement(Stmt):
    expr: Expr


@dataclass
class PrintStatement(Stmt):
    expr: Expr


@dataclass
class VarDeclaration(Stmt):
    name: str
    initializer: Expr  # Literal(NIL) when the source has no initializer
