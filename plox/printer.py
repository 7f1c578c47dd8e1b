"""Render parsed trees in a parenthesized prefix form for inspection.

    -3.14 * (52)      ->  (* (- 3.14) (group 52))
    print 1 + 2;      ->  (print (+ 1 2))
    var x = 5;        ->  (var x 5)
"""

from __future__ import annotations

import json

from .ast import (
    Binary, Unary, Grouping, Literal, Var,
    Expr, Stmt, ExprStatement, PrintStatement, VarDeclaration,
)
from .types import String, to_string


def parenthesize(name: str, *parts: str) -> str:
    return '(' + ' '.join((name,) + parts) + ')'


def print_expr(expr: Expr) -> str:
    if isinstance(expr, Binary):
        return parenthesize(expr.operator.lexeme, print_expr(expr.left), print_expr(expr.right))
    if isinstance(expr, Unary):
        return parenthesize(expr.operator.lexeme, print_expr(expr.operand))
    if isinstance(expr, Grouping):
        return parenthesize('group', print_expr(expr.inner))
    if isinstance(expr, Literal):
        if isinstance(expr.value, String):
            return json.dumps(expr.value.value, ensure_ascii=False)
        return to_string(expr.value)
    if isinstance(expr, Var):
        return expr.name
    raise NotImplementedError(f"print_expr: unexpected node type {type(expr)}")


def print_stmt(stmt: Stmt) -> str:
    if isinstance(stmt, PrintStatement):
        return parenthesize('print', print_expr(stmt.expr))
    if isinstance(stmt, ExprStatement):
        return parenthesize(';', print_expr(stmt.expr))
    if isinstance(stmt, VarDeclaration):
        return parenthesize('var', stmt.name, print_expr(stmt.initializer))
    raise NotImplementedError(f"print_stmt: unexpected node type {type(stmt)}")
