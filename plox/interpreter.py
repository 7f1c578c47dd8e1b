"""Tree-walking interpreter for Lox.

The interpreter executes statements one after another against a single
global `Environment`. Expressions are evaluated by dispatching on the node
class, and binary and unary nodes then dispatch a second time on the
operator token.

Runtime failures (type errors and undefined variables) are raised as
`LoxError`. The first one also fills the interpreter's sticky error slot:
from then on `evaluate` returns Nil and `execute` does nothing, until the
slot is cleared with `reset()`. Statements executed before the failure are
never rewound.
"""

from __future__ import annotations

import math
from typing import Callable, List, Optional, TextIO

from .ast import (
    Binary, Unary, Grouping, Literal, Var,
    Expr, Stmt, ExprStatement, PrintStatement, VarDeclaration,
)
from .environment import Environment
from .errors import ErrorVal, LoxError
from .parser import parse
from .printer import print_stmt
from .scanner import scan
from .tokens import Token, TokenType
from .types import (
    Atom, String, Number, Bool, NIL,
    is_truthy, to_string, type_name, values_equal,
)


def ieee_divide(a: float, b: float) -> float:
    # Python raises on x / 0.0; Lox follows IEEE-754 instead
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        sign = math.copysign(1.0, a) * math.copysign(1.0, b)
        return math.copysign(math.inf, sign)
    return a / b


ARITHMETIC: dict = {
    TokenType.MINUS: lambda a, b: a - b,
    TokenType.STAR: lambda a, b: a * b,
    TokenType.SLASH: ieee_divide,
}

COMPARISONS: dict = {
    TokenType.GREATER: lambda a, b: a > b,
    TokenType.GREATEREQUAL: lambda a, b: a >= b,
    TokenType.LESS: lambda a, b: a < b,
    TokenType.LESSEQUAL: lambda a, b: a <= b,
}


def type_error(operator: Token, message: str) -> LoxError:
    return LoxError(ErrorVal('TypeError', message, operator.line))


class Interpreter:
    """Core interpreter that executes Lox statements."""
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.env = Environment()
        self.error: Optional[ErrorVal] = None
        self.debug_level = debug_level
        self.debug_fp: Optional[TextIO] = open(debug_file, 'w') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    @property
    def halted(self) -> bool:
        return self.error is not None

    def reset(self):
        """Clear the sticky error slot; variables are kept."""
        if self.error is not None:
            self.debug(f"reset after {self.error}")
        self.error = None

    # Public API
    def run(self, statements: List[Stmt]) -> Optional[Atom]:
        """Execute statements in order.

        Returns the value of the last expression statement executed, or
        None if there was none. The first runtime error halts the run and
        is re-raised; a run on an already halted interpreter does nothing.
        """
        result: Optional[Atom] = None
        for stmt in statements:
            if self.halted:
                if self.debug_level >= 1:
                    self.debug(f"halted, skipping {print_stmt(stmt)}")
                break
            value = self.execute(stmt)
            if isinstance(stmt, ExprStatement):
                result = value
        return result

    def execute(self, stmt: Stmt) -> Optional[Atom]:
        if self.halted:
            return None
        if self.debug_level >= 1:
            self.debug(f"execute {print_stmt(stmt)}")
        if isinstance(stmt, ExprStatement):
            return self.evaluate(stmt.expr)
        if isinstance(stmt, PrintStatement):
            value = self.evaluate(stmt.expr)
            print(repr(value))
            return None
        if isinstance(stmt, VarDeclaration):
            value = self.evaluate(stmt.initializer)
            self.env.define(stmt.name, value)
            if self.debug_level >= 2:
                self.debug(f"define {stmt.name}: {type_name(value)} = {value!r}")
            return None
        raise NotImplementedError(f"execute: unexpected node type {type(stmt)}")

    def evaluate(self, expr: Expr) -> Atom:
        if self.halted:
            return NIL
        try:
            return self.evaluate_node(expr)
        except LoxError as e:
            if self.error is None:
                self.error = e.err
                self.debug(f"halt: {e.err}")
            raise

    def evaluate_node(self, expr: Expr) -> Atom:
        if isinstance(expr, Literal):
            return expr.value
        if isinstance(expr, Grouping):
            return self.evaluate(expr.inner)
        if isinstance(expr, Var):
            return self.env.lookup(expr.name)
        if isinstance(expr, Unary):
            operand = self.evaluate(expr.operand)
            return self.apply_unary_op(expr.operator, operand)
        if isinstance(expr, Binary):
            left = self.evaluate(expr.left)
            right = self.evaluate(expr.right)
            result = self.apply_binary_op(expr.operator, left, right)
            if self.debug_level >= 3:
                self.debug(f"{left!r} {expr.operator.lexeme} {right!r} -> {result!r}")
            return result
        raise NotImplementedError(f"evaluate: unexpected node type {type(expr)}")

    def apply_unary_op(self, op: Token, operand: Atom) -> Atom:
        if op.type == TokenType.BANG:
            return Bool(not is_truthy(operand))
        if op.type == TokenType.MINUS:
            if isinstance(operand, Number):
                return Number(-operand.value)
            raise type_error(op, f"Operand of '-' must be a Number, got {type_name(operand)}")
        raise type_error(op, f"Unsupported unary operator {op.lexeme}")

    def apply_binary_op(self, op: Token, a: Atom, b: Atom) -> Atom:
        if op.type == TokenType.PLUS:
            return self.add(op, a, b)
        if op.type in ARITHMETIC:
            return self.arithmetic(op, ARITHMETIC[op.type], a, b)
        if op.type in COMPARISONS:
            if isinstance(a, Number) and isinstance(b, Number):
                return Bool(COMPARISONS[op.type](a.value, b.value))
            raise type_error(op, f"Comparison '{op.lexeme}' not supported for {type_name(a)} and {type_name(b)}")
        if op.type == TokenType.EQUALEQUAL:
            return Bool(values_equal(a, b))
        if op.type == TokenType.BANGEQUAL:
            return Bool(not values_equal(a, b))
        raise type_error(op, f"Unsupported binary operator {op.lexeme}")

    def add(self, op: Token, a: Atom, b: Atom) -> Atom:
        # String concatenation wins whenever one side is a string
        if isinstance(a, String) or isinstance(b, String):
            return String(to_string(a) + to_string(b))
        numbers = self.numeric_pair(a, b)
        if numbers is not None:
            return Number(numbers[0] + numbers[1])
        raise type_error(op, f"Addition not supported for {type_name(a)} and {type_name(b)}")

    def arithmetic(self, op: Token, fn: Callable[[float, float], float], a: Atom, b: Atom) -> Atom:
        numbers = self.numeric_pair(a, b)
        if numbers is not None:
            return Number(fn(numbers[0], numbers[1]))
        raise type_error(op, f"Operator '{op.lexeme}' not supported for {type_name(a)} and {type_name(b)}")

    def numeric_pair(self, a: Atom, b: Atom):
        """Return both operands as floats, or None if the pair is not numeric.

        Number/Number is accepted, and so is a Number paired with a Bool in
        either order (true is 1, false is 0). Bool/Bool is not numeric.
        """
        if isinstance(a, Number) and isinstance(b, Number):
            return a.value, b.value
        if isinstance(a, Number) and isinstance(b, Bool):
            return a.value, float(b.value)
        if isinstance(a, Bool) and isinstance(b, Number):
            return float(a.value), b.value
        return None


def run_program(source: str, debug_level: int = 0, lenient: bool = False,
                single_statement: bool = False) -> Optional[Atom]:
    """Convenience function to scan, parse and run a Lox program from source string."""
    statements = parse(scan(source, lenient=lenient), single_statement=single_statement)
    interpreter = Interpreter(debug_level=debug_level)
    try:
        return interpreter.run(statements)
    finally:
        interpreter.close()
