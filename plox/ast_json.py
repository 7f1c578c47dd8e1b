"""JSON serialization/deserialization for the Lox AST.

This module converts between AST dataclasses and plain Python dict/list
structures suitable for JSON encoding. It supports a full round-trip for
every statement and expression node, the operator tokens they hold and the
literal atoms.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .ast import (
    Binary,
    Unary,
    Grouping,
    Literal,
    Var,
    Stmt,
    ExprStatement,
    PrintStatement,
    VarDeclaration,
)
from .tokens import Token, TokenType
from .types import Atom, String, Number, Bool, Nil, NIL


def atom_to_obj(value: Atom) -> Dict[str, Any]:
    if isinstance(value, Nil):
        return {"kind": "Nil"}
    if isinstance(value, (String, Number, Bool)):
        return {"kind": type(value).__name__, "value": value.value}
    raise TypeError(f"Unsupported atom for serialization: {type(value).__name__}")


def atom_from_obj(o: Dict[str, Any]) -> Atom:
    kind = o["kind"]
    if kind == "Nil":
        return NIL
    if kind == "String":
        return String(str(o["value"]))
    if kind == "Number":
        return Number(float(o["value"]))
    if kind == "Bool":
        return Bool(bool(o["value"]))
    raise ValueError(f"Unknown atom kind: {kind}")


def token_to_obj(token: Token) -> Dict[str, Any]:
    return {"type": token.type.name, "lexeme": token.lexeme, "line": token.line, "literal": token.literal}


def token_from_obj(o: Dict[str, Any]) -> Token:
    return Token(TokenType[o["type"]], o["lexeme"], int(o["line"]), o.get("literal"))


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None

    # Leaves
    if isinstance(node, Atom):
        return {"__type__": "Atom", "value": atom_to_obj(node)}
    if isinstance(node, Token):
        return {"__type__": "Token", "value": token_to_obj(node)}

    # Statements
    if isinstance(node, ExprStatement):
        return {"type": "ExprStatement", "expr": ast_to_obj(node.expr)}
    if isinstance(node, PrintStatement):
        return {"type": "PrintStatement", "expr": ast_to_obj(node.expr)}
    if isinstance(node, VarDeclaration):
        return {"type": "VarDeclaration", "name": node.name, "initializer": ast_to_obj(node.initializer)}

    # Expressions
    if isinstance(node, Binary):
        return {
            "type": "Binary",
            "left": ast_to_obj(node.left),
            "operator": ast_to_obj(node.operator),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, Unary):
        return {"type": "Unary", "operator": ast_to_obj(node.operator), "operand": ast_to_obj(node.operand)}
    if isinstance(node, Grouping):
        return {"type": "Grouping", "inner": ast_to_obj(node.inner)}
    if isinstance(node, Literal):
        return {"type": "Literal", "value": ast_to_obj(node.value)}
    if isinstance(node, Var):
        return {"type": "Var", "name": node.name}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    if obj.get("__type__") == "Atom":
        return atom_from_obj(obj["value"])
    if obj.get("__type__") == "Token":
        return token_from_obj(obj["value"])
    t = obj.get("type")
    if t == "ExprStatement":
        return ExprStatement(expr=ast_from_obj(obj["expr"]))
    if t == "PrintStatement":
        return PrintStatement(expr=ast_from_obj(obj["expr"]))
    if t == "VarDeclaration":
        return VarDeclaration(name=obj["name"], initializer=ast_from_obj(obj["initializer"]))
    if t == "Binary":
        return Binary(
            left=ast_from_obj(obj["left"]),
            operator=ast_from_obj(obj["operator"]),
            right=ast_from_obj(obj["right"]),
        )
    if t == "Unary":
        return Unary(operator=ast_from_obj(obj["operator"]), operand=ast_from_obj(obj["operand"]))
    if t == "Grouping":
        return Grouping(inner=ast_from_obj(obj["inner"]))
    if t == "Literal":
        return Literal(value=ast_from_obj(obj["value"]))
    if t == "Var":
        return Var(name=obj["name"])

    raise ValueError(f"Unknown AST node type: {t}")


def program_to_obj(statements: List[Stmt]) -> Dict[str, Any]:
    return {"type": "Program", "body": [ast_to_obj(s) for s in statements]}


def program_from_obj(obj: Dict[str, Any]) -> List[Stmt]:
    if obj.get("type") != "Program":
        raise ValueError("AST JSON root must be a Program")
    return [ast_from_obj(s) for s in obj["body"]]
