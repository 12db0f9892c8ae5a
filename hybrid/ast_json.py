"""JSON serialization/deserialization for Hybrid AST.

This module converts between Hybrid AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. Each node becomes a dict
whose ``"type"`` entry is the node's kind name.
"""

from __future__ import annotations

from typing import Any

from .ast import (
    Program,
    VariableDeclaration,
    AssignmentExpression,
    BinaryExpression,
    Identifier,
    NumberLiteral,
    NullLiteral,
    NodeKind,
)


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None

    if isinstance(node, Program):
        return {"type": NodeKind.PROGRAM.value, "body": [ast_to_obj(n) for n in node.body]}
    if isinstance(node, VariableDeclaration):
        return {
            "type": NodeKind.VARIABLE_DECLARATION.value,
            "name": node.name,
            "is_constant": node.is_constant,
            "value": ast_to_obj(node.value),
        }
    if isinstance(node, AssignmentExpression):
        return {
            "type": NodeKind.ASSIGNMENT_EXPRESSION.value,
            "assignee": ast_to_obj(node.assignee),
            "value": ast_to_obj(node.value),
        }
    if isinstance(node, BinaryExpression):
        return {
            "type": NodeKind.BINARY_EXPRESSION.value,
            "operator": node.operator,
            "left": ast_to_obj(node.left),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, Identifier):
        return {"type": NodeKind.IDENTIFIER.value, "symbol": node.symbol}
    if isinstance(node, NumberLiteral):
        return {"type": NodeKind.NUMBER_LITERAL.value, "value": node.value}
    if isinstance(node, NullLiteral):
        return {"type": NodeKind.NULL_LITERAL.value}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == NodeKind.PROGRAM.value:
        return Program(body=tuple(ast_from_obj(n) for n in obj["body"]))
    if t == NodeKind.VARIABLE_DECLARATION.value:
        return VariableDeclaration(
            name=obj["name"],
            is_constant=bool(obj.get("is_constant", False)),
            value=ast_from_obj(obj.get("value")),
        )
    if t == NodeKind.ASSIGNMENT_EXPRESSION.value:
        return AssignmentExpression(
            assignee=ast_from_obj(obj["assignee"]),
            value=ast_from_obj(obj["value"]),
        )
    if t == NodeKind.BINARY_EXPRESSION.value:
        return BinaryExpression(
            left=ast_from_obj(obj["left"]),
            right=ast_from_obj(obj["right"]),
            operator=obj["operator"],
        )
    if t == NodeKind.IDENTIFIER.value:
        return Identifier(symbol=obj["symbol"])
    if t == NodeKind.NUMBER_LITERAL.value:
        return NumberLiteral(value=float(obj["value"]))
    if t == NodeKind.NULL_LITERAL.value:
        return NullLiteral()

    raise ValueError(f"Unknown AST node type: {t}")

