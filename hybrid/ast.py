"""Abstract Syntax Tree (AST) definitions for the Hybrid language.

The node classes below are the closed set of constructs the parser can
produce. Nodes are frozen dataclasses, so a tree is immutable once built.
Every class carries a ``kind`` discriminator which the interpreter uses for
dispatch and the JSON converter uses as the serialized type name.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple


class NodeKind(Enum):
    PROGRAM = 'Program'
    VARIABLE_DECLARATION = 'VariableDeclaration'
    ASSIGNMENT_EXPRESSION = 'AssignmentExpression'
    BINARY_EXPRESSION = 'BinaryExpression'
    IDENTIFIER = 'Identifier'
    NUMBER_LITERAL = 'NumberLiteral'
    NULL_LITERAL = 'NullLiteral'


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    kind: ClassVar[NodeKind]


@dataclass(frozen=True)
class Program(Node):
    kind: ClassVar[NodeKind] = NodeKind.PROGRAM
    body: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class VariableDeclaration(Node):
    kind: ClassVar[NodeKind] = NodeKind.VARIABLE_DECLARATION
    name: str
    is_constant: bool = False
    value: Optional[Node] = None  # None means deferred initialization


@dataclass(frozen=True)
class AssignmentExpression(Node):
    kind: ClassVar[NodeKind] = NodeKind.ASSIGNMENT_EXPRESSION
    assignee: Node  # any expression; only Identifier is valid at runtime
    value: Node


@dataclass(frozen=True)
class BinaryExpression(Node):
    kind: ClassVar[NodeKind] = NodeKind.BINARY_EXPRESSION
    left: Node
    right: Node
    operator: str


@dataclass(frozen=True)
class Identifier(Node):
    kind: ClassVar[NodeKind] = NodeKind.IDENTIFIER
    symbol: str


@dataclass(frozen=True)
class NumberLiteral(Node):
    kind: ClassVar[NodeKind] = NodeKind.NUMBER_LITERAL
    value: float


@dataclass(frozen=True)
class NullLiteral(Node):
    kind: ClassVar[NodeKind] = NodeKind.NULL_LITERAL
