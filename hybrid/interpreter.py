"""Tree-walking interpreter for the Hybrid language.

The interpreter evaluates a parsed Program against an Environment and
returns the value of the last statement. Evaluation is synchronous and
single-threaded; every failure is raised as a HybridError subclass so the
caller (REPL, CLI, editor host) decides whether to stop.

Division and modulo by zero follow IEEE-754 rather than raising: ``x / 0``
is an infinity signed like the operands, ``0 / 0`` and ``x % 0`` are NaN.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, Optional

from .ast import (
    Program, VariableDeclaration, AssignmentExpression, BinaryExpression,
    Identifier, Node, NodeKind,
)
from .environment import Environment, create_global_environment
from .errors import EvaluationError, InvalidAssignmentTarget
from .parser import parse
from .values import NULL, NumberVal, RuntimeValue, to_string


def divide(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def remainder(a: float, b: float) -> float:
    # math.fmod keeps the sign of the dividend and raises for a zero divisor.
    if b == 0.0 or math.isinf(a) or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.fmod(a, b)


BINARY_OPERATORS: Dict[str, Callable[[float, float], float]] = {
    '+': lambda a, b: a + b,
    '-': lambda a, b: a - b,
    '*': lambda a, b: a * b,
    '/': divide,
    '%': remainder,
}


class Interpreter:
    """Core interpreter that evaluates Hybrid AST nodes."""
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None
        self.handlers: Dict[NodeKind, Callable[[Node, Environment], RuntimeValue]] = {
            NodeKind.PROGRAM: self.eval_program,
            NodeKind.VARIABLE_DECLARATION: self.eval_var_declaration,
            NodeKind.ASSIGNMENT_EXPRESSION: self.eval_assignment,
            NodeKind.BINARY_EXPRESSION: self.eval_binary_expression,
            NodeKind.IDENTIFIER: self.eval_identifier,
            NodeKind.NUMBER_LITERAL: lambda node, env: NumberVal(node.value),
            NodeKind.NULL_LITERAL: lambda node, env: NULL,
        }

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def __enter__(self) -> 'Interpreter':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Public API
    def run(self, program: Program, env: Optional[Environment] = None) -> RuntimeValue:
        if env is None:
            env = create_global_environment()
        return self.evaluate(program, env)

    def evaluate(self, node: Node, env: Environment) -> RuntimeValue:
        try:
            return self.visit(node, env)
        except RecursionError:
            raise EvaluationError('expression nested too deeply to evaluate') from None

    def visit(self, node: Node, env: Environment) -> RuntimeValue:
        kind = getattr(node, 'kind', None)
        handler = self.handlers.get(kind) if isinstance(kind, NodeKind) else None
        if handler is None:
            raise EvaluationError(f'unsupported node for interpretation: {node!r}')
        return handler(node, env)

    def eval_program(self, program: Program, env: Environment) -> RuntimeValue:
        last: RuntimeValue = NULL
        for index, stmt in enumerate(program.body):
            last = self.visit(stmt, env)
            if self.debug_level >= 1:
                self.debug(f"statement {index}: {stmt.kind.value} -> {to_string(last)}")
        return last

    def eval_var_declaration(self, node: VariableDeclaration, env: Environment) -> RuntimeValue:
        value = self.visit(node.value, env) if node.value is not None else NULL
        env.declare(node.name, value, node.is_constant)
        if self.debug_level >= 2:
            keyword = 'const' if node.is_constant else 'let'
            self.debug(f"declare {keyword} {node.name} = {to_string(value)} (depth {env.depth})")
        return value

    def eval_assignment(self, node: AssignmentExpression, env: Environment) -> RuntimeValue:
        if not isinstance(node.assignee, Identifier):
            raise InvalidAssignmentTarget(
                f'invalid left-hand side in assignment: {node.assignee.kind.value}'
            )
        value = self.visit(node.value, env)
        env.assign(node.assignee.symbol, value)
        if self.debug_level >= 2:
            owner = env.resolve(node.assignee.symbol)
            self.debug(f"assign {node.assignee.symbol} = {to_string(value)} (depth {owner.depth})")
        return value

    def eval_binary_expression(self, node: BinaryExpression, env: Environment) -> RuntimeValue:
        # Left-folded chains are walked down the left spine without recursion,
        # then folded back up: leftmost operand first, each right operand in order.
        spine = []
        while isinstance(node, BinaryExpression):
            spine.append(node)
            node = node.left
        left = self.visit(node, env)
        for binary in reversed(spine):
            right = self.visit(binary.right, env)
            left = self.combine(binary.operator, left, right)
        return left

    def combine(self, op: str, left: RuntimeValue, right: RuntimeValue) -> RuntimeValue:
        if isinstance(left, NumberVal) and isinstance(right, NumberVal):
            result = self.apply_binary_op(op, left.value, right.value)
        else:
            # Mismatched operand types are not an error: the result is null.
            result = NULL
        if self.debug_level >= 3:
            self.debug(
                f"binary {to_string(left)} {op} {to_string(right)} -> {to_string(result)}"
            )
        return result

    def apply_binary_op(self, op: str, a: float, b: float) -> NumberVal:
        fn = BINARY_OPERATORS.get(op)
        if fn is None:
            raise EvaluationError(f'invalid operator {op!r}')
        return NumberVal(fn(a, b))

    def eval_identifier(self, node: Identifier, env: Environment) -> RuntimeValue:
        value = env.lookup(node.symbol)
        if self.debug_level >= 4:
            self.debug(f"lookup {node.symbol} -> {to_string(value)}")
        return value


def run_program(source: str, env: Optional[Environment] = None, debug_level: int = 0) -> RuntimeValue:
    """Convenience function to parse and evaluate a Hybrid program from source."""
    program = parse(source)
    with Interpreter(debug_level=debug_level) as interpreter:
        return interpreter.run(program, env)


def run_file(file_path: str, debug_level: int = 0) -> RuntimeValue:
    """Parse and evaluate a Hybrid file in a fresh global environment."""
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    return run_program(source, debug_level=debug_level)
