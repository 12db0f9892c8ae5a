"""Parser for the Hybrid language.

A hand-written recursive-descent parser. Operator precedence is encoded by
the nesting of the grammar rules (precedence climbing), lowest first::

    statement      := var_decl | expression ';'?
    var_decl       := ('let' | 'const') IDENT (';' | '=' expression ';')
    expression     := assignment
    assignment     := additive ('=' assignment)?
    additive       := multiplicative (('+' | '-') multiplicative)*
    multiplicative := primary (('*' | '/' | '%') primary)*
    primary        := NUMBER | IDENT | 'null' | '(' expression ')'

The parser walks an immutable token list with an index cursor. It never
recovers from an error: the first violation raises ParseError.
"""

from __future__ import annotations

from typing import List, Sequence

from .ast import (
    Program, VariableDeclaration, AssignmentExpression, BinaryExpression,
    Identifier, NumberLiteral, NullLiteral, Node,
)
from .errors import ParseError
from .lexer import Token, TokenKind, tokenize

ADDITIVE_OPERATORS = ('+', '-')
MULTIPLICATIVE_OPERATORS = ('*', '/', '%')


class Parser:
    def __init__(self) -> None:
        self.tokens: List[Token] = []
        self.pos = 0

    # Token cursor helpers
    def at(self) -> Token:
        return self.tokens[self.pos]

    def not_eof(self) -> bool:
        return self.at().kind is not TokenKind.END_OF_INPUT

    def eat(self) -> Token:
        token = self.tokens[self.pos]
        if token.kind is not TokenKind.END_OF_INPUT:
            self.pos += 1
        return token

    def expect(self, kind: TokenKind, message: str) -> Token:
        token = self.at()
        if token.kind is not kind:
            raise ParseError(
                f"{message} at {token.line}:{token.column}: "
                f"expected {kind.value}, got {token}"
            )
        return self.eat()

    def match_operator(self, operators: Sequence[str]) -> bool:
        token = self.at()
        return token.kind is TokenKind.BINARY_OPERATOR and token.text in operators

    # Entry point
    def produce_ast(self, source: str) -> Program:
        """Tokenize ``source`` and parse it into a Program node."""
        self.tokens = tokenize(source)
        self.pos = 0
        body: List[Node] = []
        try:
            while self.not_eof():
                body.append(self.parse_statement())
        except RecursionError:
            token = self.at()
            raise ParseError(
                f"expression nested too deeply at {token.line}:{token.column}"
            ) from None
        return Program(tuple(body))

    # Statements
    def parse_statement(self) -> Node:
        if self.at().kind in (TokenKind.LET, TokenKind.CONST):
            return self.parse_var_declaration()
        expr = self.parse_expression()
        if self.at().kind is TokenKind.SEMICOLON:
            self.eat()
        return expr

    def parse_var_declaration(self) -> VariableDeclaration:
        is_constant = self.eat().kind is TokenKind.CONST
        name = self.expect(
            TokenKind.IDENTIFIER,
            "expected identifier name following let/const keyword",
        ).text

        if self.at().kind is TokenKind.SEMICOLON:
            if is_constant:
                token = self.at()
                raise ParseError(
                    f"const requires an initializer: {name!r} at {token.line}:{token.column}"
                )
            self.eat()
            return VariableDeclaration(name, False, None)

        self.expect(TokenKind.EQUALS, f"expected '=' or ';' after identifier {name!r}")
        value = self.parse_expression()
        self.expect(TokenKind.SEMICOLON, "variable declaration must end with ';'")
        return VariableDeclaration(name, is_constant, value)

    # Expressions, lowest precedence first
    def parse_expression(self) -> Node:
        return self.parse_assignment()

    # assignment: additive ('=' assignment)?
    def parse_assignment(self) -> Node:
        left = self.parse_additive()
        if self.at().kind is TokenKind.EQUALS:
            self.eat()
            value = self.parse_assignment()
            return AssignmentExpression(left, value)
        return left

    def parse_additive(self) -> Node:
        left = self.parse_multiplicative()
        while self.match_operator(ADDITIVE_OPERATORS):
            operator = self.eat().text
            right = self.parse_multiplicative()
            left = BinaryExpression(left, right, operator)
        return left

    def parse_multiplicative(self) -> Node:
        left = self.parse_primary()
        while self.match_operator(MULTIPLICATIVE_OPERATORS):
            operator = self.eat().text
            right = self.parse_primary()
            left = BinaryExpression(left, right, operator)
        return left

    def parse_primary(self) -> Node:
        token = self.at()
        if token.kind is TokenKind.NUMBER:
            self.eat()
            return NumberLiteral(float(token.text))
        if token.kind is TokenKind.IDENTIFIER:
            self.eat()
            return Identifier(token.text)
        if token.kind is TokenKind.NULL:
            self.eat()
            return NullLiteral()
        if token.kind is TokenKind.OPEN_PAREN:
            self.eat()
            value = self.parse_expression()
            self.expect(
                TokenKind.CLOSE_PAREN,
                "expected closing parenthesis after expression",
            )
            return value
        raise ParseError(
            f"unexpected token found during parsing at {token.line}:{token.column}: {token}"
        )


def parse(source: str) -> Program:
    """Parse the given source code into a Program AST."""
    return Parser().produce_ast(source)
