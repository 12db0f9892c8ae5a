"""Tokenizer for the Hybrid language.

The lexer performs a single left-to-right scan over the source text with
an index cursor and produces a flat list of tokens that always ends with
exactly one END_OF_INPUT token. Hybrid has a deliberately tiny alphabet:
digits, letters, whitespace and the punctuation ``( ) + - * / % = ;``.
Anything else is rejected with a LexError.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from .errors import LexError


class TokenKind(Enum):
    NUMBER = 'Number'
    IDENTIFIER = 'Identifier'
    LET = 'Let'
    CONST = 'Const'
    NULL = 'Null'
    OPEN_PAREN = 'OpenParen'
    CLOSE_PAREN = 'CloseParen'
    EQUALS = 'Equals'
    SEMICOLON = 'Semicolon'
    BINARY_OPERATOR = 'BinaryOperator'
    END_OF_INPUT = 'EndOfInput'


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        if self.kind is TokenKind.END_OF_INPUT:
            return 'end of input'
        return f"{self.kind.value} {self.text!r}"


KEYWORDS: Dict[str, TokenKind] = {
    'let': TokenKind.LET,
    'const': TokenKind.CONST,
    'null': TokenKind.NULL,
}

SINGLE_CHAR_TOKENS: Dict[str, TokenKind] = {
    '(': TokenKind.OPEN_PAREN,
    ')': TokenKind.CLOSE_PAREN,
    '=': TokenKind.EQUALS,
    ';': TokenKind.SEMICOLON,
    '+': TokenKind.BINARY_OPERATOR,
    '-': TokenKind.BINARY_OPERATOR,
    '*': TokenKind.BINARY_OPERATOR,
    '/': TokenKind.BINARY_OPERATOR,
    '%': TokenKind.BINARY_OPERATOR,
}

SKIPPABLE = frozenset(' \t\n')


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def tokenize(source: str) -> List[Token]:
    """Convert source code into a list of tokens.

    Numbers are maximal runs of decimal digits; there is no sign, decimal
    point or exponent, so ``-3`` is an operator followed by a number.
    Identifiers are maximal runs of alphabetic characters, and the exact
    (case-sensitive) texts ``let``, ``const`` and ``null`` are keywords.
    """
    tokens: List[Token] = []
    i = 0
    line = 1
    col = 1
    length = len(source)

    while i < length:
        c = source[i]
        if c in SKIPPABLE:
            if c == '\n':
                line += 1
                col = 1
            else:
                col += 1
            i += 1
            continue
        if c in SINGLE_CHAR_TOKENS:
            tokens.append(Token(SINGLE_CHAR_TOKENS[c], c, line, col))
            i += 1
            col += 1
            continue
        if is_digit(c):
            start = i
            while i < length and is_digit(source[i]):
                i += 1
            tokens.append(Token(TokenKind.NUMBER, source[start:i], line, col))
            col += i - start
            continue
        if c.isalpha():
            start = i
            while i < length and source[i].isalpha():
                i += 1
            text = source[start:i]
            tokens.append(Token(KEYWORDS.get(text, TokenKind.IDENTIFIER), text, line, col))
            col += i - start
            continue
        raise LexError(f"unrecognized character {c!r} at {line}:{col}")

    tokens.append(Token(TokenKind.END_OF_INPUT, '', line, col))
    return tokens
