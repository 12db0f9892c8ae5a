from dataclasses import dataclass


@dataclass
class ErrorVal:
    """A Hybrid error record: the error kind and a human readable message."""
    name: str
    message: str


class HybridError(Exception):
    """Base exception for every failure raised by the Hybrid core."""
    kind = 'HybridError'

    def __init__(self, message: str):
        self.err = ErrorVal(self.kind, message)
        super().__init__(f"{self.kind}: {message}")

    @property
    def message(self) -> str:
        return self.err.message


class LexError(HybridError):
    """Raised when the source contains a character the lexer does not recognize."""
    kind = 'LexError'


class ParseError(HybridError):
    """Raised when the token stream violates the grammar."""
    kind = 'ParseError'


class HybridRuntimeError(HybridError):
    """Base class for errors raised while evaluating a program."""
    kind = 'RuntimeError'


class DuplicateDeclaration(HybridRuntimeError):
    kind = 'DuplicateDeclaration'


class UnresolvedName(HybridRuntimeError):
    kind = 'UnresolvedName'


class ConstReassignment(HybridRuntimeError):
    kind = 'ConstReassignment'


class InvalidAssignmentTarget(HybridRuntimeError):
    kind = 'InvalidAssignmentTarget'


class EvaluationError(HybridRuntimeError):
    kind = 'EvaluationError'
