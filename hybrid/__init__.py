# Hybrid language package
# This package provides the lexer, parser and interpreter for the Hybrid language.
from .environment import Environment, create_global_environment
from .errors import HybridError
from .interpreter import Interpreter, run_program
from .parser import parse
from .values import to_string

__all__ = [
    'Environment',
    'create_global_environment',
    'HybridError',
    'Interpreter',
    'run_program',
    'parse',
    'to_string',
]
