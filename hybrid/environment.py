from typing import Dict, Optional, Set

from hybrid.errors import ConstReassignment, DuplicateDeclaration, UnresolvedName
from hybrid.values import FALSE, TRUE, RuntimeValue


class Environment:
    """Represents a scope environment mapping identifiers to values.

    Scopes form a tree through ``parent``; a scope never holds references to
    its children. Names resolve from the innermost scope outward.
    """
    def __init__(self, parent: Optional['Environment'] = None):
        self.parent = parent
        self.values: Dict[str, RuntimeValue] = {}
        self.constants: Set[str] = set()

    @property
    def depth(self) -> int:
        depth = 0
        env = self.parent
        while env is not None:
            depth += 1
            env = env.parent
        return depth

    def declare(self, name: str, value: RuntimeValue, is_constant: bool = False) -> RuntimeValue:
        # Only the current scope is checked; shadowing an outer name is allowed.
        if name in self.values:
            raise DuplicateDeclaration(f'variable {name} has already been declared')
        self.values[name] = value
        if is_constant:
            self.constants.add(name)
        return value

    def assign(self, name: str, value: RuntimeValue) -> RuntimeValue:
        env = self.resolve(name)
        if name in env.constants:
            raise ConstReassignment(f'cannot reassign constant {name}')
        env.values[name] = value
        return value

    def lookup(self, name: str) -> RuntimeValue:
        return self.resolve(name).values[name]

    def resolve(self, name: str) -> 'Environment':
        env: Optional[Environment] = self
        while env is not None:
            if name in env.values:
                return env
            env = env.parent
        raise UnresolvedName(f'cannot resolve {name} because it does not exist')


def create_global_environment() -> Environment:
    """Root scope used by the REPL and CLI, with the boolean constants bound."""
    env = Environment()
    env.declare('true', TRUE, is_constant=True)
    env.declare('false', FALSE, is_constant=True)
    return env
