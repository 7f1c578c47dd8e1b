from typing import Dict, Optional

from plox.errors import ErrorVal, LoxError
from plox.types import Atom


class Environment:
    """Maps variable names to runtime values.

    The interpreter keeps a single global environment. `parent` links are
    followed on lookup so nested scopes can be chained in later.
    """
    def __init__(self, parent: Optional['Environment'] = None):
        self.parent = parent
        self.values: Dict[str, Atom] = {}

    def __contains__(self, name: str) -> bool:
        if name in self.values:
            return True
        return self.parent is not None and name in self.parent

    def define(self, name: str, value: Atom):
        # redeclaring silently overwrites
        self.values[name] = value

    def lookup(self, name: str) -> Atom:
        if name in self.values:
            return self.values[name]
        if self.parent:
            return self.parent.lookup(name)
        raise LoxError(ErrorVal('UndefinedVariable', f"Undefined variable '{name}'."))
