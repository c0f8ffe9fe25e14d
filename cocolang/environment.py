"""Scoped variable environments.

An :class:`Environment` maps names to values for one scope and points at the
enclosing scope it was created in. Lookups and assignments walk outwards from
the innermost scope and stop at the first scope that binds the name.
Declarations always bind in the scope they are made in, shadowing any outer
binding of the same name.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from cocolang.exceptions import UndefinedVariableError


class Environment:
    """A single scope in the environment chain."""

    def __init__(self, parent: "Environment | None" = None):
        self.vars = {}
        self.parent = parent

    def child(self) -> "Environment":
        """
        Create a new scope nested inside this one.
        """
        return Environment(self)

    def define(self, name: str, value) -> None:
        """
        Bind ``name`` in this scope, replacing any existing binding here.
        """
        self.vars[name] = value

    def resolve(self, name: str) -> "Environment | None":
        """
        Return the innermost scope that binds ``name``, or None.
        """
        env = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.parent
        return None

    def lookup(self, name: str, pos=None, file=None):
        """
        Return the value bound to ``name``.

        Raises:
            UndefinedVariableError: If no scope in the chain binds ``name``.
        """
        env = self.resolve(name)
        if env is None:
            raise UndefinedVariableError(name, *_location(pos), file)
        return env.vars[name]

    def assign(self, name: str, value, pos=None, file=None) -> None:
        """
        Replace the binding of ``name`` in the scope where it was declared.

        Raises:
            UndefinedVariableError: If no scope in the chain binds ``name``.
        """
        env = self.resolve(name)
        if env is None:
            raise UndefinedVariableError(name, *_location(pos), file)
        env.vars[name] = value

    def __contains__(self, name: str) -> bool:
        return self.resolve(name) is not None

    def __repr__(self) -> str:
        depth = 0
        env = self.parent
        while env is not None:
            depth += 1
            env = env.parent
        return f"Environment(depth={depth}, vars={sorted(self.vars)})"


def _location(pos) -> tuple:
    if pos is None:
        return (None, None)
    return (pos.line, pos.column)
