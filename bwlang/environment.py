"""Environments.

An :class:`Environment` is one scope: a table of bindings plus a link to the
scope that encloses it. Scopes are shared by reference. A function value keeps
the scope it was declared in, so a closure returned from a block still sees
(and updates) the variables of that block after the block has finished.

A name bound to :data:`UNINITIALIZED` has been declared with ``var x;`` but
not given a value yet, which is distinct from being bound to ``nil``.

The chain of enclosing scopes is always finite and acyclic because a scope
can only be created as the child of one that already exists.


File: environment.py
Version: 0.1.0
License: MIT
"""

from typing import Any

from bwlang.exceptions import UndeclaredVariableError, UninitializedVariableError
from bwlang.source import FilePosition


class _Uninitialized:
    """Marker for a declared variable that has no value yet."""

    def __repr__(self) -> str:
        return "<uninitialized>"


UNINITIALIZED = _Uninitialized()


class Environment:
    """A single scope in the chain of lexical scopes."""

    def __init__(self, enclosing: "Environment | None" = None):
        """
        Create an empty scope.

        Args:
            enclosing: The parent scope, or None for the global scope.
        """
        self.values: dict[str, Any] = {}
        self.enclosing = enclosing

    def child(self) -> "Environment":
        """
        Return a new empty scope enclosed by this one.
        """
        return Environment(self)

    def declare(self, name: str, value: Any = UNINITIALIZED) -> None:
        """
        Bind ``name`` in this scope, replacing any binding it already has here.
        """
        self.values[name] = value

    def _find(self, name: str) -> "Environment | None":
        env = self
        while env is not None:
            if name in env.values:
                return env
            env = env.enclosing
        return None

    def lookup(self, name: str, position: FilePosition | None = None) -> Any:
        """
        Return the value bound to ``name`` in the nearest scope declaring it.

        Raises:
            UndeclaredVariableError: If no scope in the chain declares ``name``.
            UninitializedVariableError: If it is declared but has no value yet.
        """
        env = self._find(name)
        if env is None:
            raise UndeclaredVariableError(name, position)
        value = env.values[name]
        if value is UNINITIALIZED:
            raise UninitializedVariableError(name, position)
        return value

    def assign(self, name: str, value: Any, position: FilePosition | None = None) -> Any:
        """
        Rebind ``name`` in the nearest scope declaring it and return ``value``.
        Assignment never declares a new variable.

        Raises:
            UndeclaredVariableError: If no scope in the chain declares ``name``.
        """
        env = self._find(name)
        if env is None:
            raise UndeclaredVariableError(name, position)
        env.values[name] = value
        return value

    def __contains__(self, name: str) -> bool:
        return self._find(name) is not None

    def __repr__(self) -> str:
        depth = 0
        env = self.enclosing
        while env is not None:
            depth += 1
            env = env.enclosing
        return f"Environment({sorted(self.values)}, depth={depth})"
