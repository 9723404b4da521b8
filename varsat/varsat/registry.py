"""
Variable registry: name → declared variable.

Variables are kept in declaration order. That order decides which variable
is reported first when several fail, so it is part of the observable
behavior and must not be replaced by an unordered container.
"""

from __future__ import annotations

from typing import Iterator

from .constraints.schema import Constraint, VariableDef
from .errors import VariableNotFound


class VariableRegistry:
    """Ordered, name-unique catalog of declared variables."""

    def __init__(self) -> None:
        self._variables: dict[str, VariableDef] = {}

    def declare(self, name: str, *constraints: Constraint) -> VariableDef:
        """
        Declare a new variable.

        Args:
            name: Variable name (unique within this registry)
            constraints: Constraints, evaluated in the order given

        Raises:
            ValueError: if `name` is empty or already declared
        """
        if not isinstance(name, str) or not name.strip():
            raise ValueError("variable name must be a non-empty string")
        if name in self._variables:
            raise ValueError(f"variable `{name}` is already declared")
        var = VariableDef(name=name, constraints=tuple(constraints))
        self._variables[name] = var
        return var

    def add_constraint(self, name: str, constraint: Constraint) -> VariableDef:
        """Append a constraint to an already declared variable."""
        var = self.get(name).with_constraint(constraint)
        self._variables[name] = var
        return var

    def get(self, name: str) -> VariableDef:
        """
        Look up a variable by name.

        Raises:
            VariableNotFound: if `name` was never declared
        """
        var = self._variables.get(name)
        if var is None:
            raise VariableNotFound(name)
        return var

    def names(self) -> list[str]:
        return list(self._variables.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __iter__(self) -> Iterator[VariableDef]:
        return iter(list(self._variables.values()))

    def __len__(self) -> int:
        return len(self._variables)

    def __repr__(self) -> str:
        return f"VariableRegistry({', '.join(self._variables)})"
