from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from ..errors import Status

if TYPE_CHECKING:
    from .predicates import AnalysisContext


@runtime_checkable
class Constraint(Protocol):
    """
    A predicate over a candidate value.

    `check()` receives the value being validated plus a read-only context
    exposing every other known value, so a constraint may depend on other
    variables. Implementations must be pure: same inputs, same outcome.
    """

    def check(self, value: Any, ctx: AnalysisContext) -> Status:
        ...

    def describe(self) -> str:
        ...

    def dependencies(self) -> tuple[str, ...]:
        ...


@dataclass(frozen=True)
class VariableDef:
    name: str
    constraints: tuple[Constraint, ...] = field(default_factory=tuple)

    def with_constraint(self, constraint: Constraint) -> VariableDef:
        return VariableDef(name=self.name, constraints=(*self.constraints, constraint))

    def dependencies(self) -> tuple[str, ...]:
        """Other variables read by any of this variable's constraints, in first-seen order."""
        seen: dict[str, None] = {}
        for c in self.constraints:
            for dep in c.dependencies():
                if dep != self.name:
                    seen.setdefault(dep, None)
        return tuple(seen)


@dataclass(frozen=True)
class ConstraintViolation:
    """A variable that did not pass validation, with the reason shown to users."""

    variable: str
    reason: str

    def __str__(self) -> str:
        return f"[{self.variable}] {self.reason}"


class ValidationStyle(Enum):
    """Which variables/values `check_values()` looks at."""

    EVERYTHING = "everything"  # all variables, and no undeclared values
    ALL_VARIABLES = "all_variables"  # every declared variable needs a valid value
    ONLY_SET_VALUES = "only_set_values"  # every stored value; must be declared
    ONLY_SET_VARIABLES = "only_set_variables"  # declared variables that have a value
    NONE = "none"
