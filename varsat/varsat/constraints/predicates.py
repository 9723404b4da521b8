from __future__ import annotations

import logging
import numbers
from collections.abc import Iterable, Mapping
from collections.abc import Set as AbstractSet
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from ..errors import (
    OK,
    Status,
    ValueNotFound,
    check_constraint,
    type_mismatch_error,
)
from .schema import Constraint, VariableDef

if TYPE_CHECKING:
    from ..registry import VariableRegistry

logger = logging.getLogger(__name__)

_MAX_DEBUG_LEN = 50
_MAX_OPTIONS_SHOWN = 10


def debug_string(value: Any) -> str:
    """Short, backticked rendering of a value for explanations."""
    text = value if isinstance(value, str) else repr(value)
    text = " ".join(text.split())
    if len(text) > _MAX_DEBUG_LEN:
        text = text[: _MAX_DEBUG_LEN - 3] + "..."
    return f"`{text}`"


def _options_string(options: Iterable[Any]) -> str:
    items = list(options)
    shown = [debug_string(o) for o in items[:_MAX_OPTIONS_SHOWN]]
    if len(items) > _MAX_OPTIONS_SHOWN:
        shown.append(f"... ({len(items) - _MAX_OPTIONS_SHOWN} more)")
    return "{" + ", ".join(shown) + "}"


@dataclass(frozen=True)
class AnalysisContext:
    """
    Read-only view handed to constraints during evaluation.

    `values` is a mapping proxy; constraints can read any variable's value but
    cannot change the store.
    """

    variable_name: str
    registry: VariableRegistry
    values: Mapping[str, Any]

    def get_value(self, name: str) -> Any:
        """
        Current value of another variable.

        Raises:
            ValueNotFound: if no value is stored for `name`
        """
        if name not in self.values:
            raise ValueNotFound(name)
        return self.values[name]

    def get_value_if_known(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def get_variable(self, name: str) -> VariableDef:
        """Raises VariableNotFound if `name` was never declared."""
        return self.registry.get(name)


# -----------------------------------------------------------------------------
# Built-in constraints
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Exactly:
    """The value must equal `value`."""

    value: Any

    def check(self, value: Any, ctx: AnalysisContext) -> Status:
        return check_constraint(
            value == self.value,
            f"{debug_string(value)} is not exactly {debug_string(self.value)}",
        )

    def describe(self) -> str:
        return f"is exactly {debug_string(self.value)}"

    def dependencies(self) -> tuple[str, ...]:
        return ()


@dataclass(frozen=True)
class OneOf:
    """The value must be one of `options`."""

    options: tuple[Any, ...]

    def __init__(self, options: Iterable[Any]):
        object.__setattr__(self, "options", tuple(options))

    def check(self, value: Any, ctx: AnalysisContext) -> Status:
        return check_constraint(
            value in self.options,
            f"{debug_string(value)} is not one of {_options_string(self.options)}",
        )

    def describe(self) -> str:
        return f"is one of {_options_string(self.options)}"

    def dependencies(self) -> tuple[str, ...]:
        return ()


Bound = numbers.Real | str


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class Between:
    """
    Inclusive numeric range.

    A bound given as a string is the name of another variable; its current
    value is read from the context at check time.
    """

    minimum: Bound
    maximum: Bound

    def _resolve(self, bound: Bound, ctx: AnalysisContext) -> Any:
        if isinstance(bound, str):
            return ctx.get_value(bound)
        return bound

    def check(self, value: Any, ctx: AnalysisContext) -> Status:
        if not _is_number(value):
            return type_mismatch_error(ctx.variable_name, "number")

        lo = self._resolve(self.minimum, ctx)
        hi = self._resolve(self.maximum, ctx)
        for name, bound in ((self.minimum, lo), (self.maximum, hi)):
            if not _is_number(bound):
                return type_mismatch_error(str(name), "number")

        return check_constraint(
            lo <= value <= hi,
            f"{debug_string(value)} is not between {debug_string(lo)} and {debug_string(hi)}",
        )

    def describe(self) -> str:
        return f"is between {debug_string(self.minimum)} and {debug_string(self.maximum)}"

    def dependencies(self) -> tuple[str, ...]:
        return tuple(b for b in (self.minimum, self.maximum) if isinstance(b, str))


def _check_all(constraints: tuple[Constraint, ...], value: Any, ctx: AnalysisContext) -> Status:
    for c in constraints:
        status = c.check(value, ctx)
        if not status.ok:
            return status
    return OK


def _dependencies_of(constraints: tuple[Constraint, ...]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for c in constraints:
        for dep in c.dependencies():
            seen.setdefault(dep, None)
    return tuple(seen)


@dataclass(frozen=True)
class Length:
    """`len(value)` must satisfy every nested constraint."""

    constraints: tuple[Constraint, ...]

    def __init__(self, *constraints: Constraint):
        object.__setattr__(self, "constraints", tuple(constraints))

    def check(self, value: Any, ctx: AnalysisContext) -> Status:
        try:
            size = len(value)
        except TypeError:
            return type_mismatch_error(ctx.variable_name, "sized container")
        return check_constraint(
            _check_all(self.constraints, size, ctx),
            f"{debug_string(value)} has invalid length",
        )

    def describe(self) -> str:
        return "has length that " + " and ".join(c.describe() for c in self.constraints)

    def dependencies(self) -> tuple[str, ...]:
        return _dependencies_of(self.constraints)


@dataclass(frozen=True)
class Elements:
    """Every element of the value must satisfy every nested constraint."""

    constraints: tuple[Constraint, ...]

    def __init__(self, *constraints: Constraint):
        object.__setattr__(self, "constraints", tuple(constraints))

    def check(self, value: Any, ctx: AnalysisContext) -> Status:
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            return type_mismatch_error(ctx.variable_name, "container")
        # Sets have no stable element order.
        if isinstance(value, AbstractSet):
            return type_mismatch_error(ctx.variable_name, "ordered container")
        for idx, element in enumerate(value):
            status = check_constraint(
                _check_all(self.constraints, element, ctx),
                f"element {idx} is invalid",
            )
            if not status.ok:
                return status
        return OK

    def describe(self) -> str:
        return "each element " + " and ".join(c.describe() for c in self.constraints)

    def dependencies(self) -> tuple[str, ...]:
        return _dependencies_of(self.constraints)


@dataclass(frozen=True)
class CustomConstraint:
    """
    User-supplied predicate.

    Without dependencies the checker is called as `checker(value)`. With
    dependencies it is called as `checker(ctx, value)` and may read the
    listed variables through `ctx.get_value()`.

    The checker returns a bool, or a `Status` whose message is kept as the
    detail of the failure.
    """

    name: str
    checker: Callable[..., bool | Status]
    depends_on: tuple[str, ...] = field(default_factory=tuple)

    def check(self, value: Any, ctx: AnalysisContext) -> Status:
        if self.depends_on:
            satisfied = self.checker(ctx, value)
        else:
            satisfied = self.checker(value)
        explanation = f"{debug_string(value)} does not satisfy the custom constraint `{self.name}`"
        if isinstance(satisfied, Status):
            return check_constraint(satisfied, explanation)
        return check_constraint(bool(satisfied), explanation)

    def describe(self) -> str:
        return f"[CustomConstraint] {self.name}"

    def dependencies(self) -> tuple[str, ...]:
        return tuple(self.depends_on)


def evaluate_variable(var: VariableDef, value: Any, ctx: AnalysisContext) -> Status:
    """
    Run `var`'s constraints against `value`, stopping at the first failure.

    Exceptions raised by constraints (including ValueNotFound for other
    variables) are not caught.
    """
    for constraint in var.constraints:
        status = constraint.check(value, ctx)
        if not status.ok:
            logger.debug("%s: constraint %s failed: %s", var.name, constraint.describe(), status.message)
            return status
    return OK
