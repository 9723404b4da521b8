from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from .predicates import AnalysisContext, evaluate_variable
from .schema import ConstraintViolation, ValidationStyle
from ..errors import VariableNotFound, ValueNotFound

if TYPE_CHECKING:
    from ..registry import VariableRegistry
    from ..values import ValueStore

logger = logging.getLogger(__name__)


def all_variables_satisfy_constraints(
    registry: VariableRegistry,
    store: ValueStore,
) -> str | None:
    """
    Check every declared variable's value against its constraints.

    Variables are visited in declaration order, and each variable's
    constraints in the order they were added. Values stored under names the
    registry does not declare are never looked at.

    Returns:
        None if everything is satisfied, otherwise the name of the first
        variable whose first failing constraint was found.

    Raises:
        ValueNotFound: if a declared variable has no value in `store`, or if
            a constraint needs another variable's value that is not stored.
            The analysis stops at the first such case.
    """
    values = store.view()

    for var in registry:
        if var.name not in values:
            raise ValueNotFound(var.name)

        logger.debug("checking %s against %d constraint(s)", var.name, len(var.constraints))
        ctx = AnalysisContext(variable_name=var.name, registry=registry, values=values)
        status = evaluate_variable(var, values[var.name], ctx)
        if not status.ok:
            logger.debug("'%s' does not satisfy constraints", var.name)
            return var.name

    return None


def check_values(
    registry: VariableRegistry,
    store: ValueStore,
    *,
    ignored_variables: Iterable[str] = (),
    style: ValidationStyle = ValidationStyle.ALL_VARIABLES,
) -> list[ConstraintViolation]:
    """
    Report every variable that fails validation.

    Unlike `all_variables_satisfy_constraints()`, this collects one violation
    per failing variable instead of stopping at the first one.

    Args:
        registry: Declared variables
        store: Known values
        ignored_variables: Names to skip entirely
        style: Which variables/values to look at (see ValidationStyle)

    Returns:
        Violations in declaration order (for ONLY_SET_VALUES: store order).

    Raises:
        VariableNotFound: ONLY_SET_VALUES only, for a stored value whose name
            is not declared.
        ValueNotFound: if a constraint needs a value that is not stored.
    """
    if style is ValidationStyle.NONE:
        return []

    ignored = set(ignored_variables)
    values = store.view()
    violations: list[ConstraintViolation] = []

    if style is ValidationStyle.ONLY_SET_VALUES:
        for name in store:
            if name in ignored:
                continue
            if name not in registry:
                raise VariableNotFound(name)
            violation = _check_one(registry, name, values)
            if violation is not None:
                violations.append(violation)
        return violations

    for var in registry:
        if var.name in ignored:
            continue
        if var.name not in values:
            if style is ValidationStyle.ONLY_SET_VARIABLES:
                continue
            violations.append(ConstraintViolation(variable=var.name, reason=f"Value for `{var.name}` not found"))
            continue
        violation = _check_one(registry, var.name, values)
        if violation is not None:
            violations.append(violation)

    if style is ValidationStyle.EVERYTHING:
        for name in store:
            if name in ignored or name in registry:
                continue
            violations.append(ConstraintViolation(variable=name, reason=f"Variable `{name}` not found"))

    return violations


def _check_one(registry: VariableRegistry, name: str, values) -> ConstraintViolation | None:
    var = registry.get(name)
    ctx = AnalysisContext(variable_name=name, registry=registry, values=values)
    status = evaluate_variable(var, values[name], ctx)
    if status.ok:
        return None
    return ConstraintViolation(variable=name, reason=status.message)
