"""
Assertion helpers for code built on varsat.

Matchers are small objects with `explain(actual) -> (matched, explanation)`.
Negate with `~matcher`; assert with `assert_that(actual, matcher)`.

    assert_that(status, is_unsatisfied_constraint("between"))
    assert_that(lambda: store.get("N"), throws_value_not_found("N"))
    assert_that(lambda: store.get("N"), ~throws_variable_not_found("N"))

The `throws_*` matchers call the function exactly once and only ever look at
the first exception it raises.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .constraints.schema import ConstraintViolation
from .errors import Status, ValueNotFound, VariableNotFound, is_unsatisfied_constraint_error


class Matcher:
    """Base class for matchers."""

    def explain(self, actual: Any) -> tuple[bool, str]:
        raise NotImplementedError

    def describe(self, negated: bool = False) -> str:
        raise NotImplementedError

    def matches(self, actual: Any) -> bool:
        return self.explain(actual)[0]

    def __invert__(self) -> Matcher:
        return _Not(self)

    def __repr__(self) -> str:
        return f"<{self.describe()}>"


class _Not(Matcher):
    def __init__(self, inner: Matcher):
        self.inner = inner

    def explain(self, actual: Any) -> tuple[bool, str]:
        matched, why = self.inner.explain(actual)
        return not matched, why

    def describe(self, negated: bool = False) -> str:
        return self.inner.describe(negated=not negated)

    def __invert__(self) -> Matcher:
        return self.inner


def assert_that(actual: Any, matcher: Matcher) -> None:
    matched, why = matcher.explain(actual)
    if not matched:
        raise AssertionError(f"Expected: {matcher.describe()}\n  Actual: {why}")


# -----------------------------------------------------------------------------
# Status matchers
# -----------------------------------------------------------------------------


class _IsUnsatisfiedConstraint(Matcher):
    def __init__(self, substring: str):
        self.substring = substring

    def explain(self, actual: Any) -> tuple[bool, str]:
        if not isinstance(actual, Status):
            return False, f"received {type(actual).__name__}, not a Status"
        if not is_unsatisfied_constraint_error(actual):
            return False, f"received status that is not an UnsatisfiedConstraintError: {actual}"
        why = f"received UnsatisfiedConstraintError with message: {actual.message}"
        return self.substring in actual.message, why

    def describe(self, negated: bool = False) -> str:
        return (
            f"{'is not' if negated else 'is'} an error saying that a value does not satisfy "
            f"the variable's constraints with an error message including the substring "
            f"'{self.substring}'"
        )


def is_unsatisfied_constraint(substring: str) -> Matcher:
    """Matches an unsatisfied-constraint Status whose message contains `substring`."""
    return _IsUnsatisfiedConstraint(substring)


# -----------------------------------------------------------------------------
# Exception matchers
# -----------------------------------------------------------------------------


class _Throws(Matcher):
    def __init__(self, exc_type: type[BaseException], variable_name: str):
        self.exc_type = exc_type
        self.variable_name = variable_name

    def explain(self, actual: Any) -> tuple[bool, str]:
        if not callable(actual):
            return False, f"received {type(actual).__name__}, not a callable"
        try:
            actual()
        except self.exc_type as e:
            name = getattr(e, "variable_name", None)
            if name != self.variable_name:
                return False, f"threw the expected exception, but the wrong variable name. `{name}`"
            return True, "threw the expected exception"
        except Exception as e:  # noqa: BLE001
            return False, f"threw {type(e).__name__}: {e}"
        return False, "did not throw"

    def describe(self, negated: bool = False) -> str:
        return (
            f"{'is not' if negated else 'is'} a function that throws a "
            f"{self.exc_type.__name__} exception with the variable name `{self.variable_name}`"
        )


def throws_variable_not_found(variable_name: str) -> Matcher:
    return _Throws(VariableNotFound, variable_name)


def throws_value_not_found(variable_name: str) -> Matcher:
    return _Throws(ValueNotFound, variable_name)


# -----------------------------------------------------------------------------
# check_values() result matchers
# -----------------------------------------------------------------------------


class _HasInvalidConstraints(Matcher):
    def __init__(self, names: list[str]):
        self.names = names

    def explain(self, actual: Any) -> tuple[bool, str]:
        if isinstance(actual, (str, bytes)) or not isinstance(actual, Iterable):
            return False, f"received {type(actual).__name__}, not a list of ConstraintViolations"
        violations = list(actual)
        if not all(isinstance(v, ConstraintViolation) for v in violations):
            return False, "received something other than ConstraintViolations"
        got = [v.variable for v in violations]
        if not got:
            return not self.names, "no invalid constraints"
        return got == self.names, "invalid variables: " + ", ".join(f"`{n}`" for n in got)

    def describe(self, negated: bool = False) -> str:
        verb = "does not have" if negated else "has"
        if not self.names:
            return f"{verb} no invalid constraints"
        return f"{verb} invalid constraints on exactly: " + ", ".join(f"`{n}`" for n in self.names)


def has_no_invalid_constraints() -> Matcher:
    return _HasInvalidConstraints([])


def has_invalid_constraints(names: Iterable[str]) -> Matcher:
    return _HasInvalidConstraints(list(names))
