"""
Error classification for variable analysis.

Two channels, chosen by expectedness:

- Returned `Status` values for data-level outcomes (a constraint was not
  satisfied). These are composable via `check_constraint()`.
- Raised `ContractViolation` exceptions for caller defects (asking about a
  variable that was never declared, or a value that was never stored).

A classified failure is a `Status` with a kind tag attached. The tag is
private: code that only cares whether something failed reads `status.ok` and
`status.message`; code that needs the kind uses the `is_*_error()` predicates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Closed set of classified failure kinds."""

    UNSATISFIED_CONSTRAINT = "unsatisfied_constraint"
    VALUE_NOT_FOUND = "value_not_found"
    VARIABLE_NOT_FOUND = "variable_not_found"
    TYPE_MISMATCH = "type_mismatch"


@dataclass(frozen=True)
class Status:
    """Outcome of a check: ok, or failed with a message."""

    message: str = ""
    failed: bool = False
    payload: dict[str, Any] = field(default_factory=dict, compare=False)
    _kind: ErrorKind | None = field(default=None, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        return not self.failed

    @classmethod
    def ok_status(cls) -> Status:
        return cls()

    @classmethod
    def error(cls, message: str) -> Status:
        """Generic (unclassified) failure."""
        return cls(message=message, failed=True)

    def __str__(self) -> str:
        if self.ok:
            return "OK"
        return f"FAILED: {self.message}"


OK = Status()


def make_classified_failure(
    kind: ErrorKind,
    message: str,
    payload: dict[str, Any] | None = None,
) -> Status:
    """Build a failed `Status` tagged with `kind`."""
    if not isinstance(kind, ErrorKind):
        raise TypeError(f"kind must be an ErrorKind, got {type(kind).__name__}")
    return Status(message=message, failed=True, payload=dict(payload or {}), _kind=kind)


def _kind_of(status: Status) -> ErrorKind | None:
    if status.ok:
        return None
    return status._kind


def is_classified(status: Status) -> bool:
    """True if `status` is a failure produced by this module's constructors."""
    return isinstance(_kind_of(status), ErrorKind)


def is_unsatisfied_constraint_error(status: Status) -> bool:
    return _kind_of(status) is ErrorKind.UNSATISFIED_CONSTRAINT


def is_value_not_found_error(status: Status) -> bool:
    return _kind_of(status) is ErrorKind.VALUE_NOT_FOUND


def is_variable_not_found_error(status: Status) -> bool:
    return _kind_of(status) is ErrorKind.VARIABLE_NOT_FOUND


def is_type_mismatch_error(status: Status) -> bool:
    return _kind_of(status) is ErrorKind.TYPE_MISMATCH


# -----------------------------------------------------------------------------
# Constructors
# -----------------------------------------------------------------------------


def unsatisfied_constraint_error(explanation: str) -> Status:
    """A constraint on some variable was not satisfied.

    `explanation` is kept verbatim as the message and is what users see when
    debugging a generation run.
    """
    return make_classified_failure(ErrorKind.UNSATISFIED_CONSTRAINT, explanation)


def check_constraint(constraint: Status | bool, explanation: str) -> Status:
    """
    Turn a lower-level check into an unsatisfied-constraint outcome.

    Args:
        constraint: Either a `Status` from a nested check or a plain bool
        explanation: Context to show when the check failed

    Returns:
        OK when the check passed. Otherwise an unsatisfied-constraint failure;
        for a nested `Status` the message is "explanation; nested message".
    """
    if isinstance(constraint, Status):
        if constraint.ok:
            return OK
        return unsatisfied_constraint_error(f"{explanation}; {constraint.message}")
    if constraint:
        return OK
    return unsatisfied_constraint_error(explanation)


def value_not_found_error(variable_name: str) -> Status:
    """The variable is declared, but no value is currently known for it."""
    return make_classified_failure(
        ErrorKind.VALUE_NOT_FOUND,
        f"Value for `{variable_name}` not found",
        {"variable": variable_name},
    )


def variable_not_found_error(variable_name: str) -> Status:
    return make_classified_failure(
        ErrorKind.VARIABLE_NOT_FOUND,
        f"Variable `{variable_name}` not found",
        {"variable": variable_name},
    )


def type_mismatch_error(variable_name: str, expected_type: str) -> Status:
    return make_classified_failure(
        ErrorKind.TYPE_MISMATCH,
        f"Value of `{variable_name}` is not a {expected_type}",
        {"variable": variable_name, "expected_type": expected_type},
    )


# -----------------------------------------------------------------------------
# Contract violations (raised, never returned)
# -----------------------------------------------------------------------------


class ContractViolation(LookupError):
    """Base class for errors that signal a caller defect, not a data outcome."""


class VariableNotFound(ContractViolation):
    """Raised when asking about a variable that was never declared."""

    def __init__(self, variable_name: str):
        super().__init__(f"Variable `{variable_name}` not found")
        self.variable_name = variable_name


class ValueNotFound(ContractViolation):
    """Raised when a value is expected for a variable but none is stored.

    Says nothing about whether the variable itself is declared.
    """

    def __init__(self, variable_name: str):
        super().__init__(f"Value for `{variable_name}` not found")
        self.variable_name = variable_name


class ValueTypeMismatch(ContractViolation):
    """Raised when a stored value is read back as an incompatible type."""

    def __init__(self, variable_name: str, type_name: str):
        super().__init__(f"Cannot convert the value of `{variable_name}` into {type_name}")
        self.variable_name = variable_name
        self.type_name = type_name
