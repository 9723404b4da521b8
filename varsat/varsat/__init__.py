"""varsat - constraint satisfaction checks over declared variables and known values."""

__version__ = "0.1.0"

from .constraints import all_variables_satisfy_constraints, check_values
from .errors import (
    ContractViolation,
    ErrorKind,
    Status,
    ValueNotFound,
    ValueTypeMismatch,
    VariableNotFound,
    check_constraint,
    is_classified,
    is_unsatisfied_constraint_error,
    unsatisfied_constraint_error,
    value_not_found_error,
)
from .registry import VariableRegistry
from .values import ValueStore

__all__ = [
    "__version__",
    "all_variables_satisfy_constraints",
    "check_values",
    "ContractViolation",
    "ErrorKind",
    "Status",
    "ValueNotFound",
    "ValueTypeMismatch",
    "VariableNotFound",
    "check_constraint",
    "is_classified",
    "is_unsatisfied_constraint_error",
    "unsatisfied_constraint_error",
    "value_not_found_error",
    "VariableRegistry",
    "ValueStore",
]
