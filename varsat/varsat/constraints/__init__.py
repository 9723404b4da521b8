"""Constraint evaluation (constraints as objects, analysis as plain functions)."""

from .engine import all_variables_satisfy_constraints, check_values
from .predicates import (
    AnalysisContext,
    Between,
    CustomConstraint,
    Elements,
    Exactly,
    Length,
    OneOf,
)
from .schema import Constraint, ConstraintViolation, ValidationStyle, VariableDef

__all__ = [
    "all_variables_satisfy_constraints",
    "check_values",
    "AnalysisContext",
    "Between",
    "Constraint",
    "ConstraintViolation",
    "CustomConstraint",
    "Elements",
    "Exactly",
    "Length",
    "OneOf",
    "ValidationStyle",
    "VariableDef",
]
