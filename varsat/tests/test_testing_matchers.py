from __future__ import annotations

import pytest

from varsat.constraints import ConstraintViolation
from varsat.errors import OK, Status, ValueNotFound, VariableNotFound, unsatisfied_constraint_error
from varsat.testing import (
    assert_that,
    has_invalid_constraints,
    has_no_invalid_constraints,
    is_unsatisfied_constraint,
    throws_value_not_found,
    throws_variable_not_found,
)


def _raise(exc: BaseException):
    def fn() -> None:
        raise exc

    return fn


# -----------------------------------------------------------------------------
# is_unsatisfied_constraint
# -----------------------------------------------------------------------------


def test_is_unsatisfied_constraint_matches_substring() -> None:
    assert_that(unsatisfied_constraint_error("reason"), is_unsatisfied_constraint("reason"))
    assert_that(unsatisfied_constraint_error("long long reason"), is_unsatisfied_constraint("reason"))


def test_is_unsatisfied_constraint_rejects_other_message() -> None:
    assert_that(unsatisfied_constraint_error("some reason"), ~is_unsatisfied_constraint("another reason"))


def test_is_unsatisfied_constraint_rejects_unclassified_failure() -> None:
    assert_that(Status.error("reason"), ~is_unsatisfied_constraint("reason"))
    assert_that(OK, ~is_unsatisfied_constraint(""))


def test_assert_that_explains_mismatch() -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_that(Status.error("reason"), is_unsatisfied_constraint("reason"))
    assert "not an UnsatisfiedConstraintError" in str(exc_info.value)
    assert "including the substring 'reason'" in str(exc_info.value)


def test_double_negation_is_identity() -> None:
    matcher = is_unsatisfied_constraint("reason")
    assert ~~matcher is matcher
    assert (~matcher).describe().startswith("is not")


# -----------------------------------------------------------------------------
# throws_variable_not_found / throws_value_not_found
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("exc_type", "make_matcher"),
    [
        (VariableNotFound, throws_variable_not_found),
        (ValueNotFound, throws_value_not_found),
    ],
)
def test_throws_matchers(exc_type, make_matcher) -> None:
    # Happy path
    assert_that(_raise(exc_type("X")), make_matcher("X"))

    # Wrong name
    assert_that(_raise(exc_type("X")), ~make_matcher("other"))
    assert_that(_raise(exc_type("X")), ~make_matcher(""))

    # Wrong exception
    assert_that(_raise(RuntimeError("words")), ~make_matcher("X"))
    assert_that(_raise(RuntimeError("X")), ~make_matcher("X"))

    # No exception
    assert_that(lambda: None, ~make_matcher("X"))


@pytest.mark.parametrize(
    ("exc_type", "make_matcher"),
    [
        (VariableNotFound, throws_variable_not_found),
        (ValueNotFound, throws_value_not_found),
    ],
)
def test_throws_matchers_only_see_first_exception(exc_type, make_matcher) -> None:
    def other_first() -> None:
        raise RuntimeError("words")
        raise exc_type("X")  # unreachable

    def target_first() -> None:
        raise exc_type("X")

    assert_that(other_first, ~make_matcher("X"))
    assert_that(target_first, make_matcher("X"))


def test_value_and_variable_matchers_do_not_cross_match() -> None:
    assert_that(_raise(ValueNotFound("X")), ~throws_variable_not_found("X"))
    assert_that(_raise(VariableNotFound("X")), ~throws_value_not_found("X"))


def test_throws_matcher_calls_function_once() -> None:
    calls: list[int] = []

    def fn() -> None:
        calls.append(1)
        raise ValueNotFound("X")

    assert_that(fn, throws_value_not_found("X"))
    assert calls == [1]


# -----------------------------------------------------------------------------
# check_values() matchers
# -----------------------------------------------------------------------------


def test_invalid_constraint_matchers() -> None:
    violations = [ConstraintViolation("B", "bad"), ConstraintViolation("C", "worse")]
    assert_that(violations, has_invalid_constraints(["B", "C"]))
    assert_that(violations, ~has_invalid_constraints(["B"]))
    assert_that(violations, ~has_no_invalid_constraints())
    assert_that([], has_no_invalid_constraints())


def test_invalid_constraint_matchers_reject_non_lists() -> None:
    assert_that(None, ~has_no_invalid_constraints())
    assert_that("B", ~has_invalid_constraints(["B"]))
    matched, why = has_no_invalid_constraints().explain(None)
    assert not matched
    assert "NoneType" in why
