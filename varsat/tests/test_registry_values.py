from __future__ import annotations

import pytest

from varsat.constraints import Between, Exactly
from varsat.errors import ValueNotFound, ValueTypeMismatch, VariableNotFound
from varsat.registry import VariableRegistry
from varsat.values import ValueStore


def test_registry_iterates_in_declaration_order() -> None:
    registry = VariableRegistry()
    for name in ("N", "A", "Z", "B"):
        registry.declare(name)
    assert [v.name for v in registry] == ["N", "A", "Z", "B"]
    assert registry.names() == ["N", "A", "Z", "B"]
    assert len(registry) == 4


def test_registry_rejects_duplicates_and_empty_names() -> None:
    registry = VariableRegistry()
    registry.declare("N")
    with pytest.raises(ValueError):
        registry.declare("N")
    with pytest.raises(ValueError):
        registry.declare("  ")


def test_registry_get_unknown_raises_variable_not_found() -> None:
    with pytest.raises(VariableNotFound) as exc_info:
        VariableRegistry().get("N")
    assert exc_info.value.variable_name == "N"


def test_add_constraint_appends_in_order() -> None:
    registry = VariableRegistry()
    first = Exactly(1)
    second = Between(0, 2)
    registry.declare("N", first)
    registry.add_constraint("N", second)
    assert registry.get("N").constraints == (first, second)
    assert "N" in registry


def test_add_constraint_to_unknown_variable_raises() -> None:
    with pytest.raises(VariableNotFound):
        VariableRegistry().add_constraint("N", Exactly(1))


def test_variable_dependencies_skip_self_and_duplicates() -> None:
    registry = VariableRegistry()
    var = registry.declare("K", Between("N", "M"), Between(1, "N"), Between("K", 10))
    assert var.dependencies() == ("N", "M")


def test_store_set_get_and_overwrite() -> None:
    store = ValueStore()
    store.set("N", 1)
    store.set("N", 2)
    assert store.get("N") == 2
    assert "N" in store
    assert len(store) == 1


def test_store_get_missing_raises_value_not_found() -> None:
    with pytest.raises(ValueNotFound) as exc_info:
        ValueStore().get("N")
    assert exc_info.value.variable_name == "N"


def test_store_get_as_checks_type() -> None:
    store = ValueStore({"N": 5, "S": "abc"})
    assert store.get_as("N", int) == 5
    with pytest.raises(ValueTypeMismatch) as exc_info:
        store.get_as("S", int)
    assert exc_info.value.variable_name == "S"
    assert exc_info.value.type_name == "int"


def test_store_stores_none_as_a_real_value() -> None:
    store = ValueStore({"N": None})
    assert "N" in store
    assert store.get("N") is None


def test_store_erase_is_a_no_op_when_absent() -> None:
    store = ValueStore({"N": 1})
    store.erase("M")
    store.erase("N")
    assert "N" not in store
    assert store.get_if_known("N", "default") == "default"


def test_store_view_is_read_only_and_live() -> None:
    store = ValueStore({"N": 1})
    view = store.view()
    with pytest.raises(TypeError):
        view["N"] = 2  # type: ignore[index]
    store.set("M", 3)
    assert view["M"] == 3
