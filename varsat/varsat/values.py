"""Value store: the currently known value of each variable, by name."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping, TypeVar

from .errors import ValueNotFound, ValueTypeMismatch

T = TypeVar("T")

_MISSING = object()


class ValueStore:
    """
    Name → value mapping.

    Values are type-erased; reading one back with `get_as()` checks the type.
    The store may hold names no registry declares, and may lack names that
    one does.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def set(self, name: str, value: Any) -> None:
        """Store `value` for `name`, overwriting any previous value."""
        self._values[name] = value

    def get(self, name: str) -> Any:
        value = self._values.get(name, _MISSING)
        if value is _MISSING:
            raise ValueNotFound(name)
        return value

    def get_as(self, name: str, type_: type[T]) -> T:
        """
        Return the value for `name`, checked against `type_`.

        Raises:
            ValueNotFound: if no value is stored for `name`
            ValueTypeMismatch: if the stored value is not a `type_`
        """
        value = self.get(name)
        if not isinstance(value, type_):
            raise ValueTypeMismatch(name, type_.__name__)
        return value

    def get_if_known(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def erase(self, name: str) -> None:
        self._values.pop(name, None)

    def view(self) -> Mapping[str, Any]:
        """Read-only live view of the stored values."""
        return MappingProxyType(self._values)

    def names(self) -> list[str]:
        return list(self._values.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ValueStore({self._values!r})"
