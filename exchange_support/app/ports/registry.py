"""Port: type-indexed registry of collaborators bound to a context."""
from __future__ import annotations

from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class Registry(Protocol):
    def bind(self, name: str, obj: Any) -> None: ...

    def lookup_by_name(self, name: str) -> Any | None: ...

    def find_single_by_type(self, type_: type[T]) -> T | None:
        """Return the only bound instance of type_, or None when there are zero or several."""
        ...

    def find_by_type(self, type_: type[T]) -> list[T]:
        """All bound instances of type_, in binding order."""
        ...
