"""In-memory Registry: name-keyed bindings with type-based lookup. Safe to share across threads."""
from __future__ import annotations

import threading
from typing import Any, TypeVar

T = TypeVar("T")


class InMemoryRegistry:
    """Registry implementation backed by an insertion-ordered dict."""

    def __init__(self, bindings: dict[str, Any] | None = None) -> None:
        self._bindings: dict[str, Any] = dict(bindings) if bindings else {}
        self._lock = threading.Lock()

    def bind(self, name: str, obj: Any) -> None:
        with self._lock:
            self._bindings[name] = obj

    def unbind(self, name: str) -> None:
        with self._lock:
            self._bindings.pop(name, None)

    def lookup_by_name(self, name: str) -> Any | None:
        with self._lock:
            return self._bindings.get(name)

    def find_by_type(self, type_: type[T]) -> list[T]:
        with self._lock:
            values = list(self._bindings.values())
        return [value for value in values if isinstance(value, type_)]

    def find_single_by_type(self, type_: type[T]) -> T | None:
        found = self.find_by_type(type_)
        if len(found) == 1:
            return found[0]
        return None
