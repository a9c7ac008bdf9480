"""Port: value conversion used by typed exchange reads. Implementations live in infrastructure."""
from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class TypeConverter(Protocol):
    def convert_to(self, target_type: type[T], value: Any) -> T | None:
        """Convert value to target_type; return None when it cannot be converted. Never raises."""
        ...
