"""Exchange model: the unit of work helpers inspect."""
from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, TypeVar

from exchange_support.app.constants import ExchangePropertyKey
from exchange_support.app.domain.context import ExchangeContext

T = TypeVar("T")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _now_millis() -> int:
    return int(time.time() * 1000)


def millis_to_datetime(millis: int) -> datetime:
    """UTC datetime for a count of milliseconds since the epoch. Raises OverflowError when out of range."""
    return EPOCH + timedelta(milliseconds=millis)


@dataclass
class Message:
    """Payload and headers carried by an exchange."""

    body: Any = None
    headers: dict[str, Any] = field(default_factory=dict)


@dataclass
class Exchange:
    """In-flight unit of work. Owned by the pipeline; helpers only read it."""

    context: ExchangeContext
    message: Message = field(default_factory=Message)
    properties: dict[str, Any] = field(default_factory=dict)
    exception: Exception | None = None
    created: int = field(default_factory=_now_millis)
    exchange_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def get_property(self, key: str, target_type: type[T] | None = None) -> Any:
        value = self.properties.get(key)
        if target_type is None:
            return value
        return self.context.type_converter.convert_to(target_type, value)

    def get_header(self, name: str, target_type: type[T] | None = None) -> Any:
        value = self.message.headers.get(name)
        if target_type is None:
            return value
        return self.context.type_converter.convert_to(target_type, value)

    def resolve_exception(self) -> Exception | None:
        """The exception field, else the caught-exception property converted to Exception."""
        if self.exception is not None:
            return self.exception
        return self.get_property(ExchangePropertyKey.EXCEPTION_CAUGHT, Exception)
