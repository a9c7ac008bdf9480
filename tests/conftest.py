from __future__ import annotations

from typing import Any

import pytest

from exchange_support.app.domain.context import ExchangeContext
from exchange_support.app.domain.exchange import Exchange, Message
from exchange_support.app.infrastructure.conversion.default_type_converter import DefaultTypeConverter
from exchange_support.app.infrastructure.registry.in_memory_registry import InMemoryRegistry
from exchange_support.app.ports.dependency_strategy import DependencyStrategy
from exchange_support.app.ports.exchange_formatter import ExchangeFormatter


class FakeFormatter(ExchangeFormatter):
    """Implements ExchangeFormatter for tests."""

    def __init__(self, label: str = "fake") -> None:
        self.label = label

    def format(self, exchange: Exchange) -> str:
        return f"{self.label}:{exchange.exchange_id}"


class RecordingDependencyStrategy(DependencyStrategy):
    """Implements DependencyStrategy; records every dependency it is told about."""

    def __init__(self, calls: list[tuple[str, str]] | None = None, name: str = "strategy") -> None:
        self.name = name
        self.calls = calls if calls is not None else []

    def on_dependency(self, dependency: str) -> None:
        self.calls.append((self.name, dependency))


class NullTypeConverter:
    """Implements TypeConverter but refuses every conversion."""

    def convert_to(self, target_type: type, value: Any) -> Any:
        return None


def make_context(
    *,
    global_options: dict[str, str] | None = None,
    registry: InMemoryRegistry | None = None,
    type_converter: Any = None,
) -> ExchangeContext:
    return ExchangeContext(
        registry=registry if registry is not None else InMemoryRegistry(),
        type_converter=type_converter if type_converter is not None else DefaultTypeConverter(),
        global_options=global_options,
    )


@pytest.fixture()
def context() -> ExchangeContext:
    return make_context()


@pytest.fixture()
def exchange(context: ExchangeContext) -> Exchange:
    return Exchange(context=context, message=Message(body="hello"))
