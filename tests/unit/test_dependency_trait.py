from __future__ import annotations

import pytest

from exchange_support.app.application.dependency_trait import DependencyTrait
from exchange_support.app.infrastructure.registry.in_memory_registry import InMemoryRegistry

from tests.conftest import FakeFormatter, RecordingDependencyStrategy, make_context


def test_trait_name():
    assert DependencyTrait().name == "dependency"


def test_parse_trait_is_deprecated():
    with pytest.warns(DeprecationWarning):
        DependencyTrait().parse_trait("route.yaml", "mvn:org.example:lib:1.0")


def test_configure_notifies_every_strategy_in_registry_order():
    calls: list[tuple[str, str]] = []
    registry = InMemoryRegistry(
        {
            "first": RecordingDependencyStrategy(calls, name="first"),
            "formatter": FakeFormatter(),
            "second": RecordingDependencyStrategy(calls, name="second"),
        }
    )
    context = make_context(registry=registry)
    with pytest.warns(DeprecationWarning):
        customizer = DependencyTrait().parse_trait("route.yaml", "mvn:org.example:lib:1.0")

    customizer.configure(context)

    assert calls == [
        ("first", "mvn:org.example:lib:1.0"),
        ("second", "mvn:org.example:lib:1.0"),
    ]


def test_configure_without_strategies_is_a_no_op(context):
    with pytest.warns(DeprecationWarning):
        customizer = DependencyTrait().parse_trait(None, "camel:kafka")

    assert customizer.configure(context) is None
    assert customizer.dependency == "camel:kafka"


class _UnregisteredListener:
    """Same method name as DependencyStrategy, but not a subclass."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def on_dependency(self, dependency: str) -> None:
        self.calls.append(dependency)


def test_configure_only_notifies_dependency_strategies():
    strategy = RecordingDependencyStrategy()
    outsider = _UnregisteredListener()
    registry = InMemoryRegistry(
        {"name": "camel", "count": 3, "outsider": outsider, "strategy": strategy}
    )
    with pytest.warns(DeprecationWarning):
        customizer = DependencyTrait().parse_trait("route.yaml", "camel:jms")

    customizer.configure(make_context(registry=registry))

    assert strategy.calls == [("strategy", "camel:jms")]
    assert outsider.calls == []
