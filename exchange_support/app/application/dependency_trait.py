"""Modeline `dependency` trait: announces a declared dependency to every registered DependencyStrategy.

Deprecated; kept so existing modelines keep working.
"""
from __future__ import annotations

import warnings
from typing import Any

from loguru import logger

from exchange_support.app.core import SERVICE_NAME
from exchange_support.app.domain.context import ExchangeContext
from exchange_support.app.ports.dependency_strategy import DependencyStrategy
from exchange_support.app.ports.trait import ContextCustomizer


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class DependencyCustomizer:
    """ContextCustomizer that fans one dependency string out to the context's listeners."""

    def __init__(self, resource: Any, dependency: str) -> None:
        self._resource = resource
        self._dependency = dependency

    @property
    def dependency(self) -> str:
        return self._dependency

    def configure(self, context: ExchangeContext) -> None:
        strategies = context.registry.find_by_type(DependencyStrategy)
        for strategy in strategies:
            strategy.on_dependency(self._dependency)
        _log(
            "dependency_notified",
            dependency=self._dependency,
            resource=str(self._resource),
            listeners=len(strategies),
        )


class DependencyTrait:
    """Trait implementation for `dependency=<value>` modeline entries."""

    @property
    def name(self) -> str:
        return "dependency"

    def parse_trait(self, resource: Any, trait: str) -> ContextCustomizer:
        warnings.warn(
            "the dependency modeline trait is deprecated",
            DeprecationWarning,
            stacklevel=2,
        )
        return DependencyCustomizer(resource, trait)
