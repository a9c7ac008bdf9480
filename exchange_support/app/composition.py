"""Composition root: build an ExchangeContext from settings.

Composition may: import concrete classes, call factories, store interface types.
"""
from __future__ import annotations

from typing import Any

from loguru import logger

from exchange_support.app.config.settings import Settings
from exchange_support.app.constants import Exchange
from exchange_support.app.core import SERVICE_NAME
from exchange_support.app.domain.context import ExchangeContext
from exchange_support.app.infrastructure.conversion.factory import create_type_converter
from exchange_support.app.infrastructure.registry.factory import create_registry


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def _global_options(settings: Settings) -> dict[str, str]:
    options = dict(settings.global_options)
    if settings.log_debug_body_max_chars is not None:
        options[Exchange.LOG_DEBUG_BODY_MAX_CHARS] = settings.log_debug_body_max_chars
    return options


def create_exchange_context(settings: Settings | None = None) -> ExchangeContext:
    settings = settings or Settings()
    context = ExchangeContext(
        registry=create_registry(settings),
        type_converter=create_type_converter(settings),
        global_options=_global_options(settings),
    )
    _log(
        "exchange_context_created",
        registry_backend=settings.registry_backend,
        type_converter_backend=settings.type_converter_backend,
        global_options=sorted(context.global_options),
    )
    return context
