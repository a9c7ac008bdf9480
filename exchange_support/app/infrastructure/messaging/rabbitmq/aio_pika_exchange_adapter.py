"""Adapter: build an Exchange from an aio_pika.IncomingMessage so helpers can inspect consumed messages."""
from __future__ import annotations

from datetime import datetime
from typing import Any

from aio_pika import IncomingMessage as AioPikaIncomingMessage

from exchange_support.app.domain.context import ExchangeContext
from exchange_support.app.domain.exchange import Exchange, Message


def _created_millis(timestamp: datetime | None) -> int | None:
    if timestamp is None:
        return None
    return int(timestamp.timestamp() * 1000)


def exchange_from_incoming_message(
    message: AioPikaIncomingMessage,
    context: ExchangeContext,
    *,
    properties: dict[str, Any] | None = None,
) -> Exchange:
    """Copy body and headers; message_id and timestamp become exchange id and creation time when present."""
    headers = dict(message.headers or {})
    exchange = Exchange(
        context=context,
        message=Message(body=message.body, headers=headers),
        properties=dict(properties) if properties else {},
    )
    if message.message_id:
        exchange.exchange_id = str(message.message_id)
    created = _created_millis(message.timestamp)
    if created is not None:
        exchange.created = created
    return exchange
