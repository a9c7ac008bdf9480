"""Default exchange formatter: renders id, headers, properties and body as one block of text.

Body text is clipped to max_chars (<= 0 disables clipping). Output layout is picked by
OutputStyle; multiline puts every entry on its own indented line.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from exchange_support.app.domain.exchange import Exchange
from exchange_support.app.ports.exchange_formatter import ExchangeFormatter

DEFAULT_MAX_CHARS = 10_000
FIXED_LABEL_WIDTH = 18


class OutputStyle(str, Enum):
    DEFAULT = "Default"
    TAB = "Tab"
    FIXED = "Fixed"


@dataclass
class DefaultExchangeFormatter(ExchangeFormatter):
    """ExchangeFormatter implementation with switchable sections."""

    show_exchange_id: bool = False
    show_headers: bool = False
    show_properties: bool = False
    show_body_type: bool = True
    show_body: bool = True
    show_exception: bool = False
    multiline: bool = False
    max_chars: int = DEFAULT_MAX_CHARS
    style: OutputStyle = OutputStyle.DEFAULT

    def format(self, exchange: Exchange) -> str:
        entries: list[tuple[str, str]] = []
        if self.show_exchange_id:
            entries.append(("Id", exchange.exchange_id))
        if self.show_headers:
            entries.append(("Headers", repr(dict(exchange.message.headers))))
        if self.show_properties:
            entries.append(("Properties", repr(dict(exchange.properties))))
        if self.show_body_type:
            entries.append(("BodyType", self._body_type(exchange.message.body)))
        if self.show_body:
            entries.append(("Body", self._body_text(exchange.message.body)))
        if self.show_exception:
            error = exchange.resolve_exception()
            if error is not None:
                entries.append(("Exception", f"{type(error).__name__}: {error}"))

        rendered = [self._entry(label, value) for label, value in entries]
        if self.multiline:
            lines = "\n".join(f"  {line}" for line in rendered)
            return f"Exchange[\n{lines}\n]"
        separator = "\t" if self.style == OutputStyle.TAB else ", "
        return f"Exchange[{separator.join(rendered)}]"

    def _entry(self, label: str, value: str) -> str:
        if self.style == OutputStyle.FIXED:
            return f"{label:<{FIXED_LABEL_WIDTH}}{value}"
        return f"{label}: {value}"

    @staticmethod
    def _body_type(body: Any) -> str:
        if body is None:
            return "null"
        return type(body).__name__

    def _body_text(self, body: Any) -> str:
        if body is None:
            return "[Body is null]"
        if isinstance(body, (bytes, bytearray)):
            text = bytes(body).decode("utf-8", errors="replace")
        else:
            text = str(body)
        if self.max_chars > 0 and len(text) > self.max_chars:
            return (
                f"{text[:self.max_chars]}... "
                f"[Body clipped after {self.max_chars} chars, total length is {len(text)}]"
            )
        return text
