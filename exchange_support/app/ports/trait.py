"""Port: customizer applied to a context once it is configured."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from exchange_support.app.domain.context import ExchangeContext


class ContextCustomizer(Protocol):
    def configure(self, context: "ExchangeContext") -> None: ...
