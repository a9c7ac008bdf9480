"""Port: renders an exchange as human-readable text for logging and tracing.

Nominal base class: registry lookups by type only match real subclasses.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from exchange_support.app.domain.exchange import Exchange


class ExchangeFormatter(ABC):
    @abstractmethod
    def format(self, exchange: "Exchange") -> str: ...
