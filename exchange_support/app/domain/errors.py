"""Domain errors raised by exchange helpers."""
from __future__ import annotations


class RuntimeExchangeError(RuntimeError):
    """Raised when a helper fails for a reason the caller cannot recover from (e.g. bad configuration)."""


class PropertyPlaceholderError(KeyError):
    """Raised when a {{placeholder}} names an unknown global option."""
