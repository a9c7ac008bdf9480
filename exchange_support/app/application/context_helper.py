"""Helpers that read typed values out of an ExchangeContext."""
from __future__ import annotations

from exchange_support.app.domain.context import ExchangeContext


def parse_integer(context: ExchangeContext, text: str | None) -> int | None:
    """Parse text as an int after resolving {{placeholders}}; None passes through.

    Raises ValueError naming the offending text when it is not an integer.
    """
    if text is None:
        return None
    resolved = context.resolve_placeholders(text).strip()
    try:
        return int(resolved)
    except ValueError as exc:
        raise ValueError(f"Error parsing [{text}] as an integer") from exc
