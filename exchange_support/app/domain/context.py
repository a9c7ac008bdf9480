"""Context shared by every exchange: registry, type converter and global options."""
from __future__ import annotations

import re
from typing import Mapping

from exchange_support.app.domain.errors import PropertyPlaceholderError
from exchange_support.app.ports.registry import Registry
from exchange_support.app.ports.type_converter import TypeConverter

_PLACEHOLDER = re.compile(r"\{\{([^{}]+)\}\}")


class ExchangeContext:
    """Holds the collaborators helpers look up instead of reaching for globals."""

    def __init__(
        self,
        *,
        registry: Registry,
        type_converter: TypeConverter,
        global_options: Mapping[str, str] | None = None,
    ) -> None:
        self._registry = registry
        self._type_converter = type_converter
        self._global_options = dict(global_options) if global_options else {}

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def type_converter(self) -> TypeConverter:
        return self._type_converter

    @property
    def global_options(self) -> dict[str, str]:
        return dict(self._global_options)

    def get_global_option(self, key: str) -> str | None:
        return self._global_options.get(key)

    def resolve_placeholders(self, text: str) -> str:
        """Replace every {{key}} in text with the matching global option."""

        def _replace(match: re.Match[str]) -> str:
            key = match.group(1).strip()
            value = self._global_options.get(key)
            if value is None:
                raise PropertyPlaceholderError(f"global option not found for placeholder: {key}")
            return value

        return _PLACEHOLDER.sub(_replace, text)
