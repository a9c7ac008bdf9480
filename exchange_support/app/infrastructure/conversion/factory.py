"""Type converter factory: selects implementation from config."""
from __future__ import annotations

from exchange_support.app.config.settings import Settings
from exchange_support.app.infrastructure.conversion.default_type_converter import DefaultTypeConverter
from exchange_support.app.ports.type_converter import TypeConverter


def create_type_converter(settings: Settings) -> TypeConverter:
    backend = settings.type_converter_backend.strip().lower()

    if backend == "default":
        return DefaultTypeConverter()

    raise ValueError(f"Unsupported type converter backend: {backend}")
