"""Registry factory: selects implementation from config. Only place that imports concrete registries."""
from __future__ import annotations

from exchange_support.app.config.settings import Settings
from exchange_support.app.infrastructure.registry.in_memory_registry import InMemoryRegistry
from exchange_support.app.ports.registry import Registry


def create_registry(settings: Settings) -> Registry:
    backend = settings.registry_backend.strip().lower()

    if backend in ("memory", "in-memory"):
        return InMemoryRegistry()

    raise ValueError(f"Unsupported registry backend: {backend}")
