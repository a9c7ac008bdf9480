"""Port: listener notified when a route declares an extra dependency. Implementations subclass it."""
from __future__ import annotations

from abc import ABC, abstractmethod


class DependencyStrategy(ABC):
    @abstractmethod
    def on_dependency(self, dependency: str) -> None: ...
