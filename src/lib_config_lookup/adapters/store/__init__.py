"""Value store adapters."""

from .memory import InMemoryValueStore

__all__ = ["InMemoryValueStore"]
