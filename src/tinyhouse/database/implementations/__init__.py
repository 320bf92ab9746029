"""Document store implementations."""

from .memory import InMemoryCollection, create_memory_database

__all__ = ["InMemoryCollection", "create_memory_database"]
