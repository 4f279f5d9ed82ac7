"""Repository implementations."""

from collectionspine.repository.memory import MemoryRepository

__all__ = ["MemoryRepository"]
