"""Storage collaborators for the services layer."""

from __future__ import annotations

from .repository import InMemoryRepository, Record, Repository

__all__ = ["InMemoryRepository", "Record", "Repository"]
