"""
Entity Store

Keyed record storage with per-kind monotonic identifiers. Two backends share
the ``EntityStore`` contract:

- memory.py: transient dict-backed store (default)
- sql.py: SQLAlchemy-backed store for a durable database
"""

from .base import EntityKind, EntityStore, SequenceGenerator
from .memory import MemoryEntityStore

__all__ = [
    "EntityKind",
    "EntityStore",
    "SequenceGenerator",
    "MemoryEntityStore",
]
