"""
Message stores - persistence backends behind MessageData
"""
from .base import MessageStore, UPDATABLE_FIELDS
from .memory_store import InMemoryMessageStore
from .postgres_store import PostgresMessageStore

__all__ = [
    "MessageStore",
    "UPDATABLE_FIELDS",
    "InMemoryMessageStore",
    "PostgresMessageStore"
]
