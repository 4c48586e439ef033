"""
Message store contract

A store owns durable storage of message records. Records are flat dicts
(see Message.to_record); the store assigns the id on insert.
"""
from typing import Any, Dict, Optional, Protocol

# Fields a partial update may touch
UPDATABLE_FIELDS = frozenset({"tags", "likes", "likes_count", "reactions", "resolved", "deleted"})

# Fields whose update leaves updated_at alone; soft delete changes nothing but the flag
UNTIMESTAMPED_FIELDS = frozenset({"deleted"})


def check_update_fields(fields: Dict[str, Any]) -> None:
    unknown = set(fields) - UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Fields cannot be updated: {sorted(unknown)}")
    if not fields:
        raise ValueError("No fields to update")


def touches_updated_at(fields: Dict[str, Any]) -> bool:
    return not set(fields) <= UNTIMESTAMPED_FIELDS


class MessageStore(Protocol):
    """Persistence operations required by MessageData."""

    async def insert(self, record: Dict[str, Any]) -> str:
        ...

    async def find_by_id(self, message_id: str) -> Optional[Dict[str, Any]]:
        ...

    async def update_by_id(self, message_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        ...

    async def ping(self) -> bool:
        ...
