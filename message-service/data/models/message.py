"""
Chat message data model
"""
from datetime import datetime
from enum import Enum
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field

from utils.time_utils import ensure_utc, now


class MessageState(Enum):
    """Soft-delete lifecycle. ACTIVE -> DELETED is the only transition."""
    ACTIVE = "active"
    DELETED = "deleted"


@dataclass(frozen=True)
class UserReference:
    """Read view of the message sender"""
    id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id}


@dataclass(frozen=True)
class ConversationReference:
    """Read view of the owning conversation"""
    id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id}


@dataclass
class Reaction:
    """Reaction record attached to a message"""

    reaction: str = ""
    reaction_unicode: str = ""
    user_ids: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reaction": self.reaction,
            "reaction_unicode": self.reaction_unicode,
            "user_ids": list(self.user_ids)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Reaction":
        return cls(
            reaction=data.get("reaction", ""),
            reaction_unicode=data.get("reaction_unicode", ""),
            user_ids=list(data.get("user_ids") or [])
        )


@dataclass
class Message:
    """Chat Message Model"""

    conversation_id: str
    sender_id: str
    text: str
    id: Optional[str] = None  # assigned by the store on insert
    tags: List[str] = field(default_factory=list)
    likes: List[str] = field(default_factory=list)
    likes_count: int = 0
    reactions: List[Reaction] = field(default_factory=list)
    resolved: bool = False
    state: MessageState = MessageState.ACTIVE
    created_at: datetime = field(default_factory=now)
    updated_at: datetime = field(default_factory=now)

    @classmethod
    def new(
        cls,
        conversation_id: str,
        sender_id: str,
        text: str,
        tags: Optional[List[str]] = None
    ) -> "Message":
        """Build a fresh, not yet stored message with every optional field at its default"""
        created_at = now()
        return cls(
            conversation_id=conversation_id,
            sender_id=sender_id,
            text=text,
            tags=list(tags) if tags else [],
            likes=[],
            likes_count=0,
            reactions=[],
            resolved=False,
            state=MessageState.ACTIVE,
            created_at=created_at,
            updated_at=created_at
        )

    @property
    def deleted(self) -> bool:
        return self.state is MessageState.DELETED

    @property
    def sender(self) -> UserReference:
        return UserReference(id=self.sender_id)

    @property
    def conversation(self) -> ConversationReference:
        return ConversationReference(id=self.conversation_id)

    def to_record(self) -> Dict[str, Any]:
        """Flat form handed to the store. Reference views are never persisted."""
        return {
            "conversation_id": self.conversation_id,
            "sender_id": self.sender_id,
            "text": self.text,
            "tags": list(self.tags),
            "likes": list(self.likes),
            "likes_count": self.likes_count,
            "reactions": [reaction.to_dict() for reaction in self.reactions],
            "resolved": self.resolved,
            "deleted": self.deleted,
            "created_at": self.created_at,
            "updated_at": self.updated_at
        }

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Message":
        """Create instance from a stored record"""
        return cls(
            id=str(record["id"]),
            conversation_id=str(record["conversation_id"]),
            sender_id=str(record["sender_id"]),
            text=record["text"],
            tags=list(record.get("tags") or []),
            likes=list(record.get("likes") or []),
            likes_count=record.get("likes_count") or 0,
            reactions=[Reaction.from_dict(item) for item in record.get("reactions") or []],
            resolved=bool(record.get("resolved", False)),
            state=MessageState.DELETED if record.get("deleted") else MessageState.ACTIVE,
            created_at=ensure_utc(record["created_at"]),
            updated_at=ensure_utc(record.get("updated_at") or record["created_at"])
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, including the sender and conversation views"""
        return {
            "id": self.id,
            "conversation_id": self.conversation_id,
            "sender_id": self.sender_id,
            "text": self.text,
            "tags": list(self.tags),
            "likes": list(self.likes),
            "likes_count": self.likes_count,
            "reactions": [reaction.to_dict() for reaction in self.reactions],
            "resolved": self.resolved,
            "deleted": self.deleted,
            "sender": self.sender.to_dict(),
            "conversation": self.conversation.to_dict(),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat()
        }
