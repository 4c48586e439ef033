"""
Data Model Package - Data Access Layer Models
"""
from .message import (
    Message,
    MessageState,
    Reaction,
    UserReference,
    ConversationReference
)

__all__ = [
    "Message",
    "MessageState",
    "Reaction",
    "UserReference",
    "ConversationReference"
]
