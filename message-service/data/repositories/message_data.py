"""
Message Data Access Layer
"""
import uuid
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from configs.settings import settings
from data.models.message import Message
from data.stores.base import MessageStore
from utils.exceptions import NotFoundError
from utils.logger import get_logger
from utils.validators import (
    normalize_message_id,
    validate_message_text,
    validate_reference_id,
    validate_tags
)

logger = get_logger(__name__)

MessageId = Union[str, uuid.UUID]


@dataclass
class CreateMessageInput:
    """Caller supplied part of a new message"""
    conversation_id: Union[str, uuid.UUID]
    text: str


class MessageData:
    """Create, read, soft-delete and retag chat messages.

    Every message handed back is rebuilt from the stored record by
    Message.from_record, so the sender and conversation views are always
    present. Retrieval does not filter on the deleted flag.
    """

    def __init__(self, store: MessageStore):
        self.store = store

    async def create(
        self,
        message_input: CreateMessageInput,
        sender_id: Union[str, uuid.UUID],
        tags: Optional[Sequence[str]] = None
    ) -> Message:
        """Create new message"""
        conversation_id = validate_reference_id(message_input.conversation_id, "Conversation ID")
        sender_id = validate_reference_id(sender_id, "Sender ID")
        validate_message_text(message_input.text, settings.message_max_length)
        tags = validate_tags(tags)

        message = Message.new(
            conversation_id=conversation_id,
            sender_id=sender_id,
            text=message_input.text,
            tags=tags
        )
        message.id = await self.store.insert(message.to_record())

        logger.info("Message created", message_id=message.id, conversation_id=conversation_id, tags=len(tags))
        return message

    async def get_message(self, message_id: MessageId) -> Message:
        """Get message by ID, including soft-deleted ones"""
        message_id = normalize_message_id(message_id)
        record = await self.store.find_by_id(message_id)
        if record is None:
            logger.debug("Message not found", message_id=message_id)
            raise NotFoundError(f"Message {message_id} not found")
        return Message.from_record(record)

    async def delete(self, message_id: MessageId) -> Message:
        """Delete message (soft delete). Deleting twice is a no-op."""
        message_id = normalize_message_id(message_id)
        record = await self.store.update_by_id(message_id, {"deleted": True})
        if record is None:
            raise NotFoundError(f"Message {message_id} not found")

        logger.info("Message deleted", message_id=message_id)
        return Message.from_record(record)

    async def update_message(self, message_id: MessageId, tags: List[str]) -> Message:
        """Replace the message tags. An empty list clears them."""
        message_id = normalize_message_id(message_id)
        tags = validate_tags(tags)
        record = await self.store.update_by_id(message_id, {"tags": tags})
        if record is None:
            raise NotFoundError(f"Message {message_id} not found")

        logger.info("Message tags updated", message_id=message_id, tags=len(tags))
        return Message.from_record(record)
