"""
Validation tools
"""
import uuid
from typing import Any, List, Optional, Sequence, Union

from utils.exceptions import NotFoundError, ValidationError

# Width of the conversation_id and sender_id columns
REFERENCE_ID_MAX_LENGTH = 255

def validate_not_empty(value: Optional[str], field_name: str = "Field"):
    """Validate non-empty"""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} cannot be empty")

def validate_max_length(value: str, max_length: int, field_name: str = "Field"):
    """Validate maximum length"""
    if len(value) > max_length:
        raise ValidationError(f"{field_name} length cannot exceed {max_length} characters")

def validate_message_text(text: Optional[str], max_length: int):
    """Validate chat message body"""
    validate_not_empty(text, "Message text")
    validate_max_length(text, max_length, "Message text")

def validate_reference_id(value: Union[str, uuid.UUID, None], field_name: str) -> str:
    """Validate a conversation/user reference and return its string form, otherwise unchanged"""
    if isinstance(value, uuid.UUID):
        return str(value)
    validate_not_empty(value, field_name)
    validate_max_length(value, REFERENCE_ID_MAX_LENGTH, field_name)
    return value

def validate_tags(tags: Optional[Sequence[Any]]) -> List[str]:
    """Validate a tag list; None means no tags. Order and duplicates are kept."""
    if tags is None:
        return []
    if not isinstance(tags, (list, tuple)):
        raise ValidationError("Tags must be a list of strings")
    for tag in tags:
        if not isinstance(tag, str):
            raise ValidationError("Tags must be a list of strings")
    return list(tags)

def normalize_message_id(message_id: Union[str, uuid.UUID, None]) -> str:
    """Return the canonical string form of a message ID.

    A value that is not a UUID can never name a stored message, so it is
    reported as not found rather than as bad input.
    """
    if isinstance(message_id, uuid.UUID):
        return str(message_id)
    try:
        return str(uuid.UUID(str(message_id).strip()))
    except (TypeError, ValueError):
        raise NotFoundError(f"Message {message_id} not found")
