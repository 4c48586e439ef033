"""
API Request Model
"""
from pydantic import BaseModel, Field
from typing import List, Optional

class CreateMessageRequest(BaseModel):
    """Create Message Request Model"""
    conversation_id: str = Field(
        ...,
        description="Conversation ID",
        max_length=255
    )
    sender_id: str = Field(
        ...,
        description="Sender user ID",
        max_length=255
    )
    text: str = Field(
        ...,
        description="Message text"
    )
    tags: Optional[List[str]] = Field(
        None,
        description="Message tags, kept in the given order"
    )
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "conversation_id": "5fe0cce8-61c8-4a54-8183-85af00000001",
                "sender_id": "5fe0cce8-61c8-4a54-8183-85af00000002",
                "text": "Hello world",
                "tags": ["firstTAG", "secondTAG"]
            }
        }
    }

class UpdateTagsRequest(BaseModel):
    """Replace Message Tags Request Model"""
    tags: List[str] = Field(
        ...,
        description="New tag list; replaces the current tags, an empty list clears them"
    )
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "tags": ["TAG3"]
            }
        }
    }
