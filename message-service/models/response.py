"""
API Response Models
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Any
from datetime import datetime

class ReferenceResponse(BaseModel):
    """Reference view of a related entity"""
    id: str = Field(..., description="Referenced entity ID")

class ReactionResponse(BaseModel):
    """Reaction Response Model"""
    reaction: str = Field(..., description="Reaction name")
    reaction_unicode: str = Field(..., description="Reaction unicode")
    user_ids: List[str] = Field(default_factory=list, description="Users that reacted")

class MessageResponse(BaseModel):
    """Message Response Model"""
    id: str = Field(..., description="Message ID")
    conversation_id: str = Field(..., description="Conversation ID")
    sender_id: str = Field(..., description="Sender user ID")
    text: str = Field(..., description="Message text")
    tags: List[str] = Field(default_factory=list, description="Message tags")
    likes: List[str] = Field(default_factory=list, description="IDs of users that liked the message")
    likes_count: int = Field(0, description="Number of likes")
    reactions: List[ReactionResponse] = Field(default_factory=list, description="Reactions")
    resolved: bool = Field(False, description="Whether the message is resolved")
    deleted: bool = Field(False, description="Whether the message is soft-deleted")
    sender: ReferenceResponse = Field(..., description="Sender reference")
    conversation: ReferenceResponse = Field(..., description="Conversation reference")
    created_at: str = Field(..., description="Creation time")
    updated_at: str = Field(..., description="Update time")
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "0b6f5a2e-3f4c-4a8e-9d53-1c2b3a4d5e6f",
                "conversation_id": "5fe0cce8-61c8-4a54-8183-85af00000001",
                "sender_id": "5fe0cce8-61c8-4a54-8183-85af00000002",
                "text": "Hello world",
                "tags": [],
                "likes": [],
                "likes_count": 0,
                "reactions": [],
                "resolved": False,
                "deleted": False,
                "sender": {"id": "5fe0cce8-61c8-4a54-8183-85af00000002"},
                "conversation": {"id": "5fe0cce8-61c8-4a54-8183-85af00000001"},
                "created_at": "2024-01-15T10:30:00+00:00",
                "updated_at": "2024-01-15T10:30:00+00:00"
            }
        }
    }

class ErrorResponse(BaseModel):
    """Error Response Model"""
    success: bool = Field(False, description="Always false for errors")
    error: Dict[str, Any] = Field(..., description="Error message and type")
    timestamp: int = Field(..., description="Error time (ms)")

class HealthResponse(BaseModel):
    """Health Check Response Model"""
    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat(), description="Check time")
    details: Optional[Dict[str, Any]] = Field(None, description="Detailed information")
