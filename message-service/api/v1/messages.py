"""
Chat message API routes
"""
from fastapi import APIRouter, Depends

from api.dependencies import get_message_data
from data.models.message import Message
from data.repositories.message_data import CreateMessageInput, MessageData
from models.request import CreateMessageRequest, UpdateTagsRequest
from models.response import MessageResponse
from utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter()

def _to_response(message: Message) -> MessageResponse:
    return MessageResponse(**message.to_dict())

@router.post("/messages", response_model=MessageResponse, status_code=201)
async def create_message(
    request: CreateMessageRequest,
    message_data: MessageData = Depends(get_message_data)
) -> MessageResponse:
    """Create a chat message"""
    logger.info("Creating message", conversation_id=request.conversation_id, sender_id=request.sender_id)
    
    message = await message_data.create(
        CreateMessageInput(conversation_id=request.conversation_id, text=request.text),
        request.sender_id,
        request.tags
    )
    return _to_response(message)

@router.get("/messages/{message_id}", response_model=MessageResponse)
async def get_message(
    message_id: str,
    message_data: MessageData = Depends(get_message_data)
) -> MessageResponse:
    """Get a message by ID, including soft-deleted ones"""
    message = await message_data.get_message(message_id)
    return _to_response(message)

@router.delete("/messages/{message_id}", response_model=MessageResponse)
async def delete_message(
    message_id: str,
    message_data: MessageData = Depends(get_message_data)
) -> MessageResponse:
    """Soft-delete a message"""
    logger.info("Deleting message", message_id=message_id)
    
    message = await message_data.delete(message_id)
    return _to_response(message)

@router.put("/messages/{message_id}/tags", response_model=MessageResponse)
async def update_message_tags(
    message_id: str,
    request: UpdateTagsRequest,
    message_data: MessageData = Depends(get_message_data)
) -> MessageResponse:
    """Replace the tags of a message"""
    logger.info("Updating message tags", message_id=message_id, tags=request.tags)
    
    message = await message_data.update_message(message_id, request.tags)
    return _to_response(message)
