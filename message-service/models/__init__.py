"""
API model package
"""
from .request import (
    CreateMessageRequest,
    UpdateTagsRequest
)

from .response import (
    ReferenceResponse,
    ReactionResponse,
    MessageResponse,
    ErrorResponse,
    HealthResponse
)

__all__ = [
    # Request models
    "CreateMessageRequest",
    "UpdateTagsRequest",

    # Response models
    "ReferenceResponse",
    "ReactionResponse",
    "MessageResponse",
    "ErrorResponse",
    "HealthResponse"
]
