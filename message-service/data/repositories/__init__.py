"""
Data Repository Layer - Unified Export
"""

from .message_data import MessageData, CreateMessageInput


__all__ = [
    "MessageData",
    "CreateMessageInput"
]
