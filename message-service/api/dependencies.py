"""
Shared route dependencies
"""
from fastapi import Request

from data.repositories.message_data import MessageData

def get_message_data(request: Request) -> MessageData:
    """MessageData created by the application lifespan"""
    return request.app.state.message_data
