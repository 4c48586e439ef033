"""
ID Generator Utils
"""
import uuid

def generate_message_id() -> str:
    """Generate message ID - using standard UUID format"""
    return str(uuid.uuid4())
