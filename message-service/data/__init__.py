"""
Data access layer package
"""

# Database management
from .database import db_manager

# Data models
from .models import Message, MessageState, Reaction

# Stores and repository
from .stores import MessageStore, InMemoryMessageStore, PostgresMessageStore
from .repositories import MessageData, CreateMessageInput

from configs.database_config import database_config
from utils.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "db_manager",
    "Message",
    "MessageState",
    "Reaction",
    "MessageStore",
    "InMemoryMessageStore",
    "PostgresMessageStore",
    "MessageData",
    "CreateMessageInput",
    "build_message_store",
    "initialize_data_layer",
    "cleanup_data_layer",
]

def build_message_store(backend: str = None) -> MessageStore:
    """Create the configured message store"""
    backend = backend or database_config.store_backend
    if backend == "memory":
        return InMemoryMessageStore()
    if backend == "postgres":
        return PostgresMessageStore(db_manager)
    raise ValueError(f"Unknown message store backend: {backend}")

async def initialize_data_layer(backend: str = None) -> MessageData:
    """Initialize data access layer and return the message repository"""
    backend = backend or database_config.store_backend
    logger.info("Initializing data layer", backend=backend)

    if backend == "postgres":
        # Connect and make sure the messages table exists
        await db_manager.initialize()
        await db_manager.create_tables()

    return MessageData(build_message_store(backend))

async def cleanup_data_layer():
    """Release data access layer resources"""
    await db_manager.close()
