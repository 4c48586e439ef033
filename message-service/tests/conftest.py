"""
Pytest configuration and fixtures for message service tests.
"""
import os
import sys
import uuid
from pathlib import Path

# Add project root directory to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Settings are read at import time, so pick the in-memory store first
os.environ.setdefault("MESSAGE_STORE_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from data.repositories.message_data import MessageData
from data.stores.memory_store import InMemoryMessageStore


@pytest.fixture
def store() -> InMemoryMessageStore:
    return InMemoryMessageStore()


@pytest.fixture
def message_data(store) -> MessageData:
    return MessageData(store)


@pytest.fixture
def sender_id() -> str:
    return "5fe0cce8-61c8-4a54-8183-85af00000001"


@pytest.fixture
def conversation_id() -> str:
    return str(uuid.uuid4())


@pytest.fixture
def client():
    """Test client with the lifespan running against the in-memory store."""
    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
