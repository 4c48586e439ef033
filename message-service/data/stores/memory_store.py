"""
In-memory message store

Keeps records in a dict. Used for local development and tests; data is lost
when the process exits.
"""
import copy
from typing import Any, Dict, Optional

from data.stores.base import check_update_fields, touches_updated_at
from utils.id_generator import generate_message_id
from utils.logger import get_logger
from utils.time_utils import now

logger = get_logger(__name__)


class InMemoryMessageStore:
    """Dict-backed implementation of the MessageStore contract."""

    def __init__(self):
        self._records: Dict[str, Dict[str, Any]] = {}

    def __len__(self) -> int:
        return len(self._records)

    async def insert(self, record: Dict[str, Any]) -> str:
        message_id = generate_message_id()
        stored = copy.deepcopy(record)
        stored["id"] = message_id
        self._records[message_id] = stored
        logger.debug("Record inserted", message_id=message_id)
        return message_id

    async def find_by_id(self, message_id: str) -> Optional[Dict[str, Any]]:
        record = self._records.get(message_id)
        return copy.deepcopy(record) if record is not None else None

    async def update_by_id(self, message_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        check_update_fields(fields)
        record = self._records.get(message_id)
        if record is None:
            return None
        # No await between read and write, so the update is atomic on the event loop
        record.update(copy.deepcopy(fields))
        if touches_updated_at(fields):
            record["updated_at"] = now()
        logger.debug("Record updated", message_id=message_id, fields=sorted(fields))
        return copy.deepcopy(record)

    async def ping(self) -> bool:
        return True
