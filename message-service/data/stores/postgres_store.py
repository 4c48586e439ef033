"""
PostgreSQL message store
"""
import asyncio
import json
import uuid
from typing import Any, Dict, List, Optional

import asyncpg

from data.database import DatabaseManager, db_manager
from data.stores.base import check_update_fields, touches_updated_at
from utils.exceptions import PersistenceError
from utils.logger import get_logger

logger = get_logger(__name__)

COLUMNS = (
    "id, conversation_id, sender_id, text, tags, likes, likes_count, "
    "reactions, resolved, deleted, created_at, updated_at"
)
JSONB_COLUMNS = frozenset({"tags", "likes", "reactions"})

# Driver level failures surfaced to callers as PersistenceError
STORE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)


class PostgresMessageStore:
    """Message store backed by one row per message in PostgreSQL"""

    def __init__(self, database: DatabaseManager = db_manager, table_name: Optional[str] = None):
        self.db = database
        self.table = table_name or database.messages_table

    def _parse_json_list(self, value: Any) -> List[Any]:
        """Parse a JSONB list column; NULL reads as an empty list"""
        if value is None:
            return []
        parsed = value
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
            except json.JSONDecodeError as e:
                logger.error("Failed to parse JSONB column", value=value, error=str(e))
                raise PersistenceError("Stored message is corrupt") from e
        if not isinstance(parsed, list):
            logger.error("JSONB column is not a list", value=value)
            raise PersistenceError("Stored message is corrupt")
        return parsed

    def _row_to_record(self, row) -> Dict[str, Any]:
        return {
            "id": str(row["id"]),  # Ensure UUID is converted to string
            "conversation_id": row["conversation_id"],
            "sender_id": row["sender_id"],
            "text": row["text"],
            "tags": self._parse_json_list(row["tags"]),
            "likes": self._parse_json_list(row["likes"]),
            "likes_count": row["likes_count"] or 0,
            "reactions": self._parse_json_list(row["reactions"]),
            "resolved": row["resolved"],
            "deleted": row["deleted"],
            "created_at": row["created_at"],
            "updated_at": row["updated_at"]
        }

    async def insert(self, record: Dict[str, Any]) -> str:
        """Insert a message row and return the generated id"""
        try:
            async with self.db.get_connection() as conn:
                message_id = await conn.fetchval(
                    f"""
                    INSERT INTO {self.table} (conversation_id, sender_id, text, tags, likes, likes_count,
                                              reactions, resolved, deleted, created_at, updated_at)
                    VALUES ($1, $2, $3, $4::jsonb, $5::jsonb, $6, $7::jsonb, $8, $9, $10, $11)
                    RETURNING id
                    """,
                    record["conversation_id"],
                    record["sender_id"],
                    record["text"],
                    json.dumps(record["tags"]),
                    json.dumps(record["likes"]),
                    record["likes_count"],
                    json.dumps(record["reactions"]),
                    record["resolved"],
                    record["deleted"],
                    record["created_at"],
                    record["updated_at"]
                )
        except STORE_ERRORS as e:
            logger.error("Failed to insert message", error=str(e), conversation_id=record["conversation_id"])
            raise PersistenceError("Failed to store message") from e

        logger.debug("Message row inserted", message_id=str(message_id))
        return str(message_id)

    async def find_by_id(self, message_id: str) -> Optional[Dict[str, Any]]:
        """Get a message row by ID, deleted or not"""
        try:
            async with self.db.get_connection() as conn:
                row = await conn.fetchrow(
                    f"SELECT {COLUMNS} FROM {self.table} WHERE id = $1",
                    uuid.UUID(message_id)
                )
        except STORE_ERRORS as e:
            logger.error("Failed to get message", message_id=message_id, error=str(e))
            raise PersistenceError("Failed to load message") from e

        return self._row_to_record(row) if row else None

    async def update_by_id(self, message_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Update the given columns in a single statement and return the new row"""
        check_update_fields(fields)

        params: List[Any] = [uuid.UUID(message_id)]
        assignments = []
        for name, value in fields.items():
            if name in JSONB_COLUMNS:
                params.append(json.dumps(value))
                assignments.append(f"{name} = ${len(params)}::jsonb")
            else:
                params.append(value)
                assignments.append(f"{name} = ${len(params)}")
        if touches_updated_at(fields):
            assignments.append("updated_at = NOW()")

        try:
            async with self.db.get_connection() as conn:
                row = await conn.fetchrow(
                    f"""
                    UPDATE {self.table}
                    SET {", ".join(assignments)}
                    WHERE id = $1
                    RETURNING {COLUMNS}
                    """,
                    *params
                )
        except STORE_ERRORS as e:
            logger.error("Failed to update message", message_id=message_id, error=str(e))
            raise PersistenceError("Failed to update message") from e

        if row is None:
            return None

        logger.debug("Message row updated", message_id=message_id, fields=sorted(fields))
        return self._row_to_record(row)

    async def ping(self) -> bool:
        try:
            return await self.db.ping()
        except STORE_ERRORS as e:
            logger.warning("Database ping failed", error=str(e))
            return False
