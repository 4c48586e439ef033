"""
Database connection and management
"""
from typing import Optional
from contextlib import asynccontextmanager
import asyncpg
from asyncpg import Pool
from configs.database_config import database_config
from utils.logger import get_logger

logger = get_logger(__name__)

class DatabaseManager:
    """Database Manager"""

    def __init__(self):
        self.pool: Optional[Pool] = None
        self._initialized = False

    @property
    def messages_table(self) -> str:
        return database_config.messages_table

    async def initialize(self):
        """Initialize database connection pool"""
        if self._initialized:
            return

        try:
            logger.info("Initializing database connection pool", host=database_config.host, database=database_config.database)

            self.pool = await asyncpg.create_pool(
                host=database_config.host,
                port=database_config.port,
                database=database_config.database,
                user=database_config.username,
                password=database_config.password,
                min_size=database_config.min_connections,
                max_size=database_config.max_connections,
                command_timeout=database_config.connection_timeout
            )

            # Test connection
            async with self.pool.acquire() as conn:
                await conn.execute("SELECT 1")

            self._initialized = True
            logger.info("Database connection pool initialized successfully")

        except Exception as e:
            logger.error("Failed to initialize database connection pool", error=str(e))
            raise

    async def close(self):
        """Close database connection pool"""
        if self.pool:
            await self.pool.close()
            self.pool = None
            self._initialized = False
            logger.info("Database connection pool closed")

    @asynccontextmanager
    async def get_connection(self):
        """Get database connection context manager"""
        if not self._initialized:
            await self.initialize()

        async with self.pool.acquire() as connection:
            yield connection

    async def ping(self) -> bool:
        """Check that the database answers"""
        async with self.get_connection() as conn:
            return await conn.fetchval("SELECT 1") == 1

    async def _enable_uuid_extension(self):
        """Enable UUID extension"""
        async with self.get_connection() as conn:
            await conn.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp";')
            logger.debug("UUID extension enabled")

    async def _create_messages_table(self):
        """Create chat messages table"""
        create_messages_sql = f"""
        CREATE TABLE IF NOT EXISTS {self.messages_table} (
            id UUID PRIMARY KEY DEFAULT uuid_generate_v4(),
            conversation_id VARCHAR(255) NOT NULL,
            sender_id VARCHAR(255) NOT NULL,
            text TEXT NOT NULL,
            tags JSONB NOT NULL DEFAULT '[]',
            likes JSONB NOT NULL DEFAULT '[]',
            likes_count INTEGER NOT NULL DEFAULT 0,
            reactions JSONB NOT NULL DEFAULT '[]',
            resolved BOOLEAN NOT NULL DEFAULT FALSE,
            deleted BOOLEAN NOT NULL DEFAULT FALSE,
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW()
        );
        """

        async with self.get_connection() as conn:
            await conn.execute(create_messages_sql)
            logger.debug("Messages table created", table=self.messages_table)

    async def _create_indexes(self):
        """Create indexes"""
        table = self.messages_table
        indexes = [
            f"CREATE INDEX IF NOT EXISTS idx_{table}_conversation_id ON {table}(conversation_id);",
            f"CREATE INDEX IF NOT EXISTS idx_{table}_sender_id ON {table}(sender_id);",
        ]

        async with self.get_connection() as conn:
            for index_sql in indexes:
                await conn.execute(index_sql)
                logger.debug(f"Index created: {index_sql}")

    async def drop_tables(self):
        """Drop all tables (for testing or reset)"""
        async with self.get_connection() as conn:
            await conn.execute(f"DROP TABLE IF EXISTS {self.messages_table} CASCADE;")
            logger.info("Database tables dropped", table=self.messages_table)

    async def create_tables(self):
        """Create database tables"""
        try:
            logger.info("Creating database tables...")

            # 1. Enable UUID extension
            await self._enable_uuid_extension()

            # 2. Create tables
            await self._create_messages_table()

            # 3. Create indexes
            await self._create_indexes()

            logger.info("Database tables created successfully")

        except Exception as e:
            logger.error("Failed to create database tables", error=str(e))
            raise


db_manager = DatabaseManager()
