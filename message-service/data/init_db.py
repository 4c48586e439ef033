"""
Create the chat messages table

Usage: python -m data.init_db [--reset]
"""
import argparse
import asyncio
from configs.database_config import database_config
from data.database import db_manager
from utils.logger import get_logger

logger = get_logger(__name__)

async def init_database(reset: bool = False):
    """Initialize database"""
    try:
        logger.info("Starting database initialization", database=database_config.database, reset=reset)
        
        await db_manager.initialize()
        
        if reset:
            await db_manager.drop_tables()
        
        await db_manager.create_tables()
        
        logger.info("Database initialization completed successfully")
        
    except Exception as e:
        logger.error("Database initialization failed", error=str(e))
        raise
    finally:
        await db_manager.close()

def main():
    parser = argparse.ArgumentParser(description="Create the chat messages table")
    parser.add_argument("--reset", action="store_true", help="drop the table before creating it")
    args = parser.parse_args()
    asyncio.run(init_database(reset=args.reset))

if __name__ == "__main__":
    main()
