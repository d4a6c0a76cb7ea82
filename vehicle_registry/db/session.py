import logging
from typing import AsyncGenerator

import asyncpg
from asyncpg import Connection
from asyncpg.pool import Pool

from vehicle_registry.core.config import settings
from vehicle_registry.core.exceptions import StoreUnavailableException

logger = logging.getLogger(__name__)

db_pool: Pool | None = None


async def get_pool() -> Pool:
    global db_pool
    if db_pool is None:
        await connect_db_pool()
    return db_pool


async def connect_db_pool():
    global db_pool
    if db_pool is None:
        try:
            db_pool = await asyncpg.create_pool(
                dsn=settings.asyncpg_url,
                min_size=settings.DB_POOL_MIN_SIZE,
                max_size=settings.DB_POOL_MAX_SIZE,
                timeout=settings.DB_CONNECT_TIMEOUT,
                command_timeout=settings.DB_COMMAND_TIMEOUT,
            )
            logger.info("✅ AsyncPG connection pool created.")
        except Exception as e:
            logger.error(f"❌ Error connecting to database: {e}")
            raise


async def close_db_pool():
    global db_pool
    if db_pool:
        await db_pool.close()
        db_pool = None
        logger.info("AsyncPG connection pool closed.")


async def is_connected() -> bool:
    """Report store connectivity without opening a pool that does not exist yet."""
    if db_pool is None:
        return False
    try:
        async with db_pool.acquire() as connection:
            await connection.fetchval("SELECT 1;")
        return True
    except Exception as e:
        logger.warning(f"Database health probe failed: {e}")
        return False


async def get_db_connection() -> AsyncGenerator[Connection, None]:
    try:
        pool = await get_pool()
    except Exception as e:
        raise StoreUnavailableException(e)
    async with pool.acquire() as connection:
        yield connection
