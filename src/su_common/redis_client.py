"""Redis connection for the state_user_* profile cache.

One bounded pool per process, created on first use.
"""

import redis.asyncio as aioredis

from config.settings import settings

_client: aioredis.Redis | None = None


def _build_client() -> aioredis.Redis:
    pool = aioredis.ConnectionPool.from_url(
        settings.REDIS_URL,
        max_connections=settings.REDIS_MAX_CONNECTIONS,
        decode_responses=True,
    )
    return aioredis.Redis(connection_pool=pool)


async def get_redis() -> aioredis.Redis:
    """FastAPI dependency: the shared cache client."""
    global _client  # noqa: PLW0603
    if _client is None:
        _client = _build_client()
    return _client


async def ping_redis() -> None:
    """Fail fast at startup when the cache is unreachable."""
    client = await get_redis()
    await client.ping()


async def close_redis() -> None:
    global _client  # noqa: PLW0603
    if _client is not None:
        await _client.aclose()
        # An explicitly passed pool is not closed by the client
        await _client.connection_pool.disconnect()
        _client = None
