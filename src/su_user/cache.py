"""Cache-aside storage of StateUser profiles in Redis.

Key: f"state_user_{address}" with a lowercased address.
Value: compact JSON of StateUser. No TTL is set here.
"""

import redis.asyncio as aioredis

from src.su_user.schemas import StateUser

KEY_PREFIX = "state_user_"


def cache_key(address: str) -> str:
    return f"{KEY_PREFIX}{address}"


class StateUserCache:
    def __init__(self, redis: aioredis.Redis) -> None:
        self._redis = redis

    async def get(self, address: str) -> StateUser | None:
        raw = await self._redis.get(cache_key(address))
        if not raw:
            return None
        return StateUser.model_validate_json(raw)

    async def set(self, user: StateUser) -> bool:
        """Write the profile; returns True only when Redis acknowledged it."""
        ok = await self._redis.set(cache_key(user.address), user.model_dump_json())
        return bool(ok)
