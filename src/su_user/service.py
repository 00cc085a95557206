"""State user resolver: address -> public profile, cache first.

Reads the backing store only on a cache miss and never writes to it.
"""

import logging

import redis.asyncio as aioredis
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.su_common.errors import CacheWriteError, StateUserNotFoundError
from src.su_user.cache import StateUserCache
from src.su_user.db_models import UserModel
from src.su_user.schemas import StateUser

logger = logging.getLogger("su.user")


class StateUserService:
    """Stateless service — instantiate once, reuse across requests."""

    async def get_state_user(
        self,
        address: str,
        db: AsyncSession,
        redis: aioredis.Redis,
    ) -> StateUser:
        """Collect the StateUser for an address or raise.

        Raises StateUserNotFoundError when no record matches, and
        CacheWriteError when Redis does not acknowledge the write-back.
        """
        lower_address = address.lower()
        cache = StateUserCache(redis)

        cached = await cache.get(lower_address)
        if cached is not None:
            logger.debug("state user cache hit: %s", lower_address)
            return cached

        logger.debug("state user cache miss: %s", lower_address)
        result = await db.execute(
            select(
                UserModel.twitter_pfp_url.label("image"),
                UserModel.twitter_username.label("username"),
            ).where(UserModel.address == lower_address)
        )
        row = result.one_or_none()
        if row is None:
            raise StateUserNotFoundError(lower_address)

        user = StateUser(
            address=lower_address,
            image=row.image,
            username=row.username,
        )

        if not await cache.set(user):
            logger.warning("state user cache write not acknowledged: %s", lower_address)
            raise CacheWriteError()

        return user
