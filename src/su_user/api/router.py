"""State user endpoint.

POST /api/user  {"address": "0x..."}
  200 {"address", "image", "username"}
  400 {"error": "Missing address"}
  500 {"message": "..."}
"""

import logging

import redis.asyncio as aioredis
from fastapi import APIRouter, Body, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.su_common.database import get_db_session
from src.su_common.errors import AppError, InternalError, MissingAddressError
from src.su_common.redis_client import get_redis
from src.su_user.schemas import StateUser, StateUserRequest
from src.su_user.service import StateUserService

logger = logging.getLogger("su.user")

router = APIRouter(tags=["user"])
_service = StateUserService()


@router.post(
    "/user",
    status_code=status.HTTP_200_OK,
    response_model=StateUser,
    summary="Resolve an address to its public profile",
)
async def get_user(
    request: Request,
    body: StateUserRequest | None = Body(None),
    db: AsyncSession = Depends(get_db_session),
    redis: aioredis.Redis = Depends(get_redis),
) -> StateUser:
    if body is None or not body.address:
        raise MissingAddressError()

    try:
        return await _service.get_state_user(body.address, db, redis)
    except AppError:
        raise
    except Exception as exc:
        logger.exception(
            "state user lookup failed %s",
            getattr(request.state, "request_id", "req_unknown"),
        )
        raise InternalError(str(exc)) from exc
