"""Unit tests for the state user resolver (mocked DB and Redis)."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.su_common.errors import CacheWriteError, StateUserNotFoundError
from src.su_user.schemas import StateUser
from src.su_user.service import StateUserService


def _store_returns(mock_db: AsyncMock, image: str | None, username: str | None) -> None:
    row = MagicMock()
    row.image = image
    row.username = username
    result = MagicMock()
    result.one_or_none.return_value = row
    mock_db.execute = AsyncMock(return_value=result)


def _store_empty(mock_db: AsyncMock) -> None:
    result = MagicMock()
    result.one_or_none.return_value = None
    mock_db.execute = AsyncMock(return_value=result)


def _compiled_sql(mock_db: AsyncMock) -> str:
    stmt = mock_db.execute.call_args.args[0]
    return str(stmt.compile(compile_kwargs={"literal_binds": True}))


@pytest.fixture
def service() -> StateUserService:
    return StateUserService()


class TestCacheHit:
    async def test_returns_cached_user_without_store(
        self, service: StateUserService, mock_db: AsyncMock, mock_redis: AsyncMock
    ) -> None:
        mock_redis.get = AsyncMock(
            return_value='{"address":"0xabc","image":"https://pfp","username":"bob"}'
        )

        user = await service.get_state_user("0xABC", mock_db, mock_redis)

        assert user == StateUser(address="0xabc", image="https://pfp", username="bob")
        mock_redis.get.assert_awaited_once_with("state_user_0xabc")
        mock_db.execute.assert_not_called()
        mock_redis.set.assert_not_called()


class TestCacheMiss:
    async def test_reads_store_and_populates_cache(
        self, service: StateUserService, mock_db: AsyncMock, mock_redis: AsyncMock
    ) -> None:
        _store_returns(mock_db, image=None, username="bob")

        user = await service.get_state_user("0xABC", mock_db, mock_redis)

        assert user == StateUser(address="0xabc", image=None, username="bob")
        mock_redis.set.assert_awaited_once_with(
            "state_user_0xabc", '{"address":"0xabc","image":null,"username":"bob"}'
        )

    async def test_store_query_uses_lowercased_address(
        self, service: StateUserService, mock_db: AsyncMock, mock_redis: AsyncMock
    ) -> None:
        _store_returns(mock_db, image="https://pfp", username="alice")

        await service.get_state_user("0xDeadBeef", mock_db, mock_redis)

        sql = _compiled_sql(mock_db)
        assert "'0xdeadbeef'" in sql
        assert "twitterPfpUrl" in sql
        assert "twitterUsername" in sql

    async def test_unknown_address_raises_not_found(
        self, service: StateUserService, mock_db: AsyncMock, mock_redis: AsyncMock
    ) -> None:
        _store_empty(mock_db)

        with pytest.raises(StateUserNotFoundError):
            await service.get_state_user("0xabc", mock_db, mock_redis)
        mock_redis.set.assert_not_called()

    async def test_unacknowledged_cache_write_raises(
        self, service: StateUserService, mock_db: AsyncMock, mock_redis: AsyncMock
    ) -> None:
        _store_returns(mock_db, image=None, username="bob")
        mock_redis.set = AsyncMock(return_value=None)

        with pytest.raises(CacheWriteError, match="Error updating cache"):
            await service.get_state_user("0xabc", mock_db, mock_redis)

    async def test_store_never_written(
        self, service: StateUserService, mock_db: AsyncMock, mock_redis: AsyncMock
    ) -> None:
        _store_returns(mock_db, image=None, username="bob")

        await service.get_state_user("0xabc", mock_db, mock_redis)

        mock_db.add.assert_not_called()
        mock_db.commit.assert_not_called()
        mock_db.flush.assert_not_called()
