"""Pydantic request/response schemas for su_user."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class StateUserRequest(BaseModel):
    # Optional so that a missing field reaches the handler as a 400, not a 422
    address: str | None = None

    @field_validator("address", mode="before")
    @classmethod
    def non_string_is_missing(cls, v: Any) -> str | None:
        """Anything but a string counts as no address at all."""
        return v if isinstance(v, str) else None


class StateUser(BaseModel):
    """Public profile for an address.

    Field order is part of the cache format: it must serialize exactly like
    other writers of the state_user_* keys. Extra fields those writers store
    are kept and returned as-is.
    """

    model_config = ConfigDict(extra="allow")

    address: str
    image: str | None = None
    username: str | None = None
