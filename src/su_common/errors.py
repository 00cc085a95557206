"""Application exceptions and their HTTP rendering.

Server-side failures render as {"message": ...}; client errors render as
{"error": ...}. See AppError.to_content().
"""

from typing import Any


class AppError(Exception):
    """Base application error."""

    body_key = "message"

    def __init__(
        self,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.message = message
        self.http_status = http_status
        super().__init__(message)

    def to_content(self) -> dict[str, Any]:
        return {self.body_key: self.message}


# --- 4xx: client ---

class MissingAddressError(AppError):
    """Any body without a non-empty string address, malformed bodies included."""

    body_key = "error"

    def __init__(self) -> None:
        super().__init__("Missing address", 400)


# --- 5xx: server ---

class StateUserNotFoundError(AppError):
    # Unknown addresses are surfaced as a server error, not 404
    def __init__(self, address: str) -> None:
        super().__init__(f"No user found for address {address}", 500)


class CacheWriteError(AppError):
    def __init__(self) -> None:
        super().__init__("Error updating cache", 500)


class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(detail or "Internal server error", 500)
