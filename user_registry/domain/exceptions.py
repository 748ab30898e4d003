"""
Domain Exceptions
=================

Typed failures raised by stores and repositories.
"""
from typing import Optional


class RecordNotFoundError(LookupError):
    """Raised when a lookup key has no matching record."""

    def __init__(self, record_id: str, message: Optional[str] = None) -> None:
        self.record_id = record_id
        super().__init__(message or f"Record '{record_id}' not found")


class UserNotFoundError(RecordNotFoundError):
    """Raised when no user exists for the requested ID."""

    def __init__(self, user_id: str) -> None:
        super().__init__(user_id, f"User '{user_id}' not found")

    @property
    def user_id(self) -> str:
        return self.record_id
