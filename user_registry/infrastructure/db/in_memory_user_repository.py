"""
In-Memory User Repository
=========================

Concrete implementation of UserRepository over a record store.
"""
import logging
from typing import Union

from user_registry.domain.exceptions import RecordNotFoundError, UserNotFoundError
from user_registry.domain.models.user import User
from user_registry.domain.repositories.user_repository import UserRepository
from user_registry.infrastructure.db.in_memory_database import InMemoryDatabase
from user_registry.infrastructure.db.synchronized_database import SynchronizedDatabase

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """
    In-memory implementation of UserRepository.

    The store is injected by the caller; the repository never creates
    or looks up a shared instance on its own.
    """

    def __init__(self, database: Union[InMemoryDatabase[User], SynchronizedDatabase[User]]):
        """
        Initialize repository with a record store.

        Args:
            database: Store holding User records
        """
        self._database = database

    def get_by_id(self, user_id: str) -> User:
        """Get a user by ID, raising UserNotFoundError if absent."""
        try:
            return self._database.get_by_id(user_id)
        except RecordNotFoundError:
            logger.warning(f"User {user_id} not found")
            raise UserNotFoundError(user_id) from None

    def add(self, user: User) -> None:
        """Add a user without checking for an existing ID."""
        self._database.add(user)
        logger.debug(f"Stored user {user.id} ({self._database.count()} records)")
