from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.in_memory_user_repository import InMemoryUserRepository
from .database_provider import USER_DATABASE_KEY

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the store from the database provider and creates repository instances.
        """
        database = container.get(USER_DATABASE_KEY)

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            InMemoryUserRepository(database)
        )
