import logging
from typing import TYPE_CHECKING

from ...domain.models.user import User
from ...infrastructure.db.in_memory_database import InMemoryDatabase
from ...infrastructure.db.synchronized_database import SynchronizedDatabase

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)

USER_DATABASE_KEY = "user_database"


class DatabaseProvider:
    """Centralized store provider - single source of truth for the record store"""

    @staticmethod
    def register(container: "BaseContainer", thread_safe: bool = True) -> None:
        """
        Create the user store once and register it in the container.
        Repositories receive this instance; nothing else constructs a store.
        """
        database = InMemoryDatabase[User]()
        if thread_safe:
            database = SynchronizedDatabase(database)

        container.register_singleton(USER_DATABASE_KEY, database)
        logger.debug(f"Registered {type(database).__name__} as '{USER_DATABASE_KEY}'")
