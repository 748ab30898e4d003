# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Record store (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on the store
    3. Services and controller (UserProvider) - depend on repositories
    """

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: store → repositories → services
        """
        # Step 1: Create the record store (foundation)
        DatabaseProvider.register(self, thread_safe=self.settings.store_thread_safe)

        # Step 2: Register repositories (depends on the store)
        RepositoryProvider.register(self)

        # Step 3: Register services and the in-process controller
        UserProvider.register(self)
