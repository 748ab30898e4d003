from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.services.user_service import UserService
from ...application.services.user_application_service import UserApplicationService
from ...api.v1.user_controller import UserController

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User provider - registers domain service, application service and controller"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register user services.
        Each layer is created with the layer below it from the container.
        """
        container.register_singleton(
            UserService,
            UserService(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_singleton(
            UserApplicationService,
            UserApplicationService(
                user_service=container.get(UserService)
            )
        )

        container.register_singleton(
            UserController,
            UserController(
                user_application_service=container.get(UserApplicationService)
            )
        )
