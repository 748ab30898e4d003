"""
Demo bootstrap
--------------

Wires the layers through the DI container and runs the two user
operations in order:

1. get_user("1") on an empty store -> logged as not found
2. create_user("1", "user1", "password1") and read it back

Run:
    python -m user_registry.demo
"""
import logging
from typing import Optional

from user_registry.api.v1.user_controller import UserController
from user_registry.core.config import Settings, get_settings
from user_registry.core.logging_config import configure_logging
from user_registry.di.container import DIContainer
from user_registry.domain.exceptions import UserNotFoundError
from user_registry.domain.models.user import User

logger = logging.getLogger(__name__)


def run(settings: Optional[Settings] = None) -> User:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    controller = DIContainer(settings).get(UserController)

    try:
        controller.get_user("1")
    except UserNotFoundError as e:
        logger.info(f"Lookup before insert failed as expected: {e}")

    controller.create_user("1", "user1", "password1")
    user = controller.get_user("1")
    logger.info(f"Lookup after insert returned {user!r}")
    return user


if __name__ == "__main__":
    run()
