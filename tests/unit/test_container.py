import pytest

from user_registry.api.v1.user_controller import UserController
from user_registry.application.services.user_application_service import UserApplicationService
from user_registry.core.config import Settings
from user_registry.di.base_container import BaseContainer
from user_registry.di.container import DIContainer
from user_registry.di.providers import USER_DATABASE_KEY
from user_registry.domain.repositories.user_repository import UserRepository
from user_registry.domain.services.user_service import UserService
from user_registry.infrastructure.db.in_memory_database import InMemoryDatabase
from user_registry.infrastructure.db.in_memory_user_repository import InMemoryUserRepository
from user_registry.infrastructure.db.synchronized_database import SynchronizedDatabase


def test_container_registers_all_layers(container):
    assert isinstance(container.get(UserRepository), InMemoryUserRepository)
    assert isinstance(container.get(UserService), UserService)
    assert isinstance(container.get(UserApplicationService), UserApplicationService)
    assert isinstance(container.get(UserController), UserController)


def test_container_shares_one_store(container):
    controller = container.get(UserController)
    controller.create_user("1", "user1", "password1")

    assert container.get(USER_DATABASE_KEY).count() == 1
    assert container.get(UserRepository).get_by_id("1").username == "user1"


def test_containers_are_isolated(settings):
    first = DIContainer(settings)
    second = DIContainer(settings)
    first.get(UserController).create_user("1", "user1", "password1")
    assert second.get(USER_DATABASE_KEY).count() == 0


def test_thread_safe_store_is_wrapped(container):
    assert isinstance(container.get(USER_DATABASE_KEY), SynchronizedDatabase)


def test_plain_store_when_thread_safety_disabled(monkeypatch):
    monkeypatch.setenv("STORE_THREAD_SAFE", "false")
    container = DIContainer(Settings())
    assert isinstance(container.get(USER_DATABASE_KEY), InMemoryDatabase)


def test_base_container_unknown_key_raises():
    container = BaseContainer()
    with pytest.raises(ValueError):
        container.get("missing")


def test_base_container_factory_builds_fresh_instances():
    container = BaseContainer()
    container.register_factory(list, lambda: [])
    assert container.get(list) is not container.get(list)


def test_container_membership(container):
    assert UserRepository in container
    assert USER_DATABASE_KEY in container
    assert "missing" not in container
