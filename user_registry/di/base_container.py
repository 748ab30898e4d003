# Standard library imports
from typing import Any, Callable, Dict, Type, TypeVar, Union

ServiceType = TypeVar('ServiceType')
ServiceKey = Union[Type[Any], str]


class BaseContainer:
    """Base dependency injection container: singletons and factories by type or name"""

    def __init__(self) -> None:
        self.instances: Dict[ServiceKey, Any] = {}
        self.factories: Dict[Type[Any], Callable[[], Any]] = {}

    def register_singleton(self, key: Union[Type[ServiceType], str], instance: ServiceType) -> None:
        """Register one shared instance under a type or a string key"""
        self.instances[key] = instance

    def register_factory(self, key: Type[ServiceType], factory: Callable[[], ServiceType]) -> None:
        """Register a callable producing a new instance per lookup"""
        self.factories[key] = factory

    def __contains__(self, key: ServiceKey) -> bool:
        return key in self.instances or key in self.factories

    def get(self, key: Union[Type[ServiceType], str]) -> ServiceType:
        """Resolve a registered singleton, else build one from its factory"""
        if key in self.instances:
            return self.instances[key]
        if key in self.factories:
            return self.factories[key]()
        raise ValueError(f"No registration found for {key}")
