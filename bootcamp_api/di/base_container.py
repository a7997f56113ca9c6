# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal service registry.

    Keys are usually classes (interfaces or use cases) but plain strings
    are used for infrastructure handles such as database collections.

    - Singletons are stored instances returned as-is.
    - Factories are called on every get() to build a fresh instance.
    """

    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}

    def register_singleton(self, key: Hashable, instance: Any) -> None:
        self._singletons[key] = instance

    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        self._factories[key] = factory

    def is_registered(self, key: Hashable) -> bool:
        return key in self._singletons or key in self._factories

    def get(self, key: Hashable) -> Any:
        """
        Resolve a registered dependency

        Raises:
            ValueError: If nothing is registered under `key`
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise ValueError(f"No registration found for {name}")
