"""Framework registry for adapter management.

This module provides the ordered FrameworkRegistry and the built-in
default set every application starts from.
"""

import logging
from typing import (
    Any,
    Callable,
    Dict,
    ItemsView,
    Iterator,
    List,
    Optional,
    Tuple,
    Type,
    TYPE_CHECKING,
)

from ..exceptions import FrameworkAdapterError

if TYPE_CHECKING:
    from .base_adapter import BaseAdapter

logger = logging.getLogger(__name__)


class FrameworkRegistry:
    """Ordered registry of framework adapters.

    Maps framework names to adapter instances. Insertion order is the
    detection order: when several adapters recognize the same arguments,
    the earliest registered one wins.

    Example:
        registry = FrameworkRegistry()

        @registry.register("flask")
        class FlaskAdapter(BaseAdapter):
            ...

        registry.add("custom", CustomAdapter())
        match = registry.detect(request)
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._adapters: Dict[str, "BaseAdapter"] = {}

    def register(
        self, name: str
    ) -> Callable[[Type["BaseAdapter"]], Type["BaseAdapter"]]:
        """Decorator to instantiate and register a framework adapter class.

        Args:
            name: The framework name (e.g., "flask", "lambda").

        Returns:
            Decorator function that registers the adapter class.
        """

        def decorator(adapter_cls: Type["BaseAdapter"]) -> Type["BaseAdapter"]:
            self.add(name, adapter_cls())
            return adapter_cls

        return decorator

    def add(self, name: str, adapter: "BaseAdapter", replace: bool = False) -> None:
        """Register an adapter instance under a name.

        Args:
            name: The framework name.
            adapter: The adapter instance.
            replace: Allow overwriting an adapter already registered under
                this name. The replacement keeps the original position.

        Raises:
            ValueError: If the name is taken and replace is False.
        """
        if name in self._adapters and not replace:
            raise ValueError(
                f"Framework '{name}' is already registered. "
                f"Pass replace=True to override it."
            )
        self._adapters[name] = adapter
        logger.debug(f"Registered framework adapter: {name}")

    def remove(self, name: str) -> "BaseAdapter":
        """Unregister an adapter.

        Args:
            name: The framework name.

        Returns:
            The removed adapter.

        Raises:
            KeyError: If no adapter is registered for the given name.
        """
        adapter = self.get(name)
        del self._adapters[name]
        return adapter

    def get(self, name: str) -> "BaseAdapter":
        """Get a registered adapter by name.

        Args:
            name: The framework name.

        Returns:
            The adapter instance.

        Raises:
            KeyError: If no adapter is registered for the given name.
        """
        if name not in self._adapters:
            raise KeyError(
                f"No adapter registered for framework '{name}'. "
                f"Available frameworks: {self.list_frameworks()}"
            )
        return self._adapters[name]

    def list_frameworks(self) -> List[str]:
        """List all registered framework names in detection order.

        Returns:
            List of registered framework names.
        """
        return list(self._adapters.keys())

    def is_registered(self, name: str) -> bool:
        """Check if a framework is registered.

        Args:
            name: The framework name.

        Returns:
            True if registered, False otherwise.
        """
        return name in self._adapters

    def detect(self, *args: Any) -> Optional[Tuple[str, "BaseAdapter"]]:
        """Find the adapter for a set of raw call arguments.

        Iterates through registered adapters in insertion order and stops
        at the first one whose ``check`` accepts the arguments.

        Args:
            *args: The raw positional arguments given to the dispatcher.

        Returns:
            A (name, adapter) tuple if detected, None otherwise.

        Raises:
            FrameworkAdapterError: If an adapter's ``check`` raises.
        """
        for name, adapter in self._adapters.items():
            try:
                matched = adapter.check(*args)
            except Exception as e:
                logger.error(f"Adapter {name} raised while checking request: {e}")
                raise FrameworkAdapterError(
                    f"Framework adapter '{name}' raised in check()",
                    framework=name,
                    cause=e,
                ) from e
            if matched:
                logger.debug(f"Detected framework: {name}")
                return name, adapter
        return None

    def copy(self) -> "FrameworkRegistry":
        """Create an independent registry with the same adapters and order.

        Returns:
            A new FrameworkRegistry.
        """
        clone = FrameworkRegistry()
        clone._adapters = dict(self._adapters)
        return clone

    def clear(self) -> None:
        """Remove all registered adapters (mainly for testing)."""
        self._adapters.clear()

    def items(self) -> ItemsView[str, "BaseAdapter"]:
        return self._adapters.items()

    def __getitem__(self, name: str) -> "BaseAdapter":
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._adapters

    def __iter__(self) -> Iterator[str]:
        return iter(self._adapters)

    def __len__(self) -> int:
        return len(self._adapters)

    def __repr__(self) -> str:
        return f"FrameworkRegistry({self.list_frameworks()})"


# Built-in adapters register here on import of web_omnihandler.frameworks.
BUILTIN_FRAMEWORKS = FrameworkRegistry()
