"""
Trigger registry for dynamic hosting trigger lookup.

Design Pattern: Registry Pattern
    - Triggers register themselves when their provider package is imported
    - Lookup is done by string name (e.g., "aws-lambda", "gcp-http")

How Registration Works:
    Each provider package (e.g., providers/aws/__init__.py) imports this
    registry and calls register() when the module loads:

        from multicloud_echo.core.registry import TriggerRegistry
        from .trigger import AWSLambdaTrigger
        TriggerRegistry.register("aws-lambda", AWSLambdaTrigger)

    Importing multicloud_echo.providers triggers all registrations.
"""

from typing import Dict, Type, TYPE_CHECKING

if TYPE_CHECKING:
    from .protocols import HostingTrigger

from .exceptions import TriggerNotFoundError


class TriggerRegistry:
    """
    Central registry for hosting trigger implementations.

    Class-level state: triggers register at import time, before any
    instances are created.
    """

    _triggers: Dict[str, Type['HostingTrigger']] = {}

    @classmethod
    def register(cls, name: str, trigger_class: Type['HostingTrigger']) -> None:
        """
        Register a trigger class under a name.

        Registering the same class twice is a no-op.

        Raises:
            ValueError: If name is already registered with a different class
        """
        if name in cls._triggers:
            existing_class = cls._triggers[name]
            if existing_class is not trigger_class:
                raise ValueError(
                    f"Trigger '{name}' is already registered with {existing_class.__name__}. "
                    f"Cannot re-register with {trigger_class.__name__}."
                )
            return

        cls._triggers[name] = trigger_class

    @classmethod
    def get(cls, name: str) -> 'HostingTrigger':
        """
        Get a new instance of the named trigger.

        Raises:
            TriggerNotFoundError: If no trigger is registered with that name.
        """
        if name not in cls._triggers:
            raise TriggerNotFoundError(name, cls.list_triggers())

        return cls._triggers[name]()

    @classmethod
    def list_triggers(cls) -> list[str]:
        """Registered trigger names, sorted alphabetically."""
        return sorted(cls._triggers.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._triggers

    @classmethod
    def clear(cls) -> None:
        """
        Clear all registered triggers.

        Used by tests to reset state between tests.
        """
        cls._triggers.clear()
