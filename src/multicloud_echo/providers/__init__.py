"""
Provider implementations package.

Each provider package registers its hosting trigger with the
TriggerRegistry when imported:

    providers/
    ├── __init__.py         # This file - imports all providers
    ├── aws/                # Direct invocation (Lambda)
    └── gcp/                # HTTP trigger (Cloud Functions)

Usage:
    from multicloud_echo.providers import get_trigger

    trigger = get_trigger("gcp-http")
    trigger.invoke(trigger_url, Event("hi!", 123))
"""

from multicloud_echo.core.registry import TriggerRegistry

# Import provider modules to trigger auto-registration
from . import aws
from . import gcp


def get_trigger(name: str):
    """Return a new instance of the named hosting trigger."""
    return TriggerRegistry.get(name)


def list_triggers() -> list[str]:
    return TriggerRegistry.list_triggers()
