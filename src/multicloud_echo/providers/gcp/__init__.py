"""
GCP Provider package.

Auto-registers GCPHttpTrigger with the TriggerRegistry under "gcp-http".
"""

from multicloud_echo.core.registry import TriggerRegistry
from .trigger import GCPHttpTrigger

TriggerRegistry.register(GCPHttpTrigger.name, GCPHttpTrigger)

__all__ = ["GCPHttpTrigger"]
