"""
Core module for the echo function.

This package is shipped inside every function package, so everything in
it runs on the bare provider runtimes (standard library only).

Modules:
    - event: Event data model and JSON wire codec
    - handler: The shared echo-or-fail decision
    - exceptions: Exception hierarchy
"""

from .event import Event
from .handler import handle, FAILURE_PREFIX
from .exceptions import (
    EchoError,
    EventDecodeError,
    HandlerFailure,
    TriggerNotFoundError,
    ConfigurationError,
    InvocationError,
    InvocationOptionsError,
    FunctionError,
    TransportError,
)

__all__ = [
    "Event",
    "handle",
    "FAILURE_PREFIX",
    "EchoError",
    "EventDecodeError",
    "HandlerFailure",
    "TriggerNotFoundError",
    "ConfigurationError",
    "InvocationError",
    "InvocationOptionsError",
    "FunctionError",
    "TransportError",
]
