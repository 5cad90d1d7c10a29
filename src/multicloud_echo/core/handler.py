"""
The echo-or-fail Handler shared by every deployment target.
"""

from .event import Event
from .exceptions import HandlerFailure

FAILURE_PREFIX = "Failed to handle "


def handle(event: Event) -> str:
    """
    Echo the event's message, or fail if the event asks for it.

    Args:
        event: The decoded invocation payload

    Returns:
        event.message, unchanged

    Raises:
        HandlerFailure: If event.code == 0. The message is
            "Failed to handle " followed by repr(event).
    """
    if event.is_failure_request:
        raise HandlerFailure(f"{FAILURE_PREFIX}{event!r}", event=event)
    return event.message
