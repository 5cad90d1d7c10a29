"""
Protocol definitions for hosting triggers.

A hosting trigger is one way the shared Handler is exposed on a cloud:
direct invocation (AWS Lambda) or HTTP (Google Cloud Function). Each
trigger knows where its adapter source lives, how it is packaged, and
how a deployed copy of it is invoked.

Implementations are plain classes; @runtime_checkable allows isinstance
checks against this Protocol.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from .event import Event


@runtime_checkable
class HostingTrigger(Protocol):
    """
    Protocol defining the interface for a hosting trigger.

    Responsibilities:
        - Describe the adapter source file and entry point
        - Describe what the deployable package must contain
        - Invoke a deployed copy and return its textual result

    Example Implementation:
        class AWSLambdaTrigger:
            name = "aws-lambda"
            provider = "aws"
            entry_point = "lambda_function.lambda_handler"

            def invoke(self, target, event, **options):
                ...
    """

    name: str
    provider: str
    entry_point: str
    runtime: str
    archive_entry_name: str
    requirements: list[str]

    @property
    def source_file(self) -> Path:
        """Absolute path of the adapter source file."""
        ...

    def invoke(self, target: str, event: "Event", **options) -> str:
        """
        Invoke a deployed copy of this trigger.

        Args:
            target: Function name (direct invocation) or trigger URL (HTTP)
            event: The Event to send
            **options: Provider-specific options (region, timeout, ...)

        Returns:
            The function's textual result

        Raises:
            FunctionError: If the function reported an error
            TransportError: If the function could not be reached
        """
        ...
