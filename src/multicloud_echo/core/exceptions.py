"""
Custom exceptions for the multi-cloud echo function.

This module defines a hierarchy of exceptions used by the Handler, the
provider adapters and the invocation tooling to provide clear,
actionable error messages.

Exception Hierarchy:
    EchoError (base)
    ├── EventDecodeError - Payload is not a valid Event
    ├── HandlerFailure - Domain failure requested via code == 0
    ├── TriggerNotFoundError - Unknown hosting trigger requested
    ├── ConfigurationError - Invalid or missing configuration
    └── InvocationError - Calling a deployed function went wrong
        ├── InvocationOptionsError - Invalid invocation parameters
        ├── FunctionError - The function ran and reported an error
        └── TransportError - Network or SDK failure
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .event import Event


class EchoError(Exception):
    """
    Base exception for all echo-related errors.

    Attributes:
        message: Human-readable error description
        provider: Optional provider name where error occurred
    """

    def __init__(self, message: str, provider: Optional[str] = None):
        self.message = message
        self.provider = provider

        if provider:
            full_message = f"{message} [provider={provider}]"
        else:
            full_message = message

        super().__init__(full_message)


class EventDecodeError(EchoError, ValueError):
    """
    Raised when a payload cannot be decoded into an Event.

    This typically occurs when:
    - The body is not valid JSON
    - The JSON value is not an object (e.g. a list or a string)
    - A field has the wrong type (e.g. "code": "abc")

    Example:
        >>> Event.from_json("not json")
        EventDecodeError: Invalid JSON: Expecting value: line 1 column 1 (char 0)
    """


class HandlerFailure(EchoError):
    """
    Raised by the Handler when the caller requests a failure (code == 0).

    The message embeds the full representation of the offending event,
    prefixed with "Failed to handle ".

    Attributes:
        event: The Event that triggered the failure
    """

    def __init__(self, message: str, event: "Event"):
        self.event = event
        super().__init__(message)


class TriggerNotFoundError(EchoError):
    """
    Raised when an unknown hosting trigger name is requested.

    Example:
        >>> get_trigger("azure-http")
        TriggerNotFoundError: Trigger 'azure-http' not found. Available: ['aws-lambda', 'gcp-http']
    """

    def __init__(self, trigger_name: str, available_triggers: list[str]):
        self.trigger_name = trigger_name
        self.available_triggers = available_triggers
        message = (
            f"Trigger '{trigger_name}' not found. "
            f"Available: {available_triggers}"
        )
        super().__init__(message)


class ConfigurationError(EchoError):
    """
    Raised when configuration is invalid or missing required fields.
    """

    def __init__(self, message: str, config_file: Optional[str] = None):
        self.config_file = config_file
        if config_file:
            message = f"{message} (file: {config_file})"
        super().__init__(message)


class InvocationError(EchoError):
    """
    Base exception for errors raised while invoking a deployed function.

    Attributes:
        function_name: Name or URL of the function that was invoked
    """

    def __init__(
        self,
        message: str,
        function_name: Optional[str] = None,
        provider: Optional[str] = None
    ):
        self.function_name = function_name
        super().__init__(message, provider=provider)


class InvocationOptionsError(InvocationError):
    """
    Raised when invocation parameters are rejected before any call is made.
    """


class FunctionError(InvocationError):
    """
    Raised when a deployed function executed but reported an error.

    Attributes:
        status_code: Status code of the invoke call (200 for Lambda errors)
        function_error: Error category reported by the platform ("Unhandled")
        payload: Raw error payload returned by the function
    """

    def __init__(
        self,
        function_name: str,
        status_code: int,
        function_error: str,
        payload: bytes,
        provider: Optional[str] = None
    ):
        self.status_code = status_code
        self.function_error = function_error
        self.payload = payload
        message = (
            f"Function '{function_name}' failed ({function_error}, "
            f"status {status_code}): {payload.decode('utf-8', errors='replace')}"
        )
        super().__init__(message, function_name=function_name, provider=provider)


class TransportError(InvocationError):
    """
    Raised when the function could not be reached at all.

    Wraps the underlying SDK or HTTP client exception so callers decide
    how to react instead of the process aborting.

    Attributes:
        original_error: The underlying exception
    """

    def __init__(
        self,
        function_name: str,
        original_error: Exception,
        provider: Optional[str] = None
    ):
        self.original_error = original_error
        message = f"Failed to invoke '{function_name}': {original_error}"
        super().__init__(message, function_name=function_name, provider=provider)
