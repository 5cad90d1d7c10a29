"""
Echo Lambda Function.

Direct-invocation adapter: the Lambda runtime decodes the JSON payload,
this function turns it into an Event and runs the shared Handler.

- Success: returns the message (serialized by the runtime as a JSON string)
- code == 0: HandlerFailure propagates and the runtime reports it as an
  "Unhandled" function error whose errorMessage contains "Failed to handle"

Source: src/multicloud_echo/providers/aws/lambda_functions/echo/lambda_function.py
Editable: Yes - This is the runtime Lambda code
"""
import logging

from multicloud_echo.core import Event, handle

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def lambda_handler(event, context):
    """
    Echo the event's message or fail on request.

    Args:
        event: Decoded invocation payload ({"message": str, "code": int})
        context: Lambda context (unused)

    Returns:
        str: The message, unchanged

    Raises:
        EventDecodeError: If the payload is not a valid Event
        HandlerFailure: If the event's code is 0
    """
    evnt = Event.from_payload(event)
    logger.info(f"Handling event: {evnt!r}")
    return handle(evnt)
