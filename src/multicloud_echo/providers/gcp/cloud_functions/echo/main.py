"""
Echo GCP Cloud Function.

HTTP-triggered adapter: decodes the request body as a JSON Event and
answers with plain text.

    empty body                -> 200 "Hello World!"
    body is not an Event      -> 400 "Bad Request" (logged)
    message == ""             -> 200 "Hello World!"
    code == 0                 -> 500 escaped failure message (logged)
    otherwise                 -> 200 HTML-escaped message

Source: src/multicloud_echo/providers/gcp/cloud_functions/echo/main.py
Editable: Yes - This is the runtime Cloud Function code
"""
import html
import logging
from http import HTTPStatus

import functions_framework

from multicloud_echo.core import Event, EventDecodeError, HandlerFailure, handle

logger = logging.getLogger(__name__)

GREETING = "Hello World!"
TEXT_HEADERS = {"Content-Type": "text/plain; charset=utf-8"}


@functions_framework.http
def main(request):
    """
    Echo the message of a JSON Event posted in the request body.

    Args:
        request: flask.Request provided by functions-framework

    Returns:
        tuple: (body, status, headers)
    """
    body = request.get_data()

    if not body.strip():
        return (GREETING, HTTPStatus.OK, TEXT_HEADERS)

    try:
        event = Event.from_json(body)
    except EventDecodeError as e:
        logger.warning(f"Event decode failed: {e}")
        return (HTTPStatus.BAD_REQUEST.phrase, HTTPStatus.BAD_REQUEST, TEXT_HEADERS)

    if event.message == "":
        return (GREETING, HTTPStatus.OK, TEXT_HEADERS)

    try:
        message = handle(event)
    except HandlerFailure as e:
        logger.error(str(e))
        return (html.escape(str(e)), HTTPStatus.INTERNAL_SERVER_ERROR, TEXT_HEADERS)

    return (html.escape(message), HTTPStatus.OK, TEXT_HEADERS)
