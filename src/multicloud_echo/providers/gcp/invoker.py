"""
HTTP Cloud Function invocation client.

POSTs an Event to a Cloud Function trigger URL. Transport failures are
raised as TransportError so the caller decides what to do; HTTP error
statuses are data and come back in the result.

Usage:
    from multicloud_echo.providers.gcp.invoker import invoke_http_function

    result = invoke_http_function(trigger_url, Event("hi!", 123))
    result.status_code  # 200
    result.body         # "hi!"
"""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from multicloud_echo.constants import DEFAULT_HTTP_TIMEOUT, JSON_CONTENT_TYPE
from multicloud_echo.core.event import Event
from multicloud_echo.core.exceptions import TransportError

logger = logging.getLogger(__name__)

PROVIDER = "gcp"


@dataclass
class HttpInvocationResult:
    status_code: int
    body: str
    content_type: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def fetch_id_token(audience: str) -> str:
    """
    Fetch a Google ID token for an authenticated Cloud Function.

    Uses Application Default Credentials (GOOGLE_APPLICATION_CREDENTIALS).
    """
    from google.auth.transport.requests import Request
    from google.oauth2 import id_token

    return id_token.fetch_id_token(Request(), audience)


def invoke_http_function(
    trigger_url: str,
    event: Optional[Event] = None,
    timeout: int = DEFAULT_HTTP_TIMEOUT,
    id_token: Optional[str] = None
) -> HttpInvocationResult:
    """
    Invoke an HTTP-triggered function with an Event.

    Args:
        trigger_url: HTTPS trigger URL of the function
        event: Event to send as JSON body (None sends an empty body)
        timeout: Request timeout in seconds
        id_token: Optional bearer token for authenticated functions

    Returns:
        HttpInvocationResult with status code, body and content type

    Raises:
        ValueError: If trigger_url is empty
        TransportError: If the request could not be completed
    """
    if not trigger_url:
        raise ValueError("trigger_url is required")

    headers = {"Content-Type": JSON_CONTENT_TYPE}
    if id_token:
        headers["Authorization"] = f"Bearer {id_token}"

    data = event.to_json().encode("utf-8") if event is not None else b""

    logger.info(f"POST {trigger_url}")

    try:
        response = requests.post(trigger_url, data=data, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        raise TransportError(trigger_url, e, provider=PROVIDER) from e

    logger.debug(f"Response {response.status_code}: {response.text[:200]}")

    return HttpInvocationResult(
        status_code=response.status_code,
        body=response.text,
        content_type=response.headers.get("Content-Type", "")
    )
