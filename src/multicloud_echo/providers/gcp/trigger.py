"""
HTTP hosting trigger (Google Cloud Function).
"""

from pathlib import Path
from typing import Optional

from multicloud_echo import constants as CONSTANTS
from multicloud_echo.core.event import Event
from multicloud_echo.core.exceptions import FunctionError
from .invoker import invoke_http_function


class GCPHttpTrigger:
    """
    The echo Handler deployed as an HTTP-triggered Cloud Function.

    Successful invocations answer 200 with the HTML-escaped message
    as text/plain.
    """

    name = "gcp-http"
    provider = "gcp"
    entry_point = "main"
    runtime = CONSTANTS.GCP_FUNCTION_RUNTIME
    archive_entry_name = CONSTANTS.GCP_FUNCTION_ENTRY_FILE
    requirements: list[str] = ["functions-framework==3.*"]

    @property
    def source_file(self) -> Path:
        return (
            CONSTANTS.GCP_CLOUD_FUNCTIONS_DIR
            / CONSTANTS.ECHO_FUNCTION_DIR_NAME
            / CONSTANTS.GCP_FUNCTION_ENTRY_FILE
        )

    def invoke(
        self,
        target: str,
        event: Event,
        timeout: int = CONSTANTS.DEFAULT_HTTP_TIMEOUT,
        id_token: Optional[str] = None,
        **options
    ) -> str:
        """
        POST the event to the trigger URL and return the response body.

        Raises:
            FunctionError: If the function answered with a non-2xx status
            TransportError: If the request could not be completed
        """
        result = invoke_http_function(target, event, timeout=timeout, id_token=id_token)
        if not result.ok:
            raise FunctionError(
                target,
                status_code=result.status_code,
                function_error=f"HTTP {result.status_code}",
                payload=result.body.encode("utf-8"),
                provider=self.provider
            )
        return result.body
