"""
Direct-invocation hosting trigger (AWS Lambda).
"""

import json
from pathlib import Path
from typing import Optional

from multicloud_echo import constants as CONSTANTS
from multicloud_echo.core.event import Event
from .invoker import invoke_function


class AWSLambdaTrigger:
    """
    The echo Handler deployed as an AWS Lambda function.

    The Lambda runtime decodes the payload; a successful invocation
    returns the message as a JSON string.
    """

    name = "aws-lambda"
    provider = "aws"
    entry_point = "lambda_function.lambda_handler"
    runtime = CONSTANTS.AWS_LAMBDA_RUNTIME
    archive_entry_name = CONSTANTS.AWS_LAMBDA_ENTRY_FILE
    # boto3 and the standard library are all the Lambda runtime needs
    requirements: list[str] = []

    @property
    def source_file(self) -> Path:
        return (
            CONSTANTS.AWS_LAMBDA_FUNCTIONS_DIR
            / CONSTANTS.ECHO_FUNCTION_DIR_NAME
            / CONSTANTS.AWS_LAMBDA_ENTRY_FILE
        )

    def invoke(
        self,
        target: str,
        event: Event,
        region: Optional[str] = None,
        client=None,
        **options
    ) -> str:
        """
        Invoke the deployed function by name and decode its JSON string result.

        Raises:
            ValueError: If region is missing
            FunctionError: If the function reported an error
            TransportError: If the Invoke API call failed
        """
        if not region:
            raise ValueError("region is required to invoke an AWS Lambda function")

        payload = invoke_function(region, target, event, client=client)
        result = json.loads(payload) if payload else ""
        return result if isinstance(result, str) else json.dumps(result)
