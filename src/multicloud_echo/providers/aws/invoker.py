"""
AWS Lambda invocation client.

Invokes a deployed Lambda function with an Event payload and turns the
Lambda Invoke API response into either the raw result payload or a
FunctionError carrying the error payload.

Usage:
    from multicloud_echo.providers.aws.invoker import invoke_function

    payload = invoke_function("eu-central-1", "my-echo", Event("hi!", 123))
    # b'"hi!"'
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from multicloud_echo.constants import (
    ALLOWED_INVOCATION_TYPES,
    INVOCATION_TYPE_REQUEST_RESPONSE,
)
from multicloud_echo.core.event import Event
from multicloud_echo.core.exceptions import (
    FunctionError,
    InvocationOptionsError,
    TransportError,
)

logger = logging.getLogger(__name__)

PROVIDER = "aws"


@dataclass
class LambdaOptions:
    """
    Parameters for invoke_function_with_params.

    Attributes:
        invocation_type: None (RequestResponse), "RequestResponse" or "DryRun"
        payload: Event or any JSON-serializable value
    """

    invocation_type: Optional[str] = None
    payload: Any = None


@dataclass
class LambdaOutput:
    """
    Result of a Lambda invocation.

    Attributes:
        status_code: HTTP status of the invoke call (200, or 204 for DryRun)
        payload: Raw response payload (None for DryRun)
    """

    status_code: int
    payload: Optional[bytes] = None


def create_lambda_client(region: str):
    """Create a boto3 Lambda client for the given region."""
    return boto3.client("lambda", region_name=region)


def _encode_payload(payload: Any) -> Optional[bytes]:
    if payload is None:
        return None
    if isinstance(payload, Event):
        return payload.to_json().encode("utf-8")
    return json.dumps(payload).encode("utf-8")


def _validate_options(options: LambdaOptions) -> str:
    """
    Return the effective invocation type, rejecting unsupported ones.

    Raises:
        InvocationOptionsError: If invocation_type is not allowed
    """
    if options.invocation_type is None:
        return INVOCATION_TYPE_REQUEST_RESPONSE
    if options.invocation_type not in ALLOWED_INVOCATION_TYPES:
        raise InvocationOptionsError(
            'LambdaOptions.InvocationType, if specified, must either be '
            '"RequestResponse" or "DryRun"',
            provider=PROVIDER
        )
    return options.invocation_type


def invoke_function_with_params(
    region: str,
    function_name: str,
    options: LambdaOptions,
    client=None
) -> LambdaOutput:
    """
    Invoke a Lambda function with explicit invocation parameters.

    Args:
        region: AWS region of the function
        function_name: Name of the deployed function
        options: Invocation type and payload
        client: Optional pre-built boto3 Lambda client

    Returns:
        LambdaOutput with the status code and raw payload

    Raises:
        InvocationOptionsError: If the invocation type is not supported
        FunctionError: If the function ran and reported an error
        TransportError: If the Invoke API call failed
    """
    invocation_type = _validate_options(options)

    if client is None:
        client = create_lambda_client(region)

    request = {
        "FunctionName": function_name,
        "InvocationType": invocation_type,
    }
    payload = _encode_payload(options.payload)
    if payload is not None:
        request["Payload"] = payload

    logger.info(f"Invoking Lambda '{function_name}' in {region} ({invocation_type})")

    try:
        response = client.invoke(**request)
    except (ClientError, BotoCoreError) as e:
        raise TransportError(function_name, e, provider=PROVIDER) from e

    status_code = response.get("StatusCode", 0)
    stream = response.get("Payload")
    body = stream.read() if stream is not None else None

    function_error = response.get("FunctionError")
    if function_error:
        raise FunctionError(
            function_name,
            status_code=status_code,
            function_error=function_error,
            payload=body or b"",
            provider=PROVIDER
        )

    # DryRun returns an empty stream
    if invocation_type != INVOCATION_TYPE_REQUEST_RESPONSE and not body:
        body = None

    return LambdaOutput(status_code=status_code, payload=body)


def invoke_function(
    region: str,
    function_name: str,
    payload: Any,
    client=None
) -> bytes:
    """
    Synchronously invoke a Lambda function and return its raw payload.

    Returns:
        The response payload bytes, e.g. b'"hi!"'

    Raises:
        FunctionError: If the function ran and reported an error
        TransportError: If the Invoke API call failed
    """
    output = invoke_function_with_params(
        region,
        function_name,
        LambdaOptions(payload=payload),
        client=client
    )
    return output.payload or b""
