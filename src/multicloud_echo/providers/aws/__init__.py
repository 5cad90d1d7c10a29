"""
AWS Provider package.

Auto-Registration:
    Importing this package registers AWSLambdaTrigger with the
    TriggerRegistry under "aws-lambda".

Package Structure:
    aws/
    ├── __init__.py           # This file - registers the trigger
    ├── trigger.py            # AWSLambdaTrigger
    ├── invoker.py            # boto3 Lambda invocation client
    └── lambda_functions/
        └── echo/
            └── lambda_function.py   # Runtime adapter (deployed)
"""

from multicloud_echo.core.registry import TriggerRegistry
from .trigger import AWSLambdaTrigger

TriggerRegistry.register(AWSLambdaTrigger.name, AWSLambdaTrigger)

__all__ = ["AWSLambdaTrigger"]
