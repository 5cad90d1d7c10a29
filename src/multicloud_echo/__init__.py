"""
Multi-cloud echo function.

One echo-or-fail Handler shared by an AWS Lambda function and an
HTTP-triggered Google Cloud Function.

This package root is bundled into every deployed function, so it must
only import the standard library.
"""

__version__ = "2.0.0"
