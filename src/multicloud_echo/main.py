"""
Multi-Cloud Echo - CLI Entry Point.

Commands:
    handle          Run the Handler locally on an Event
    invoke-lambda   Invoke the deployed AWS Lambda function
    invoke-http     Invoke the deployed HTTP Cloud Function
    build-packages  Build the deployment ZIPs for every trigger
    triggers        List the registered hosting triggers
"""

import argparse
import sys
from pathlib import Path

from multicloud_echo.config import get_settings
from multicloud_echo.core import ConfigurationError, EchoError, Event, handle
from multicloud_echo.logger import configure_logger, print_stack_trace
from multicloud_echo.package_builder import build_all_packages
from multicloud_echo.providers import get_trigger, list_triggers


def _add_event_arguments(parser: argparse.ArgumentParser, required: bool = True) -> None:
    parser.add_argument("--message", required=required, help="Event message")
    parser.add_argument("--code", type=int, default=None, help="Event code (0 requests a failure)")


def _event_from_args(args) -> Event:
    return Event(message=args.message or "", code=args.code if args.code is not None else 0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multicloud-echo",
        description="Echo-or-fail function for AWS Lambda and Google Cloud Functions"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    handle_parser = subparsers.add_parser("handle", help="Run the Handler locally")
    _add_event_arguments(handle_parser)

    lambda_parser = subparsers.add_parser("invoke-lambda", help="Invoke the deployed Lambda function")
    lambda_parser.add_argument("--function", required=True, help="Lambda function name")
    lambda_parser.add_argument("--region", default=None, help="AWS region (defaults to settings)")
    _add_event_arguments(lambda_parser)

    http_parser = subparsers.add_parser("invoke-http", help="Invoke the deployed HTTP Cloud Function")
    http_parser.add_argument("--url", required=True, help="Trigger URL")
    http_parser.add_argument("--id-token", default=None, help="Bearer token for authenticated functions")
    _add_event_arguments(http_parser, required=False)

    build_parser_ = subparsers.add_parser("build-packages", help="Build deployment ZIPs")
    build_parser_.add_argument("--build-dir", default=None, help="Output directory (defaults to settings)")

    subparsers.add_parser("triggers", help="List registered hosting triggers")

    return parser


def run(args) -> int:
    settings = get_settings()
    logger = configure_logger(settings.MODE)

    try:
        if args.command == "handle":
            print(handle(_event_from_args(args)))

        elif args.command == "invoke-lambda":
            trigger = get_trigger("aws-lambda")
            region = args.region or settings.AWS_REGION
            if not region:
                raise ConfigurationError("AWS region not configured (use --region or ECHO_AWS_REGION)")
            print(trigger.invoke(args.function, _event_from_args(args), region=region))

        elif args.command == "invoke-http":
            trigger = get_trigger("gcp-http")
            if settings.HTTP_TIMEOUT <= 0:
                raise ConfigurationError(f"ECHO_HTTP_TIMEOUT must be positive, got {settings.HTTP_TIMEOUT}")
            has_event = args.message is not None or args.code is not None
            event = _event_from_args(args) if has_event else None
            print(trigger.invoke(
                args.url,
                event,
                timeout=settings.HTTP_TIMEOUT,
                id_token=args.id_token
            ))

        elif args.command == "build-packages":
            build_dir = Path(args.build_dir or settings.BUILD_DIR)
            for name, path in build_all_packages(build_dir).items():
                print(f"{name}: {path}")

        elif args.command == "triggers":
            for name in list_triggers():
                trigger = get_trigger(name)
                print(f"{name}: provider={trigger.provider} entry_point={trigger.entry_point} runtime={trigger.runtime}")

    except EchoError as e:
        logger.error(str(e))
        print_stack_trace()
        return 1

    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
