"""
Module: cli.py
Description: Command-line trigger for the hook dispatcher.

Runs one trigger outside the API and prints the report as JSON. Hooks
come from the configured DynamoDB table, or from --hook arguments for
ad-hoc runs against local receivers.

Usage:
    hookfanout-trigger --ipadr 203.0.113.7
    hookfanout-trigger --hook a=http://localhost:4000 --hook b=http://localhost:4001
    hookfanout-trigger --batch-size 5 --retry-count 2
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from hookfanout.config.settings import DispatchConfig, settings
from hookfanout.delivery.dispatcher import HookDispatcher
from hookfanout.delivery.service import TriggerService
from hookfanout.exceptions import HookFanoutError
from hookfanout.models.endpoint import Endpoint
from hookfanout.storage.base import EndpointSource
from hookfanout.storage.dynamodb import DynamoDBEndpointSource
from hookfanout.storage.memory import InMemoryEndpointSource
from hookfanout.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def parse_hook(value: str) -> Endpoint:
    """
    Parse a NAME=URL hook argument.

    Raises:
        argparse.ArgumentTypeError: If the value has no '=' separator
    """
    name, sep, url = value.partition("=")
    if not sep or not name or not url:
        raise argparse.ArgumentTypeError(f"hook must look like NAME=URL, got {value!r}")
    return Endpoint(endpoint_id=name, name=name, url=url)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Notify every registered hook and print the trigger report"
    )
    parser.add_argument(
        "--ipadr",
        default="127.0.0.1",
        help="Client address forwarded to hooks (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--hook",
        dest="hooks",
        action="append",
        type=parse_hook,
        default=[],
        metavar="NAME=URL",
        help="Hook to notify instead of reading the hooks table (repeatable)"
    )
    parser.add_argument("--batch-size", type=int, default=settings.batch_size)
    parser.add_argument("--retry-count", type=int, default=settings.retry_count)
    parser.add_argument("--timeout", type=float, default=settings.delivery_timeout)
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # NAME doubles as the hook id
    names = [hook.endpoint_id for hook in args.hooks]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        parser.error(f"duplicate hook name(s): {', '.join(duplicates)}")

    configure_logging(args.log_level)

    try:
        config = DispatchConfig.from_settings(
            settings.model_copy(update={
                "batch_size": args.batch_size,
                "retry_count": args.retry_count,
                "delivery_timeout": args.timeout,
            })
        )

        source: EndpointSource
        if args.hooks:
            source = InMemoryEndpointSource(args.hooks)
        else:
            source = DynamoDBEndpointSource(
                table_name=settings.hooks_table_name,
                region_name=settings.aws_region
            )

        service = TriggerService(source, HookDispatcher.from_config(config))
        report = asyncio.run(service.trigger(args.ipadr))

    except HookFanoutError as e:
        logger.error("Trigger failed", error=e.message, code=e.code)
        print(f"ERROR: {e.message}", file=sys.stderr)
        return 1

    print(report.model_dump_json(indent=2))
    # Exit 2 when some hook never acknowledged delivery
    return 2 if report.final_failed else 0


if __name__ == "__main__":
    sys.exit(main())
