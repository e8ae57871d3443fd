"""Command-line interface for the OPC PLC simulator container."""

from __future__ import annotations

import argparse
import logging
import sys
from contextlib import ExitStack

from .core.utils import logger, setup_opcplc_logging
from .environments.container import (
    EngineConnection,
    PlcHarnessError,
    PlcServer,
    PlcSettings,
    classify_platform,
    reap,
    resolve_engine_endpoint,
)


def positive_int(value: str) -> int:
    """Parse a strictly positive integer argument."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def cmd_endpoint(args: argparse.Namespace) -> int:
    """Handle the endpoint command."""
    endpoint = classify_platform(args.platform)
    status = "OK" if endpoint.is_supported else "FAILED"
    print(f"[{status}] {endpoint.platform}: {endpoint}")
    return 0 if endpoint.is_supported else 1


def cmd_up(args: argparse.Namespace) -> int:
    """Handle the up command.

    Leaves the container running; use ``reap`` to remove it.
    """
    server = PlcServer(settings=args.settings, platform=args.platform)
    with ExitStack() as stack:
        # __enter__ releases after a failed acquire and re-raises the acquire error
        handle = stack.enter_context(server)
        stack.pop_all()
    print(f"[OK] {handle.name} {handle.id}")
    return 0


def cmd_reap(args: argparse.Namespace) -> int:
    """Handle the reap command."""
    settings: PlcSettings = args.settings
    endpoint = resolve_engine_endpoint(args.platform)
    connection = EngineConnection.open(endpoint)
    try:
        removed = reap(
            connection,
            settings.image_ref,
            limit=args.limit if args.limit is not None else settings.reap_limit,
            continue_on_error=args.continue_on_error or settings.reap_continue_on_error,
        )
    finally:
        connection.close()
    print(f"[OK] removed {len(removed)} container(s)")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="opcplc-harness",
        description="Provision and clean up the OPC PLC simulator container",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log engine commands",
    )

    parser.add_argument(
        "--platform",
        default=None,
        help="Host platform override in sys.platform form (default: this host)",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    endpoint_parser = subparsers.add_parser(
        "endpoint",
        help="Show the container engine endpoint for the platform",
    )
    endpoint_parser.set_defaults(func=cmd_endpoint)

    up_parser = subparsers.add_parser(
        "up",
        help="Reap stale PLC containers, pull the image and start a fresh PLC container",
    )
    up_parser.set_defaults(func=cmd_up)

    reap_parser = subparsers.add_parser(
        "reap",
        help="Stop and remove recent PLC containers",
    )
    reap_parser.add_argument(
        "-n",
        "--limit",
        type=positive_int,
        default=None,
        help="Number of most recent containers to inspect (default: OPCPLC_REAP_LIMIT or 10)",
    )
    reap_parser.add_argument(
        "--continue-on-error",
        action="store_true",
        help="Keep going past individual stop/remove failures",
    )
    reap_parser.set_defaults(func=cmd_reap)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. Defaults to sys.argv[1:].

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = PlcSettings()
    setup_opcplc_logging(logging.DEBUG if args.verbose else settings.log_level, force=True)
    args.settings = settings

    try:
        logger.debug(f"Executing command: {args.command}")
        return args.func(args)
    except PlcHarnessError as e:
        logger.error(f"Error: {e}")
        print(f"[FAILED] {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\nInterrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
