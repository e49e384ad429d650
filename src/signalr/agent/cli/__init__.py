from __future__ import annotations

import argparse
import logging
import sys
from types import ModuleType

from signalr.agent.cli import os_name, show

_SUBCOMMANDS: dict[str, ModuleType] = {subcommand.COMMAND: subcommand for subcommand in (show, os_name)}

_log_handler = logging.StreamHandler(sys.stderr)
_log_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="signalr-user-agent",
        description="Print the SignalR User-Agent header or the platform label for an OS name",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for subcommand in _SUBCOMMANDS.values():
        subcommand.register_parser(subparsers)

    return parser


def _configure_logging(verbose: bool = False) -> None:
    """Attach the stderr handler to the package logger once, then only adjust the level."""
    package_logger = logging.getLogger("signalr.agent")
    if _log_handler not in package_logger.handlers:
        package_logger.addHandler(_log_handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(args: list[str] | None = None) -> int:
    parser = create_parser()
    parsed = parser.parse_args(args)
    _configure_logging(verbose=parsed.verbose)

    subcommand = _SUBCOMMANDS.get(parsed.command)
    if subcommand is None:
        parser.print_help()
        return 0
    return subcommand.run(parsed)


if __name__ == "__main__":
    sys.exit(main())
