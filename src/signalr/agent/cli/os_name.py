from __future__ import annotations

import argparse

from signalr.agent._user_agent import find_os_name

COMMAND = "os-name"


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    os_parser = subparsers.add_parser(
        COMMAND,
        help="Print the platform label reported for an operating system name",
    )
    os_parser.add_argument("name", metavar="NAME", help="Operating system name, e.g. 'Windows 11'")


def run(parsed: argparse.Namespace) -> int:
    print(find_os_name(parsed.name))
    return 0
