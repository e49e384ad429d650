from __future__ import annotations

import argparse
import sys

from signalr.agent._user_agent import InvalidVersionFormat, create_user_agent_string, get_user_agent_name
from signalr.agent.runtime import load_runtime_identity

COMMAND = "show"


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    show_parser = subparsers.add_parser(
        COMMAND,
        help="Print the User-Agent string for this host",
    )
    show_parser.add_argument("--detailed-version", metavar="VERSION", help="Override the library version")
    show_parser.add_argument("--os-name", metavar="NAME", help="Override the operating system name")
    show_parser.add_argument("--runtime-version", metavar="VERSION", help="Override the runtime version")
    show_parser.add_argument("--runtime-vendor", metavar="VENDOR", help="Override the runtime vendor")
    show_parser.add_argument(
        "--header",
        action="store_true",
        default=False,
        help="Print as a complete header line, e.g. 'User-Agent: ...'",
    )


def run(parsed: argparse.Namespace) -> int:
    identity = load_runtime_identity().with_overrides(
        detailed_version=parsed.detailed_version,
        os_name=parsed.os_name,
        runtime_version=parsed.runtime_version,
        runtime_vendor=parsed.runtime_vendor,
    )
    try:
        user_agent = create_user_agent_string(identity)
    except InvalidVersionFormat as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if parsed.header:
        print(f"{get_user_agent_name()}: {user_agent}")
    else:
        print(user_agent)
    return 0
