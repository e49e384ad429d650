"""User-Agent string handling for SignalR connections."""

import logging
from typing import Optional

from signalr.agent import USER_AGENT_LANGUAGE, USER_AGENT_PRODUCT
from signalr.agent.runtime import RuntimeIdentity, load_runtime_identity

USER_AGENT_HEADER = "User-Agent"

logger = logging.getLogger(__name__)


class InvalidVersionFormat(ValueError):
    """Raised when a detailed version has no ``major.minor`` prefix to shorten."""

    def __init__(self, detailed_version: str):
        self.detailed_version = detailed_version
        super().__init__(
            f"Expected a version with at least two '.' separators, got '{detailed_version}'"
        )


def get_user_agent_name() -> str:
    """Name of the header carrying the agent string, ``USER_AGENT_HEADER``."""
    return USER_AGENT_HEADER


def get_version(detailed_version: str) -> str:
    """Shorten a detailed version to its ``major.minor`` prefix.

    Example: ``"7.0.12+abc123"`` becomes ``"7.0"``.

    Raises:
        InvalidVersionFormat: if the version contains fewer than two periods.
    """
    first = detailed_version.find(".")
    second = detailed_version.find(".", first + 1) if first >= 0 else -1
    if second < 0:
        raise InvalidVersionFormat(detailed_version)
    return detailed_version[:second]


def find_os_name(operating_system: str) -> str:
    """Map a raw OS name to the platform label used in the User-Agent string.

    Returns an empty string for unrecognized systems.
    """
    # fold through upper case: "ı" lowercases to itself but uppercases to "I"
    operating_system = operating_system.upper().lower()
    if "win" in operating_system:
        return "Windows NT"
    if "mac" in operating_system:
        return "macOS"
    if "nix" in operating_system or "nux" in operating_system or "aix" in operating_system:
        return "Linux"
    return ""


def create_user_agent_string(identity: Optional[RuntimeIdentity] = None) -> str:
    """Build the User-Agent string for SignalR requests.

    Args:
        identity: Runtime identity to describe. Read from the host when omitted.

    Returns:
        User-Agent string like
        "Microsoft SignalR/7.0; 7.0.12+abc123; Windows NT; Java; 17.0.1; Acme Corp"
    """
    if identity is None:
        identity = load_runtime_identity()

    detailed_version = identity.detailed_version
    user_agent = "; ".join(
        [
            f"{USER_AGENT_PRODUCT}/{get_version(detailed_version)}",
            detailed_version,
            find_os_name(identity.os_name),
            USER_AGENT_LANGUAGE,
            identity.runtime_version,
            identity.runtime_vendor,
        ]
    )
    logger.debug(f"Created user agent: {user_agent}")
    return user_agent


def with_client_name(user_agent: str, client_name: Optional[str] = None) -> str:
    """Append a client name to a User-Agent string, if one is given."""
    if client_name:
        return f"{user_agent} {client_name}"
    return user_agent
