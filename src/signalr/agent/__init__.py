import logging
from logging import NullHandler

logging.getLogger(__name__).addHandler(NullHandler())

try:
    from ._version import __version__
except ImportError:
    __version__ = "0.0.0"

USER_AGENT_PRODUCT = "Microsoft SignalR"
USER_AGENT_LANGUAGE = "Java"

ENV_DETAILED_VERSION = "SIGNALR_AGENT_DETAILED_VERSION"
ENV_OS_NAME = "SIGNALR_AGENT_OS_NAME"
ENV_RUNTIME_VERSION = "SIGNALR_AGENT_RUNTIME_VERSION"
ENV_RUNTIME_VENDOR = "SIGNALR_AGENT_RUNTIME_VENDOR"

from signalr.agent._user_agent import (  # noqa: E402
    InvalidVersionFormat,
    create_user_agent_string,
    get_user_agent_name,
)
from signalr.agent.runtime import RuntimeIdentity, load_runtime_identity  # noqa: E402

__all__ = [
    "InvalidVersionFormat",
    "RuntimeIdentity",
    "create_user_agent_string",
    "get_user_agent_name",
    "load_runtime_identity",
]
