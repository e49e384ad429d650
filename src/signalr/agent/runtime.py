"""Runtime identity reported in the SignalR User-Agent string."""

import dataclasses
import logging
import os
import platform
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from signalr.agent import (
    ENV_DETAILED_VERSION,
    ENV_OS_NAME,
    ENV_RUNTIME_VENDOR,
    ENV_RUNTIME_VERSION,
    __version__,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeIdentity:
    detailed_version: str
    os_name: str
    runtime_version: str
    runtime_vendor: str

    def with_overrides(self, **fields: Optional[str]) -> "RuntimeIdentity":
        """Return a copy with the given fields replaced. ``None`` values are ignored."""
        changes = {k: v for k, v in fields.items() if v is not None}
        return dataclasses.replace(self, **changes)


def _host_os_name() -> Optional[str]:
    # "Darwin" contains "win", report macOS hosts under their product name instead
    system = platform.system()
    if system == "Darwin":
        return "Mac OS X"
    return system


def _probe(env: Mapping[str, str], key: str, default: Callable[[], Optional[str]]) -> str:
    value = env.get(key)
    if value:
        logger.debug(f"Using {key}={value!r} from environment")
        return value
    return default() or ""


def load_runtime_identity(environ: Optional[Mapping[str, str]] = None) -> RuntimeIdentity:
    """Read the runtime identity from the host.

    Each field can be overridden with an environment variable, otherwise the value
    is taken from the running interpreter:

    - ``SIGNALR_AGENT_DETAILED_VERSION``: installed package version
    - ``SIGNALR_AGENT_OS_NAME``: ``platform.system()``, with ``"Darwin"`` reported as ``"Mac OS X"``
    - ``SIGNALR_AGENT_RUNTIME_VERSION``: ``platform.python_version()``
    - ``SIGNALR_AGENT_RUNTIME_VENDOR``: ``platform.python_implementation()``

    Empty overrides are treated as unset.

    Args:
        environ: Mapping to read overrides from. Defaults to ``os.environ``.
    """
    env = os.environ if environ is None else environ
    return RuntimeIdentity(
        detailed_version=_probe(env, ENV_DETAILED_VERSION, lambda: __version__),
        os_name=_probe(env, ENV_OS_NAME, _host_os_name),
        runtime_version=_probe(env, ENV_RUNTIME_VERSION, platform.python_version),
        runtime_vendor=_probe(env, ENV_RUNTIME_VENDOR, platform.python_implementation),
    )
