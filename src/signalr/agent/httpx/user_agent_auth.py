"""User-Agent header handler for httpx."""

from __future__ import annotations

from typing import Generator, Optional

import httpx

from signalr.agent._user_agent import create_user_agent_string, get_user_agent_name, with_client_name
from signalr.agent.runtime import RuntimeIdentity


class SignalRHttpxUserAgentAuth(httpx.Auth):
    """Sets the SignalR User-Agent header on each request, for sync and async httpx clients."""

    def __init__(self, identity: Optional[RuntimeIdentity] = None, client_name: Optional[str] = None) -> None:
        self.user_agent = with_client_name(create_user_agent_string(identity), client_name)

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers[get_user_agent_name()] = self.user_agent
        yield request
