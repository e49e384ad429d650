"""User-Agent header handler for requests."""

from __future__ import annotations

from typing import Optional

import requests
from requests.auth import AuthBase

from signalr.agent._user_agent import create_user_agent_string, get_user_agent_name, with_client_name
from signalr.agent.runtime import RuntimeIdentity


class SignalRUserAgentAuth(AuthBase):
    """Sets the SignalR User-Agent header on each request.

    The header value is computed once, when the handler is created.

    Example::

        session = requests.Session()
        session.auth = SignalRUserAgentAuth(client_name="MyHubClient")
    """

    def __init__(self, identity: Optional[RuntimeIdentity] = None, client_name: Optional[str] = None) -> None:
        self.user_agent = with_client_name(create_user_agent_string(identity), client_name)

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        r.headers[get_user_agent_name()] = self.user_agent
        return r
