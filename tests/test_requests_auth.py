"""Tests for setting the User-Agent header on requests."""

import unittest

import requests

from signalr.agent.requests.user_agent_auth import SignalRUserAgentAuth
from signalr.agent.runtime import RuntimeIdentity

IDENTITY = RuntimeIdentity("7.0.12+abc123", "Windows 11", "17.0.1", "Acme Corp")
EXPECTED = "Microsoft SignalR/7.0; 7.0.12+abc123; Windows NT; Java; 17.0.1; Acme Corp"


class TestSignalRUserAgentAuth(unittest.TestCase):
    def test_sets_header_on_prepared_request(self):
        auth = SignalRUserAgentAuth(IDENTITY)
        prepared = requests.Request("GET", "https://example.com/hub/negotiate", auth=auth).prepare()
        self.assertEqual(prepared.headers["User-Agent"], EXPECTED)

    def test_overrides_session_default(self):
        session = requests.Session()
        session.auth = SignalRUserAgentAuth(IDENTITY)
        prepared = session.prepare_request(requests.Request("POST", "https://example.com/hub"))
        self.assertEqual(prepared.headers["User-Agent"], EXPECTED)

    def test_client_name(self):
        auth = SignalRUserAgentAuth(IDENTITY, client_name="MyHubClient")
        self.assertEqual(auth.user_agent, f"{EXPECTED} MyHubClient")

    def test_returns_same_request(self):
        auth = SignalRUserAgentAuth(IDENTITY)
        prepared = requests.Request("GET", "https://example.com").prepare()
        self.assertIs(auth(prepared), prepared)
