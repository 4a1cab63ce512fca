"""
Module: conftest.py
Description: Shared pytest fixtures for hook dispatcher tests.

Provides sample hooks and payloads, a scriptable fake hook server
plugged in as an httpx MockTransport, and AWS credentials for moto.
"""

from typing import Dict, List, Union

import httpx
import pytest

from hookfanout.config.settings import DispatchConfig
from hookfanout.delivery.dispatcher import HookDispatcher
from hookfanout.models.endpoint import Endpoint, TriggerPayload

Reply = Union[int, Exception]


class FakeHooks:
    """
    Scriptable stand-in for the receiving hook servers.

    Each URL answers with the next planned reply; the last reply repeats.
    Unplanned URLs answer 200. Exceptions are raised from the transport
    the same way a real connection failure would be.
    """

    def __init__(self):
        self.calls: List[str] = []
        self.bodies: List[bytes] = []
        self._plans: Dict[str, List[Reply]] = {}

    def plan(self, url: str, *replies: Reply) -> None:
        self._plans[url] = list(replies)

    def calls_to(self, url: str) -> int:
        return self.calls.count(url)

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.calls.append(url)
        self.bodies.append(request.content)

        replies = self._plans.get(url)
        reply: Reply = 200
        if replies:
            reply = replies.pop(0) if len(replies) > 1 else replies[0]

        if isinstance(reply, Exception):
            raise reply
        return httpx.Response(reply, json={"received": reply == 200})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def hook_url(name: str) -> str:
    return f"http://hooks.test/{name.lower()}"


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake AWS credentials so boto3 never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def endpoints() -> List[Endpoint]:
    """Five hooks A..E, in registration order."""
    return [
        Endpoint(endpoint_id=f"hook_{name.lower()}", name=f"Server#{name}", url=hook_url(name))
        for name in "ABCDE"
    ]


@pytest.fixture
def payload() -> TriggerPayload:
    return TriggerPayload(client_address="203.0.113.7", timestamp=1700000000000)


@pytest.fixture
def fake_hooks() -> FakeHooks:
    return FakeHooks()


@pytest.fixture
def dispatch_config() -> DispatchConfig:
    return DispatchConfig(batch_size=10, retry_count=3, delivery_timeout=1.0)


@pytest.fixture
def dispatcher(dispatch_config, fake_hooks) -> HookDispatcher:
    return HookDispatcher.from_config(dispatch_config, transport=fake_hooks.transport())
