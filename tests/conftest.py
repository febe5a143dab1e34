"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from dohresolver.core.base import BaseResolver
from dohresolver.core.exceptions import ResolutionError
from dohresolver.core.models import DoHQuery, MailExchange, RecordType


class StubResolver(BaseResolver):
    """In-memory resolver backend.

    Unknown names raise ResolutionError the way a real NXDOMAIN would.
    """

    def __init__(self, forward=None, reverse=None):
        self.forward = forward or {}
        self.reverse_map = reverse or {}
        self.calls: list[tuple[str, str]] = []

    async def resolve(self, name, record_type):
        self.calls.append((name, record_type.value))
        try:
            return self.forward[(name, record_type)]
        except KeyError:
            raise ResolutionError(f"queryA ENOTFOUND {name}") from None

    async def reverse(self, ip):
        self.calls.append((ip, "PTR"))
        try:
            return self.reverse_map[ip]
        except KeyError:
            raise ResolutionError(f"getHostByAddr ENOTFOUND {ip}") from None


@pytest.fixture
def stub_resolver() -> StubResolver:
    """Resolver backend with a few known names."""
    return StubResolver(
        forward={
            ("example.com", RecordType.A): ["93.184.216.34"],
            ("example.com", RecordType.AAAA): ["2606:2800:220:1:248:1893:25c8:1946"],
            ("example.com", RecordType.TXT): ["v=spf1 -all", "wgyf8z8cgvm2qmxpnbnldrcltvk4xqfn"],
            ("www.example.com", RecordType.CNAME): ["example.com"],
            ("example.com", RecordType.MX): [
                MailExchange(priority=10, exchange="mail.example.com"),
                MailExchange(priority=20, exchange="backup.example.com"),
            ],
        },
        reverse={
            "8.8.8.8": ["dns.google"],
        },
    )


@pytest.fixture
def sample_query() -> DoHQuery:
    """Sample lookup request."""
    return DoHQuery(name="example.com", record_type=RecordType.A)


@pytest.fixture
async def api_client(stub_resolver) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for API testing, backed by the stub resolver."""
    from dohresolver.api.main import app, state

    state.resolver = stub_resolver
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    state.resolver = None
