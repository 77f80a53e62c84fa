"""pytest fixtures for testing."""

import pytest


ACCESS_KEY = "abcdefghijkl"


class StubResolver:
    """Resolver returning a fixed answer and recording queried hostnames.

    With answer=None the hostname is echoed back, like an unlisted IP.
    """

    def __init__(self, answer: str | None = None):
        self.answer = answer
        self.calls: list[str] = []

    def __call__(self, hostname: str) -> str:
        self.calls.append(hostname)
        return hostname if self.answer is None else self.answer


@pytest.fixture
def access_key():
    """Sample Project Honey Pot access key."""
    return ACCESS_KEY


@pytest.fixture
def stub_resolver():
    """Factory for stub resolvers returning a literal answer."""
    return StubResolver


@pytest.fixture
def make_query():
    """Build a ReputationQuery for 203.0.113.45 with a stubbed answer."""
    from httpbl.services.reputation_query import ReputationQuery

    def _make(answer: str | None, ip: str = "203.0.113.45"):
        return ReputationQuery(ip, ACCESS_KEY, StubResolver(answer))

    return _make
