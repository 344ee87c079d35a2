import os

import httpx
import pytest

# Keep tests deterministic: short timeouts and plain log lines.
os.environ["POD_REQUEST_TIMEOUT_S"] = "5"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_JSON"] = "false"


@pytest.fixture
def captured() -> list[httpx.Request]:
    return []


@pytest.fixture
def mock_transport_factory(captured):
    """Build an httpx.MockTransport that records requests and replies with ``respond``."""

    def _factory(respond) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return respond(request)

        return httpx.MockTransport(handler)

    return _factory
