"""Shared test fixtures for all test modules."""

import time
from unittest import mock

import pytest
import requests

from stackdriver.client import StackdriverClient
from stackdriver.transport import Endpoints, Transport


def make_response(status_code: int = 200, text: str = "") -> mock.Mock:
    """Build a stand-in for requests.Response."""
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    return response


@pytest.fixture
def now() -> int:
    """Current Unix time in seconds."""
    return int(time.time())


@pytest.fixture
def session() -> mock.Mock:
    """Fake requests session answering every POST with 200."""
    fake = mock.Mock(spec=requests.Session)
    fake.post.return_value = make_response(200)
    return fake


@pytest.fixture
def endpoints() -> Endpoints:
    """Mock gateway URLs."""
    return Endpoints(
        custom_metric="https://metrics.test/v1/custom",
        annotation_event="https://events.test/v1/annotationevent",
        deploy_event="https://events.test/v1/deployevent",
    )


@pytest.fixture
def transport(session, endpoints) -> Transport:
    """Transport posting through the fake session without retry delays."""
    return Transport("test-key", endpoints=endpoints, retry_delay=0, session=session)


@pytest.fixture
def client(session, endpoints) -> StackdriverClient:
    """Client posting through the fake session."""
    return StackdriverClient(
        api_key="test-key",
        customer_id=None,
        endpoints=endpoints,
        retry_delay=0,
        session=session,
    )


@pytest.fixture
def response():
    """Factory for fake responses: response(status_code, text)."""
    return make_response
