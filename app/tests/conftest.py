"""Shared fixtures for runtime and service client tests."""

from typing import Any, Optional, Type

import pytest
from botocore.credentials import Credentials

from awsruntime.clients import ClientConfiguration, HttpTransport, ServiceClient
from awsruntime.logging import configure_logging
from tests.fixtures.http import FakeHttpSession


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Route structlog through the test configuration so runs stay silent."""
    configure_logging()


@pytest.fixture
def static_credentials():
    return Credentials("AKIDEXAMPLE", "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY")


@pytest.fixture
def client_config():
    """Configuration with no retries and a small executor."""
    config = ClientConfiguration(region="us-east-1", max_retries=0, executor_max_workers=2)
    yield config
    config.shutdown(wait=True)


@pytest.fixture
def http_session():
    return FakeHttpSession()


@pytest.fixture
def sleep_calls():
    return []


@pytest.fixture
def make_client(client_config, static_credentials, http_session, sleep_calls):
    """Factory building a service client wired to the fake HTTP session.

    Usage:
        client = make_client(GlacierClient)
        client = make_client(GlacierClient, credentials=None, config=other)
    """

    def _make(
        client_cls: Type[ServiceClient],
        config: Optional[ClientConfiguration] = None,
        credentials: Any = static_credentials,
        session: Optional[FakeHttpSession] = None,
        **kwargs: Any,
    ) -> ServiceClient:
        cfg = config or client_config
        transport = HttpTransport.from_config(
            cfg, http_session=session or http_session, sleep=sleep_calls.append
        )
        return client_cls(cfg, credentials, transport=transport, **kwargs)

    return _make
