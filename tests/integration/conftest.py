from collections.abc import Callable, Generator

import httpx
import pytest
from fastapi.testclient import TestClient

from recon_gateway.api.app import create_app
from recon_gateway.config.settings import Settings
from recon_gateway.gateway.gateway import ReconciliationGateway
from recon_gateway.gateway.httpx_client_adapter import HttpxClientAdapter

SERVICE_URL = "http://recon.test:5001"
Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(
        reconciliation_api_url=SERVICE_URL,
        upload_max_files_per_role=3,
        upload_max_file_size_bytes=1024 * 1024,
    )


@pytest.fixture()
def upstream_requests() -> list[httpx.Request]:
    """Requests received by the fake reconciliation service."""
    return []


@pytest.fixture()
def make_client(
    test_settings: Settings,
    upstream_requests: list[httpx.Request],
) -> Generator[Callable[[Handler], TestClient], None, None]:
    """Build an API client whose gateway talks to ``handler`` instead of the network."""
    clients: list[TestClient] = []

    def _make(handler: Handler) -> TestClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            upstream_requests.append(request)
            return handler(request)

        gateway = ReconciliationGateway(
            client=HttpxClientAdapter(
                timeout_seconds=5,
                transport=httpx.MockTransport(recording_handler),
            ),
            endpoint_url=f"{SERVICE_URL}/process",
        )
        client = TestClient(create_app(test_settings, gateway=gateway))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
