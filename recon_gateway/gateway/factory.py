from typing import ClassVar

import httpx

from recon_gateway.config.settings import Settings
from recon_gateway.gateway.client_base import BaseUpstreamClient
from recon_gateway.gateway.example_client_adapter import ExampleClientAdapter
from recon_gateway.gateway.exceptions import GatewayConfigurationError
from recon_gateway.gateway.gateway import ReconciliationGateway
from recon_gateway.gateway.httpx_client_adapter import HttpxClientAdapter
from recon_gateway.gateway.response_normalizer import ResponseNormalizer


class GatewayFactory:
    """Creates the configured reconciliation gateway."""

    CLIENTS: ClassVar[tuple[str, ...]] = ("httpx", "example")

    @classmethod
    def create(cls, settings: Settings) -> ReconciliationGateway:
        """Create a gateway from application settings.

        Raises:
            GatewayConfigurationError: if the service URL is missing or invalid.
            ValueError: if the configured client is unknown.
        """
        endpoint_url = cls._resolve_endpoint_url(settings)
        return ReconciliationGateway(
            client=cls._create_client(settings),
            endpoint_url=endpoint_url,
            normalizer=ResponseNormalizer(
                default_file_name=settings.result_default_file_name,
                default_content_type=settings.result_default_content_type,
            ),
        )

    @classmethod
    def _create_client(cls, settings: Settings) -> BaseUpstreamClient:
        name = settings.reconciliation_client.lower()
        if name == "example":
            return ExampleClientAdapter()
        if name == "httpx":
            return HttpxClientAdapter(
                timeout_seconds=settings.reconciliation_timeout_seconds,
                verify_tls=settings.reconciliation_verify_tls,
            )
        raise ValueError(
            f"Unknown reconciliation client '{name}'. Choose from: {list(cls.CLIENTS)}"
        )

    @classmethod
    def _resolve_endpoint_url(cls, settings: Settings) -> str:
        base_url = settings.reconciliation_api_url.strip().rstrip("/")
        if not base_url:
            raise GatewayConfigurationError(
                "reconciliation_api_url is required (set RECONCILIATION_API_URL)"
            )
        if not base_url.lower().startswith(("http://", "https://")):
            raise GatewayConfigurationError(
                f"reconciliation_api_url must be an http(s) URL, got '{base_url}'"
            )
        try:
            host = httpx.URL(base_url).host
        except httpx.InvalidURL as exc:
            raise GatewayConfigurationError(
                f"reconciliation_api_url is not a valid URL: {exc}"
            ) from exc
        if not host:
            raise GatewayConfigurationError(
                f"reconciliation_api_url has no host, got '{base_url}'"
            )
        path = settings.reconciliation_process_path.strip()
        if path and not path.startswith("/"):
            path = f"/{path}"
        return f"{base_url}{path}"
