"""Tests for application wiring."""

from unittest.mock import MagicMock, patch

import pytest

from recon_gateway.api.app import create_app
from recon_gateway.config.settings import Settings
from recon_gateway.gateway.exceptions import GatewayConfigurationError
from recon_gateway.gateway.gateway import ReconciliationGateway
from recon_gateway.main import main


class TestCreateApp:
    def test_missing_service_url_fails_at_startup(self) -> None:
        with pytest.raises(GatewayConfigurationError):
            create_app(Settings(reconciliation_api_url=""))

    def test_builds_gateway_from_settings(self) -> None:
        app = create_app(Settings(reconciliation_api_url="http://recon:5001"))
        assert isinstance(app.state.gateway, ReconciliationGateway)
        assert app.state.gateway.endpoint_url == "http://recon:5001/process"

    def test_uses_injected_gateway(self) -> None:
        gateway = MagicMock(spec=ReconciliationGateway)
        app = create_app(Settings(reconciliation_api_url=""), gateway=gateway)
        assert app.state.gateway is gateway

    def test_registers_routes(self) -> None:
        app = create_app(Settings(reconciliation_api_url="http://recon:5001"))
        paths = {route.path for route in app.routes}
        assert {"/health", "/api/process-files"} <= paths


class TestMain:
    def test_configures_logging_and_serves(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RECONCILIATION_API_URL", "http://recon:5001")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setenv("API_PORT", "8088")
        with (
            patch("recon_gateway.main.uvicorn.run") as mock_run,
            patch("recon_gateway.main.Log") as mock_log,
        ):
            main()
        mock_log.configure.assert_called_once_with("WARNING")
        assert mock_run.call_args.kwargs["port"] == 8088
