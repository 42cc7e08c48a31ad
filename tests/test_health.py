"""Tests for health check endpoint."""

from pathlib import Path
from typing import Any

import pytest
from starlette.testclient import TestClient

from remote_oss.config import Config
from remote_oss.services import reset_state, set_config


class TestHealthCheck:
    """Tests for health check endpoint."""

    @pytest.fixture
    def client(self, tmp_path: Path) -> TestClient:
        """Create test client for HTTP server."""
        from remote_oss.server import create_server

        hosts_file = tmp_path / "settings.json"
        hosts_file.write_text('{"remote.OSS.hosts": []}')
        reset_state()
        set_config(Config.from_hosts_file(hosts_file))

        server = create_server()
        return TestClient(server.http_app())

    def test_health_returns_ok(self, client: Any) -> None:
        """Health endpoint returns OK status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.text == "OK"

    def test_health_returns_plain_text(self, client: Any) -> None:
        """Health endpoint returns plain text content type."""
        response = client.get("/health")
        assert "text/plain" in response.headers["content-type"]
