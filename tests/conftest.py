"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
import json
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

# Add src to sys.path so the package imports without installation
src_root = Path(__file__).parent.parent / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

TENANT_ID = "11111111-2222-3333-4444-555555555555"


def _make_response(status_code, payload=None, headers=None, url="https://graph.microsoft.com/"):
    """Build a real requests.Response carrying a JSON payload."""
    response = requests.Response()
    response.status_code = status_code
    if payload is None:
        response._content = b""
    elif isinstance(payload, (bytes, str)):
        response._content = payload.encode() if isinstance(payload, str) else payload
    else:
        response._content = json.dumps(payload).encode("utf-8")
    response.headers.update(headers or {})
    response.url = url
    response.encoding = "utf-8"
    return response


@pytest.fixture
def make_response():
    """Factory for canned Graph responses."""
    return _make_response


@pytest.fixture
def api():
    """GraphAPI with a static token and a mocked transport."""
    from entra_graph.api import GraphAPI

    client = GraphAPI(tenant_id=TENANT_ID, access_token="test-token", logger=Mock())
    client.session.request = Mock()
    yield client
    client.close()


@pytest.fixture
def respond(api):
    """Queue responses for the mocked transport, in call order."""
    def _respond(*responses):
        api.session.request.side_effect = list(responses)
        return api.session.request
    return _respond


@pytest.fixture
def config_file(tmp_path):
    """Write a minimal valid configuration file."""
    def _write(data=None):
        content = data if data is not None else {
            "graph": {"tenant_id": TENANT_ID, "environment": "global", "api_version": "v1.0"},
            "authentication": {"access_token": "file-token"},
        }
        path = tmp_path / "config.json"
        path.write_text(json.dumps(content), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture(autouse=True)
def clean_env(request, monkeypatch):
    """Keep developer environment variables out of unit tests."""
    if request.node.get_closest_marker("integration"):
        return
    for name in (
        "CONFIG_FILE", "GRAPH_ENVIRONMENT", "GRAPH_API_VERSION", "AZURE_TENANT_ID",
        "AZURE_CLIENT_ID", "GRAPH_ACCESS_TOKEN", "LOG_LEVEL", "LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring API access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
