"""
Tests for configuration loading.
"""

import pytest

from entra_graph.core import Config, constants

TENANT = "11111111-2222-3333-4444-555555555555"


class TestConfigLoading:
    """Loading from file."""

    def test_loads_file(self, config_file):
        config = Config(config_file())

        assert config.tenant_id == TENANT
        assert config.environment == constants.ENVIRONMENT_GLOBAL
        assert config.graph_endpoint == "https://graph.microsoft.com"
        assert config.api_version == constants.VERSION_1_0
        assert config.access_token == "file-token"

    def test_defaults(self, config_file):
        config = Config(config_file({"graph": {"tenant_id": TENANT}}))

        assert config.api_timeout == constants.DEFAULT_TIMEOUT
        assert config.api_max_retries == constants.DEFAULT_MAX_RETRIES
        assert config.api_verify_ssl is True
        assert config.access_token is None
        assert config.log_level == "INFO"
        assert config.log_file is None

    def test_config_file_env_var(self, config_file, monkeypatch):
        monkeypatch.setenv("CONFIG_FILE", config_file())

        assert Config().tenant_id == TENANT

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "absent.json"))

    def test_dot_notation(self, config_file):
        config = Config(config_file())

        assert config.get("graph.tenant_id") == TENANT
        assert config.get("graph.missing", "fallback") == "fallback"
        assert config.get("graph.tenant_id.deeper") is None


class TestConfigValidation:
    """Required keys and allowed values."""

    def test_missing_graph_section(self, config_file):
        with pytest.raises(ValueError, match="graph"):
            Config(config_file({"logging": {"level": "DEBUG"}}))

    def test_missing_tenant(self, config_file):
        with pytest.raises(ValueError, match="tenant_id"):
            Config(config_file({"graph": {"environment": "global"}}))

    def test_unknown_environment(self, config_file):
        with pytest.raises(ValueError, match="environment"):
            Config(config_file({"graph": {"tenant_id": TENANT, "environment": "mars"}}))

    def test_unknown_api_version(self, config_file):
        with pytest.raises(ValueError, match="version"):
            Config(config_file({"graph": {"tenant_id": TENANT, "api_version": "v2.0"}}))

    def test_environment_is_case_insensitive(self, config_file):
        config = Config(config_file({"graph": {"tenant_id": TENANT, "environment": "China"}}))

        assert config.graph_endpoint == "https://microsoftgraph.chinacloudapi.cn"


class TestEnvironmentOverrides:
    """Environment variables take precedence over the file."""

    def test_overrides(self, config_file, monkeypatch):
        monkeypatch.setenv("AZURE_TENANT_ID", "override-tenant")
        monkeypatch.setenv("GRAPH_API_VERSION", "beta")
        monkeypatch.setenv("GRAPH_ACCESS_TOKEN", "env-token")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        config = Config(config_file())

        assert config.tenant_id == "override-tenant"
        assert config.api_version == constants.VERSION_BETA
        assert config.access_token == "env-token"
        assert config.log_level == "DEBUG"

    def test_tenant_from_env_only(self, config_file, monkeypatch):
        monkeypatch.setenv("AZURE_TENANT_ID", TENANT)

        config = Config(config_file({"graph": {}}))

        assert config.tenant_id == TENANT

    def test_creates_missing_sections(self, config_file, monkeypatch):
        monkeypatch.setenv("AZURE_CLIENT_ID", "client-1")

        config = Config(config_file({"graph": {"tenant_id": TENANT}}))

        assert config.client_id == "client-1"

    def test_repr(self, config_file):
        assert TENANT in repr(Config(config_file()))
