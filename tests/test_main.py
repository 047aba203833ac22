"""
Tests for the command line entry point.
"""

import json
from unittest.mock import Mock, patch

import pytest

from entra_graph import main as cli_module
from entra_graph.api import Query, ResourceNotFoundError
from entra_graph.main import GraphCLI, RESOURCES, main
from entra_graph.models import IPNamedLocation, IPNamedLocationIPRange, User


@pytest.fixture
def cli(config_file, tmp_path):
    """GraphCLI with a mocked API."""
    instance = GraphCLI(config_file({
        "graph": {"tenant_id": "11111111-2222-3333-4444-555555555555"},
        "authentication": {"access_token": "file-token"},
        "logging": {"file": str(tmp_path / "cli.log")},
    }))
    instance.logger = Mock()
    instance.api = Mock()
    return instance


class TestGraphCLI:
    """Command dispatch."""

    def test_every_action_maps_to_an_api_method(self):
        from entra_graph.api import GraphAPI

        for actions in RESOURCES.values():
            for method_name in actions.values():
                assert callable(getattr(GraphAPI, method_name))

    def test_list_named_locations_passes_filter(self, cli):
        cli.api.list_named_locations.return_value = [
            IPNamedLocation(id="loc-1", display_name="Office", ip_ranges=[
                IPNamedLocationIPRange(cidr_address="10.0.0.0/8"),
            ]),
        ]

        result = cli.run("named-locations", "list", filter="displayName eq 'Office'")

        cli.api.list_named_locations.assert_called_once_with(filter="displayName eq 'Office'")
        assert result[0]["id"] == "loc-1"
        assert result[0]["@odata.type"] == "#microsoft.graph.ipNamedLocation"

    def test_list_builds_query(self, cli):
        cli.api.list_users.return_value = []

        cli.run("users", "list", filter="accountEnabled eq true", top=10)

        cli.api.list_users.assert_called_once_with(Query(filter="accountEnabled eq true", top=10))

    def test_get(self, cli):
        cli.api.get_user.return_value = User(id="user-1", display_name="Test")

        assert cli.run("users", "get", resource_id="user-1") == {"id": "user-1", "displayName": "Test"}

    def test_cancel_returns_status(self, cli):
        cli.api.cancel_access_package_assignment_request.return_value = 204

        assert cli.run("assignment-requests", "cancel", resource_id="req-1") == 204

    def test_id_required(self, cli):
        with pytest.raises(ValueError, match="--id"):
            cli.run("users", "delete")

    def test_unsupported_action(self, cli):
        with pytest.raises(ValueError):
            cli.run("users", "cancel", resource_id="user-1")

    def test_top_rejected_for_named_locations(self, cli):
        with pytest.raises(ValueError, match="--top"):
            cli.run("named-locations", "list", top=5)

        cli.api.list_named_locations.assert_not_called()

    def test_unknown_resource(self, cli):
        with pytest.raises(ValueError):
            cli.run("groups", "list")


class TestMain:
    """Exit codes and output."""

    def test_prints_json(self, config_file, capsys):
        fake = Mock()
        fake.run.return_value = [{"id": "user-1"}]

        with patch.object(cli_module, "GraphCLI", return_value=fake):
            main(["--config", config_file(), "users", "list"])

        assert json.loads(capsys.readouterr().out) == [{"id": "user-1"}]
        fake.close.assert_called_once()

    def test_missing_config_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(tmp_path / "absent.json"), "users", "list"])

        assert exc_info.value.code == 1
        assert "Configuration error" in capsys.readouterr().err

    def test_api_error_exits(self, config_file, capsys):
        fake = Mock()
        fake.run.side_effect = ResourceNotFoundError(404, "gone", endpoint="/users/x")

        with patch.object(cli_module, "GraphCLI", return_value=fake):
            with pytest.raises(SystemExit) as exc_info:
                main(["--config", config_file(), "users", "get", "--id", "x"])

        assert exc_info.value.code == 1
        assert "Command failed" in capsys.readouterr().err
        fake.close.assert_called_once()
