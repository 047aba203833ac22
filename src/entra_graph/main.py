"""
Command line entry point for the Microsoft Graph identity client.

Lists, shows and removes identity resources of a tenant.
"""

import json
import sys
from typing import Any, Callable, Dict, List, Optional

import requests  # type: ignore

from .core import Config, setup_logger, LoggerContext
from .api import GraphAPI, GraphError, Query
from .models import GraphModel

# resource -> action -> GraphAPI method name
RESOURCES: Dict[str, Dict[str, str]] = {
    "named-locations": {
        "list": "list_named_locations",
        "get": "get_named_location",
        "delete": "delete_named_location",
    },
    "catalogs": {
        "list": "list_access_package_catalogs",
        "get": "get_access_package_catalog",
        "delete": "delete_access_package_catalog",
    },
    "access-packages": {
        "list": "list_access_packages",
        "get": "get_access_package",
        "delete": "delete_access_package",
    },
    "assignment-policies": {
        "list": "list_access_package_assignment_policies",
        "get": "get_access_package_assignment_policy",
        "delete": "delete_access_package_assignment_policy",
    },
    "assignment-requests": {
        "list": "list_access_package_assignment_requests",
        "get": "get_access_package_assignment_request",
        "delete": "delete_access_package_assignment_request",
        "cancel": "cancel_access_package_assignment_request",
    },
    "users": {
        "list": "list_users",
        "get": "get_user",
        "delete": "delete_user",
    },
}


class GraphCLI:
    """Runs a single resource command against the configured tenant."""

    def __init__(self, config_file: Optional[str] = None, log_level: Optional[str] = None):
        """
        Initialize CLI.

        Args:
            config_file: Path to configuration file
            log_level: Overrides the configured log level
        """
        self.config = Config(config_file)
        self.logger = setup_logger(
            log_file=self.config.log_file,
            log_level=log_level or self.config.log_level
        )
        self.logger.debug(f"Configuration: {self.config}")

        self.api = GraphAPI(
            tenant_id=self.config.tenant_id,
            environment=self.config.environment,
            api_version=self.config.api_version,
            access_token=self.config.access_token,
            timeout=self.config.api_timeout,
            max_retries=self.config.api_max_retries,
            verify_ssl=self.config.api_verify_ssl,
            logger=self.logger
        )

    def run(
        self,
        resource: str,
        action: str,
        resource_id: Optional[str] = None,
        filter: Optional[str] = None,
        top: int = 0
    ) -> Any:
        """
        Execute one command.

        Args:
            resource: Resource name (see RESOURCES)
            action: list, get, delete or cancel
            resource_id: ID for get, delete and cancel
            filter: OData $filter for list
            top: Page size for list (not supported for named-locations)

        Returns:
            JSON-serializable result
        """
        actions = RESOURCES.get(resource)
        if actions is None:
            raise ValueError(f"Unknown resource: {resource}")
        if action not in actions:
            raise ValueError(f"Action '{action}' is not supported for {resource}")

        if action != "list" and not resource_id:
            raise ValueError(f"--id is required for {action}")

        if resource == "named-locations" and top:
            raise ValueError("--top is not supported for named-locations")

        method: Callable[..., Any] = getattr(self.api, actions[action])

        with LoggerContext(self.logger, f"{action} {resource}"):
            if action != "list":
                result = method(resource_id)
            elif resource == "named-locations":
                result = method(filter=filter)
            else:
                result = method(Query(filter=filter, top=top))

        return _to_json(result)

    def close(self) -> None:
        self.api.close()


def _to_json(result: Any) -> Any:
    if isinstance(result, GraphModel):
        return result.to_dict()
    if isinstance(result, list):
        return [_to_json(item) for item in result]
    return result


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Microsoft Graph identity resources"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    parser.add_argument("resource", choices=sorted(RESOURCES), help="Resource type")
    parser.add_argument("action", choices=["list", "get", "delete", "cancel"], help="Operation")
    parser.add_argument("--id", dest="resource_id", type=str, default=None, help="Resource ID")
    parser.add_argument("--filter", type=str, default=None, help="OData $filter expression for list")
    parser.add_argument("--top", type=int, default=0, help="Page size for list (not for named-locations)")

    args = parser.parse_args(argv)

    try:
        cli = GraphCLI(config_file=args.config, log_level=args.log_level)
    except (FileNotFoundError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        result = cli.run(
            args.resource,
            args.action,
            resource_id=args.resource_id,
            filter=args.filter,
            top=args.top
        )
    except (GraphError, ValueError, requests.exceptions.RequestException) as e:
        print(f"Command failed: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        cli.close()

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
