"""
API layer for Microsoft Graph identity resources.

Provides the shared HTTP client plus one mixin per resource: named
locations, access package catalogs, access packages, assignment policies,
assignment requests and users.
"""

import logging
from typing import Callable, Optional

from ..core import constants
from .client import APIClient
from .auth import AuthAPI
from .named_locations import NamedLocationsAPI
from .catalogs import AccessPackageCatalogsAPI
from .access_packages import AccessPackagesAPI
from .assignment_policies import AccessPackageAssignmentPoliciesAPI
from .assignment_requests import AccessPackageAssignmentRequestsAPI
from .users import UsersAPI
from .odata import Query, Expand, OrderBy, OData
from .exceptions import (
    GraphError,
    GraphAPIError,
    ResourceNotFoundError,
    AuthenticationError,
    DecodeError,
)
from . import helpers


class GraphAPI(
    AuthAPI,
    NamedLocationsAPI,
    AccessPackageCatalogsAPI,
    AccessPackagesAPI,
    AccessPackageAssignmentPoliciesAPI,
    AccessPackageAssignmentRequestsAPI,
    UsersAPI,
):
    """
    Unified API client for Microsoft Graph identity resources.

    Combines credential handling with every resource's operations.
    """

    def __init__(
        self,
        tenant_id: str,
        environment: str = constants.ENVIRONMENT_GLOBAL,
        api_version: str = constants.VERSION_1_0,
        access_token: Optional[str] = None,
        token_provider: Optional[Callable[[], str]] = None,
        timeout: int = constants.DEFAULT_TIMEOUT,
        max_retries: int = constants.DEFAULT_MAX_RETRIES,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize unified API client.

        Args:
            tenant_id: Azure AD tenant ID
            environment: National cloud name
            api_version: Default API version
            access_token: Bearer token
            token_provider: Callable returning a bearer token per request
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        super().__init__(
            tenant_id,
            environment=environment,
            api_version=api_version,
            access_token=access_token,
            token_provider=token_provider,
            timeout=timeout,
            max_retries=max_retries,
            verify_ssl=verify_ssl,
            logger=logger
        )


__all__ = [
    "APIClient",
    "AuthAPI",
    "NamedLocationsAPI",
    "AccessPackageCatalogsAPI",
    "AccessPackagesAPI",
    "AccessPackageAssignmentPoliciesAPI",
    "AccessPackageAssignmentRequestsAPI",
    "UsersAPI",
    "GraphAPI",
    "Query",
    "Expand",
    "OrderBy",
    "OData",
    "GraphError",
    "GraphAPIError",
    "ResourceNotFoundError",
    "AuthenticationError",
    "DecodeError",
    "helpers",
]
