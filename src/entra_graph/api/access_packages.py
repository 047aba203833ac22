"""
Access package operations for Microsoft Graph.

Handles creation and maintenance of access packages within catalogs.
"""

from typing import List, Optional

from ..core import constants
from ..models import AccessPackage
from .odata import Query
from .resource import ResourceAPI

ACCESS_PACKAGES_PATH = "/identityGovernance/entitlementManagement/accessPackages"


class AccessPackagesAPI(ResourceAPI):
    """Mixin for access package operations."""

    def list_access_packages(self, query: Optional[Query] = None) -> List[AccessPackage]:
        """
        List access packages.

        Args:
            query: OData query options, e.g. a $filter on catalogId

        Returns:
            List of access packages across all pages
        """
        self.logger.info("Fetching access packages")
        return self._list_resources(ACCESS_PACKAGES_PATH, AccessPackage, query, constants.VERSION_BETA)

    def get_access_package(self, access_package_id: str) -> AccessPackage:
        """Get an access package by ID."""
        self.logger.debug(f"Fetching access package {access_package_id}")
        return self._get_resource(ACCESS_PACKAGES_PATH, access_package_id, AccessPackage, constants.VERSION_BETA)

    def create_access_package(self, access_package: AccessPackage) -> AccessPackage:
        """
        Create an access package.

        Args:
            access_package: Package to create; catalog_id and display_name are required by the service

        Returns:
            Created access package, including its service-assigned ID
        """
        self.logger.info(f"Creating access package {access_package.display_name!r}")
        return self._create_resource(ACCESS_PACKAGES_PATH, access_package, constants.VERSION_BETA)

    def update_access_package(self, access_package: AccessPackage) -> int:
        """Amend an access package. Returns the HTTP status code."""
        self.logger.info(f"Updating access package {access_package.id}")
        return self._update_resource(ACCESS_PACKAGES_PATH, access_package, constants.VERSION_BETA)

    def delete_access_package(self, access_package_id: str) -> int:
        """Delete an access package. Returns the HTTP status code."""
        self.logger.info(f"Deleting access package {access_package_id}")
        return self._delete_resource(ACCESS_PACKAGES_PATH, access_package_id, constants.VERSION_BETA)
