"""
Access package catalog operations for Microsoft Graph.

Catalogs live under entitlement management, which is served by the beta API.
"""

from typing import List, Optional

from ..core import constants
from ..models import AccessPackageCatalog
from .odata import Query
from .resource import ResourceAPI

CATALOGS_PATH = "/identityGovernance/entitlementManagement/accessPackageCatalogs"


class AccessPackageCatalogsAPI(ResourceAPI):
    """Mixin for access package catalog operations."""

    def list_access_package_catalogs(self, query: Optional[Query] = None) -> List[AccessPackageCatalog]:
        """
        List access package catalogs.

        Args:
            query: OData query options

        Returns:
            List of catalogs across all pages
        """
        self.logger.info("Fetching access package catalogs")
        return self._list_resources(CATALOGS_PATH, AccessPackageCatalog, query, constants.VERSION_BETA)

    def get_access_package_catalog(self, catalog_id: str) -> AccessPackageCatalog:
        """Get an access package catalog by ID."""
        self.logger.debug(f"Fetching access package catalog {catalog_id}")
        return self._get_resource(CATALOGS_PATH, catalog_id, AccessPackageCatalog, constants.VERSION_BETA)

    def create_access_package_catalog(self, catalog: AccessPackageCatalog) -> AccessPackageCatalog:
        """Create an access package catalog and return it with its new ID."""
        self.logger.info(f"Creating access package catalog {catalog.display_name!r}")
        return self._create_resource(CATALOGS_PATH, catalog, constants.VERSION_BETA)

    def update_access_package_catalog(self, catalog: AccessPackageCatalog) -> int:
        """Amend an access package catalog. Returns the HTTP status code."""
        self.logger.info(f"Updating access package catalog {catalog.id}")
        return self._update_resource(CATALOGS_PATH, catalog, constants.VERSION_BETA)

    def delete_access_package_catalog(self, catalog_id: str) -> int:
        """Delete an access package catalog. Returns the HTTP status code."""
        self.logger.info(f"Deleting access package catalog {catalog_id}")
        return self._delete_resource(CATALOGS_PATH, catalog_id, constants.VERSION_BETA)
