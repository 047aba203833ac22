"""
Access package assignment policy operations for Microsoft Graph.

Policies are replaced wholesale: updates use PUT rather than PATCH.
"""

from typing import List, Optional

from ..core import constants
from ..models import AccessPackageAssignmentPolicy
from .helpers import entity_path, require_id
from .odata import Query
from .resource import ResourceAPI

ASSIGNMENT_POLICIES_PATH = "/identityGovernance/entitlementManagement/accessPackageAssignmentPolicies"


class AccessPackageAssignmentPoliciesAPI(ResourceAPI):
    """Mixin for access package assignment policy operations."""

    def list_access_package_assignment_policies(
        self,
        query: Optional[Query] = None
    ) -> List[AccessPackageAssignmentPolicy]:
        """
        List access package assignment policies.

        Args:
            query: OData query options

        Returns:
            List of policies across all pages
        """
        self.logger.info("Fetching access package assignment policies")
        return self._list_resources(
            ASSIGNMENT_POLICIES_PATH, AccessPackageAssignmentPolicy, query, constants.VERSION_BETA
        )

    def get_access_package_assignment_policy(self, policy_id: str) -> AccessPackageAssignmentPolicy:
        """Get an access package assignment policy by ID."""
        self.logger.debug(f"Fetching access package assignment policy {policy_id}")
        return self._get_resource(
            ASSIGNMENT_POLICIES_PATH, policy_id, AccessPackageAssignmentPolicy, constants.VERSION_BETA
        )

    def create_access_package_assignment_policy(
        self,
        policy: AccessPackageAssignmentPolicy
    ) -> AccessPackageAssignmentPolicy:
        """Create an assignment policy and return it with its new ID."""
        self.logger.info(f"Creating access package assignment policy {policy.display_name!r}")
        return self._create_resource(ASSIGNMENT_POLICIES_PATH, policy, constants.VERSION_BETA)

    def update_access_package_assignment_policy(self, policy: AccessPackageAssignmentPolicy) -> int:
        """
        Replace an assignment policy.

        Args:
            policy: Full policy definition, including its ID

        Returns:
            HTTP status code
        """
        policy_id = require_id(policy, "update_access_package_assignment_policy")
        self.logger.info(f"Updating access package assignment policy {policy_id}")
        return self.put(
            entity_path(ASSIGNMENT_POLICIES_PATH, policy_id),
            policy.to_dict(),
            api_version=constants.VERSION_BETA
        )

    def delete_access_package_assignment_policy(self, policy_id: str) -> int:
        """Delete an assignment policy. Returns the HTTP status code."""
        self.logger.info(f"Deleting access package assignment policy {policy_id}")
        return self._delete_resource(ASSIGNMENT_POLICIES_PATH, policy_id, constants.VERSION_BETA)
