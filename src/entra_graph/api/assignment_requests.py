"""
Access package assignment request operations for Microsoft Graph.

Requests are never updated in place. They are submitted, cancelled while
pending, and deleted once they reach a final state.
"""

from typing import List, Optional

from ..core import constants
from ..models import AccessPackageAssignmentRequest
from .helpers import entity_path
from .odata import Query
from .resource import ResourceAPI

ASSIGNMENT_REQUESTS_PATH = "/identityGovernance/entitlementManagement/accessPackageAssignmentRequests"


class AccessPackageAssignmentRequestsAPI(ResourceAPI):
    """Mixin for access package assignment request operations."""

    def list_access_package_assignment_requests(
        self,
        query: Optional[Query] = None
    ) -> List[AccessPackageAssignmentRequest]:
        """
        List access package assignment requests.

        Args:
            query: OData query options

        Returns:
            List of requests across all pages
        """
        self.logger.info("Fetching access package assignment requests")
        return self._list_resources(
            ASSIGNMENT_REQUESTS_PATH, AccessPackageAssignmentRequest, query, constants.VERSION_BETA
        )

    def get_access_package_assignment_request(self, request_id: str) -> AccessPackageAssignmentRequest:
        """Get an access package assignment request by ID."""
        self.logger.debug(f"Fetching access package assignment request {request_id}")
        return self._get_resource(
            ASSIGNMENT_REQUESTS_PATH, request_id, AccessPackageAssignmentRequest, constants.VERSION_BETA
        )

    def create_access_package_assignment_request(
        self,
        request: AccessPackageAssignmentRequest
    ) -> AccessPackageAssignmentRequest:
        """
        Submit an access package assignment request.

        Args:
            request: Request with request_type and access_package_assignment
                     (target, policy and access package IDs)

        Returns:
            Submitted request, including its ID and initial state
        """
        self.logger.info(f"Submitting access package assignment request ({request.request_type})")
        return self._create_resource(ASSIGNMENT_REQUESTS_PATH, request, constants.VERSION_BETA)

    def cancel_access_package_assignment_request(self, request_id: str) -> int:
        """
        Cancel a pending access package assignment request.

        Returns:
            HTTP status code
        """
        self.logger.info(f"Cancelling access package assignment request {request_id}")
        response = self._make_request(
            "POST",
            entity_path(ASSIGNMENT_REQUESTS_PATH, request_id, "cancel"),
            (204,),
            api_version=constants.VERSION_BETA
        )
        return response.status_code

    def delete_access_package_assignment_request(self, request_id: str) -> int:
        """
        Delete an access package assignment request.

        The service only accepts this for denied, cancelled or delivered
        requests.

        Returns:
            HTTP status code
        """
        self.logger.info(f"Deleting access package assignment request {request_id}")
        return self._delete_resource(ASSIGNMENT_REQUESTS_PATH, request_id, constants.VERSION_BETA)
