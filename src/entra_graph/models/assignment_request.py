"""
Access package assignment request data models.

Contains DTOs for requests to add, update or remove an assignment.
"""

from typing import Optional

from ..core import constants
from .access_package import AccessPackage
from .base import GraphDateTime, GraphModel


class AccessPackageAssignment(GraphModel):
    """Assignment of an access package to a target subject."""

    id: Optional[str] = None
    access_package_id: Optional[str] = None
    assignment_policy_id: Optional[str] = None
    target_id: Optional[str] = None
    assignment_state: Optional[str] = None
    assignment_status: Optional[str] = None
    expired_date_time: Optional[GraphDateTime] = None


class ExpirationPattern(GraphModel):
    """When a requested assignment ends."""

    type: Optional[str] = None
    duration: Optional[str] = None  # ISO 8601 duration, e.g. P30D
    end_date_time: Optional[GraphDateTime] = None


class RequestSchedule(GraphModel):
    """Requested start and expiry of an assignment."""

    start_date_time: Optional[GraphDateTime] = None
    expiration: Optional[ExpirationPattern] = None


class AccessPackageAssignmentRequest(GraphModel):
    """Request to create, change or remove an access package assignment."""

    id: Optional[str] = None
    request_type: Optional[str] = None
    request_state: Optional[str] = None
    request_status: Optional[str] = None
    justification: Optional[str] = None
    access_package: Optional[AccessPackage] = None
    access_package_assignment: Optional[AccessPackageAssignment] = None
    schedule: Optional[RequestSchedule] = None
    created_date_time: Optional[GraphDateTime] = None
    completed_date: Optional[GraphDateTime] = None

    @property
    def is_deletable(self) -> bool:
        """Whether the service allows deleting the request in its current state."""
        return self.request_state in constants.REQUEST_STATES_DELETABLE
