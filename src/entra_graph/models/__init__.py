"""
Data models for Microsoft Graph identity resources.

Contains DTOs for named locations, entitlement management and users.
"""

from .base import GraphModel, ODATA_TYPE_KEY
from .named_location import NamedLocation, IPNamedLocation, IPNamedLocationIPRange, CountryNamedLocation
from .access_package import AccessPackageCatalog, AccessPackage
from .assignment_policy import (
    UserSet,
    AssignmentReviewSettings,
    RequestorSettings,
    ApprovalStage,
    ApprovalSettings,
    AccessPackageAssignmentPolicy,
)
from .assignment_request import (
    AccessPackageAssignment,
    ExpirationPattern,
    RequestSchedule,
    AccessPackageAssignmentRequest,
)
from .user import User, UserPasswordProfile

__all__ = [
    "GraphModel",
    "ODATA_TYPE_KEY",
    "NamedLocation",
    "IPNamedLocation",
    "IPNamedLocationIPRange",
    "CountryNamedLocation",
    "AccessPackageCatalog",
    "AccessPackage",
    "UserSet",
    "AssignmentReviewSettings",
    "RequestorSettings",
    "ApprovalStage",
    "ApprovalSettings",
    "AccessPackageAssignmentPolicy",
    "AccessPackageAssignment",
    "ExpirationPattern",
    "RequestSchedule",
    "AccessPackageAssignmentRequest",
    "User",
    "UserPasswordProfile",
]
