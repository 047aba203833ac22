"""
Access package assignment policy data models.

Contains DTOs for who may request an access package, who approves, and how
assignments are reviewed.
"""

from typing import List, Optional

from pydantic import ConfigDict

from .base import GraphDateTime, GraphModel, odata_field


class PolicyModel(GraphModel):
    """
    Policy member that keeps properties it does not model.

    Policies are replaced as a whole on update, so members read from the
    service are written back unchanged.
    """

    model_config = ConfigDict(extra="allow")


class UserSet(PolicyModel):
    """
    Subject of a requestor, approver or reviewer setting.

    The concrete kind (single user, group members, requestor manager, ...) is
    given by ``odata_type``; ``id`` names the user or group where applicable.
    """

    odata_type: Optional[str] = odata_field()
    id: Optional[str] = None
    description: Optional[str] = None
    is_backup: Optional[bool] = None
    manager_level: Optional[int] = None


class AssignmentReviewSettings(PolicyModel):
    """Recurring access review of assignments made through a policy."""

    is_enabled: Optional[bool] = None
    access_review_timeout_behavior: Optional[str] = None
    duration_in_days: Optional[int] = None
    is_access_recommendation_enabled: Optional[bool] = None
    is_approval_justification_required: Optional[bool] = None
    recurrence_type: Optional[str] = None
    reviewer_type: Optional[str] = None
    reviewers: Optional[List[UserSet]] = None
    start_date_time: Optional[GraphDateTime] = None


class RequestorSettings(PolicyModel):
    """Who may request an access package."""

    scope_type: Optional[str] = None
    accept_requests: Optional[bool] = None
    allowed_requestors: Optional[List[UserSet]] = None


class ApprovalStage(PolicyModel):
    """One stage of request approval."""

    approval_stage_time_out_in_days: Optional[int] = None
    is_approver_justification_required: Optional[bool] = None
    is_escalation_enabled: Optional[bool] = None
    escalation_time_in_minutes: Optional[int] = None
    primary_approvers: Optional[List[UserSet]] = None
    escalation_approvers: Optional[List[UserSet]] = None


class ApprovalSettings(PolicyModel):
    """Approval requirements for requests under a policy."""

    is_approval_required: Optional[bool] = None
    is_approval_required_for_extension: Optional[bool] = None
    is_requestor_justification_required: Optional[bool] = None
    approval_mode: Optional[str] = None
    approval_stages: Optional[List[ApprovalStage]] = None


class AccessPackageAssignmentPolicy(PolicyModel):
    """Rules governing assignment of an access package."""

    id: Optional[str] = None
    access_package_id: Optional[str] = None
    display_name: Optional[str] = None
    description: Optional[str] = None
    can_extend: Optional[bool] = None
    duration_in_days: Optional[int] = None
    expiration_date_time: Optional[GraphDateTime] = None
    access_review_settings: Optional[AssignmentReviewSettings] = None
    requestor_settings: Optional[RequestorSettings] = None
    request_approval_settings: Optional[ApprovalSettings] = None
    created_by: Optional[str] = None
    created_date_time: Optional[GraphDateTime] = None
    modified_by: Optional[str] = None
    modified_date_time: Optional[GraphDateTime] = None
