"""
Tests for Graph DTO serialization.

Covers camelCase mapping, omission of unset fields, nested decoding and
discriminator dispatch.
"""

from datetime import datetime

import pytest
import pytz
from pydantic import ValidationError

from entra_graph.core import constants
from entra_graph.models import (
    NamedLocation,
    IPNamedLocation,
    IPNamedLocationIPRange,
    CountryNamedLocation,
    AccessPackageAssignmentPolicy,
    AssignmentReviewSettings,
    ApprovalSettings,
    ApprovalStage,
    RequestorSettings,
    UserSet,
    AccessPackageAssignmentRequest,
    AccessPackageAssignment,
    User,
    UserPasswordProfile,
)


class TestSerialization:
    """to_dict behaviour."""

    def test_camel_case_names(self):
        location = CountryNamedLocation(id="loc-1", include_unknown_countries_and_regions=True)

        assert location.to_dict() == {
            "@odata.type": "#microsoft.graph.countryNamedLocation",
            "id": "loc-1",
            "includeUnknownCountriesAndRegions": True,
        }

    def test_unset_fields_are_omitted(self):
        user = User(display_name="Test User", account_enabled=False)

        assert user.to_dict() == {"displayName": "Test User", "accountEnabled": False}

    def test_discriminator_is_always_emitted_for_concrete_types(self):
        location = IPNamedLocation(display_name="Office", odata_type="#microsoft.graph.somethingElse")

        payload = location.to_dict()

        assert payload["@odata.type"] == constants.ODATA_TYPE_IP_NAMED_LOCATION
        assert payload["displayName"] == "Office"

    def test_user_set_keeps_caller_discriminator(self):
        approver = UserSet(odata_type=constants.ODATA_TYPE_SINGLE_USER, id="user-1", is_backup=False)

        assert approver.to_dict() == {
            "@odata.type": "#microsoft.graph.singleUser",
            "id": "user-1",
            "isBackup": False,
        }

    def test_nested_models_and_datetimes(self):
        start = datetime(2024, 3, 1, 9, 30, tzinfo=pytz.UTC)
        policy = AccessPackageAssignmentPolicy(
            access_package_id="ap-1",
            display_name="Policy",
            access_review_settings=AssignmentReviewSettings(
                is_enabled=True,
                start_date_time=start,
                duration_in_days=5,
                reviewers=[UserSet(odata_type=constants.ODATA_TYPE_USER, id="approver")],
            ),
            requestor_settings=RequestorSettings(
                scope_type=constants.REQUESTOR_SCOPE_NO_SUBJECTS,
                accept_requests=True,
            ),
            request_approval_settings=ApprovalSettings(
                is_approval_required=True,
                approval_mode=constants.APPROVAL_MODE_SINGLE_STAGE,
                approval_stages=[ApprovalStage(approval_stage_time_out_in_days=7)],
            ),
        )

        payload = policy.to_dict()

        review = payload["accessReviewSettings"]
        assert review["startDateTime"] == "2024-03-01T09:30:00Z"
        assert review["durationInDays"] == 5
        assert review["reviewers"] == [{"@odata.type": "#microsoft.graph.user", "id": "approver"}]
        assert payload["requestorSettings"] == {"scopeType": "NoSubjects", "acceptRequests": True}
        stages = payload["requestApprovalSettings"]["approvalStages"]
        assert stages == [{"approvalStageTimeOutInDays": 7}]

    def test_password_profile(self):
        user = User(
            user_principal_name="jane@example.com",
            password_profile=UserPasswordProfile(password="s3cret", force_change_password_next_sign_in=True),
        )

        assert user.to_dict()["passwordProfile"] == {
            "password": "s3cret",
            "forceChangePasswordNextSignIn": True,
        }


class TestDeserialization:
    """from_dict and from_odata behaviour."""

    def test_nested_lists_and_timestamps(self):
        data = {
            "@odata.type": "#microsoft.graph.ipNamedLocation",
            "id": "loc-1",
            "displayName": "Office",
            "createdDateTime": "2021-06-01T10:15:30.1234567Z",
            "isTrusted": True,
            "ipRanges": [
                {"@odata.type": "#microsoft.graph.iPv4CidrRange", "cidrAddress": "10.0.0.0/24"},
            ],
            "unexpectedKey": "ignored",
        }

        location = IPNamedLocation.from_dict(data)

        assert location.id == "loc-1"
        assert location.is_trusted is True
        assert location.created_date_time == datetime(2021, 6, 1, 10, 15, 30, 123456, tzinfo=pytz.UTC)
        assert location.ip_ranges == [
            IPNamedLocationIPRange(odata_type=constants.ODATA_TYPE_IPV4_CIDR_RANGE, cidr_address="10.0.0.0/24")
        ]

    def test_null_values_stay_none(self):
        user = User.from_dict({"id": "u1", "mail": None})

        assert user.id == "u1"
        assert user.mail is None

    def test_string_for_list_is_rejected(self):
        with pytest.raises(ValidationError):
            CountryNamedLocation.from_dict({"countriesAndRegions": "GB"})

    def test_boolean_strings_are_coerced(self):
        assert IPNamedLocation.from_dict({"isTrusted": "false"}).is_trusted is False

    def test_wrong_type_is_rejected(self):
        with pytest.raises(ValidationError):
            CountryNamedLocation.from_dict({"includeUnknownCountriesAndRegions": "sometimes"})

    def test_snake_case_keys_are_accepted(self):
        assert User.from_dict({"display_name": "Test"}).display_name == "Test"

    def test_rejects_non_objects(self):
        with pytest.raises(TypeError):
            User.from_dict(["not", "an", "object"])

    def test_nested_request_models(self):
        data = {
            "id": "req-1",
            "requestType": "AdminAdd",
            "requestState": "Delivered",
            "accessPackageAssignment": {
                "targetId": "user-1",
                "assignmentPolicyId": "policy-1",
                "accessPackageId": "ap-1",
            },
        }

        request = AccessPackageAssignmentRequest.from_dict(data)

        assert request.access_package_assignment == AccessPackageAssignment(
            target_id="user-1", assignment_policy_id="policy-1", access_package_id="ap-1"
        )
        assert request.is_deletable

    def test_pending_request_is_not_deletable(self):
        request = AccessPackageAssignmentRequest(request_state=constants.REQUEST_STATE_PENDING_APPROVAL)

        assert not request.is_deletable


class TestDiscriminatorDispatch:
    """Polymorphic decoding by @odata.type."""

    def test_resolve_known_types(self):
        assert NamedLocation.resolve_type("#microsoft.graph.ipNamedLocation") is IPNamedLocation
        assert NamedLocation.resolve_type("#microsoft.graph.countryNamedLocation") is CountryNamedLocation

    def test_resolve_unknown_or_missing(self):
        assert NamedLocation.resolve_type("#microsoft.graph.compliantNetworkNamedLocation") is None
        assert NamedLocation.resolve_type(None) is None

    def test_from_odata_picks_subtype(self):
        location = NamedLocation.from_odata({
            "@odata.type": "#microsoft.graph.countryNamedLocation",
            "id": "loc-2",
            "countriesAndRegions": ["GB", "FR"],
            "includeUnknownCountriesAndRegions": False,
        })

        assert isinstance(location, CountryNamedLocation)
        assert location.countries_and_regions == ["GB", "FR"]
        assert location.include_unknown_countries_and_regions is False

    def test_from_odata_falls_back_to_base(self):
        location = NamedLocation.from_odata({"@odata.type": "#microsoft.graph.futureLocation", "id": "x"})

        assert type(location) is NamedLocation
        assert location.odata_type == "#microsoft.graph.futureLocation"

    def test_subtype_does_not_resolve_sibling(self):
        assert IPNamedLocation.resolve_type("#microsoft.graph.countryNamedLocation") is None


class TestPolicyRoundTrip:
    """Policies keep members they do not model."""

    def test_unmodelled_members_are_written_back(self):
        data = {
            "@odata.context": "https://graph.microsoft.com/beta/$metadata#accessPackageAssignmentPolicies/$entity",
            "id": "policy-1",
            "displayName": "Policy",
            "questions": [{"@odata.type": "#microsoft.graph.accessPackageTextInputQuestion", "isRequired": True}],
            "requestApprovalSettings": {
                "approvalMode": "SingleStage",
                "isApprovalRequiredForUpdate": True,
            },
        }

        policy = AccessPackageAssignmentPolicy.from_dict(data)
        policy.display_name = "Renamed"
        payload = policy.to_dict()

        assert payload["displayName"] == "Renamed"
        assert payload["questions"] == data["questions"]
        assert payload["requestApprovalSettings"] == {
            "approvalMode": "SingleStage",
            "isApprovalRequiredForUpdate": True,
        }
        assert "@odata.context" not in payload

    def test_other_models_drop_unknown_members(self):
        assert User.from_dict({"id": "u1", "onPremisesSyncEnabled": True}).to_dict() == {"id": "u1"}
