"""
Application-wide constants for the Microsoft Graph identity client.

This module defines national cloud endpoints, API versions, OData type
discriminators and the string enumerations used by Graph resources.
"""

# National cloud environments
ENVIRONMENT_GLOBAL = "global"
ENVIRONMENT_CHINA = "china"
ENVIRONMENT_USGOV_L4 = "usgovernmentl4"
ENVIRONMENT_USGOV_L5 = "usgovernmentl5"
ENVIRONMENT_GERMANY = "germany"
ENVIRONMENT_CANARY = "canary"

GRAPH_ENDPOINTS = {
    ENVIRONMENT_GLOBAL: "https://graph.microsoft.com",
    ENVIRONMENT_CHINA: "https://microsoftgraph.chinacloudapi.cn",
    ENVIRONMENT_USGOV_L4: "https://graph.microsoft.us",
    ENVIRONMENT_USGOV_L5: "https://dod-graph.microsoft.us",
    ENVIRONMENT_GERMANY: "https://graph.microsoft.de",
    ENVIRONMENT_CANARY: "https://canary.graph.microsoft.com",
}

# API versions
VERSION_1_0 = "v1.0"
VERSION_BETA = "beta"
API_VERSIONS = (VERSION_1_0, VERSION_BETA)

# HTTP defaults
DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_MAX_RETRIES = 0  # retries are opt-in

# OData type discriminators
ODATA_TYPE_USER = "#microsoft.graph.user"
ODATA_TYPE_SINGLE_USER = "#microsoft.graph.singleUser"
ODATA_TYPE_GROUP_MEMBERS = "#microsoft.graph.groupMembers"
ODATA_TYPE_REQUESTOR_MANAGER = "#microsoft.graph.requestorManager"
ODATA_TYPE_CONNECTED_ORGANIZATION_MEMBERS = "#microsoft.graph.connectedOrganizationMembers"
ODATA_TYPE_INTERNAL_SPONSORS = "#microsoft.graph.internalSponsors"
ODATA_TYPE_EXTERNAL_SPONSORS = "#microsoft.graph.externalSponsors"
ODATA_TYPE_IP_NAMED_LOCATION = "#microsoft.graph.ipNamedLocation"
ODATA_TYPE_COUNTRY_NAMED_LOCATION = "#microsoft.graph.countryNamedLocation"
ODATA_TYPE_IPV4_CIDR_RANGE = "#microsoft.graph.iPv4CidrRange"
ODATA_TYPE_IPV6_CIDR_RANGE = "#microsoft.graph.iPv6CidrRange"

# Country named location lookup
COUNTRY_LOOKUP_METHOD_CLIENT_IP = "clientIpAddress"
COUNTRY_LOOKUP_METHOD_AUTHENTICATOR_GPS = "authenticatorAppGps"

# Access review settings
ACCESS_REVIEW_TIMEOUT_KEEP_ACCESS = "keepAccess"
ACCESS_REVIEW_TIMEOUT_REMOVE_ACCESS = "removeAccess"
ACCESS_REVIEW_TIMEOUT_ACCEPT_RECOMMENDATION = "acceptAccessRecommendation"

ACCESS_REVIEW_RECURRENCE_WEEKLY = "weekly"
ACCESS_REVIEW_RECURRENCE_MONTHLY = "monthly"
ACCESS_REVIEW_RECURRENCE_QUARTERLY = "quarterly"
ACCESS_REVIEW_RECURRENCE_HALF_YEARLY = "halfyearly"
ACCESS_REVIEW_RECURRENCE_ANNUAL = "annual"
ACCESS_REVIEW_RECURRENCE_ONE_TIME = "onetime"

ACCESS_REVIEW_REVIEWER_SELF = "Self"
ACCESS_REVIEW_REVIEWER_REVIEWERS = "Reviewers"
ACCESS_REVIEW_REVIEWER_MANAGER = "Manager"

# Requestor settings scope
REQUESTOR_SCOPE_NO_SUBJECTS = "NoSubjects"
REQUESTOR_SCOPE_SPECIFIC_DIRECTORY_SUBJECTS = "SpecificDirectorySubjects"
REQUESTOR_SCOPE_SPECIFIC_CONNECTED_ORGANIZATION_SUBJECTS = "SpecificConnectedOrganizationSubjects"
REQUESTOR_SCOPE_ALL_CONFIGURED_CONNECTED_ORGANIZATION_SUBJECTS = "AllConfiguredConnectedOrganizationSubjects"
REQUESTOR_SCOPE_ALL_EXISTING_CONNECTED_ORGANIZATION_SUBJECTS = "AllExistingConnectedOrganizationSubjects"
REQUESTOR_SCOPE_ALL_EXISTING_DIRECTORY_MEMBER_USERS = "AllExistingDirectoryMemberUsers"
REQUESTOR_SCOPE_ALL_EXISTING_DIRECTORY_SUBJECTS = "AllExistingDirectorySubjects"
REQUESTOR_SCOPE_ALL_EXTERNAL_SUBJECTS = "AllExternalSubjects"

# Approval settings
APPROVAL_MODE_NO_APPROVAL = "NoApproval"
APPROVAL_MODE_SINGLE_STAGE = "SingleStage"
APPROVAL_MODE_SERIAL = "Serial"

# Access package catalogs
CATALOG_STATUS_PUBLISHED = "Published"
CATALOG_STATUS_UNPUBLISHED = "Unpublished"

CATALOG_TYPE_USER_MANAGED = "UserManaged"
CATALOG_TYPE_SERVICE_DEFAULT = "ServiceDefault"
CATALOG_TYPE_SERVICE_MANAGED = "ServiceManaged"

# Access package assignment requests
REQUEST_TYPE_ADMIN_ADD = "AdminAdd"
REQUEST_TYPE_ADMIN_UPDATE = "AdminUpdate"
REQUEST_TYPE_ADMIN_REMOVE = "AdminRemove"
REQUEST_TYPE_USER_ADD = "UserAdd"
REQUEST_TYPE_USER_UPDATE = "UserUpdate"
REQUEST_TYPE_USER_REMOVE = "UserRemove"
REQUEST_TYPE_USER_EXTEND = "UserExtend"

REQUEST_STATE_SUBMITTED = "Submitted"
REQUEST_STATE_PENDING_APPROVAL = "PendingApproval"
REQUEST_STATE_DELIVERING = "Delivering"
REQUEST_STATE_DELIVERED = "Delivered"
REQUEST_STATE_PARTIALLY_DELIVERED = "PartiallyDelivered"
REQUEST_STATE_DELIVERY_FAILED = "DeliveryFailed"
REQUEST_STATE_DENIED = "Denied"
REQUEST_STATE_SCHEDULED = "Scheduled"
REQUEST_STATE_CANCELED = "Canceled"

# Requests can only be deleted once they reach one of these states
REQUEST_STATES_DELETABLE = (
    REQUEST_STATE_DENIED,
    REQUEST_STATE_CANCELED,
    REQUEST_STATE_DELIVERED,
)
