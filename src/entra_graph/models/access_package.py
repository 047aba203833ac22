"""
Access package data models.

Contains DTOs for entitlement management catalogs and access packages.
"""

from typing import Optional

from .base import GraphDateTime, GraphModel


class AccessPackageCatalog(GraphModel):
    """Container of access packages and their resources."""

    id: Optional[str] = None
    display_name: Optional[str] = None
    description: Optional[str] = None
    catalog_status: Optional[str] = None
    catalog_type: Optional[str] = None
    is_externally_visible: Optional[bool] = None
    created_by: Optional[str] = None
    created_date_time: Optional[GraphDateTime] = None
    modified_by: Optional[str] = None
    modified_date_time: Optional[GraphDateTime] = None


class AccessPackage(GraphModel):
    """Bundle of resources a user can request access to."""

    id: Optional[str] = None
    catalog_id: Optional[str] = None
    display_name: Optional[str] = None
    description: Optional[str] = None
    is_hidden: Optional[bool] = None
    is_role_scopes_visible: Optional[bool] = None
    created_by: Optional[str] = None
    created_date_time: Optional[GraphDateTime] = None
    modified_by: Optional[str] = None
    modified_date_time: Optional[GraphDateTime] = None
