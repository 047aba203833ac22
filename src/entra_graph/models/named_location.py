"""
Named location data models.

Contains DTOs for conditional access named locations. The collection
endpoint returns a mix of IP and country locations, told apart by
``@odata.type``.
"""

from typing import List, Optional

from ..core import constants
from .base import GraphDateTime, GraphModel, odata_field


class NamedLocation(GraphModel):
    """Fields shared by every named location."""

    id: Optional[str] = None
    odata_type: Optional[str] = odata_field()
    display_name: Optional[str] = None
    created_date_time: Optional[GraphDateTime] = None
    modified_date_time: Optional[GraphDateTime] = None


class IPNamedLocationIPRange(GraphModel):
    """A single IPv4 or IPv6 CIDR range."""

    odata_type: Optional[str] = odata_field()
    cidr_address: Optional[str] = None


class IPNamedLocation(NamedLocation):
    """Named location defined by IP ranges."""

    __odata_type__ = constants.ODATA_TYPE_IP_NAMED_LOCATION

    ip_ranges: Optional[List[IPNamedLocationIPRange]] = None
    is_trusted: Optional[bool] = None


class CountryNamedLocation(NamedLocation):
    """Named location defined by countries and regions."""

    __odata_type__ = constants.ODATA_TYPE_COUNTRY_NAMED_LOCATION

    countries_and_regions: Optional[List[str]] = None
    include_unknown_countries_and_regions: Optional[bool] = None
    country_lookup_method: Optional[str] = None
