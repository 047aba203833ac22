"""
Named location operations for Microsoft Graph.

Handles conditional access named locations (IP ranges and countries).
"""

from typing import Any, Dict, List, Optional

from ..core import constants
from ..models import NamedLocation, IPNamedLocation, CountryNamedLocation
from .helpers import decode_model, entity_path, require_id
from .odata import OData
from .resource import ResourceAPI

NAMED_LOCATIONS_PATH = "/identity/conditionalAccess/namedLocations"


class NamedLocationsAPI(ResourceAPI):
    """Mixin for named location operations."""

    def list_named_locations(self, filter: Optional[str] = None) -> List[NamedLocation]:
        """
        List named locations, optionally filtered using OData.

        The collection mixes IP and country locations; each item is decoded
        into its concrete type. Items without a recognised ``@odata.type``
        are skipped.

        Args:
            filter: OData $filter expression

        Returns:
            List of IPNamedLocation and CountryNamedLocation objects
        """
        self.logger.info("Fetching named locations")

        params: Dict[str, Any] = {}
        if filter:
            params["$filter"] = filter

        items = self.get_collection(
            NAMED_LOCATIONS_PATH,
            params=params if params else None,
            api_version=constants.VERSION_1_0
        )

        locations: List[NamedLocation] = []
        for item in items:
            odata_type = OData.from_dict(item).type
            location_cls = NamedLocation.resolve_type(odata_type)
            if location_cls is None:
                self.logger.debug(f"Skipping named location with unsupported type {odata_type!r}")
                continue
            locations.append(decode_model(location_cls, item, "list_named_locations"))

        return locations

    def get_named_location(self, location_id: str) -> NamedLocation:
        """
        Get a named location of any type.

        Returns:
            IPNamedLocation or CountryNamedLocation; a plain NamedLocation for
            types this client does not model
        """
        self.logger.debug(f"Fetching named location {location_id}")
        result = self.get(entity_path(NAMED_LOCATIONS_PATH, location_id), api_version=constants.VERSION_1_0)
        return decode_model(NamedLocation, result, "get_named_location")

    def get_ip_named_location(self, location_id: str) -> IPNamedLocation:
        """Get an IP named location."""
        self.logger.debug(f"Fetching IP named location {location_id}")
        result = self.get(entity_path(NAMED_LOCATIONS_PATH, location_id), api_version=constants.VERSION_1_0)
        return decode_model(IPNamedLocation, result, "get_ip_named_location")

    def get_country_named_location(self, location_id: str) -> CountryNamedLocation:
        """Get a country named location."""
        self.logger.debug(f"Fetching country named location {location_id}")
        result = self.get(entity_path(NAMED_LOCATIONS_PATH, location_id), api_version=constants.VERSION_1_0)
        return decode_model(CountryNamedLocation, result, "get_country_named_location")

    def create_ip_named_location(self, location: IPNamedLocation) -> IPNamedLocation:
        """
        Create an IP named location.

        Args:
            location: Location to create; the discriminator is set automatically

        Returns:
            Created location, including its service-assigned ID
        """
        self.logger.info(f"Creating IP named location {location.display_name!r}")
        result = self.post(NAMED_LOCATIONS_PATH, location.to_dict(), api_version=constants.VERSION_1_0)
        return decode_model(IPNamedLocation, result, "create_ip_named_location")

    def create_country_named_location(self, location: CountryNamedLocation) -> CountryNamedLocation:
        """
        Create a country named location.

        Args:
            location: Location to create; the discriminator is set automatically

        Returns:
            Created location, including its service-assigned ID
        """
        self.logger.info(f"Creating country named location {location.display_name!r}")
        result = self.post(NAMED_LOCATIONS_PATH, location.to_dict(), api_version=constants.VERSION_1_0)
        return decode_model(CountryNamedLocation, result, "create_country_named_location")

    def update_ip_named_location(self, location: IPNamedLocation) -> int:
        """
        Amend an existing IP named location.

        Returns:
            HTTP status code
        """
        location_id = require_id(location, "update_ip_named_location")
        self.logger.info(f"Updating IP named location {location_id}")
        return self.patch(
            entity_path(NAMED_LOCATIONS_PATH, location_id),
            location.to_dict(),
            api_version=constants.VERSION_1_0
        )

    def update_country_named_location(self, location: CountryNamedLocation) -> int:
        """
        Amend an existing country named location.

        Returns:
            HTTP status code
        """
        location_id = require_id(location, "update_country_named_location")
        self.logger.info(f"Updating country named location {location_id}")
        return self.patch(
            entity_path(NAMED_LOCATIONS_PATH, location_id),
            location.to_dict(),
            api_version=constants.VERSION_1_0
        )

    def delete_named_location(self, location_id: str) -> int:
        """
        Delete a named location.

        Returns:
            HTTP status code
        """
        self.logger.info(f"Deleting named location {location_id}")
        return self.delete(entity_path(NAMED_LOCATIONS_PATH, location_id), api_version=constants.VERSION_1_0)
