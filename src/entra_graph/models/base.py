"""
Base data model for Microsoft Graph resources.

DTOs are pydantic models whose fields are all optional. A field set to None
is absent: it is left out of request bodies and stays None when the service
omits it. Field names are snake_case and map to Graph's camelCase keys
unless the field names its alias explicitly.
"""

from datetime import datetime
from typing import Annotated, Any, ClassVar, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from ..core.date_utils import DateUtils

ODATA_TYPE_KEY = "@odata.type"

T = TypeVar("T", bound="GraphModel")


def _parse_timestamp(value: Any) -> Any:
    if isinstance(value, str):
        return DateUtils.parse_graph_datetime(value)
    if isinstance(value, datetime):
        return DateUtils.to_utc(value)
    return value


# Aware UTC datetime, written as ISO 8601 with a 'Z' suffix
GraphDateTime = Annotated[
    datetime,
    BeforeValidator(_parse_timestamp),
    PlainSerializer(DateUtils.format_graph_datetime, return_type=str, when_used="json"),
]


def odata_field() -> Any:
    """Field holding the ``@odata.type`` discriminator."""
    return Field(default=None, alias=ODATA_TYPE_KEY)


def _all_subclasses(cls: type) -> List[type]:
    found = []
    for sub in cls.__subclasses__():
        found.append(sub)
        found.extend(_all_subclasses(sub))
    return found


class GraphModel(BaseModel):
    """Base class for Graph DTOs."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    # Discriminator emitted for this concrete type; None for abstract bases
    __odata_type__: ClassVar[Optional[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to a Graph JSON payload.

        Returns:
            Dictionary with camelCase keys; None members are omitted
        """
        payload = self.model_dump(by_alias=True, exclude_none=True, mode="json")

        # Response annotations kept as extra members are not part of a request body
        for key in [key for key in payload if key.startswith("@odata.") and key != ODATA_TYPE_KEY]:
            del payload[key]

        if self.__odata_type__:
            payload[ODATA_TYPE_KEY] = self.__odata_type__

        return payload

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """
        Build an instance from a Graph JSON payload.

        Args:
            data: Decoded JSON object

        Returns:
            Model instance

        Raises:
            TypeError: If data is not a JSON object
            pydantic.ValidationError: If a member has the wrong type
        """
        if not isinstance(data, dict):
            raise TypeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")
        return cls.model_validate(data)

    @classmethod
    def resolve_type(cls, odata_type: Optional[str]) -> Optional[Type["GraphModel"]]:
        """
        Find the class or subclass registered for a discriminator value.

        Args:
            odata_type: Value of ``@odata.type``

        Returns:
            Matching class, or None when the value is missing or unknown
        """
        if not odata_type:
            return None

        for candidate in [cls] + _all_subclasses(cls):
            if candidate.__odata_type__ == odata_type:
                return candidate
        return None

    @classmethod
    def from_odata(cls, data: Dict[str, Any]) -> "GraphModel":
        """Decode into the subtype named by ``@odata.type``, falling back to cls."""
        if not isinstance(data, dict):
            raise TypeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")

        target = cls.resolve_type(data.get(ODATA_TYPE_KEY)) or cls
        return target.model_validate(data)
