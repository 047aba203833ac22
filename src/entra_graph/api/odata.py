"""
OData query options and response metadata.

Graph collections accept the standard OData system query options and
annotate payloads with ``@odata.*`` members.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

CONSISTENCY_LEVEL_EVENTUAL = "eventual"

FORMAT_JSON = "json"
FORMAT_ATOM = "atom"
FORMAT_XML = "xml"

ASCENDING = "asc"
DESCENDING = "desc"


@dataclass
class Expand:
    """Relationship to expand, optionally limited to some properties."""

    relationship: str
    select: List[str] = field(default_factory=list)

    def value(self) -> str:
        if self.select:
            return f"{self.relationship}($select={','.join(self.select)})"
        return self.relationship


@dataclass
class OrderBy:
    """Sort order for a collection."""

    field: str
    direction: Optional[str] = None

    def value(self) -> str:
        if self.direction:
            return f"{self.field} {self.direction}"
        return self.field


@dataclass
class Query:
    """OData system query options for a list request."""

    count: bool = False
    consistency_level: Optional[str] = None
    expand: Optional[Expand] = None
    filter: Optional[str] = None
    format: Optional[str] = None
    order_by: Optional[OrderBy] = None
    search: Optional[str] = None
    select: List[str] = field(default_factory=list)
    skip: int = 0
    top: int = 0

    def values(self) -> Dict[str, str]:
        """Query string parameters; unset options are left out."""
        params: Dict[str, str] = {}
        if self.count:
            params["$count"] = "true"
        if self.expand is not None and self.expand.relationship:
            params["$expand"] = self.expand.value()
        if self.filter:
            params["$filter"] = self.filter
        if self.format:
            params["$format"] = self.format
        if self.order_by is not None and self.order_by.field:
            params["$orderby"] = self.order_by.value()
        if self.search:
            params["$search"] = f'"{self.search}"'
        if self.select:
            params["$select"] = ",".join(self.select)
        if self.skip > 0:
            params["$skip"] = str(self.skip)
        if self.top > 0:
            params["$top"] = str(self.top)
        return params

    def headers(self) -> Dict[str, str]:
        """Request headers implied by the query (advanced queries need ConsistencyLevel)."""
        if self.consistency_level:
            return {"ConsistencyLevel": self.consistency_level}
        return {}


@dataclass
class OData:
    """OData annotations of a response payload."""

    context: Optional[str] = None
    count: Optional[int] = None
    id: Optional[str] = None
    next_link: Optional[str] = None
    type: Optional[str] = None
    etag: Optional[str] = None
    value: Optional[List[Any]] = None

    @classmethod
    def from_dict(cls, data: Any) -> "OData":
        if not isinstance(data, dict):
            return cls()
        value = data.get("value")
        return cls(
            context=data.get("@odata.context"),
            count=data.get("@odata.count"),
            id=data.get("@odata.id"),
            next_link=data.get("@odata.nextLink"),
            type=data.get("@odata.type"),
            etag=data.get("@odata.etag"),
            value=value if isinstance(value, list) else None,
        )
