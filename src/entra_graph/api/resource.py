"""
Shared plumbing for resource mixins.

Every Graph resource follows the same shape: list a collection, fetch one
item by ID, create with POST, amend with PATCH or PUT, remove with DELETE.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar

from ..models import GraphModel
from .helpers import decode_model, entity_path, require_id
from .odata import Query

M = TypeVar("M", bound=GraphModel)


class ResourceAPI:
    """Base mixin for resource operations."""

    # Type hints for attributes provided by APIClient base class
    logger: logging.Logger

    def _make_request(self, method: str, entity: str, valid_status_codes: Iterable[int],
                      api_version: Optional[str] = None, has_tenant_id: bool = True, **kwargs) -> Any:
        """Method provided by APIClient base class."""
        ...

    def get(self, entity: str, params: Optional[Dict[str, Any]] = None, valid_status_codes: Iterable[int] = (200,),
            api_version: Optional[str] = None, headers: Optional[Dict[str, str]] = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def get_collection(self, entity: str, params: Optional[Dict[str, Any]] = None, api_version: Optional[str] = None,
                       headers: Optional[Dict[str, str]] = None) -> List[Any]:
        """Method provided by APIClient base class."""
        ...

    def post(self, entity: str, data: Optional[Dict[str, Any]] = None, valid_status_codes: Iterable[int] = (201,),
             api_version: Optional[str] = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def patch(self, entity: str, data: Dict[str, Any], valid_status_codes: Iterable[int] = (204,),
              api_version: Optional[str] = None) -> int:
        """Method provided by APIClient base class."""
        ...

    def put(self, entity: str, data: Dict[str, Any], valid_status_codes: Iterable[int] = (200,),
            api_version: Optional[str] = None) -> int:
        """Method provided by APIClient base class."""
        ...

    def delete(self, entity: str, valid_status_codes: Iterable[int] = (204,),
               api_version: Optional[str] = None) -> int:
        """Method provided by APIClient base class."""
        ...

    def _list_resources(
        self,
        collection: str,
        model: Type[M],
        query: Optional[Query],
        api_version: str
    ) -> List[M]:
        query = query or Query()
        params = query.values()
        items = self.get_collection(
            collection,
            params=params if params else None,
            api_version=api_version,
            headers=query.headers() or None
        )
        return [decode_model(model, item, f"list {model.__name__}") for item in items]

    def _get_resource(self, collection: str, resource_id: str, model: Type[M], api_version: str,
                      params: Optional[Dict[str, Any]] = None) -> M:
        result = self.get(entity_path(collection, resource_id), params=params, api_version=api_version)
        return decode_model(model, result, f"get {model.__name__}")

    def _create_resource(self, collection: str, resource: M, api_version: str) -> M:
        result = self.post(collection, resource.to_dict(), api_version=api_version)
        return decode_model(type(resource), result, f"create {type(resource).__name__}")

    def _update_resource(self, collection: str, resource: GraphModel, api_version: str) -> int:
        resource_id = require_id(resource, f"update {type(resource).__name__}")
        return self.patch(entity_path(collection, resource_id), resource.to_dict(), api_version=api_version)

    def _delete_resource(self, collection: str, resource_id: str, api_version: str) -> int:
        return self.delete(entity_path(collection, resource_id), api_version=api_version)
