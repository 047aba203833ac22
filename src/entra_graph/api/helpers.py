"""
Helper functions for API operations.

Provides utility functions for building entity paths and checking payloads.
"""

from typing import Any, Dict, Optional, Type, TypeVar
from urllib.parse import quote

from pydantic import ValidationError

from ..models import GraphModel
from .exceptions import DecodeError

M = TypeVar("M", bound=GraphModel)


def entity_path(collection: str, resource_id: str, *segments: str) -> str:
    """
    Build the path of a single resource in a collection.

    Args:
        collection: Collection path (e.g. '/users')
        resource_id: Resource ID
        *segments: Further path segments (e.g. 'cancel')

    Returns:
        Resource path with the ID URL-escaped

    Raises:
        ValueError: If the resource ID is empty
    """
    if not resource_id:
        raise ValueError("Resource ID must not be empty")

    path = f"{collection.rstrip('/')}/{quote(str(resource_id), safe='')}"
    for segment in segments:
        path = f"{path}/{segment.strip('/')}"
    return path


def require_id(resource: Any, operation: str) -> str:
    """
    Return the ID of a resource that must already exist.

    Args:
        resource: Model instance with an ``id`` attribute
        operation: Operation name for the error message

    Raises:
        ValueError: If the resource has no ID
    """
    resource_id = getattr(resource, "id", None)
    if not resource_id:
        raise ValueError(f"{operation}: {type(resource).__name__}.id is required")
    return resource_id


def require_body(result: Optional[Any], operation: str) -> Dict[str, Any]:
    """
    Check that a response carried a JSON object.

    Args:
        result: Decoded response body
        operation: Operation name for the error message

    Raises:
        DecodeError: If the body is empty or not an object
    """
    if not isinstance(result, dict):
        raise DecodeError(f"{operation}: expected a JSON object in the response, got {type(result).__name__}")
    return result


def decode_model(model: Type[M], result: Optional[Any], operation: str) -> M:
    """
    Decode a response body into a model, dispatching on ``@odata.type``.

    Args:
        model: Expected model class (or base class of the expected type)
        result: Decoded response body
        operation: Operation name for the error message

    Raises:
        DecodeError: If the body is not an object or a member has the wrong type
    """
    body = require_body(result, operation)
    try:
        return model.from_odata(body)
    except ValidationError as e:
        raise DecodeError(f"{operation}: response does not match {model.__name__}: {e}") from e
