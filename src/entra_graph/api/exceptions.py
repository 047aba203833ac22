"""Graph-specific exceptions for error handling."""

from typing import Any, Dict, Optional, Tuple

import requests


class GraphError(Exception):
    """Base exception for all Graph operations."""
    pass


class AuthenticationError(GraphError):
    """No access token is available for the request."""
    pass


class DecodeError(GraphError):
    """Response body could not be decoded into the expected resource."""
    pass


class GraphAPIError(GraphError):
    """Unexpected HTTP status from the Graph API.

    Attributes:
        status_code: HTTP status code
        message: Error message from response
        endpoint: API endpoint that failed
        code: Graph error code (e.g. Request_ResourceNotFound)
        request_id: Value of the request-id header, for support cases
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        endpoint: str,
        code: Optional[str] = None,
        request_id: Optional[str] = None,
    ):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        self.code = code
        self.request_id = request_id
        label = f"{code}: {message}" if code else message
        super().__init__(f"[{status_code}] {endpoint}: {label}")

    @classmethod
    def from_response(cls, response: requests.Response) -> "GraphAPIError":
        """Build the exception matching a failed response."""
        code, message = parse_error_body(response)
        request_id = response.headers.get("request-id") or _inner_request_id(response)
        error_cls = ResourceNotFoundError if response.status_code == 404 else cls
        return error_cls(response.status_code, message, response.url, code=code, request_id=request_id)


class ResourceNotFoundError(GraphAPIError):
    """Resource does not exist (HTTP 404)."""
    pass


def _inner_request_id(response: requests.Response) -> Optional[str]:
    try:
        body: Any = response.json()
    except ValueError:
        return None
    error = body.get("error") if isinstance(body, dict) else None
    inner = error.get("innerError") if isinstance(error, dict) else None
    return inner.get("request-id") if isinstance(inner, dict) else None


def parse_error_body(response: requests.Response) -> Tuple[Optional[str], str]:
    """
    Extract code and message from a Graph error envelope.

    Graph errors look like ``{"error": {"code": ..., "message": ...}}``. Bodies
    that are not JSON fall back to the raw text.

    Returns:
        Tuple of (code or None, message)
    """
    try:
        body: Any = response.json()
    except ValueError:
        return None, response.text or response.reason or ""

    error: Optional[Dict[str, Any]] = body.get("error") if isinstance(body, dict) else None
    if not isinstance(error, dict):
        return None, response.text

    return error.get("code"), error.get("message") or response.text
