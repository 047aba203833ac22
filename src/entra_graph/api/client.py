"""
Base API client for Microsoft Graph.

Handles URL construction, bearer authentication, HTTP requests, status code
gating and collection paging.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..core import constants
from .exceptions import AuthenticationError, DecodeError, GraphAPIError
from .odata import OData


class APIClient:
    """Base client for interacting with the Microsoft Graph API."""

    def __init__(
        self,
        tenant_id: str,
        environment: str = constants.ENVIRONMENT_GLOBAL,
        api_version: str = constants.VERSION_1_0,
        access_token: Optional[str] = None,
        token_provider: Optional[Callable[[], str]] = None,
        timeout: int = constants.DEFAULT_TIMEOUT,
        max_retries: int = constants.DEFAULT_MAX_RETRIES,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize API client.

        Args:
            tenant_id: Azure AD tenant the requests are scoped to
            environment: National cloud name (see constants.GRAPH_ENDPOINTS)
            api_version: Default API version for requests
            access_token: Pre-acquired bearer token
            token_provider: Callable returning a bearer token, called per request
            timeout: Request timeout in seconds
            max_retries: Retry attempts handled by urllib3 (0 disables retries)
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        if environment not in constants.GRAPH_ENDPOINTS:
            raise ValueError(f"Unknown Graph environment: {environment}")
        if api_version not in constants.API_VERSIONS:
            raise ValueError(f"Unknown Graph API version: {api_version}")

        self.tenant_id = tenant_id
        self.environment = environment
        self.endpoint = constants.GRAPH_ENDPOINTS[environment]
        self.api_version = api_version
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.logger = logger or logging.getLogger(__name__)

        # Credential state
        self.access_token: Optional[str] = access_token
        self.token_provider: Optional[Callable[[], str]] = token_provider

        # Disable SSL warnings when verify_ssl is False
        if not verify_ssl:
            import urllib3
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        # Setup session; a status that survives the retries is still gated below
        self.session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "PUT", "DELETE"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        self._update_headers()

    def _update_headers(self) -> None:
        """Set default session headers."""
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json"
        })

    def _resolve_token(self) -> str:
        """Return the bearer token for the next request."""
        token = self.token_provider() if self.token_provider else self.access_token
        if not token:
            raise AuthenticationError("No access token available. Set an access token or token provider first.")
        return token

    def build_url(
        self,
        entity: str,
        api_version: Optional[str] = None,
        has_tenant_id: bool = True
    ) -> str:
        """
        Build the absolute URL for an entity path.

        Args:
            entity: Resource path (e.g. '/users/123'); absolute URLs are returned unchanged
            api_version: API version, defaults to the client's
            has_tenant_id: Prefix the path with the tenant ID

        Returns:
            Absolute URL
        """
        if entity.startswith("http://") or entity.startswith("https://"):
            return entity

        path = "/" + entity.lstrip("/")
        if has_tenant_id and self.tenant_id:
            path = f"/{self.tenant_id}{path}"

        return f"{self.endpoint}/{api_version or self.api_version}{path}"

    def _make_request(
        self,
        method: str,
        entity: str,
        valid_status_codes: Iterable[int],
        api_version: Optional[str] = None,
        has_tenant_id: bool = True,
        **kwargs
    ) -> requests.Response:
        """
        Make HTTP request to the Graph API.

        Args:
            method: HTTP method (GET, POST, PATCH, etc.)
            entity: Resource path or absolute URL
            valid_status_codes: Status codes that count as success
            api_version: API version override
            has_tenant_id: Prefix the path with the tenant ID
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            AuthenticationError: If no access token is available
            GraphAPIError: If the status code is not in valid_status_codes
            requests.exceptions.RequestException: On transport failure
        """
        url = self.build_url(entity, api_version=api_version, has_tenant_id=has_tenant_id)

        headers = dict(kwargs.pop("headers", None) or {})
        headers["Authorization"] = f"Bearer {self._resolve_token()}"
        kwargs.setdefault("verify", self.verify_ssl)

        self.logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                timeout=self.timeout,
                **kwargs
            )
        except requests.exceptions.RequestException as e:
            self.logger.error(f"API request failed: {method} {url} - {e}")
            raise

        if response.status_code not in set(valid_status_codes):
            error = GraphAPIError.from_response(response)
            self.logger.error(f"Unexpected status: {method} {url} - {error}")
            raise error

        return response

    def _decode(self, response: requests.Response) -> Any:
        """Decode a JSON body; an empty body decodes to None."""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Invalid JSON in response from {response.url}: {e}")

    def get(
        self,
        entity: str,
        params: Optional[Dict[str, Any]] = None,
        valid_status_codes: Iterable[int] = (200,),
        api_version: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """
        Make GET request.

        Args:
            entity: Resource path
            params: Query parameters
            valid_status_codes: Expected status codes
            api_version: API version override
            headers: Extra request headers

        Returns:
            JSON response, or None for an empty body
        """
        response = self._make_request(
            "GET", entity, valid_status_codes,
            api_version=api_version, params=params, headers=headers
        )
        return self._decode(response)

    def get_collection(
        self,
        entity: str,
        params: Optional[Dict[str, Any]] = None,
        api_version: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> List[Any]:
        """
        Fetch every item of a collection, following @odata.nextLink.

        Args:
            entity: Collection path
            params: Query parameters for the first page
            api_version: API version override
            headers: Extra request headers

        Returns:
            Items of all pages, in order
        """
        items: List[Any] = []
        next_entity: Optional[str] = entity
        page_params = params

        while next_entity:
            result = self.get(next_entity, params=page_params, api_version=api_version, headers=headers)
            odata = OData.from_dict(result)
            if odata.value:
                items.extend(odata.value)

            # nextLink already carries the query string
            next_entity = odata.next_link
            page_params = None
            if next_entity:
                self.logger.debug(f"Following next page link for {entity}")

        return items

    def post(
        self,
        entity: str,
        data: Optional[Dict[str, Any]] = None,
        valid_status_codes: Iterable[int] = (201,),
        api_version: Optional[str] = None
    ) -> Any:
        """
        Make POST request.

        Args:
            entity: Resource path
            data: Request body data
            valid_status_codes: Expected status codes
            api_version: API version override

        Returns:
            JSON response, or None for an empty body
        """
        response = self._make_request("POST", entity, valid_status_codes, api_version=api_version, json=data)
        return self._decode(response)

    def patch(
        self,
        entity: str,
        data: Dict[str, Any],
        valid_status_codes: Iterable[int] = (204,),
        api_version: Optional[str] = None
    ) -> int:
        """
        Make PATCH request.

        Returns:
            HTTP status code
        """
        response = self._make_request("PATCH", entity, valid_status_codes, api_version=api_version, json=data)
        return response.status_code

    def put(
        self,
        entity: str,
        data: Dict[str, Any],
        valid_status_codes: Iterable[int] = (200,),
        api_version: Optional[str] = None
    ) -> int:
        """
        Make PUT request.

        Returns:
            HTTP status code
        """
        response = self._make_request("PUT", entity, valid_status_codes, api_version=api_version, json=data)
        return response.status_code

    def delete(
        self,
        entity: str,
        valid_status_codes: Iterable[int] = (204,),
        api_version: Optional[str] = None
    ) -> int:
        """
        Make DELETE request.

        Returns:
            HTTP status code
        """
        response = self._make_request("DELETE", entity, valid_status_codes, api_version=api_version)
        return response.status_code

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
