"""
Bearer credential handling for the Microsoft Graph API.

Tokens are acquired elsewhere (Azure CLI, MSAL, managed identity, ...);
this client only attaches them to requests.
"""

import os
import logging
from typing import Callable, Optional

from ..core import constants
from .client import APIClient


class AuthAPI(APIClient):
    """API client with credential management."""

    logger: logging.Logger

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
        Initialize API client with credentials.

        Args:
            tenant_id: Azure AD tenant ID
            environment: National cloud name
            api_version: Default API version
            access_token: Bearer token (falls back to GRAPH_ACCESS_TOKEN env var)
            token_provider: Callable returning a fresh bearer token
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        super().__init__(
            tenant_id,
            environment=environment,
            api_version=api_version,
            access_token=access_token or os.getenv("GRAPH_ACCESS_TOKEN"),
            token_provider=token_provider,
            timeout=timeout,
            max_retries=max_retries,
            verify_ssl=verify_ssl,
            logger=logger,
        )

    @property
    def is_authenticated(self) -> bool:
        """Whether a credential is configured."""
        return bool(self.token_provider or self.access_token)

    def set_access_token(self, access_token: str) -> None:
        """
        Use a static bearer token for subsequent requests.

        Args:
            access_token: Bearer token

        Raises:
            ValueError: If the token is empty
        """
        if not access_token:
            raise ValueError("Access token must not be empty")

        self.access_token = access_token
        self.token_provider = None
        self.logger.debug("Static access token configured")

    def use_token_provider(self, token_provider: Callable[[], str]) -> None:
        """
        Fetch a token from ``token_provider`` before each request.

        Args:
            token_provider: Callable returning a bearer token
        """
        if not callable(token_provider):
            raise ValueError("Token provider must be callable")

        self.token_provider = token_provider
        self.logger.debug("Token provider configured")

    def clear_credentials(self) -> None:
        """Forget any configured token or token provider."""
        self.access_token = None
        self.token_provider = None
        self.logger.info("Credentials cleared")
