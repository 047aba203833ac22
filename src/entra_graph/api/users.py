"""
User operations for Microsoft Graph.

Handles directory users, the targets and approvers of access package
assignments.
"""

from typing import List, Optional

from ..core import constants
from ..models import User
from .odata import Query
from .resource import ResourceAPI

USERS_PATH = "/users"


class UsersAPI(ResourceAPI):
    """Mixin for user operations."""

    def list_users(self, query: Optional[Query] = None) -> List[User]:
        """
        List users.

        Args:
            query: OData query options

        Returns:
            List of users across all pages
        """
        self.logger.info("Fetching users")
        return self._list_resources(USERS_PATH, User, query, constants.VERSION_1_0)

    def get_user(self, user_id: str) -> User:
        """Get a user by ID or user principal name."""
        self.logger.debug(f"Fetching user {user_id}")
        return self._get_resource(USERS_PATH, user_id, User, constants.VERSION_1_0)

    def create_user(self, user: User) -> User:
        """Create a user and return it with its new ID."""
        self.logger.info(f"Creating user {user.user_principal_name}")
        return self._create_resource(USERS_PATH, user, constants.VERSION_1_0)

    def update_user(self, user: User) -> int:
        """Amend a user. Returns the HTTP status code."""
        self.logger.info(f"Updating user {user.id}")
        return self._update_resource(USERS_PATH, user, constants.VERSION_1_0)

    def delete_user(self, user_id: str) -> int:
        """Delete a user. Returns the HTTP status code."""
        self.logger.info(f"Deleting user {user_id}")
        return self._delete_resource(USERS_PATH, user_id, constants.VERSION_1_0)
