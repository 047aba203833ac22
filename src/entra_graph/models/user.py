"""
User data models.

Contains DTOs for directory users.
"""

from typing import Optional

from .base import GraphModel


class UserPasswordProfile(GraphModel):
    """Password settings supplied when creating a user."""

    password: Optional[str] = None
    force_change_password_next_sign_in: Optional[bool] = None


class User(GraphModel):
    """Directory user."""

    id: Optional[str] = None
    account_enabled: Optional[bool] = None
    display_name: Optional[str] = None
    given_name: Optional[str] = None
    surname: Optional[str] = None
    mail_nickname: Optional[str] = None
    mail: Optional[str] = None
    user_principal_name: Optional[str] = None
    job_title: Optional[str] = None
    department: Optional[str] = None
    usage_location: Optional[str] = None
    password_profile: Optional[UserPasswordProfile] = None
