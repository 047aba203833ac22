"""
Microsoft Graph identity client

This package provides typed access to Microsoft Graph directory and identity
resources: conditional access named locations, entitlement management
(catalogs, access packages, assignment policies and requests) and users.
"""

__version__ = "0.1.0"
__description__ = "Typed client for Microsoft Graph identity resources"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "GraphAPI":
        from .api import GraphAPI
        return GraphAPI
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "GraphAPI",
]
