"""
FastAPI dependency injection for the BFHL Classification API.

Settings and the frozen IdentityConfig are attached to ``app.state`` when the
application is created; handlers receive them through these dependencies.
"""

from fastapi import Request

from bfhl_api.config import Settings
from bfhl_api.models.identity import IdentityConfig


def get_settings(request: Request) -> Settings:
    """
    Get the settings the running application was built with.
    
    Args:
        request: Current request (injected)
    
    Returns:
        Settings instance
    """
    return request.app.state.settings


def get_identity(request: Request) -> IdentityConfig:
    """
    Get the identity fields echoed in /bfhl responses.
    
    Built once at startup from settings, shared read-only across requests.
    
    Args:
        request: Current request (injected)
    
    Returns:
        IdentityConfig instance
    """
    return request.app.state.identity
