"""
Authorization header resolution for Slack API requests.
"""

from .authentication import SGNL_USER_AGENT, fetch_client_credentials_token
from .credential_provider import DEFAULT_PROVIDERS, CredentialProvider, get_authorization_header

__all__ = [
    "SGNL_USER_AGENT",
    "fetch_client_credentials_token",
    "get_authorization_header",
    "DEFAULT_PROVIDERS",
    "CredentialProvider",
]
