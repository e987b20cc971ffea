"""
Credential providers, one per supported credential shape.
Each provider yields an Authorization header value or None when its secrets are absent.
"""
from __future__ import annotations

import base64
import logging
from typing import Any, Iterable, Mapping, Optional, Protocol, Tuple

import aiohttp

from ..config import ActionConfig
from ..config import config_loader as keys
from ..errors import FatalError
from .authentication import NO_AUTH_MESSAGE, fetch_client_credentials_token

logger = logging.getLogger("slack_revoke.auth")


def _bearer(token: str) -> str:
    return token if token.startswith("Bearer ") else f"Bearer {token}"


class CredentialProvider(Protocol):
    """Abstraction for turning context secrets into an Authorization header."""

    async def authorization_header(
        self, config: ActionConfig, session: aiohttp.ClientSession
    ) -> Optional[str]:
        ...


class BearerTokenProvider:
    async def authorization_header(self, config, session) -> Optional[str]:
        token = config.get_secret(keys.BEARER_AUTH_TOKEN)
        return _bearer(token) if token else None


class BasicAuthProvider:
    async def authorization_header(self, config, session) -> Optional[str]:
        username = config.get_secret(keys.BASIC_USERNAME)
        password = config.get_secret(keys.BASIC_PASSWORD)
        if not (username and password):
            return None
        credentials = base64.b64encode(f"{username}:{password}".encode()).decode()
        return f"Basic {credentials}"


class AuthorizationCodeProvider:
    """Uses an access token already obtained through the authorization-code flow."""

    async def authorization_header(self, config, session) -> Optional[str]:
        token = config.get_secret(keys.OAUTH2_AUTHORIZATION_CODE_ACCESS_TOKEN)
        return _bearer(token) if token else None


class ClientCredentialsProvider:
    """Exchanges the client id/secret for a bearer token at the configured token URL."""

    async def authorization_header(self, config, session) -> Optional[str]:
        client_secret = config.get_secret(keys.OAUTH2_CLIENT_SECRET)
        if not client_secret:
            return None

        token_url = config.get_env(keys.OAUTH2_TOKEN_URL)
        client_id = config.get_env(keys.OAUTH2_CLIENT_ID)
        if not token_url or not client_id:
            raise FatalError("OAuth2 Client Credentials flow requires TOKEN_URL and CLIENT_ID in env")

        token = await fetch_client_credentials_token(
            session,
            token_url=token_url,
            client_id=client_id,
            client_secret=client_secret,
            scope=config.get_env(keys.OAUTH2_SCOPE),
            audience=config.get_env(keys.OAUTH2_AUDIENCE),
            auth_style=config.get_env(keys.OAUTH2_AUTH_STYLE),
        )
        return f"Bearer {token}"


# Resolution order matters: the first provider returning a header wins.
DEFAULT_PROVIDERS: Tuple[CredentialProvider, ...] = (
    BearerTokenProvider(),
    BasicAuthProvider(),
    AuthorizationCodeProvider(),
    ClientCredentialsProvider(),
)


async def get_authorization_header(
    context: Mapping[str, Any],
    session: aiohttp.ClientSession,
    providers: Optional[Iterable[CredentialProvider]] = None,
) -> str:
    """
    Resolve the Authorization header value from the execution context.

    Args:
        context: Host context with ``environment`` and ``secrets`` mappings
        session: HTTP session used for the client credentials exchange
        providers: Credential providers in priority order, DEFAULT_PROVIDERS when None

    Returns:
        Header value such as "Bearer xoxb-..." or "Basic dXNlcjpwYXNz"
    """
    if providers is None:
        providers = DEFAULT_PROVIDERS

    config = context if isinstance(context, ActionConfig) else ActionConfig(context)
    for provider in providers:
        header = await provider.authorization_header(config, session)
        if header:
            logger.debug(f"Using {type(provider).__name__} authentication")
            return header

    raise FatalError(NO_AUTH_MESSAGE)
