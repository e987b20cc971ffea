"""
Authentication handling for Slack API requests.
Supports bearer tokens, basic auth, OAuth 2.0 authorization-code tokens and
the OAuth 2.0 client credentials flow.
"""
from __future__ import annotations

import base64
import json
import logging
from typing import Any, Dict, Mapping, Optional

import aiohttp

from ..errors import FatalError

logger = logging.getLogger("slack_revoke.auth")

SGNL_USER_AGENT = "SGNL-CAEP-Hub/2.0"

NO_AUTH_MESSAGE = (
    "No authentication configured. Provide one of: "
    "BEARER_AUTH_TOKEN, BASIC_USERNAME/BASIC_PASSWORD, "
    "OAUTH2_AUTHORIZATION_CODE_ACCESS_TOKEN, or OAUTH2_CLIENT_CREDENTIALS_*"
)


async def fetch_client_credentials_token(
    session: aiohttp.ClientSession,
    token_url: str,
    client_id: str,
    client_secret: str,
    scope: Optional[str] = None,
    audience: Optional[str] = None,
    auth_style: Optional[str] = None,
) -> str:
    """Fetch an OAuth 2.0 bearer token using the client credentials flow."""
    data: Dict[str, str] = {"grant_type": "client_credentials"}
    if scope:
        data["scope"] = scope
    if audience:
        data["audience"] = audience

    headers = {
        "Content-Type": "application/x-www-form-urlencoded",
        "Accept": "application/json",
        "User-Agent": SGNL_USER_AGENT,
    }

    if auth_style == "InParams":
        data["client_id"] = client_id
        data["client_secret"] = client_secret
    else:
        auth_header = base64.b64encode(f"{client_id}:{client_secret}".encode()).decode()
        headers["Authorization"] = f"Basic {auth_header}"

    async with session.post(token_url, headers=headers, data=data) as response:
        logger.info(f"OAuth token request -> Status: {response.status}")

        if not 200 <= response.status < 300:
            error_text = await response.text()
            try:
                error_text = json.dumps(json.loads(error_text))
            except ValueError:
                pass
            raise FatalError(
                f"OAuth2 token request failed: {response.status} {response.reason} - {error_text}"
            )

        token_data: Mapping[str, Any] = await response.json(content_type=None)

    access_token = token_data.get("access_token") if isinstance(token_data, Mapping) else None
    if not access_token:
        raise FatalError("No access_token in OAuth2 response")
    return access_token
