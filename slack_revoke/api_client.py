"""Async Slack Web API client for the two calls the action needs."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import aiohttp

from .auth import SGNL_USER_AGENT
from .errors import FatalError, RetryableError

logger = logging.getLogger("slack_revoke.api_client")

LOOKUP_BY_EMAIL_PATH = "/api/users.lookupByEmail"
SESSION_RESET_PATH = "/api/admin.users.session.reset"

_AUTH_ERRORS = ("invalid_auth", "not_authed")
_INACTIVE_ERRORS = ("account_inactive", "token_revoked")


class SlackApiClient:
    """
    Issues single request/response round trips against the Slack Web API.
    Failures are raised as RetryableError or FatalError; nothing is retried here.
    """

    def __init__(self, base_url: str, auth_header: str, session: aiohttp.ClientSession):
        self.base_url = base_url.rstrip("/")
        self.auth_header = auth_header
        self.session = session

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": self.auth_header,
            "Content-Type": "application/json",
            "User-Agent": SGNL_USER_AGENT,
        }

    @staticmethod
    def _check_status(response, action: str):
        if 200 <= response.status < 300:
            return
        if response.status == 429:
            raise RetryableError("Slack API rate limit exceeded")
        if response.status >= 500:
            raise RetryableError(f"Slack API error: {response.status}")
        raise FatalError(f"Failed to {action}: {response.status} {response.reason}")

    @staticmethod
    def _raise_for_auth_error(code: Optional[str]):
        if code in _AUTH_ERRORS:
            raise FatalError("Invalid or missing authentication token")
        if code in _INACTIVE_ERRORS:
            raise FatalError("Authentication token is inactive or revoked")

    async def lookup_user_by_email(self, email: str) -> Dict[str, Any]:
        """Resolve an email address to the Slack user record."""
        url = f"{self.base_url}{LOOKUP_BY_EMAIL_PATH}"
        async with self.session.get(url, params={"email": email}, headers=self.headers) as response:
            logger.debug(f"GET {LOOKUP_BY_EMAIL_PATH} -> Status: {response.status}")
            self._check_status(response, "lookup user")
            data = await response.json(content_type=None)

        if not data.get("ok"):
            code = data.get("error")
            if code == "users_not_found":
                raise FatalError(f"User not found with email: {email}")
            self._raise_for_auth_error(code)
            raise FatalError(f"Slack API error: {code}")

        user = data.get("user")
        if not isinstance(user, dict) or not user.get("id"):
            raise FatalError("Slack API error: missing user in response")
        return user

    async def reset_user_sessions(self, user_id: str) -> bool:
        """Invalidate every active session of the given Slack user."""
        url = f"{self.base_url}{SESSION_RESET_PATH}"
        async with self.session.post(url, json={"user_id": user_id}, headers=self.headers) as response:
            logger.debug(f"POST {SESSION_RESET_PATH} -> Status: {response.status}")
            self._check_status(response, "reset sessions")
            data = await response.json(content_type=None)

        if not data.get("ok"):
            code = data.get("error")
            if code == "user_not_found":
                raise FatalError(f"User not found: {user_id}")
            if code == "missing_scope":
                raise FatalError("Token missing required scope: admin.users:write")
            self._raise_for_auth_error(code)
            raise FatalError(f"Slack API error: {code}")

        return True
