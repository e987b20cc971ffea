"""
Host entry points for the Slack revoke-session action.

The host calls ``invoke`` with the job parameters and a context holding
``environment`` and ``secrets``; ``error`` and ``halt`` complete the lifecycle.
"""
from __future__ import annotations

import asyncio
import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

import aiohttp

from .api_client import SlackApiClient
from .auth import get_authorization_header
from .config import ActionConfig
from .duration import parse_duration
from .errors import ActionError, FatalError

logger = logging.getLogger("slack_revoke.action")

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

REQUEST_TIMEOUT_SECONDS = 30


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def validate_inputs(params: Mapping[str, Any]):
    user_email = params.get("userEmail")
    if not user_email or not isinstance(user_email, str) or not user_email.strip():
        raise FatalError("Invalid or missing userEmail parameter")
    if not _EMAIL_RE.fullmatch(user_email):
        raise FatalError("Invalid email format")


async def _revoke(params: Mapping[str, Any], config: ActionConfig, session: aiohttp.ClientSession) -> Dict[str, Any]:
    user_email = params["userEmail"]

    auth_header = await get_authorization_header(config, session)
    base_url = config.base_url(params)
    delay_ms = parse_duration(params.get("delay"))

    client = SlackApiClient(base_url, auth_header, session)

    logger.info(f"Looking up Slack user by email: {user_email}")
    user = await client.lookup_user_by_email(user_email)
    logger.info(f"Found user with ID: {user['id']}")

    # Spacing between the two calls keeps us clear of Slack's rate limits
    logger.info(f"Waiting {delay_ms:g}ms before resetting sessions")
    await asyncio.sleep(delay_ms / 1000)

    logger.info(f"Resetting sessions for user: {user['id']}")
    await client.reset_user_sessions(user["id"])

    return {
        "userEmail": user_email,
        "userId": user["id"],
        "sessionsRevoked": True,
        "revokedAt": _utc_timestamp(),
    }


async def invoke(
    params: Mapping[str, Any],
    context: Mapping[str, Any],
    session: Optional[aiohttp.ClientSession] = None,
) -> Dict[str, Any]:
    """
    Revoke all active Slack sessions for ``params["userEmail"]``.

    Args:
        params: Job parameters (userEmail, optional delay and address)
        context: Host context with ``environment`` and ``secrets``
        session: Optional HTTP session; one is created and closed per call otherwise

    Returns:
        Result with userEmail, userId, sessionsRevoked and revokedAt

    Raises:
        RetryableError: transient Slack failure, the host may re-invoke
        FatalError: anything else
    """
    logger.info("Starting Slack Revoke Session action")
    params = params or {}

    try:
        validate_inputs(params)
        logger.info(f"Processing user email: {params['userEmail']}")
        config = ActionConfig(context)

        if session is not None:
            result = await _revoke(params, config, session)
        else:
            timeout = aiohttp.ClientTimeout(total=REQUEST_TIMEOUT_SECONDS)
            async with aiohttp.ClientSession(timeout=timeout) as own_session:
                result = await _revoke(params, config, own_session)

        logger.info(f"Successfully revoked sessions for user: {result['userEmail']}")
        return result

    except ActionError as e:
        logger.error(f"Error revoking Slack sessions: {e.message}")
        raise
    except Exception as e:
        logger.error(f"Error revoking Slack sessions: {e}")
        raise FatalError(f"Unexpected error: {e}") from e


async def error(params: Mapping[str, Any], context: Mapping[str, Any]):
    """Re-raise the triggering error so the host decides on retries."""
    exc = (params or {}).get("error")
    logger.error(f"Error handler invoked: {exc}")
    if exc is None:
        raise FatalError("Error handler invoked without an error")
    raise exc


async def halt(params: Mapping[str, Any], context: Mapping[str, Any]) -> Dict[str, Any]:
    """Acknowledge that the host abandoned the job. No network calls are made."""
    params = params or {}
    reason = params.get("reason")
    logger.info(f"Job is being halted ({reason})")

    return {
        "userEmail": params.get("userEmail") or "unknown",
        "reason": reason or "unknown",
        "haltedAt": _utc_timestamp(),
        "cleanupCompleted": True,
    }
