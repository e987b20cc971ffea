"""
Configuration access for the Slack revoke-session action.
Wraps the host-supplied context and loads a local one from .env files for development.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv

from ..errors import FatalError

# Environment keys
ADDRESS = "ADDRESS"
OAUTH2_TOKEN_URL = "OAUTH2_CLIENT_CREDENTIALS_TOKEN_URL"
OAUTH2_CLIENT_ID = "OAUTH2_CLIENT_CREDENTIALS_CLIENT_ID"
OAUTH2_SCOPE = "OAUTH2_CLIENT_CREDENTIALS_SCOPE"
OAUTH2_AUDIENCE = "OAUTH2_CLIENT_CREDENTIALS_AUDIENCE"
OAUTH2_AUTH_STYLE = "OAUTH2_CLIENT_CREDENTIALS_AUTH_STYLE"
LOG_LEVEL = "LOG_LEVEL"
DEBUG = "DEBUG"

ENVIRONMENT_KEYS = (
    ADDRESS,
    OAUTH2_TOKEN_URL,
    OAUTH2_CLIENT_ID,
    OAUTH2_SCOPE,
    OAUTH2_AUDIENCE,
    OAUTH2_AUTH_STYLE,
    LOG_LEVEL,
    DEBUG,
)

# Secret keys
BEARER_AUTH_TOKEN = "BEARER_AUTH_TOKEN"
BASIC_USERNAME = "BASIC_USERNAME"
BASIC_PASSWORD = "BASIC_PASSWORD"
OAUTH2_AUTHORIZATION_CODE_ACCESS_TOKEN = "OAUTH2_AUTHORIZATION_CODE_ACCESS_TOKEN"
OAUTH2_CLIENT_SECRET = "OAUTH2_CLIENT_CREDENTIALS_CLIENT_SECRET"

SECRET_KEYS = (
    BEARER_AUTH_TOKEN,
    BASIC_USERNAME,
    BASIC_PASSWORD,
    OAUTH2_AUTHORIZATION_CODE_ACCESS_TOKEN,
    OAUTH2_CLIENT_SECRET,
)


class ActionConfig:
    """Read-only view over the execution context supplied by the host."""

    def __init__(self, context: Optional[Mapping[str, Any]] = None):
        context = context or {}
        self.environment: Mapping[str, str] = context.get("environment") or {}
        self.secrets: Mapping[str, str] = context.get("secrets") or {}

    def get_env(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.environment.get(key) or default

    def get_secret(self, key: str) -> Optional[str]:
        return self.secrets.get(key) or None

    def base_url(self, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Resolve the Slack API base URL.

        Args:
            params: Invocation parameters; an ``address`` entry overrides ADDRESS

        Returns:
            Base URL without a trailing slash
        """
        address = (params or {}).get("address") or self.get_env(ADDRESS)
        if not address:
            raise FatalError("No URL specified. Provide address parameter or ADDRESS environment variable")
        return address[:-1] if address.endswith("/") else address

    def is_debug_mode(self) -> bool:
        return str(self.get_env(DEBUG, "")).lower() in ("1", "true", "yes")


def load_context_from_env(env_file: Optional[str] = None) -> Dict[str, Dict[str, str]]:
    """
    Build an execution context from process environment variables.

    Loads envs/.env (or ``env_file``) first without overriding variables that are
    already set, then picks up every known environment and secret key.
    """
    env_path = Path(env_file) if env_file else Path.cwd() / "envs" / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)
        print(f"[OK] Loaded env config from {env_path}")
    elif env_file:
        print(f"Warning: Environment file {env_path} not found")

    environment = {key: os.environ[key] for key in ENVIRONMENT_KEYS if os.getenv(key)}
    secrets = {key: os.environ[key] for key in SECRET_KEYS if os.getenv(key)}
    return {"environment": environment, "secrets": secrets}


def setup_logging(config: Optional[ActionConfig] = None, log_level: Optional[str] = None):
    """Setup logging based on configuration."""
    config = config or ActionConfig()
    log_level = log_level or config.get_env(LOG_LEVEL, "INFO")
    debug = config.is_debug_mode()

    level = getattr(logging, log_level.upper(), logging.INFO)

    format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s" if debug else "%(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[logging.StreamHandler()]
    )
