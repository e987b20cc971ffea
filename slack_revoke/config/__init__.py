"""
Configuration management for the Slack revoke-session action.
"""

from .config_loader import ActionConfig, load_context_from_env, setup_logging

__all__ = ["ActionConfig", "load_context_from_env", "setup_logging"]
