"""
Slack Revoke Session action.
Revokes every active Slack session of a user identified by email, for use by a job-scheduling host.
"""
__version__ = "1.0.0"
__author__ = "SGNL Actions"
from .action import error, halt, invoke
from .errors import ActionError, FatalError, RetryableError

__all__ = ["invoke", "error", "halt", "ActionError", "FatalError", "RetryableError"]
