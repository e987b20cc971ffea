"""
Error taxonomy for the Slack revoke-session action.
The host only looks at the message and the retryable flag.
"""


class ActionError(Exception):
    """Base class for classified action failures."""

    retryable = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RetryableError(ActionError):
    """Transient upstream failure (429, 5xx); the host may re-invoke."""

    retryable = True


class FatalError(ActionError):
    """Failure that re-running the same invocation will not fix."""

    retryable = False
