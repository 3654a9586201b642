"""
Notification errors raised by the webhook client and the hook callback.
"""

from typing import Optional

from ..config.constants import TIMEOUT_ERROR_MESSAGE


class SlackHookError(Exception):
    """Base class for all delivery failures."""


class TransportError(SlackHookError):
    """
    The webhook post failed: connection error, or a non-success response.

    Attributes:
        status_code: HTTP status if a response was received
        body: Response body text if a response was received
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RequestTimeoutError(SlackHookError, TimeoutError):
    """The configured deadline passed before the post completed."""

    def __init__(self, message: str = TIMEOUT_ERROR_MESSAGE):
        super().__init__(message)
