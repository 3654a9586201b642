"""
slackhook - Log hook for Slack incoming webhooks
================================================
Forwards log entries at selected severities to a Slack channel.
"""

from .config import (
    SLACKHOOK_VERSION,
    Level,
    ALL_LEVELS,
    LEVEL_COLOR_MAP,
)

from .notifications import (
    SlackHookError,
    TransportError,
    RequestTimeoutError,
    Attachment,
    WebHookPostPayload,
    WebhookClient,
    mask_webhook_url,
    Entry,
    SlackHook,
    new_slack_hook,
    level_threshold,
    SlackHandler,
)

__version__ = SLACKHOOK_VERSION

__all__ = [
    # Levels
    "Level",
    "ALL_LEVELS",
    "LEVEL_COLOR_MAP",
    # Hook
    "SlackHook",
    "new_slack_hook",
    "level_threshold",
    "Entry",
    "SlackHandler",
    # Delivery
    "WebhookClient",
    "WebHookPostPayload",
    "Attachment",
    "mask_webhook_url",
    # Errors
    "SlackHookError",
    "TransportError",
    "RequestTimeoutError",
]
