"""
Notifications module - Slack hook, webhook client, and logging handler.
"""

from .errors import SlackHookError, TransportError, RequestTimeoutError
from .payload import Attachment, WebHookPostPayload
from .webhook_client import WebhookClient, mask_webhook_url
from .slack_hook import Entry, SlackHook, new_slack_hook, level_threshold
from .handler import SlackHandler

__all__ = [
    "SlackHookError",
    "TransportError",
    "RequestTimeoutError",
    "Attachment",
    "WebHookPostPayload",
    "WebhookClient",
    "mask_webhook_url",
    "Entry",
    "SlackHook",
    "new_slack_hook",
    "level_threshold",
    "SlackHandler",
]
