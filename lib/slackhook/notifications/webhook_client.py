"""
Webhook Client
==============
Posts a WebHookPostPayload to a Slack-compatible incoming webhook.
"""

import logging
from typing import Optional
from urllib.parse import urlsplit

import requests

from .errors import TransportError
from .payload import WebHookPostPayload
from ..config.constants import WEBHOOK_SUCCESS_STATUS

logger = logging.getLogger(__name__)


def mask_webhook_url(webhook_url: Optional[str]) -> Optional[str]:
    """
    Create a masked copy of a webhook URL for safe logging.

    An incoming-webhook URL is a bearer secret. Scheme and host are kept;
    the path (which carries the secret) is reduced to its first and last
    four characters.

    Examples:
        https://hooks.slack.com/services/T000/B000/XXXXXXXX
            -> https://hooks.slack.com/serv...XXXX

    Args:
        webhook_url: URL to mask

    Returns:
        Masked URL, or the input unchanged if empty
    """
    if not webhook_url:
        return webhook_url

    parts = urlsplit(webhook_url)
    secret = parts.path.lstrip('/')
    if parts.query:
        secret = f"{secret}?{parts.query}"

    if len(secret) > 8:
        masked_secret = f"{secret[:4]}...{secret[-4:]}"
    else:
        masked_secret = "***"

    if not parts.scheme or not parts.netloc:
        return masked_secret

    return f"{parts.scheme}://{parts.netloc}/{masked_secret}"


class WebhookClient:
    """
    Thin HTTP client for one webhook URL.

    Usage:
        client = WebhookClient("https://hooks.slack.com/services/...")
        client.post_message(payload)
    """

    def __init__(self, url: str, timeout: Optional[float] = None):
        """
        Initialize webhook client.

        Args:
            url: Incoming webhook URL
            timeout: Transport timeout in seconds passed to requests;
                None blocks until the server responds
        """
        self.url = url
        self.timeout = timeout
        self._headers = {'Content-Type': 'application/json'}

    def __repr__(self) -> str:
        return f"WebhookClient(url={mask_webhook_url(self.url)!r})"

    def post_message(self, payload: WebHookPostPayload) -> None:
        """
        Post a payload to the webhook.

        Args:
            payload: Message to deliver

        Raises:
            TransportError: On connection failure or a non-200 response
        """
        try:
            response = requests.post(
                self.url,
                json=payload.to_dict(),
                headers=self._headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            # requests messages embed the URL path, which is the secret
            raise TransportError(
                f"Webhook post to {mask_webhook_url(self.url)} failed: {type(e).__name__}"
            ) from e

        if response.status_code != WEBHOOK_SUCCESS_STATUS:
            raise TransportError(
                f"Webhook returned {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        logger.debug("Webhook post delivered to %s", mask_webhook_url(self.url))
