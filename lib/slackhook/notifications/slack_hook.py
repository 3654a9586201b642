"""
Slack Hook
==========
Forwards log entries at selected severities to a Slack incoming webhook.

Usage:
    hook = new_slack_hook("https://hooks.slack.com/services/...", Level.ERROR)
    hook.channel = "#alerts"
    hook.timeout = 5.0

    # Plain callback, one call per log entry
    callback = hook.get_hook()
    callback(Entry(Level.ERROR, "an error happened!"))

    # Or as a stdlib logging handler
    logging.getLogger().addHandler(hook.handler())
"""

import logging
import queue
import threading
from typing import Any, Callable, List, NamedTuple, Optional, Sequence, Tuple

from .errors import RequestTimeoutError
from .payload import Attachment, WebHookPostPayload
from .webhook_client import WebhookClient, mask_webhook_url
from ..config.constants import ALL_LEVELS, LEVEL_COLOR_MAP, Level
from ..utils.once import Once

logger = logging.getLogger(__name__)


class Entry(NamedTuple):
    """A log entry as seen by the hook."""
    level: int
    message: str

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> "Entry":
        return cls(record.levelno, record.getMessage())


def _entry_fields(entry: Any) -> Tuple[int, str]:
    if isinstance(entry, logging.LogRecord):
        entry = Entry.from_record(entry)
    return entry.level, entry.message


class SlackHook:
    """
    Log hook dispatching messages to a Slack channel.

    Messages whose level is not in ``accepted_levels`` are dropped without
    a network call. ``accepted_levels=None`` accepts every level in
    ALL_LEVELS.

    The webhook client is built on the first callback invocation and
    reused for the life of the hook.
    """

    def __init__(
        self,
        hook_url: str,
        accepted_levels: Optional[Sequence[int]] = None,
        username: str = "",
        channel: str = "",
        icon_emoji: str = "",
        icon_url: str = "",
        field_header: str = "",
        timeout: float = 0,
        async_: bool = False,
        client_factory: Callable[[str], Any] = WebhookClient,
    ):
        """
        Initialize the hook.

        Args:
            hook_url: Incoming webhook URL
            accepted_levels: Levels to forward; None forwards all levels
            username: Display name for the post
            channel: Channel override, e.g. "#alerts"
            icon_emoji: Emoji avatar, e.g. ":ghost:"
            icon_url: Image avatar URL
            field_header: Header above field data (not rendered in posts)
            timeout: Seconds to wait for delivery; <= 0 waits indefinitely
            async_: Post on a background thread and return immediately
            client_factory: Builds the webhook client from hook_url
        """
        self.hook_url = hook_url
        self.accepted_levels = list(accepted_levels) if accepted_levels is not None else None

        # slack post parameters
        self.username = username
        self.channel = channel
        self.icon_emoji = icon_emoji
        self.icon_url = icon_url

        self.field_header = field_header
        self.timeout = timeout
        self.async_ = async_

        self.client_factory = client_factory
        self._client = None
        self._once = Once()

    def __repr__(self) -> str:
        return (
            f"SlackHook(hook_url={mask_webhook_url(self.hook_url)!r}, "
            f"levels={[int(lv) for lv in self.levels()]}, async_={self.async_})"
        )

    @property
    def client(self):
        """The webhook client, or None before the first callback."""
        return self._client

    def _build_client(self) -> None:
        self._client = self.client_factory(self.hook_url)

    def get_hook(self) -> Callable[[Any], None]:
        """
        Return the per-entry callback.

        The callback accepts an Entry, a logging.LogRecord, or any object
        with ``level`` and ``message`` attributes. It returns None on
        success (including filtered entries) and raises SlackHookError when
        a synchronous post fails.
        """
        def hook(entry: Any) -> None:
            self._once.do(self._build_client)

            level, message = _entry_fields(entry)
            if not self.is_accepted_level(level):
                return None

            payload = self.build_payload(level, message)

            if self.async_:
                threading.Thread(
                    target=self._post_in_background,
                    args=(payload,),
                    name="slackhook-async",
                    daemon=True,
                ).start()
                return None

            self.post_message(payload)
            return None

        return hook

    def build_payload(self, level: int, message: str) -> WebHookPostPayload:
        """Build the post body for one entry."""
        attachment = Attachment(
            text=message,
            fallback=message,
            color=LEVEL_COLOR_MAP.get(level, ""),
        )
        return WebHookPostPayload(
            username=self.username,
            channel=self.channel,
            icon_emoji=self.icon_emoji,
            icon_url=self.icon_url,
            attachments=[attachment],
        )

    def post_message(self, payload: WebHookPostPayload) -> None:
        """
        Deliver a payload, honouring the configured timeout.

        With timeout > 0 the post runs on a worker thread and the caller
        waits for its real outcome or the deadline, whichever comes first.
        The post itself is not cancelled when the deadline passes.

        Raises:
            TransportError: The client failed to deliver
            RequestTimeoutError: The deadline passed first
        """
        self._once.do(self._build_client)

        if self.timeout <= 0:
            self._client.post_message(payload)
            return

        outcome: "queue.Queue[Optional[BaseException]]" = queue.Queue(maxsize=1)

        def send() -> None:
            try:
                self._client.post_message(payload)
            except Exception as e:
                outcome.put(e)
            else:
                outcome.put(None)

        threading.Thread(target=send, name="slackhook-post", daemon=True).start()

        try:
            error = outcome.get(timeout=self.timeout)
        except queue.Empty:
            raise RequestTimeoutError() from None

        if error is not None:
            raise error

    def _post_in_background(self, payload: WebHookPostPayload) -> None:
        try:
            self.post_message(payload)
        except Exception as e:
            # fire-and-forget; nobody is waiting for this result
            logger.debug("Async webhook post dropped: %r", e)

    def levels(self) -> List[int]:
        """Levels this hook forwards."""
        if self.accepted_levels is None:
            return list(ALL_LEVELS)
        return self.accepted_levels

    def is_accepted_level(self, level: int) -> bool:
        return level in self.levels()

    def handler(self, level: int = logging.NOTSET) -> logging.Handler:
        """Wrap this hook in a logging.Handler."""
        from .handler import SlackHandler
        return SlackHandler(self, level=level)


def new_slack_hook(hook_url: str, level: int) -> SlackHook:
    """
    Create a hook accepting exactly one level.

    This is not a threshold: new_slack_hook(url, Level.ERROR) ignores FATAL.
    Use level_threshold() to accept a level and everything above it.
    """
    return SlackHook(hook_url, accepted_levels=[level])


def level_threshold(level: int) -> List[Level]:
    """Return every level at or above ``level``; [] if it is not a known level."""
    for i, lv in enumerate(ALL_LEVELS):
        if lv == level:
            return list(ALL_LEVELS[i:])
    return []
