"""
Webhook Payload
===============
Incoming-webhook message body: presentation fields plus attachments.

Wire format:
    {
        "username": "...",
        "channel": "#alerts",
        "icon_emoji": ":ghost:",
        "icon_url": "...",
        "attachments": [
            {"text": "...", "fallback": "...", "color": "danger"}
        ]
    }
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Attachment:
    """A single message attachment."""
    text: str = ""
    fallback: str = ""
    color: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = {'text': self.text, 'fallback': self.fallback}
        if self.color:
            data['color'] = self.color
        return data


@dataclass
class WebHookPostPayload:
    """Body of one webhook post."""
    username: str = ""
    channel: str = ""
    icon_emoji: str = ""
    icon_url: str = ""
    attachments: List[Attachment] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize for the JSON request body.

        Empty presentation fields are omitted so the webhook's own
        defaults apply; attachments are always present.
        """
        data: Dict[str, Any] = {}
        for key in ('username', 'channel', 'icon_emoji', 'icon_url'):
            value = getattr(self, key)
            if value:
                data[key] = value
        data['attachments'] = [a.to_dict() for a in self.attachments]
        return data
