"""
Example: send ERROR-level log messages to Slack.

Run with:
    SLACK_WEBHOOK_URL=https://hooks.slack.com/services/XXXXX/YYYYY/ZZZZZ python examples/app.py
"""

import logging
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "lib"))

from slackhook import new_slack_hook, Level  # noqa: E402

# Please rewrite it with your webhook URL
SLACK_WEBHOOK_URL = os.getenv(
    "SLACK_WEBHOOK_URL", "https://hooks.slack.com/services/XXXXX/YYYYY/ZZZZZ"
)


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")
    logger = logging.getLogger("app")

    # Send a notification to slack at only error level
    hook = new_slack_hook(SLACK_WEBHOOK_URL, Level.ERROR)
    hook.timeout = 5
    logger.addHandler(hook.handler())

    logger.debug("don't need to send a message")
    logger.error("an error happened!")


if __name__ == "__main__":
    main()
