"""
Integration Tests: Slack Webhook
================================
Posts real messages to a Slack incoming webhook.
Requires TEST_SLACK_WEBHOOK_URL environment variable.

WARNING: These tests post to the configured channel!

Run with: pytest tests/integration/test_slack_webhook.py -v
"""

import logging
import time

import pytest


@pytest.mark.integration
@pytest.mark.slack
class TestSlackWebhookDelivery:
    """Test delivering notifications to Slack."""

    def test_posts_error_entry(self, slack_webhook_url):
        """Should deliver a synchronous post."""
        from slackhook import new_slack_hook, Entry, Level

        hook = new_slack_hook(slack_webhook_url, Level.ERROR)
        hook.username = "slackhook-tests"
        hook.timeout = 10

        assert hook.get_hook()(Entry(Level.ERROR, "slackhook integration: sync post")) is None

    def test_posts_through_logging_handler(self, slack_webhook_url):
        from slackhook import SlackHook, level_threshold, Level

        hook = SlackHook(
            slack_webhook_url,
            accepted_levels=level_threshold(Level.WARN),
            username="slackhook-tests",
            timeout=10,
        )
        logger = logging.getLogger("tests.integration.slack")
        logger.propagate = False
        handler = hook.handler()
        logger.addHandler(handler)

        try:
            with pytest.MonkeyPatch.context() as mp:
                mp.setattr(handler, "handleError", _fail_on_error)
                logger.warning("slackhook integration: handler post")
        finally:
            logger.removeHandler(handler)

    @pytest.mark.slow
    def test_async_post_returns_immediately(self, slack_webhook_url):
        from slackhook import SlackHook, Entry, Level

        hook = SlackHook(slack_webhook_url, async_=True, timeout=10)

        start = time.monotonic()
        hook.get_hook()(Entry(Level.INFO, "slackhook integration: async post"))

        assert time.monotonic() - start < 0.5
        # Give the background post time to land before the process exits
        time.sleep(3)

    def test_bad_path_raises_transport_error(self, slack_webhook_url):
        """A mangled webhook path should be rejected by Slack."""
        from slackhook import new_slack_hook, Entry, Level, TransportError

        hook = new_slack_hook(slack_webhook_url.rstrip("/") + "-invalid", Level.ERROR)
        hook.timeout = 10

        with pytest.raises(TransportError) as exc_info:
            hook.get_hook()(Entry(Level.ERROR, "should not arrive"))

        assert exc_info.value.status_code is not None


def _fail_on_error(record):
    pytest.fail(f"Delivery failed for record: {record.getMessage()}")
