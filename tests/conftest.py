"""
Pytest Configuration and Fixtures
==================================
Reads the optional live webhook URL from environment and provides
reusable fixtures.
"""

import os
import sys
import threading
import pytest
from pathlib import Path

# Add lib/ to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "lib"))


TEST_HOOK_URL = "https://hooks.slack.com/services/T0000/B0000/XXXXXXXXXXXXXXXX"


# =============================================================================
# WEBHOOK URL FIXTURES
# =============================================================================

@pytest.fixture(scope="session")
def slack_webhook_url():
    """Real Slack webhook URL from environment."""
    url = os.getenv("TEST_SLACK_WEBHOOK_URL")

    if not url:
        pytest.skip("Slack webhook not configured")

    return url


@pytest.fixture(scope="session")
def hook_url():
    """Fake webhook URL for unit tests."""
    return TEST_HOOK_URL


# =============================================================================
# CLIENT FIXTURES
# =============================================================================

class FakeWebhookClient:
    """
    Stand-in for WebhookClient that records posts.

    Attributes:
        delay: Seconds each post blocks before completing
        error: Exception raised by each post, if set
        release: Event that, when provided, a post waits on before returning
    """

    instances = []

    def __init__(self, url):
        self.url = url
        self.posts = []
        self.delay = 0.0
        self.error = None
        self.release = None
        self.started = threading.Event()
        FakeWebhookClient.instances.append(self)

    def post_message(self, payload):
        self.started.set()
        if self.release is not None:
            self.release.wait()
        if self.delay:
            threading.Event().wait(self.delay)
        self.posts.append(payload)
        if self.error is not None:
            raise self.error


@pytest.fixture
def fake_client_factory():
    """Client factory that builds FakeWebhookClient and tracks instances."""
    FakeWebhookClient.instances = []
    return FakeWebhookClient


@pytest.fixture
def make_hook(hook_url, fake_client_factory):
    """
    Helper building a SlackHook wired to FakeWebhookClient.

    client_options are set as attributes on the client when the hook
    builds it, e.g. make_hook(client_options={"delay": 0.5}).
    """
    from slackhook import SlackHook

    def _make_hook(client_options=None, **kwargs):
        options = client_options or {}

        def factory(url):
            client = fake_client_factory(url)
            for name, value in options.items():
                setattr(client, name, value)
            return client

        kwargs.setdefault("client_factory", factory)
        return SlackHook(hook_url, **kwargs)

    return _make_hook


# =============================================================================
# TEST MARKERS COLLECTION
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: Tests that call external APIs")
    config.addinivalue_line("markers", "slack: Tests requiring a Slack webhook URL")
    config.addinivalue_line("markers", "slow: Tests that take more than a few seconds")
