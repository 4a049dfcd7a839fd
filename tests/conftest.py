"""
Shared test fixtures for hypr-raise tests
"""
import pytest
from hypr_raise.core.window import Window
from .fakes import FakeLauncher, make_window

@pytest.fixture
def launcher():
    """Fixture providing a recording launcher"""
    return FakeLauncher()

@pytest.fixture
def browser_window():
    """Fixture providing a window with every field populated"""
    return Window(
        address="0x5a1",
        window_class="Firefox",
        initial_class="firefox",
        title="Docs - Mozilla Firefox",
        initial_title="Welcome",
        tag="work",
        xdg_tag="browser",
    )

@pytest.fixture
def slack_windows():
    """Fixture providing two Slack windows, the first one focused"""
    return [
        make_window(0, "Slack", focused=True, title="general"),
        make_window(1, "Slack", title="random"),
    ]
