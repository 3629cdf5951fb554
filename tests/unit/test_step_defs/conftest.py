"""Unit test conftest for step definitions.

This conftest is loaded by pytest when running unit tests from this directory.
It overrides fixtures from the root conftest.py to provide mock objects
instead of a real browser, enabling isolated unit testing of step
definition functions and feature scenarios.
"""

import pytest

from tests.ui_helpers.browser_session import BrowserSession
from tests.ui_helpers.config import StepsConfig
from tests.unit.mocks import MockContext, MockWebDriver


# -- Mock Browser Fixtures --
# These fixtures override the real browser fixtures in the root conftest.py


@pytest.fixture
def mock_driver() -> MockWebDriver:
    """Mock WebDriver serving the sample form."""
    return MockWebDriver()


@pytest.fixture
def browser_session(mock_driver: MockWebDriver, steps_config: StepsConfig) -> BrowserSession:
    """Browser session over the mock driver."""
    return BrowserSession(driver=mock_driver, window_size=steps_config.window_size)


@pytest.fixture
def steps_config(tmp_path) -> StepsConfig:
    """Configuration writing artifacts into a temporary directory."""
    return StepsConfig(report_path=tmp_path / "reports")


# -- Mock Context Fixture --


@pytest.fixture
def bdd_context() -> MockContext:
    """Mock scenario context (bdd_context) fixture.

    Provides a clean, isolated context for each unit test.
    """
    return MockContext()
