"""General browser Keywords for Robot Framework.

Keywords for window, screenshot, form and script operations, aligned with
the pytest-bdd general steps. Uses @keyword decorator to map clean function
names to scenario step text.

Mirrors: tests/step_defs/general_steps.py
"""

import time
from typing import Any, Optional

from robot.api import logger
from robot.api.deco import keyword

from tests.step_defs.helpers import fix_step_argument, resolve_field_id, unique_suffix
from tests.ui_helpers.artifacts import capture_failure_artifacts, dump_html, take_screenshot
from tests.ui_helpers.browser_session import (
    BrowserSession,
    build_click_script,
    build_focus_script,
    create_webdriver,
)
from tests.ui_helpers.config import load_config
from tests.ui_helpers.exceptions import UnsupportedOperationError
from tests.ui_helpers.option_selector import OptionSelector


class GeneralKeywords:
    """Keywords for general browser operations matching BDD scenario steps."""

    ROBOT_LIBRARY_SCOPE = "SUITE"
    ROBOT_LIBRARY_DOC_FORMAT = "TEXT"

    def __init__(
        self, reports_path: Optional[str] = None, window_size: Optional[str] = None
    ) -> None:
        """Initialize GeneralKeywords.

        Arguments:
            reports_path: Directory for screenshots and HTML dumps
            window_size: Window size as WIDTHxHEIGHT
        """
        self._config = load_config(
            {"report_path": reports_path, "window_size": window_size}
        )
        self._session: Optional[BrowserSession] = None

    @property
    def session(self) -> BrowserSession:
        if self._session is None:
            raise AssertionError(
                "No browser session, use 'Open browser session' or 'Use browser' first"
            )
        return self._session

    # =========================================================================
    # Session Keywords
    # =========================================================================

    @keyword("Open browser session")
    def open_browser_session(self) -> None:
        """Start a browser using the configured browser and Selenium URL."""
        self._session = BrowserSession(driver_factory=lambda: create_webdriver(self._config))
        self.resize_window()

    @keyword("Use browser")
    def use_browser(self, driver: Any) -> None:
        """Use an already running WebDriver.

        Arguments:
            driver: Selenium WebDriver instance
        """
        self._session = BrowserSession(driver=driver)

    @keyword("Close browser session")
    def close_browser_session(self) -> None:
        """Quit the browser started by this library."""
        if self._session is not None:
            self._session.stop()
            self._session = None

    @keyword("Resize window to configured size")
    def resize_window(self) -> None:
        """Resize the window, ignored when the driver does not support it."""
        try:
            self.session.resize_window(*self._config.window_size)
        except UnsupportedOperationError as e:
            logger.warn(f"Window not resized: {e}")

    # =========================================================================
    # Artifact Keywords
    # =========================================================================

    @keyword("Take a screenshot")
    def take_a_screenshot(self, status: str = "screenshot") -> Optional[str]:
        """Take a screenshot of the current window.

        Maps to scenario step:
        - "Then take a screenshot"

        Arguments:
            status: Appended to the file name

        Returns:
            Screenshot path, or None if the driver cannot take screenshots
        """
        path = take_screenshot(self.session, self._config.report_path, status)
        if path is None:
            logger.warn("Driver does not support screenshots")
            return None
        logger.info(f"Screenshot saved to {path}")
        return str(path)

    @keyword("Dump page HTML")
    def dump_page_html(self) -> str:
        """Write the current page HTML to the dump directory.

        Returns:
            Dump file path
        """
        path = dump_html(self.session, self._config.report_path)
        logger.info(f"HTML dump saved to {path}")
        return str(path)

    @keyword("Capture failure artifacts")
    def capture_failure(self) -> list[str]:
        """Take a failure screenshot and dump the HTML, e.g. as test teardown.

        Usage:
            [Teardown]    Run Keyword If Test Failed    Capture failure artifacts
        """
        paths = [str(p) for p in capture_failure_artifacts(self.session, self._config.report_path)]
        for path in paths:
            logger.info(f"Saved {path}")
        return paths

    # =========================================================================
    # Step Keywords
    # =========================================================================

    @keyword("I wait for ${seconds} second(s)")
    def wait_for_seconds(self, seconds: str) -> None:
        """Sleep for a fixed number of seconds.

        Maps to scenario step:
        - "When I wait for 2 seconds"
        """
        time.sleep(int(seconds))

    @keyword("I focus on ${element}")
    def focus_on_element(self, element: str) -> None:
        """Click on every element containing the given text.

        Maps to scenario step:
        - 'When I focus on "Submit"'
        """
        element = fix_step_argument(element.strip('"'))
        self.session.execute_script(build_focus_script(element))

    @keyword("Fill in field with random data")
    def fill_field_append_random(self, field: str, value: str) -> str:
        """Fill a field with a value followed by a 10 character random suffix.

        Maps to scenario step:
        - 'When I fill in "Title" with "Article" plus random data'

        Returns:
            The value written into the field
        """
        filled = fix_step_argument(value) + unique_suffix()
        self.session.page.fill_field(fix_step_argument(field), filled)
        logger.info(f"Filled '{field}' with '{filled}'")
        return filled

    @keyword("Select option with javascript")
    def select_option_with_javascript(self, select: str, option: str) -> Any:
        """Select an option of a field by id|name|label|value using javascript.

        Maps to scenario step:
        - 'When I select "Canada" from "Country" with javascript'

        Returns:
            The value injected into the field
        """
        value = OptionSelector(self.session).select_option(select, option)
        logger.info(f"Selected '{option}' in '{select}', value now {value}")
        return value

    @keyword("Check option with javascript")
    def check_option_with_javascript(self, option: str) -> None:
        """Check a checkbox by id|name|label|value using javascript.

        Maps to scenario step:
        - 'When I check "Accept terms" with javascript'
        """
        field_id = resolve_field_id(self.session.page, fix_step_argument(option))
        self.session.execute_script(build_click_script(field_id))
