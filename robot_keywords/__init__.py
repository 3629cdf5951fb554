"""Robot Framework keyword libraries for the general browser steps.

This package provides keyword libraries that mirror the pytest-bdd step
definitions in tests/step_defs/. Each library uses the @keyword decorator to
map clean Python function names to scenario step text.

Libraries:
    GeneralKeywords: Window, screenshot, form and script operations

Usage:
    *** Settings ***
    Library    robot_keywords.GeneralKeywords    reports_path=results

    *** Test Cases ***
    Select Country
        Open browser session
        Select option with javascript    Country    Canada
        [Teardown]    Run Keyword If Test Failed    Capture failure artifacts
"""

from robot_keywords.general_keywords import GeneralKeywords

__all__ = [
    "GeneralKeywords",
]
