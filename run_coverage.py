"""Run the unit tests under coverage for the browser step library.

Usage:
    python run_coverage.py [--html DIR] [--fail-under PCT] [PYTEST_ARGS...]

Coverage is measured over the step definitions, the browser helpers and the
Robot Framework keyword library. The script exits non-zero when pytest fails
or when total coverage falls below ``--fail-under``.
"""

import argparse
import sys
from pathlib import Path

import coverage
import pytest

PROJECT_ROOT = Path(__file__).parent
MEASURED_PACKAGES = ["tests.step_defs", "tests.ui_helpers", "robot_keywords"]
UNIT_TESTS = "tests/unit/test_step_defs/"


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--html", metavar="DIR", help="also write an HTML report to DIR")
    parser.add_argument("--fail-under", type=float, default=0.0, metavar="PCT")
    args, pytest_args = parser.parse_known_args(argv)

    # the helper packages live below tests/, import them from the project root
    sys.path.insert(0, str(PROJECT_ROOT))

    cov = coverage.Coverage(source=MEASURED_PACKAGES, omit=["*/tests/unit/*"])
    cov.start()
    exit_code = pytest.main([UNIT_TESTS, *pytest_args])
    cov.stop()
    cov.save()

    total = cov.report(show_missing=True)
    if args.html:
        cov.html_report(directory=args.html)
        print(f"HTML report written to {args.html}")

    if exit_code != 0:
        return int(exit_code)
    if total < args.fail_under:
        print(f"Coverage {total:.1f}% is below the required {args.fail_under:.1f}%")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
