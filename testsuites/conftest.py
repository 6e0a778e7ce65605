"""
================================================================================
Root Pytest Configuration
================================================================================

Project-wide markers, automatic suite marking and logging setup.

================================================================================
"""

import pytest

from testsuites.ui_testing.framework.config import init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "unit: Browser-free tests of the framework and page objects"
    )
    config.addinivalue_line(
        "markers", "ui: Browser-backed UI tests"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "orders: Tests related to the admin order list"
    )

    init_logger()


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests by the suite directory they live in."""
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Admin UI Automation - Order List",
        "=" * 60,
        "",
    ]
