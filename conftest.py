"""
Repository-level pytest configuration.

Why this exists:
  - Provide safe defaults so the suites run without any local setup
  - Keep the defaults explicit and discoverable

Values set here only apply when the user/CI has not provided them.
They must be in place before `testsuites/conftest.py` loads the configuration.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest


DEMO_SAFE_ENV_DEFAULTS = {
    "ENV": "dev",
    "UI__HEADLESS": "true",
}


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config):
    """Set environment defaults if not already provided."""
    for k, v in DEMO_SAFE_ENV_DEFAULTS.items():
        os.environ.setdefault(k, v)


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
