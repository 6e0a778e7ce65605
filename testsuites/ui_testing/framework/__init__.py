"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the admin panel.

Components:
    - config: YAML/env configuration and Loguru logging setup
    - element_registry: Symbolic element name -> selector tables
    - page_base: Base page object for common operations
    - browser_manager: Browser lifecycle management

Author: Automation Team
License: MIT
================================================================================
"""

from .element_registry import ElementRegistry, UnknownElementError
from .page_base import PageBase
from .browser_manager import BrowserManager

__all__ = [
    "ElementRegistry",
    "UnknownElementError",
    "PageBase",
    "BrowserManager",
]
