"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for admin pages.

Each page class encapsulates:
    - Element registry entries
    - Page-specific actions

Author: Automation Team
License: MIT
================================================================================
"""

from .crud_index_page import CrudIndexPage
from .order_index_page import OrderIndexPage

__all__ = [
    "CrudIndexPage",
    "OrderIndexPage",
]
