"""
================================================================================
Element Registry
================================================================================

Symbolic element name -> CSS selector table used by page objects.

Registries are built once per page object from a base mapping plus any number
of override mappings; later mappings win on key collisions. Lookups of names
that were never registered raise `UnknownElementError`.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, Mapping

from loguru import logger


class UnknownElementError(KeyError):
    """Raised when a page object asks for an element it never registered."""

    def __init__(self, element_name: str, known: Mapping[str, str]):
        self.element_name = element_name
        self.known = sorted(known)
        super().__init__(element_name)

    def __str__(self) -> str:
        return (
            f"Element '{self.element_name}' is not defined. "
            f"Defined elements: {', '.join(self.known) or '<none>'}"
        )


class ElementRegistry(Mapping[str, str]):
    """
    Read-only mapping of element names to selectors.

    Usage:
        >>> registry = ElementRegistry({"table": "table"}, {"filter_channel": "#criteria_channel"})
        >>> registry.resolve("filter_channel")
        '#criteria_channel'
    """

    def __init__(self, *mappings: Mapping[str, str]):
        merged: Dict[str, str] = {}
        for mapping in mappings:
            for name, selector in mapping.items():
                if name in merged and merged[name] != selector:
                    logger.debug(
                        f"Element '{name}' overridden: {merged[name]} -> {selector}"
                    )
                merged[name] = selector
        self._elements = MappingProxyType(merged)

    def resolve(self, element_name: str) -> str:
        """Return the selector registered for `element_name`."""
        try:
            return self._elements[element_name]
        except KeyError:
            raise UnknownElementError(element_name, self._elements) from None

    def __getitem__(self, element_name: str) -> str:
        return self.resolve(element_name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"ElementRegistry({dict(self._elements)!r})"


__all__ = [
    "ElementRegistry",
    "UnknownElementError",
]
