"""Read-only views of the ``class`` and ``style`` attributes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domquery.logic.element import Element


class ClassList:
    """The classes of an element, in order and without duplicates."""

    def __init__(self, element: Element):
        self.element = element
        self._classes = self.parse(element.attr("class") or "")

    @staticmethod
    def parse(value: str) -> list[str]:
        classes: list[str] = []
        for name in value.split():
            if name not in classes:
                classes.append(name)
        return classes

    def all(self) -> list[str]:
        return list(self._classes)

    def contains(self, name: str) -> bool:
        return name in self._classes

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def __iter__(self) -> Iterator[str]:
        return iter(self._classes)

    def __len__(self) -> int:
        return len(self._classes)

    def __repr__(self) -> str:
        return "<ClassList(%s)>" % " ".join(self._classes)


class StyleAttribute:
    """The declarations of an inline ``style`` attribute.

    Property names are lower-cased; a later declaration of the same
    property wins, as in a browser.
    """

    def __init__(self, element: Element):
        self.element = element
        self._properties = self.parse(element.attr("style") or "")

    @staticmethod
    def parse(value: str) -> dict[str, str]:
        properties: dict[str, str] = {}
        for declaration in value.split(";"):
            name, sep, prop_value = declaration.partition(":")
            name = name.strip().lower()
            if not sep or not name:
                continue
            properties[name] = prop_value.strip()
        return properties

    def properties(self, names: list[str] | None = None) -> dict[str, str]:
        """All declarations, or only those listed in ``names``."""
        if names is None:
            return dict(self._properties)
        return {
            name: self._properties[name] for name in names if name in self._properties
        }

    def get(self, name: str, default: str | None = None) -> str | None:
        return self._properties.get(name.lower(), default)

    def has(self, name: str) -> bool:
        return name.lower() in self._properties

    def __repr__(self) -> str:
        return "<StyleAttribute(%s)>" % self.element.attr("style")
