"""Element wrapper around lxml nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from lxml import etree

from domquery.exc import InvalidArgument
from domquery.logic.attributes import ClassList, StyleAttribute
from domquery.model import ExpressionType

if TYPE_CHECKING:
    from domquery.logic.document import Document


class Element:
    """A node of a ``Document``.

    Queries issued on an element search below it; CSS selectors are made
    relative to the element automatically.
    """

    node: etree._Element
    document: Document

    def __init__(self, node: etree._Element, document: Document):
        self.node = node
        self.document = document

    @property
    def tag(self) -> str | None:
        """The tag name, or None for comments and processing instructions."""
        if isinstance(self.node.tag, str):
            return self.node.tag
        return None

    @property
    def is_element_node(self) -> bool:
        return isinstance(self.node.tag, str)

    def find(
        self,
        expression: str,
        type: ExpressionType | str = ExpressionType.CSS,
        wrap: bool = True,
    ) -> list[Any]:
        return self.document.find(expression, type, wrap, context=self)

    def first(
        self,
        expression: str,
        type: ExpressionType | str = ExpressionType.CSS,
        wrap: bool = True,
    ) -> Any | None:
        return self.document.first(expression, type, wrap, context=self)

    def xpath(self, expression: str, wrap: bool = True) -> list[Any]:
        return self.document.find(expression, ExpressionType.XPATH, wrap, context=self)

    def has(
        self, expression: str, type: ExpressionType | str = ExpressionType.CSS
    ) -> bool:
        return self.document.has(expression, type, context=self)

    def count(
        self, expression: str, type: ExpressionType | str = ExpressionType.CSS
    ) -> int:
        return self.document.count(expression, type, context=self)

    def attr(self, name: str, default: str | None = None) -> str | None:
        if not self.is_element_node:
            return default
        return self.node.get(name, default)

    def has_attribute(self, name: str) -> bool:
        return self.is_element_node and name in self.node.attrib

    def attributes(self, names: list[str] | None = None) -> dict[str, str]:
        """All attributes, or only those listed in ``names``."""
        if not self.is_element_node:
            return {}
        attributes = dict(self.node.attrib)
        if names is None:
            return attributes
        return {name: attributes[name] for name in names if name in attributes}

    @property
    def classes(self) -> ClassList:
        if not self.is_element_node:
            raise InvalidArgument("Only element nodes have a class list")
        return ClassList(self)

    @property
    def style(self) -> StyleAttribute:
        if not self.is_element_node:
            raise InvalidArgument("Only element nodes have an inline style")
        return StyleAttribute(self)

    def text(self) -> str:
        if not self.is_element_node:
            return self.node.text or ""
        return "".join(self.node.itertext())

    def parent(self) -> Element | None:
        parent = self.node.getparent()
        if parent is None:
            return None
        return Element(parent, self.document)

    def children(self) -> list[Element]:
        return [
            Element(child, self.document)
            for child in self.node
            if isinstance(child.tag, str)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.node is other.node

    def __hash__(self) -> int:
        return hash(self.node)

    def __repr__(self) -> str:
        return "<Element(%s)>" % (self.tag or "#node")
