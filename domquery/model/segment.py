"""Selector segment and expression type models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from domquery.exc import InvalidArgument


class ExpressionType(str, Enum):
    """The language a query expression is written in."""

    CSS = "CSS"
    XPATH = "XPATH"

    @classmethod
    def parse(cls, value: ExpressionType | str) -> ExpressionType:
        """Accept an enum member or its name in any letter case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        raise InvalidArgument(f'Unknown expression type "{value}"')


class Relation(str, Enum):
    """How a segment relates to the segment following it."""

    DESCENDANT = "descendant"
    CHILD = "child"


class SelectorSegment(BaseModel):
    """One single-element fragment of a CSS selector.

    ``classes`` and ``attributes`` are ``None`` when the selector does not
    specify them, so "not specified" can be told apart from an empty
    container. An attribute value of ``None`` means "present, any value".
    """

    model_config = {"frozen": True, "extra": "forbid"}

    tag: str = "*"
    id: str | None = None
    classes: list[str] | None = None
    attributes: dict[str, str | None] | None = None
    pseudo_class: str | None = None
    pseudo_expr: str | None = None
    relation: Relation = Relation.DESCENDANT
    matched_text: str = Field(min_length=1)
    start: int = 0
    end: int = 0

    @property
    def is_child_relation(self) -> bool:
        return self.relation == Relation.CHILD

    def as_dict(self) -> dict[str, Any]:
        """Only the keys the selector actually specified."""
        data: dict[str, Any] = {"selector": self.matched_text, "tag": self.tag}
        if self.id is not None:
            data["id"] = self.id
        if self.classes is not None:
            data["classes"] = list(self.classes)
        if self.attributes is not None:
            data["attributes"] = dict(self.attributes)
        if self.pseudo_class is not None:
            data["pseudo"] = self.pseudo_class
            if self.pseudo_expr is not None:
                data["expr"] = self.pseudo_expr
        if self.is_child_relation:
            data["rel"] = ">"
        return data
