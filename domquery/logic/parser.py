"""CSS selector segment parser.

A selector chain such as ``div.post > a[href]:first-child`` is consumed one
segment at a time. Each call matches a single composite pattern at a cursor
position and reports where the match ended, so the caller can continue from
there without re-slicing the selector.
"""

from __future__ import annotations

import re

from domquery.exc import InvalidSelector
from domquery.model import Relation, SelectorSegment

SEGMENT = re.compile(
    r"""
    (?P<body>
        (?P<tag>[\w\-*]+)?
        (?:\#(?P<id>[\w\-]+))?
        (?P<classes>\.[\w\-.]+)?
        (?P<attrs>(?:\[[^\]]*\])+)?
        (?::(?P<pseudo>[\w\-]+)(?:\((?P<expr>(?:[^()]|\([^()]*\))*)\))?)?
    )
    (?P<rel>\s*>)?
    """,
    re.VERBOSE,
)
ATTRIBUTE_NAME = re.compile(r"^[\w\-.:]+$")
WHITESPACE = " \t\n\r\f"
QUOTES = "'\""


def skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in WHITESPACE:
        pos += 1
    return pos


def unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTES:
        return value[1:-1]
    return value


def split_selector_list(expression: str) -> list[tuple[str, int]]:
    """Split a selector list on top-level commas.

    Commas inside brackets, parentheses or quoted attribute values do not
    separate branches. A quote only opens a value when it is the first
    character after ``=`` inside brackets; elsewhere it is literal text.
    Returns the trimmed branches with the offset each one starts at.

    Raises:
        InvalidSelector: If a branch is empty.
    """
    branches: list[tuple[str, int]] = []
    depth = 0
    brackets = 0
    quote: str | None = None
    value_start = False
    start = 0
    for pos, char in enumerate(expression):
        if quote is not None:
            if char == quote:
                quote = None
            continue
        if value_start and char in WHITESPACE:
            continue
        opens_value = value_start
        value_start = False
        if opens_value and char in QUOTES:
            quote = char
        elif char == "=" and brackets > 0:
            value_start = True
        elif char in "[(":
            depth += 1
            if char == "[":
                brackets += 1
        elif char in "])":
            depth = max(depth - 1, 0)
            if char == "]":
                brackets = max(brackets - 1, 0)
        elif char == "," and depth == 0:
            branches.append((expression[start:pos], start))
            start = pos + 1
    branches.append((expression[start:], start))

    result = []
    for branch, offset in branches:
        stripped = branch.strip()
        if not stripped:
            raise InvalidSelector("Empty selector in list", expression, offset)
        result.append((stripped, skip_whitespace(expression, offset)))
    return result


class SelectorParser:
    """Decomposes one CSS selector segment into a ``SelectorSegment``."""

    def get_segments(self, selector: str, pos: int = 0) -> SelectorSegment:
        """Parse the segment starting at ``pos`` (leading whitespace skipped).

        Raises:
            InvalidSelector: If nothing is left to parse or the text at the
                cursor is not a selector segment.
        """
        pos = skip_whitespace(selector, pos)
        if pos >= len(selector):
            raise InvalidSelector("The selector must not be empty", selector, pos)

        match = SEGMENT.match(selector, pos)
        if match is None or not match.group("body"):
            raise InvalidSelector(f'Invalid selector "{selector}"', selector, pos)

        fields = {
            "matched_text": match.group(0),
            "start": pos,
            "end": match.end(),
        }
        if match.group("tag"):
            fields["tag"] = match.group("tag")
        if match.group("id"):
            fields["id"] = match.group("id")
        if match.group("classes"):
            classes = [c for c in match.group("classes").split(".") if c]
            if classes:
                fields["classes"] = classes
        if match.group("attrs"):
            fields["attributes"] = self._parse_attributes(
                match.group("attrs"), selector, match.start("attrs")
            )
        if match.group("pseudo"):
            fields["pseudo_class"] = match.group("pseudo")
            fields["pseudo_expr"] = match.group("expr")
        if match.group("rel"):
            fields["relation"] = Relation.CHILD
        return SelectorSegment(**fields)

    def _parse_attributes(
        self, attrs: str, selector: str, pos: int
    ) -> dict[str, str | None]:
        attributes: dict[str, str | None] = {}
        for attribute in attrs[1:-1].split("]["):
            name, sep, value = attribute.partition("=")
            name = name.strip()
            if not name:
                raise InvalidSelector(
                    "Attribute name must not be empty", selector, pos
                )
            if not ATTRIBUTE_NAME.match(name):
                raise InvalidSelector(
                    f'Unsupported attribute selector "[{attribute}]"', selector, pos
                )
            attributes[name] = unquote(value.strip()) if sep else None
        return attributes
