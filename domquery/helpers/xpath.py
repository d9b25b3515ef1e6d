"""XPath string utilities.

This module provides helper functions for building XPath expressions
from untrusted text and for reading values out of lxml query results.
"""

from __future__ import annotations

import re
from typing import Any

QUOTE_SPLIT = re.compile(r"('+)")


def xpath_literal(value: str) -> str:
    """Render a Python string as an XPath string literal.

    XPath 1.0 has no escape sequences, so a value containing both quote
    characters is assembled with ``concat()``.

    Example:
        >>> xpath_literal("main")
        "'main'"
        >>> xpath_literal("it's")
        '"it\\'s"'
    """
    if "'" not in value:
        return "'%s'" % value
    if '"' not in value:
        return '"%s"' % value
    parts = [part for part in QUOTE_SPLIT.split(value) if part]
    return "concat(%s)" % ", ".join(
        ('"%s"' if "'" in part else "'%s'") % part for part in parts
    )


def node_text(result: Any) -> str | None:
    """Extract the text of a single lxml XPath result.

    Elements yield their full text content, text and attribute results are
    already strings. Whitespace is stripped.

    Example:
        >>> node_text(doc.xpath('//title')[0])
        'Page Title'
        >>> node_text(doc.xpath('//a/@href')[0])
        'https://example.com'
    """
    if result is None:
        return None
    if hasattr(result, "text_content"):
        result = result.text_content()
    elif hasattr(result, "itertext"):
        result = "".join(result.itertext())
    return str(result).strip()
