"""Module-level selector compilation on the process-wide default compiler.

These functions mirror the methods of ``XPathCompiler`` and share one
``CompilationCache``; construct an ``XPathCompiler`` of your own to keep
compilations isolated.

Example:
    ```python
    from domquery import query

    query.compile(".post h2, .post p")
    # "//*[contains(concat(' ', normalize-space(@class), ' '), ' post ')]//h2|..."
    ```
"""

from __future__ import annotations

from collections.abc import Mapping

from domquery.core import get_compiler
from domquery.logic.predicates import convert_pseudo
from domquery.model import ExpressionType, SelectorSegment

__all__ = [
    "compile",
    "convert_pseudo",
    "css_to_xpath",
    "get_compiled_cache",
    "get_segments",
    "set_compiled_cache",
]


def compile(
    expression: str, type: ExpressionType | str = ExpressionType.CSS
) -> str:
    """Compile a CSS selector list (or pass an XPath expression through)."""
    return get_compiler().compile(expression, type)


def css_to_xpath(selector: str, prefix: str = "//") -> str:
    """Compile one selector chain, bypassing the cache."""
    return get_compiler().css_to_xpath(selector, prefix)


def get_segments(selector: str) -> SelectorSegment:
    """Parse the leading segment of a selector."""
    return get_compiler().parser.get_segments(selector)


def get_compiled_cache() -> dict[str, str]:
    """A copy of the default compiler's cache table."""
    return get_compiler().cache.to_dict()


def set_compiled_cache(compiled: Mapping[str, str]) -> None:
    """Replace the default compiler's cache table.

    Raises:
        InvalidArgument: If ``compiled`` is not a mapping.
    """
    get_compiler().cache.replace(compiled)
