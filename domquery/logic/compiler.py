"""CSS selector to XPath compilation."""

from __future__ import annotations

import re

from anystore.logging import get_logger

from domquery.exc import InvalidArgument, InvalidSelector
from domquery.logic.cache import CompilationCache
from domquery.logic.parser import (
    SelectorParser,
    skip_whitespace,
    split_selector_list,
    unquote,
)
from domquery.logic.predicates import (
    PROPERTIES,
    AttributePredicate,
    BasePredicate,
    ClassPredicate,
    IdPredicate,
    LocationStep,
    PropertyStep,
    pseudo_predicate,
    render_path,
)
from domquery.model import ExpressionType, SelectorSegment

log = get_logger(__name__)

PROPERTY = re.compile(r"::(?P<name>[\w\-]+)(?:\((?P<args>[^)]*)\))?")
PREFIXES = ("//", "/")


class XPathCompiler:
    """Compiles CSS selectors into XPath 1.0 expressions.

    Compiled branches are memoized in the injected ``CompilationCache``;
    pass your own cache to keep compilations isolated from other callers.
    """

    cache: CompilationCache
    parser: SelectorParser
    use_cache: bool

    def __init__(
        self,
        cache: CompilationCache | None = None,
        parser: SelectorParser | None = None,
        use_cache: bool = True,
    ):
        self.cache = cache if cache is not None else CompilationCache()
        self.parser = parser or SelectorParser()
        self.use_cache = use_cache

    def compile(
        self,
        expression: str,
        type: ExpressionType | str = ExpressionType.CSS,
        relative: bool = False,
    ) -> str:
        """Turn a CSS selector list (or an XPath expression) into XPath.

        Args:
            expression: A CSS selector list or an XPath expression.
            type: The language of ``expression``.
            relative: Prefix every CSS branch with ``.`` so the result can
                be evaluated against a context node.

        Returns:
            The XPath expression; comma-separated CSS branches are joined
            with the ``|`` union operator in their original order.

        Raises:
            InvalidSelector: If the expression is empty or can't be parsed.
                Its ``position`` is an offset into ``expression``.
            UnknownPseudoClass: If an unsupported pseudo-class is used.
            InvalidArgument: If ``type`` is unknown or ``expression`` is not
                a string.
        """
        expression_type = ExpressionType.parse(type)
        if not isinstance(expression, str):
            raise InvalidArgument(
                f"Expression must be a string, {expression.__class__.__name__} given"
            )
        stripped = expression.strip()
        if not stripped:
            raise InvalidSelector("The expression must not be empty", expression)
        if expression_type == ExpressionType.XPATH:
            return stripped

        paths = []
        for branch, offset in split_selector_list(expression):
            try:
                xpath = self.compile_branch(branch)
            except InvalidSelector as exc:
                raise exc.relocate(expression, offset) from exc
            if relative:
                xpath = "." + xpath
            paths.append(xpath)
        return "|".join(paths)

    def compile_branch(self, branch: str) -> str:
        """Compile a single selector chain, consulting the cache first."""
        if self.use_cache:
            xpath = self.cache.get(branch)
            if xpath is not None:
                return xpath
        xpath = self.css_to_xpath(branch)
        log.debug("Compiled selector", selector=branch, xpath=xpath)
        if self.use_cache:
            self.cache.set(branch, xpath)
        return xpath

    def css_to_xpath(self, selector: str, prefix: str = "//") -> str:
        """Compile one selector chain without touching the cache.

        ``prefix`` is the axis of the first step: ``//`` for any descendant,
        ``/`` for a direct child.
        """
        return render_path(self.build_path(selector, prefix))

    def build_path(
        self, selector: str, prefix: str = "//"
    ) -> list[LocationStep | PropertyStep]:
        """Parse a selector chain into location steps."""
        if prefix not in PREFIXES:
            raise InvalidArgument(f'Unknown prefix "{prefix}"')

        steps: list[LocationStep | PropertyStep] = []
        pos = skip_whitespace(selector, 0)
        if selector.startswith(">", pos):
            prefix = "/"
            pos = skip_whitespace(selector, pos + 1)

        while True:
            segment = self.parser.get_segments(selector, pos)
            steps.append(self.build_step(segment, prefix, selector))

            pos = skip_whitespace(selector, segment.end)
            if pos >= len(selector):
                if segment.is_child_relation:
                    raise InvalidSelector(
                        "Selector must not end with a combinator", selector, pos
                    )
                break
            if selector.startswith("::", pos):
                steps.append(self.build_property(selector, pos))
                break
            if pos == segment.end and not segment.is_child_relation:
                raise InvalidSelector(
                    f'Unexpected "{selector[pos]}" in selector', selector, pos
                )
            prefix = "/" if segment.is_child_relation else "//"
        return steps

    def build_step(
        self, segment: SelectorSegment, prefix: str = "//", selector: str | None = None
    ) -> LocationStep:
        """Translate a parsed segment into a location step.

        Predicates are ordered: id, attributes, classes, pseudo-class.
        """
        predicates: list[BasePredicate] = []
        if segment.id is not None:
            predicates.append(IdPredicate(id=segment.id))
        for name, value in (segment.attributes or {}).items():
            predicates.append(AttributePredicate(name=name, value=value))
        for name in segment.classes or []:
            predicates.append(ClassPredicate(name=name))
        if segment.pseudo_class is not None:
            predicates.append(
                pseudo_predicate(
                    segment.pseudo_class,
                    segment.pseudo_expr,
                    selector=selector,
                    position=segment.start,
                )
            )
        return LocationStep(prefix=prefix, tag=segment.tag, predicates=predicates)

    def build_property(self, selector: str, pos: int) -> PropertyStep:
        """Parse a trailing ``::text`` / ``::attr(a, b)`` property."""
        match = PROPERTY.match(selector, pos)
        if match is None:
            raise InvalidSelector(f'Invalid property in "{selector}"', selector, pos)
        name = match.group("name")
        if name not in PROPERTIES:
            raise InvalidSelector(f'Unknown property "{name}"', selector, pos)
        end = skip_whitespace(selector, match.end())
        if end < len(selector):
            raise InvalidSelector(
                "Property must be the last part of a selector", selector, end
            )
        args = [unquote(a.strip()) for a in (match.group("args") or "").split(",")]
        return PropertyStep(name=name, args=[a for a in args if a])
