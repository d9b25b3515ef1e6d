"""XPath predicates and location steps as Pydantic models.

A compiled selector is a sequence of location steps, each with a tag and
a list of predicates. Rendering into an XPath string is a separate pass
so predicates can be built and inspected on their own.

Example:
    ```python
    step = LocationStep(
        prefix="//",
        tag="li",
        predicates=[ClassPredicate(name="item"), PositionPredicate(expr="1")],
    )
    step.render()
    # "//li[(contains(concat(' ', normalize-space(@class), ' '), ' item ')) and (position() = 1)]"
    ```
"""

from __future__ import annotations

import re

from pydantic import BaseModel

from domquery.exc import InvalidSelector, UnknownPseudoClass
from domquery.helpers.xpath import xpath_literal

NUMERIC = re.compile(r"^[+-]?\d+$")
NTH_FORMULA = re.compile(
    r"^(?P<mul>\d*)n(?:\s*(?P<sign>[+-])\s*(?P<pos>\d+))?$", re.IGNORECASE
)

PSEUDO_CLASSES = ("first-child", "last-child", "nth-child")
PROPERTIES = ("text", "attr")


class BasePredicate(BaseModel):
    """Base class for all predicate types."""

    model_config = {"frozen": True, "extra": "forbid"}

    def render(self) -> str:
        """Render the predicate as it appears alone inside ``[...]``."""
        raise NotImplementedError

    def render_combined(self) -> str:
        """Render the predicate as one operand of an ``and`` conjunction."""
        return self.render()


class IdPredicate(BasePredicate):
    id: str

    def render(self) -> str:
        return "@id=%s" % xpath_literal(self.id)


class AttributePredicate(BasePredicate):
    """Attribute presence (``value`` is None) or exact value match."""

    name: str
    value: str | None = None

    def render(self) -> str:
        if self.value is None:
            return "@%s" % self.name
        return "@%s=%s" % (self.name, xpath_literal(self.value))


class ClassPredicate(BasePredicate):
    name: str

    def render(self) -> str:
        return "contains(concat(' ', normalize-space(@class), ' '), %s)" % (
            xpath_literal(" %s " % self.name)
        )


class PositionPredicate(BasePredicate):
    """A bare position such as ``1`` or ``last()``.

    A bare number or ``last()`` only means a position when it is the whole
    predicate; inside ``and`` it is spelled out as a comparison.
    """

    expr: str

    def render(self) -> str:
        return self.expr

    def render_combined(self) -> str:
        return "position() = %s" % self.expr


class ExpressionPredicate(BasePredicate):
    """A ready-made boolean XPath expression."""

    expr: str

    def render(self) -> str:
        return self.expr


def render_predicates(predicates: list[BasePredicate]) -> str:
    if not predicates:
        return ""
    if len(predicates) == 1:
        return "[%s]" % predicates[0].render()
    return "[(%s)]" % ") and (".join(p.render_combined() for p in predicates)


class LocationStep(BaseModel):
    """One ``<prefix><tag>[predicates]`` step of an XPath location path."""

    prefix: str = "//"
    tag: str = "*"
    predicates: list[BasePredicate] = []

    def render(self) -> str:
        return self.prefix + self.tag + render_predicates(self.predicates)


class PropertyStep(BaseModel):
    """A trailing ``::text`` or ``::attr(...)`` selection."""

    name: str
    args: list[str] = []

    def render(self) -> str:
        if self.name == "text":
            return "/text()"
        if not self.args:
            return "/@*"
        names = " or ".join("name() = %s" % xpath_literal(a) for a in self.args)
        return "/@*[%s]" % names


def render_path(steps: list[LocationStep | PropertyStep]) -> str:
    return "".join(step.render() for step in steps)


def convert_nth_expression(expr: str) -> str:
    """Translate the argument of ``:nth-child()`` into an XPath condition.

    Unrecognized arguments are passed through untouched as raw XPath.
    """
    expr = expr.strip()
    if not expr:
        raise InvalidSelector("nth-child expression must not be empty")
    if expr == "odd":
        return "(position()-1) mod 2 = 0 and position() >= 1"
    if expr == "even":
        # the second clause can never fail; kept for output compatibility
        return "position() mod 2 = 0 and position() >= 0"
    if NUMERIC.match(expr):
        return "position() = %d" % int(expr)
    match = NTH_FORMULA.match(expr)
    if match is not None:
        multiplier = int(match.group("mul") or 1)
        position = int(match.group("pos") or 0)
        if multiplier == 0:
            return "position() = %d" % position
        if match.group("sign") == "-":
            return "(position()+%d) mod %d = 0 and position() >= 1" % (
                position,
                multiplier,
            )
        return "(position()-%d) mod %d = 0 and position() >= %d" % (
            position,
            multiplier,
            position,
        )
    return expr


def pseudo_predicate(
    name: str,
    expr: str | None = None,
    selector: str | None = None,
    position: int | None = None,
) -> BasePredicate:
    """Build the predicate for a pseudo-class.

    ``selector`` and ``position`` only enrich error messages.

    Raises:
        UnknownPseudoClass: If the pseudo-class is not supported.
        InvalidSelector: If the argument is missing or not allowed.
    """
    if name not in PSEUDO_CLASSES:
        raise UnknownPseudoClass(name, selector, position)
    if name == "nth-child":
        if expr is None:
            raise InvalidSelector(
                "nth-child requires an expression", selector, position
            )
        try:
            return ExpressionPredicate(expr=convert_nth_expression(expr))
        except InvalidSelector as exc:
            raise InvalidSelector(str(exc), selector, position) from exc
    if expr is not None:
        raise InvalidSelector(
            f'Pseudo-class "{name}" does not take an argument', selector, position
        )
    if name == "first-child":
        return PositionPredicate(expr="1")
    return PositionPredicate(expr="last()")


def convert_pseudo(name: str, expr: str | None = None) -> str:
    """Translate a pseudo-class into an XPath predicate expression.

    Example:
        >>> convert_pseudo("nth-child", "2n+1")
        '(position()-1) mod 2 = 0 and position() >= 1'
    """
    return pseudo_predicate(name, expr).render()
