import pytest

from domquery.exc import InvalidSelector, UnknownPseudoClass
from domquery.helpers.xpath import node_text, xpath_literal
from domquery.logic.predicates import (
    AttributePredicate,
    ClassPredicate,
    ExpressionPredicate,
    IdPredicate,
    LocationStep,
    PositionPredicate,
    PropertyStep,
    convert_nth_expression,
    convert_pseudo,
    render_path,
)


class TestConvertPseudo:
    def test_first_child(self):
        assert convert_pseudo("first-child") == "1"

    def test_last_child(self):
        assert convert_pseudo("last-child") == "last()"

    def test_nth_child_numeric(self):
        assert convert_pseudo("nth-child", "3") == "position() = 3"

    def test_nth_child_formula(self):
        assert (
            convert_pseudo("nth-child", "2n+1")
            == "(position()-1) mod 2 = 0 and position() >= 1"
        )

    def test_odd_matches_2n_plus_1(self):
        assert convert_pseudo("nth-child", "odd") == convert_pseudo("nth-child", "2n+1")

    def test_even_literal(self):
        # known quirk: the ">= 0" clause is always true
        assert (
            convert_pseudo("nth-child", "even")
            == "position() mod 2 = 0 and position() >= 0"
        )

    def test_unknown(self):
        with pytest.raises(UnknownPseudoClass):
            convert_pseudo("hover")

    def test_missing_argument(self):
        with pytest.raises(InvalidSelector):
            convert_pseudo("nth-child")

    def test_unexpected_argument(self):
        with pytest.raises(InvalidSelector):
            convert_pseudo("last-child", "2")


class TestNthExpression:
    @pytest.mark.parametrize(
        "expr,xpath",
        [
            ("3n+1", "(position()-1) mod 3 = 0 and position() >= 1"),
            ("3n + 2", "(position()-2) mod 3 = 0 and position() >= 2"),
            ("n+3", "(position()-3) mod 1 = 0 and position() >= 3"),
            ("2n", "(position()-0) mod 2 = 0 and position() >= 0"),
            ("3n-1", "(position()+1) mod 3 = 0 and position() >= 1"),
            ("0n+4", "position() = 4"),
            (" 7 ", "position() = 7"),
        ],
    )
    def test_formulas(self, expr, xpath):
        assert convert_nth_expression(expr) == xpath

    def test_raw_passthrough(self):
        raw = "position() > 2 and position() < 5"
        assert convert_nth_expression(raw) == raw

    def test_empty(self):
        with pytest.raises(InvalidSelector):
            convert_nth_expression("  ")


class TestRender:
    def test_single_predicate(self):
        step = LocationStep(tag="li", predicates=[PositionPredicate(expr="1")])
        assert step.render() == "//li[1]"

    def test_combined_predicates(self):
        step = LocationStep(
            prefix="/",
            tag="a",
            predicates=[
                IdPredicate(id="x"),
                AttributePredicate(name="href"),
                PositionPredicate(expr="last()"),
            ],
        )
        assert step.render() == "/a[(@id='x') and (@href) and (position() = last())]"

    def test_expression_predicate(self):
        predicate = ExpressionPredicate(expr="position() = 2")
        assert predicate.render() == predicate.render_combined()

    def test_class_predicate(self):
        assert ClassPredicate(name="nav").render() == (
            "contains(concat(' ', normalize-space(@class), ' '), ' nav ')"
        )

    def test_attribute_value(self):
        assert AttributePredicate(name="lang", value="en").render() == "@lang='en'"

    def test_path(self):
        steps = [
            LocationStep(tag="div"),
            LocationStep(prefix="/", tag="a"),
            PropertyStep(name="attr", args=["href"]),
        ]
        assert render_path(steps) == "//div/a/@*[name() = 'href']"


class TestXpathHelpers:
    def test_literal_plain(self):
        assert xpath_literal("main") == "'main'"

    def test_literal_single_quote(self):
        assert xpath_literal("it's") == '"it\'s"'

    def test_literal_both_quotes(self):
        assert xpath_literal("""a'b"c""") == """concat('a', "'", 'b"c')"""

    def test_node_text(self):
        assert node_text(None) is None
        assert node_text("  value ") == "value"
