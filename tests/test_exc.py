import pytest

from domquery import exc


@pytest.mark.parametrize(
    "error",
    [
        exc.InvalidSelector,
        exc.UnknownPseudoClass,
        exc.InvalidArgument,
        exc.DocumentError,
    ],
)
def test_hierarchy(error):
    assert issubclass(error, exc.DomQueryException)


def test_builtin_bases():
    assert issubclass(exc.InvalidSelector, ValueError)
    assert issubclass(exc.InvalidArgument, TypeError)
    assert issubclass(exc.UnknownPseudoClass, exc.InvalidSelector)


def test_message_with_position():
    error = exc.InvalidSelector("Bad", "a#b#c", 3)
    assert str(error) == "Bad (at offset 3)"
    assert error.selector == "a#b#c"


def test_relocate():
    error = exc.InvalidSelector("Bad", "a#b#c", 3)
    moved = error.relocate("p, a#b#c", 3)
    assert moved.position == 6
    assert moved.selector == "p, a#b#c"
    assert str(moved) == "Bad (at offset 6)"
    assert error.position == 3


def test_relocate_keeps_type():
    error = exc.UnknownPseudoClass("hover", "a:hover", 0)
    moved = error.relocate("p, a:hover", 3)
    assert isinstance(moved, exc.UnknownPseudoClass)
    assert moved.pseudo_class == "hover"
    assert moved.position == 3


def test_relocate_without_position():
    moved = exc.InvalidSelector("Bad").relocate("p, a", 3)
    assert moved.position is None
    assert str(moved) == "Bad"
