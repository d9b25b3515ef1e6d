import copy


class DomQueryException(Exception):
    """Base exception class."""

    pass


class InvalidSelector(DomQueryException, ValueError):
    """A selector or expression can't be parsed or compiled."""

    def __init__(
        self, message: str, selector: str | None = None, position: int | None = None
    ):
        self.message = message
        self.selector = selector
        self.position = position
        super().__init__(self._format())

    def _format(self) -> str:
        if self.position is None:
            return self.message
        return "%s (at offset %d)" % (self.message, self.position)

    def relocate(self, selector: str, offset: int) -> "InvalidSelector":
        """A copy of this error positioned within an enclosing ``selector``."""
        error = copy.copy(self)
        error.selector = selector
        if error.position is not None:
            error.position += offset
        error.args = (error._format(),)
        return error


class UnknownPseudoClass(InvalidSelector):
    """A pseudo-class outside the supported set was used."""

    def __init__(
        self, pseudo_class: str, selector: str | None = None, position: int | None = None
    ):
        self.pseudo_class = pseudo_class
        super().__init__(
            f'Unknown pseudo-class "{pseudo_class}"', selector, position
        )


class InvalidArgument(DomQueryException, TypeError):
    """A value of the wrong type was passed to an entry point."""

    pass


class DocumentError(DomQueryException):
    """A document could not be loaded or is not loaded yet."""

    pass
