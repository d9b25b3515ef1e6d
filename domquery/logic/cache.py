"""Memoization table for compiled selector branches."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from banal import is_mapping

from domquery.exc import InvalidArgument


class CompilationCache:
    """Maps a trimmed selector branch to its compiled XPath.

    Entries never expire. The table is not synchronized: share one instance
    between threads only behind an external lock.
    """

    def __init__(self, compiled: Mapping[str, str] | None = None):
        self._compiled: dict[str, str] = {}
        if compiled is not None:
            self.replace(compiled)

    def get(self, selector: str) -> str | None:
        return self._compiled.get(selector)

    def set(self, selector: str, xpath: str) -> None:
        self._compiled[selector] = xpath

    def replace(self, compiled: Mapping[str, str]) -> None:
        """Swap the whole table, e.g. to restore a persisted one.

        Raises:
            InvalidArgument: If ``compiled`` is not a mapping of strings.
        """
        if not is_mapping(compiled):
            raise InvalidArgument(
                f"Compiled cache must be a mapping, {type(compiled).__name__} given"
            )
        for key, value in compiled.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise InvalidArgument(
                    f"Compiled cache entries must map str to str: {key!r}"
                )
        self._compiled = dict(compiled)

    def clear(self) -> None:
        self._compiled.clear()

    def to_dict(self) -> dict[str, str]:
        return dict(self._compiled)

    def __contains__(self, selector: object) -> bool:
        return selector in self._compiled

    def __len__(self) -> int:
        return len(self._compiled)

    def __iter__(self) -> Iterator[str]:
        return iter(self._compiled)

    def __repr__(self) -> str:
        return "<CompilationCache(%d)>" % len(self._compiled)
