"""The set of macro names a lint run accepts."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Vocabulary:
    """Immutable set of recognized macro names.

    Iteration is always in sorted order so that anything depending on
    "first entry wins" (suggestion tie-breaks) is reproducible.
    """

    __slots__ = ("_lookup", "_names")

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._lookup = frozenset(names)
        self._names = tuple(sorted(self._lookup))

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def __contains__(self, name: object) -> bool:
        return name in self._lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return self._lookup == other._lookup

    def __hash__(self) -> int:
        return hash(self._lookup)

    def __repr__(self) -> str:
        return f"Vocabulary({len(self._names)} names)"
