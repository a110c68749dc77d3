"""The input alphabet of an automaton."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Alphabet:
    """An ordered set of single-character symbols."""

    def __init__(self, symbols: Iterable[str] = ()) -> None:
        self._symbols: dict[str, None] = {}
        for symbol in symbols:
            self.add(symbol)

    def add(self, character: str) -> None:
        """Add a symbol; adding one that is already present does nothing."""
        if not isinstance(character, str) or len(character) != 1:
            raise ValueError(f"alphabet symbol must be a single character, got {character!r}")
        self._symbols[character] = None

    def __contains__(self, character: object) -> bool:
        return character in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet({list(self._symbols)!r})"