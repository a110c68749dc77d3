"""States of deterministic and epsilon-nondeterministic automata."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


def _require_symbol(symbol: str) -> None:
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ValueError(f"transition symbol must be a single character, got {symbol!r}")


@dataclass
class DASNode:
    """A state of a deterministic automaton: one target per symbol."""

    name: str
    accepting: bool = False
    connections: dict[str, str] = field(default_factory=dict)

    def add_connection(self, symbol: str, state_name: str) -> None:
        """Set the target of the transition on ``symbol``, replacing any earlier one."""
        _require_symbol(symbol)
        self.connections[symbol] = state_name


@dataclass
class ENASNode:
    """A state of an epsilon-nondeterministic automaton: many targets per symbol."""

    name: str
    accepting: bool = False
    connections: dict[str, list[str]] = field(default_factory=dict)

    def add_connection(self, symbol: str, state_names: Iterable[str]) -> None:
        """Set the targets of the transition on ``symbol``, replacing any earlier ones."""
        _require_symbol(symbol)
        self.connections[symbol] = list(state_names)