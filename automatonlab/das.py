"""Deterministic finite automaton."""

from __future__ import annotations

from .alphabet import Alphabet
from .node import DASNode


class DAS:
    """A deterministic finite automaton built from named states."""

    def __init__(self, alphabet: Alphabet) -> None:
        self.alphabet = alphabet
        self.states: dict[str, DASNode] = {}
        self.start_state = ""

    def add_state(self, node: DASNode) -> None:
        """Add a state, replacing any state of the same name."""
        self.states[node.name] = node

    def set_start_state(self, name: str) -> None:
        self.start_state = name

    def process(self, text: str) -> bool:
        """Return whether the automaton accepts ``text``."""
        current = self.start_state
        for symbol in text:
            node = self.states.get(current)
            if node is None:
                return False
            target = node.connections.get(symbol)
            if target is None:
                return False
            current = target
        node = self.states.get(current)
        return node is not None and node.accepting

    def validate(self) -> list[str]:
        """Return a description of every defect; an empty list means the automaton is sound."""
        errors = [
            f"Stan '{state}' ma połączenie do nieistniejącego stanu '{target}'."
            for state, node in self.states.items()
            for target in node.connections.values()
            if target not in self.states
        ]
        errors.extend(
            f"Stan '{state}' nie ma połączenia dla znaku '{symbol}'."
            for state, node in self.states.items()
            for symbol in self.alphabet
            if symbol not in node.connections
        )
        return errors