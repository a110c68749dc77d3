"""Nondeterministic finite automaton with epsilon transitions."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .alphabet import Alphabet
from .node import ENASNode

EPSILON = "ε"


class ENAS:
    """A nondeterministic finite automaton whose states may move on epsilon."""

    def __init__(self, alphabet: Alphabet) -> None:
        self.alphabet = alphabet
        self.states: dict[str, ENASNode] = {}
        self.start_state = ""

    def add_state(self, node: ENASNode) -> None:
        """Add a state, replacing any state of the same name."""
        self.states[node.name] = node

    def set_start_state(self, name: str) -> None:
        self.start_state = name

    def process(self, text: str) -> bool:
        """Return whether any run of the automaton on ``text`` ends in an accepting state."""
        current = self.epsilon_closure([self.start_state])
        for symbol in text:
            reached = {
                target
                for state in current
                if state in self.states
                for target in self.states[state].connections.get(symbol, ())
            }
            current = self.epsilon_closure(reached)
        return any(
            state in self.states and self.states[state].accepting for state in current
        )

    def epsilon_closure(self, states: Iterable[str]) -> set[str]:
        """Return the given states together with every state reachable from them on epsilon."""
        start = list(states)
        closure = set(start)
        queue = deque(start)
        while queue:
            node = self.states.get(queue.popleft())
            if node is None:
                continue
            for target in node.connections.get(EPSILON, ()):
                if target not in closure:
                    closure.add(target)
                    queue.append(target)
        return closure

    def validate(self) -> list[str]:
        """Return a description of every transition that leads to an unknown state."""
        return [
            f"Stan '{state}' ma połączenie dla '{symbol}' do nieistniejącego stanu '{target}'."
            for state, node in self.states.items()
            for symbol, targets in node.connections.items()
            for target in targets
            if target not in self.states
        ]