"""Editable transition table from which automata are built and checked."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field

from .alphabet import Alphabet
from .das import DAS
from .enas import ENAS, EPSILON
from .node import DASNode, ENASNode


class ValidationError(ValueError):
    """Raised when a table cannot be checked against an input string."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("\n".join(self.errors))


class AutomatonKind(enum.Enum):
    """The kind of automaton a table describes; the value is its display label."""

    DAS = "DAS"
    ENAS = "ε-NAS"


def _split_targets(cell: str) -> list[str]:
    return [part.strip() for part in cell.split(",") if part.strip()]


@dataclass
class AutomatonTable:
    """Alphabet, states, acceptance flags and transition cells as edited by a user.

    ``transitions[i][j]`` is the cell of state ``i`` for the symbol in
    ``alphabet_cells[j]``; ``epsilon_transitions[i]`` is the epsilon cell of
    state ``i``, used only by epsilon-nondeterministic automata. The first
    state is the start state.
    """

    kind: AutomatonKind = AutomatonKind.DAS
    alphabet_cells: list[str] = field(default_factory=lambda: ["a"])
    state_names: list[str] = field(default_factory=lambda: ["q0"])
    transitions: list[list[str]] = field(default_factory=lambda: [[""]])
    epsilon_transitions: list[str] = field(default_factory=lambda: [""])
    accepting_states: list[bool] = field(default_factory=lambda: [False])

    def add_symbol(self) -> None:
        """Append an empty alphabet column."""
        self.alphabet_cells.append("")
        for row in self.transitions:
            row.append("")

    def add_state(self) -> None:
        """Append an unnamed, non-accepting state with empty transitions."""
        self.state_names.append("")
        self.transitions.append([""] * len(self.alphabet_cells))
        self.epsilon_transitions.append("")
        self.accepting_states.append(False)

    def remove_symbol(self) -> bool:
        """Drop the last alphabet column unless it is the only one."""
        if len(self.alphabet_cells) <= 1:
            return False
        self.alphabet_cells.pop()
        for row in self.transitions:
            row.pop()
        return True

    def remove_state(self) -> bool:
        """Drop the last state unless it is the only one."""
        if len(self.state_names) <= 1:
            return False
        self.state_names.pop()
        self.transitions.pop()
        self.epsilon_transitions.pop()
        self.accepting_states.pop()
        return True

    def set_symbol(self, index: int, text: str) -> str:
        """Store ``text`` as an alphabet cell, keeping only its first character."""
        value = text[:1]
        self.alphabet_cells[index] = value
        return value

    def _symbol_columns(self) -> Iterator[tuple[int, str]]:
        for column, cell in enumerate(self.alphabet_cells):
            if cell:
                yield column, cell[0]

    def _alphabet(self) -> Alphabet:
        return Alphabet(symbol for _, symbol in self._symbol_columns())

    def _rows(self) -> Iterator[tuple[str, bool, list[str], str]]:
        return zip(
            self.state_names,
            self.accepting_states,
            self.transitions,
            self.epsilon_transitions,
        )

    def build_das(self) -> DAS:
        """Build a deterministic automaton from the table."""
        das = DAS(self._alphabet())
        for name, accepting, row, _ in self._rows():
            node = DASNode(name, accepting)
            for column, symbol in self._symbol_columns():
                target = row[column]
                if target:
                    node.add_connection(symbol, target)
            das.add_state(node)
        if self.state_names:
            das.set_start_state(self.state_names[0])
        return das

    def build_enas(self) -> ENAS:
        """Build an epsilon-nondeterministic automaton; cells hold comma-separated targets."""
        enas = ENAS(self._alphabet())
        for name, accepting, row, epsilon_cell in self._rows():
            node = ENASNode(name, accepting)
            for column, symbol in self._symbol_columns():
                targets = _split_targets(row[column])
                if targets:
                    node.add_connection(symbol, targets)
            epsilon_targets = _split_targets(epsilon_cell)
            if epsilon_targets:
                node.add_connection(EPSILON, epsilon_targets)
            enas.add_state(node)
        if self.state_names:
            enas.set_start_state(self.state_names[0])
        return enas

    def _build(self) -> DAS | ENAS:
        if self.kind is AutomatonKind.ENAS:
            return self.build_enas()
        return self.build_das()

    def _errors(self, automaton: DAS | ENAS, text: str) -> list[str]:
        errors = automaton.validate()
        errors.extend(
            f"Pole na znak alfabetu w kolumnie {column} jest puste."
            for column, cell in enumerate(self.alphabet_cells, start=1)
            if not cell.strip()
        )
        errors.extend(
            f"Ciąg wejściowy zawiera znak '{symbol}' spoza alfabetu."
            for symbol in text
            if symbol not in automaton.alphabet
        )
        return errors

    def validate(self, text: str) -> list[str]:
        """Return every problem that prevents checking ``text`` against the table."""
        return self._errors(self._build(), text)

    def check(self, text: str) -> bool:
        """Return whether the automaton accepts ``text``; raise ValidationError if it cannot run."""
        automaton = self._build()
        errors = self._errors(automaton, text)
        if errors:
            raise ValidationError(errors)
        return automaton.process(text)