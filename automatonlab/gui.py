"""Window for editing a transition table and checking input strings."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from functools import partial
from typing import Any

from .table import AutomatonKind, AutomatonTable, ValidationError

TITLE = "Maszyna Stanów"
ACCEPTED = "Ciąg zaakceptowany"
REJECTED = "Ciąg odrzucony"


def describe_outcome(table: AutomatonTable, text: str) -> list[tuple[str, str]]:
    """Return the lines to show after checking ``text``, each with its colour."""
    try:
        accepted = table.check(text)
    except ValidationError as error:
        return [(line, "red") for line in error.errors]
    return [(ACCEPTED, "green")] if accepted else [(REJECTED, "red")]


class StateMachineApp:
    """A window holding an editable transition table."""

    def __init__(self, table: AutomatonTable | None = None, master: Any = None) -> None:
        import tkinter as tk

        self._tk = tk
        self.table = table if table is not None else AutomatonTable()
        self.root = master if master is not None else tk.Tk()
        self.root.title(TITLE)
        self._vars: list[Any] = []

        toolbar = tk.Frame(self.root)
        toolbar.pack(anchor="w", padx=6, pady=4)
        tk.Label(toolbar, text="Typ automatu:").pack(side="left")
        self._kind = tk.StringVar(value=self.table.kind.name)
        for kind in AutomatonKind:
            tk.Radiobutton(
                toolbar,
                text=kind.value,
                value=kind.name,
                variable=self._kind,
                command=self._on_kind,
            ).pack(side="left")

        buttons = tk.Frame(self.root)
        buttons.pack(anchor="w", padx=6)
        for label, action in (
            ("Dodaj znak alfabetu", self.table.add_symbol),
            ("Dodaj stan", self.table.add_state),
            ("Usuń znak alfabetu", self.table.remove_symbol),
            ("Usuń stan", self.table.remove_state),
        ):
            tk.Button(buttons, text=label, command=partial(self._edit, action)).pack(side="left")

        self._grid = tk.Frame(self.root)
        self._grid.pack(anchor="w", padx=6, pady=6)

        input_row = tk.Frame(self.root)
        input_row.pack(anchor="w", padx=6)
        tk.Label(input_row, text="Ciąg wejściowy:").pack(side="left")
        self._input = tk.StringVar()
        tk.Entry(input_row, textvariable=self._input).pack(side="left")
        tk.Button(input_row, text="Sprawdź", command=self._check).pack(side="left")

        self._messages = tk.Frame(self.root)
        self._messages.pack(anchor="w", padx=6, pady=4)

        self.refresh()

    def _bound(self, factory: Callable[..., Any], value: Any, on_change: Callable[[Any], None]) -> Any:
        var = factory(value=value)
        var.trace_add("write", lambda *_: on_change(var))
        self._vars.append(var)
        return var

    def _on_kind(self) -> None:
        self.table.kind = AutomatonKind[self._kind.get()]
        self.refresh()

    def _edit(self, action: Callable[[], object]) -> None:
        action()
        self.refresh()

    def _on_symbol(self, index: int, var: Any) -> None:
        stored = self.table.set_symbol(index, var.get())
        if var.get() != stored:
            var.set(stored)

    def _on_name(self, index: int, var: Any) -> None:
        self.table.state_names[index] = var.get()

    def _on_accepting(self, index: int, var: Any) -> None:
        self.table.accepting_states[index] = bool(var.get())

    def _on_transition(self, index: int, column: int, var: Any) -> None:
        self.table.transitions[index][column] = var.get()

    def _on_epsilon(self, index: int, var: Any) -> None:
        self.table.epsilon_transitions[index] = var.get()

    def refresh(self) -> None:
        """Rebuild the table widgets from the current table."""
        tk = self._tk
        for child in self._grid.winfo_children():
            child.destroy()
        self._vars.clear()
        with_epsilon = self.table.kind is AutomatonKind.ENAS
        symbols = len(self.table.alphabet_cells)

        tk.Label(self._grid, text="Akcept.").grid(row=0, column=0)
        tk.Label(self._grid, text="Stany").grid(row=0, column=1)
        for column, cell in enumerate(self.table.alphabet_cells):
            var = self._bound(tk.StringVar, cell, partial(self._on_symbol, column))
            tk.Entry(self._grid, textvariable=var, width=8).grid(row=0, column=column + 2)
        if with_epsilon:
            tk.Label(self._grid, text="ε").grid(row=0, column=symbols + 2)

        for index, name in enumerate(self.table.state_names):
            row = index + 1
            accepting = self._bound(
                tk.BooleanVar, self.table.accepting_states[index], partial(self._on_accepting, index)
            )
            tk.Checkbutton(self._grid, variable=accepting).grid(row=row, column=0)
            name_var = self._bound(tk.StringVar, name, partial(self._on_name, index))
            tk.Entry(self._grid, textvariable=name_var, width=8).grid(row=row, column=1)
            for column, cell in enumerate(self.table.transitions[index]):
                var = self._bound(tk.StringVar, cell, partial(self._on_transition, index, column))
                tk.Entry(self._grid, textvariable=var, width=8).grid(row=row, column=column + 2)
            if with_epsilon:
                var = self._bound(
                    tk.StringVar, self.table.epsilon_transitions[index], partial(self._on_epsilon, index)
                )
                tk.Entry(self._grid, textvariable=var, width=8).grid(row=row, column=symbols + 2)

    def _check(self) -> None:
        for child in self._messages.winfo_children():
            child.destroy()
        for line, colour in describe_outcome(self.table, self._input.get()):
            self._tk.Label(self._messages, text=line, fg=colour).pack(anchor="w")

    def run(self) -> None:
        """Show the window until it is closed."""
        self.root.mainloop()


def main(argv: list[str] | None = None) -> int:
    """Open the editor window."""
    parser = argparse.ArgumentParser(
        prog="automatonlab",
        description="Edit a finite automaton and check which strings it accepts.",
    )
    parser.parse_args(argv)
    StateMachineApp().run()
    return 0