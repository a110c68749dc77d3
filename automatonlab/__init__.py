"""Deterministic and epsilon-nondeterministic finite automata, a transition-table model and an editor window."""

__version__ = "0.1.0"