import pytest

from automatonlab.alphabet import Alphabet
from automatonlab.das import DAS
from automatonlab.node import DASNode


def _even_as():
    """Accepts strings over {a, b} with an even number of a's."""
    even = DASNode("even", True)
    even.add_connection("a", "odd")
    even.add_connection("b", "even")
    odd = DASNode("odd", False)
    odd.add_connection("a", "even")
    odd.add_connection("b", "odd")
    das = DAS(Alphabet("ab"))
    das.add_state(even)
    das.add_state(odd)
    das.set_start_state("even")
    return das


@pytest.mark.parametrize("text", ["", "b", "aa", "abab", "bbaab"])
def test_accepts_even_count(text):
    assert _even_as().process(text)


def test_symbol_without_transition_rejects():
    assert not _even_as().process("ac")


def test_unknown_start_state_rejects_even_empty_input():
    das = _even_as()
    das.set_start_state("missing")
    assert not das.process("")
    assert not das.process("a")


def test_transition_to_unknown_state_rejects():
    node = DASNode("q0", True)
    node.add_connection("a", "ghost")
    das = DAS(Alphabet("a"))
    das.add_state(node)
    das.set_start_state("q0")
    assert das.process("")
    assert not das.process("a")


def test_sound_automaton_validates_cleanly():
    assert _even_as().validate() == []


def test_add_state_replaces_same_name():
    das = _even_as()
    das.add_state(DASNode("even", False))
    assert not das.process("")


def test_validate_reports_unknown_target():
    node = DASNode("q0")
    node.add_connection("a", "q9")
    das = DAS(Alphabet("a"))
    das.add_state(node)
    assert das.validate() == ["Stan 'q0' ma połączenie do nieistniejącego stanu 'q9'."]


def test_validate_reports_missing_symbol():
    node = DASNode("q0")
    node.add_connection("a", "q0")
    das = DAS(Alphabet("ab"))
    das.add_state(node)
    assert das.validate() == ["Stan 'q0' nie ma połączenia dla znaku 'b'."]


def test_validate_lists_unknown_targets_before_missing_symbols():
    node = DASNode("q0")
    node.add_connection("a", "q9")
    das = DAS(Alphabet("ab"))
    das.add_state(node)
    errors = das.validate()
    assert len(errors) == 2
    assert "nieistniejącego" in errors[0]
    assert "'b'" in errors[1]