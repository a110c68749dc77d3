import pytest

from automatonlab.alphabet import Alphabet
from automatonlab.enas import ENAS
from automatonlab.node import ENASNode


def _ends_with_ab():
    """Accepts strings over {a, b} that end in 'ab', with an epsilon hop at the start."""
    start = ENASNode("s", False)
    start.add_connection("ε", ["q0"])
    q0 = ENASNode("q0", False)
    q0.add_connection("a", ["q0", "q1"])
    q0.add_connection("b", ["q0"])
    q1 = ENASNode("q1", False)
    q1.add_connection("b", ["q2"])
    q2 = ENASNode("q2", True)
    enas = ENAS(Alphabet("ab"))
    for node in (start, q0, q1, q2):
        enas.add_state(node)
    enas.set_start_state("s")
    return enas


@pytest.mark.parametrize("text", ["ab", "aab", "bab", "abab"])
def test_accepts_strings_ending_in_ab(text):
    assert _ends_with_ab().process(text)


@pytest.mark.parametrize("text", ["", "a", "b", "ba", "abb"])
def test_rejects_other_strings(text):
    assert not _ends_with_ab().process(text)


def test_epsilon_closure_follows_chains():
    enas = ENAS(Alphabet("a"))
    a = ENASNode("a")
    a.add_connection("ε", ["b"])
    b = ENASNode("b")
    b.add_connection("ε", ["c", "a"])
    enas.add_state(a)
    enas.add_state(b)
    enas.add_state(ENASNode("c"))
    assert enas.epsilon_closure(["a"]) == {"a", "b", "c"}
    assert enas.epsilon_closure(["c"]) == {"c"}


def test_epsilon_closure_keeps_unknown_states():
    enas = ENAS(Alphabet())
    assert enas.epsilon_closure(["ghost"]) == {"ghost"}
    assert enas.epsilon_closure([]) == set()


def test_accepting_state_reached_by_epsilon_accepts_empty():
    start = ENASNode("s")
    start.add_connection("ε", ["f"])
    enas = ENAS(Alphabet("a"))
    enas.add_state(start)
    enas.add_state(ENASNode("f", True))
    enas.set_start_state("s")
    assert enas.process("")
    assert not enas.process("a")


def test_unknown_start_state_rejects():
    enas = _ends_with_ab()
    enas.set_start_state("nowhere")
    assert not enas.process("ab")


def test_sound_automaton_validates_cleanly():
    assert _ends_with_ab().validate() == []


def test_validate_reports_unknown_targets_with_symbol():
    node = ENASNode("q0")
    node.add_connection("a", ["q0", "q7"])
    node.add_connection("ε", ["q8"])
    enas = ENAS(Alphabet("a"))
    enas.add_state(node)
    assert enas.validate() == [
        "Stan 'q0' ma połączenie dla 'a' do nieistniejącego stanu 'q7'.",
        "Stan 'q0' ma połączenie dla 'ε' do nieistniejącego stanu 'q8'.",
    ]


def test_validate_does_not_require_every_symbol():
    enas = ENAS(Alphabet("ab"))
    enas.add_state(ENASNode("q0", True))
    assert enas.validate() == []