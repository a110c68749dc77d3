# automatonlab

A small workbench for finite automata. You describe a machine as a
transition table and check whether input strings are accepted. In the table,
states are rows and alphabet symbols are columns.

Two kinds of automaton are supported:

- **DAS** is a deterministic automaton. Every state must have a transition
  for every symbol of the alphabet.
- **ε-NAS** is a nondeterministic automaton with epsilon moves. A cell may
  list several target states separated by commas. An extra `ε` column holds
  the epsilon transitions.

The package has no runtime dependencies. The editor window uses `tkinter`
from the standard library, which some Python installations ship separately.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Graphical editor

```
automatonlab
```

This opens a window titled "Maszyna Stanów" that holds the transition table.
`automatonlab --help` prints a short usage message. The command takes no other
options. In the window you can:

- choose the automaton type, DAS or ε-NAS;
- add or remove alphabet symbols and states. The last symbol and the last
  state cannot be removed;
- edit the symbol cells, which keep only their first character;
- edit state names and transition cells;
- mark accepting states;
- type an input string and press "Sprawdź" to check it.

The first state in the table is the start state.

Validation problems are listed in red. They include:

- a transition to a state that does not exist;
- a missing transition in a DAS;
- an empty alphabet cell;
- an input symbol that is not in the alphabet.

When there are no problems, the window shows "Ciąg zaakceptowany" in green if
the string is accepted, or "Ciąg odrzucony" in red if it is rejected.

## Library use

### Deterministic automaton

```python
from automatonlab.alphabet import Alphabet
from automatonlab.node import DASNode
from automatonlab.das import DAS

alphabet = Alphabet()
alphabet.add("a")
alphabet.add("b")

q0 = DASNode("q0", False)
q0.add_connection("a", "q1")
q0.add_connection("b", "q0")
q1 = DASNode("q1", True)
q1.add_connection("a", "q1")
q1.add_connection("b", "q0")

das = DAS(alphabet)
das.add_state(q0)
das.add_state(q1)
das.set_start_state("q0")

assert das.validate() == []
das.process("ba")   # True: ends in "a"
das.process("ab")   # False
```

`Alphabet` behaves like an ordered set. It supports `in`, `len()` and
iteration. Its `add` method raises `ValueError` for anything that is not a
single character. `add_connection` on either node type raises the same error.

`DAS.process` returns `False` when it reaches a missing transition or an
unknown state. `DAS.validate` returns a list of messages: one for each
transition to an unknown state, and one for each state that has no transition
for some symbol.

### Epsilon-nondeterministic automaton

```python
from automatonlab.alphabet import Alphabet
from automatonlab.node import ENASNode
from automatonlab.enas import ENAS, EPSILON

alphabet = Alphabet()
alphabet.add("a")

start = ENASNode("s", False)
start.add_connection(EPSILON, ["p"])   # EPSILON == "ε"
p = ENASNode("p", True)
p.add_connection("a", ["p"])

enas = ENAS(alphabet)
enas.add_state(start)
enas.add_state(p)
enas.set_start_state("s")

enas.epsilon_closure(["s"])  # {"s", "p"}
enas.process("aaa")          # True
```

`ENAS.validate` reports only transitions to states that do not exist. Missing
transitions are allowed in this kind of automaton.

### Working with the table model

`automatonlab.table.AutomatonTable` holds the same data as the editor window.
A new table has one symbol `"a"` and one non-accepting state `"q0"`. Its
fields are:

- `kind`, an `AutomatonKind.DAS` or `AutomatonKind.ENAS`;
- `alphabet_cells`, the symbol cells;
- `state_names`, the state names;
- `transitions`, the transition cells, one row per state and one column per
  symbol;
- `epsilon_transitions`, the epsilon cell of each state;
- `accepting_states`, the accepting flag of each state.

```python
from automatonlab.table import AutomatonKind, AutomatonTable, ValidationError

table = AutomatonTable()
table.transitions[0][0] = "q0"
table.accepting_states[0] = True

table.check("aaa")       # True
table.validate("ab")     # ["Ciąg wejściowy zawiera znak 'b' spoza alfabetu."]
try:
    table.check("ab")
except ValidationError as error:
    print(error.errors)
```

The table has these methods:

- `add_symbol` and `add_state` append an empty column or row.
- `remove_symbol` and `remove_state` drop the last column or row. They return
  `False` and change nothing when only one is left.
- `set_symbol(index, text)` stores the first character of `text` and returns
  it.
- `build_das` and `build_enas` build the automata.
- `validate(text)` returns the list of problem messages for the current
  `kind`.
- `check(text)` returns whether the string is accepted. It raises
  `ValidationError` if there are problems. The exception is a `ValueError`,
  and its `errors` attribute lists the problems.

`automatonlab.gui.describe_outcome(table, text)` returns the lines the window
would show after a check. Each line is a `(text, colour)` pair.

## Limitations

Tables exist only in memory. Neither the window nor the library can save a
table to a file or load one from a file.