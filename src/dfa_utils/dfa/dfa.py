import logging

import graphviz
from graphviz.quoting import escape

from .transition import Transition
from .state import State
from dfa_utils import utils

logger = logging.getLogger(__name__)


class DFA:
    """
    Deterministic finite automaton built one call at a time.

    States and alphabet symbols keep the order they were added in, and that order
    is what `str()`, `describe()` and `to_dot()` show. Construction methods return
    False instead of raising when a call refers to something that does not exist,
    and leave the automaton untouched in that case.

    Example:

        dfa = DFA()
        dfa.add_sigma("0")
        dfa.add_sigma("1")
        dfa.add_state("q0")
        dfa.add_state("q1")
        dfa.set_start("q0")
        dfa.set_final("q1")
        dfa.add_transition("q0", "q1", "1")
        dfa.accepts("1")
        # Output: True
    """

    def __init__(self):
        self.alphabet = []
        self._sigma = set()
        # name -> State, in insertion order
        self.states = {}
        self.start_state = None
        self.final_states = set()

    def __contains__(self, item):
        if isinstance(item, State):
            return self.states.get(item.name) is item
        elif isinstance(item, Transition):
            return item in self.transitions
        elif isinstance(item, str):
            return item in self.states
        else:
            return False

    def add_state(self, name):
        """
        Add a new state named `name`

        :param name: unique state name
        :return: False if a state with that name already exists
        """
        if name in self.states:
            logger.debug("State %s already exists", name)
            return False

        self.states[name] = State(name)
        return True

    def add_sigma(self, symbol):
        self._add_symbol(utils.check_symbol(symbol))

    def _add_symbol(self, symbol):
        if symbol not in self._sigma:
            self._sigma.add(symbol)
            self.alphabet.append(symbol)

    def set_start(self, name):
        """
        Make `name` the only start state of the DFA.
        The previous start state, if any, loses its start flag.

        :param name: name of an existing state
        :return: False if there is no such state
        """
        state = self.states.get(name)
        if state is None:
            logger.debug("Cannot set start, no state %s", name)
            return False

        if self.start_state is not None and self.start_state is not state:
            self.start_state.is_start_state = False

        state.is_start_state = True
        self.start_state = state
        return True

    def set_final(self, name):
        state = self.states.get(name)
        if state is None:
            logger.debug("Cannot set final, no state %s", name)
            return False

        state.is_final_state = True
        self.final_states.add(state)
        return True

    def add_transition(self, from_state, to_state, symbol):
        """
        Add the transition `from_state` -symbol-> `to_state`.
        An existing transition from `from_state` on `symbol` is replaced.

        :param from_state: name of the source state
        :param to_state: name of the destination state
        :param symbol: a symbol already in the alphabet
        :return: False if a state is unknown or the symbol is not in the alphabet
        """
        source = self.states.get(from_state)
        destination = self.states.get(to_state)

        if source is None or destination is None or symbol not in self._sigma:
            logger.debug(
                "Rejected transition (%s)-%s->(%s)", from_state, symbol, to_state
            )
            return False

        source.add_transition(symbol, destination)
        return True

    def accepts(self, s):
        """
        Run the DFA on `s`

        Unknown symbols and missing transitions reject the input,
        the same as ending in a non-final state.

        :param s: a string, or any iterable of symbols
        :return: True if the walk ends in a final state
        """
        if self.start_state is None:
            return False

        current_state = self.start_state
        for symbol in s:
            try:
                if symbol not in self._sigma:
                    return False
            except TypeError:
                # unhashable, so it cannot be a symbol of the alphabet
                return False

            current_state = current_state.get_to(symbol)
            if current_state is None:
                return False

        return current_state.is_final_state

    def get_sigma(self):
        return set(self._sigma)

    def get_state(self, name):
        return self.states.get(name)

    def is_final(self, name):
        state = self.states.get(name)
        return state is not None and state.is_final_state

    def is_start(self, name):
        state = self.states.get(name)
        return state is not None and state.is_start_state

    def get_final_states(self):
        return list(filter(lambda x: x.is_final_state, self.states.values()))

    @property
    def transitions(self):
        transitions = []
        for s in self.states.values():
            transitions.extend(s.get_transitions(alphabet=self.alphabet))
        return transitions

    def swap(self, symbol1, symbol2):
        """
        Copy the DFA with `symbol1` and `symbol2` interchanged everywhere.
        The copy shares no state objects with this DFA, which is left unchanged.

        Example:

            # dfa accepts "1"
            dfa.swap("0", "1").accepts("0")
            # Output: True

        :param symbol1: first symbol, need not be in the alphabet
        :param symbol2: second symbol, need not be in the alphabet
        :return: a new DFA
        """
        new_dfa = DFA()

        # No validation here: the swapped-in symbol is taken as given
        for symbol in self.alphabet:
            new_dfa._add_symbol(utils.swap_symbol(symbol, symbol1, symbol2))

        for name in self.states:
            new_dfa.add_state(name)

        if self.start_state is not None:
            new_dfa.set_start(self.start_state.name)

        for s in self.get_final_states():
            new_dfa.set_final(s.name)

        for t in self.transitions:
            t = t.swapped(symbol1, symbol2)
            new_dfa.add_transition(t.from_state.name, t.to_state.name, t.symbol)

        return new_dfa

    def describe(self):
        for s in self.states.values():
            # Print state name and check if it's the start state
            print(f"State {s} is_final_state={s.is_final_state}")
            if s == self.start_state:
                print("\tStart state")
            for t in s.get_transitions(alphabet=self.alphabet):
                print(f"\t\t -{t.symbol}-> {t.to_state}")

    def to_dot(self, filename=None, view=False):
        """
        Generate a DOT representation of the DFA
        Final states are marked as double circles, dead ends are grayed out

        :param filename: render the diagram to this file
        :param view: open the rendered diagram
        :return: the DOT source
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir="LR")
        for s in self.states.values():
            dot.node(
                escape(s.name),
                # Make the circle double if final state
                shape="doublecircle" if s.is_final_state else "circle",
                color="gray" if s.is_dead_end() else "black",
            )

        # Parallel transitions between the same two states share one edge
        edges = {}
        for t in self.transitions:
            edges.setdefault((t.from_state, t.to_state), set()).add(t.symbol)

        for (from_state, to_state), symbols in edges.items():
            dot.edge(
                escape(from_state.name),
                escape(to_state.name),
                label=escape(utils.range_label(symbols, self.alphabet)),
            )

        # Workaround to mark start state
        if self.start_state is not None:
            start_node = "__start"
            while start_node in self.states:
                start_node += "_"
            dot.node(start_node, label="", shape="none", width="0")
            dot.edge(start_node, escape(self.start_state.name))

        if filename or view:
            dot.render(filename, view=view)

        return dot.source

    def __str__(self):
        lines = [
            "Q = { " + " ".join(self.states) + " }",
            "Sigma = { " + " ".join(map(str, self.alphabet)) + " }",
            "delta =",
            "\t\t" + "".join(f"{symbol}\t" for symbol in self.alphabet),
        ]

        for s in self.states.values():
            row = f"\t{s.name}\t"
            for symbol in self.alphabet:
                to_state = s.get_to(symbol)
                row += f"{to_state.name if to_state is not None else utils.NO_TRANSITION}\t"
            lines.append(row)

        lines.append("q0 = " + (self.start_state.name if self.start_state else ""))
        lines.append(
            "F = { " + " ".join(s.name for s in self.get_final_states()) + " }"
        )

        return "\n".join(lines)

    def __repr__(self):
        start = self.start_state.name if self.start_state else None
        return f"<DFA states={len(self.states)} sigma={len(self.alphabet)} start={start}>"
