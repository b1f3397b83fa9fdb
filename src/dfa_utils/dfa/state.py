from .transition import Transition


class State:

    def __init__(self, name, start_state=False, final_state=False):
        self._name = name
        self.transitions = {}
        self.is_start_state = start_state
        self.is_final_state = final_state

    @property
    def name(self):
        return self._name

    def add_transition(self, symbol, to_state):
        # Deterministic: a later transition on the same symbol replaces the earlier one
        self.transitions[symbol] = to_state

    def get_to(self, symbol):
        return self.transitions.get(symbol)

    def get_outgoing_symbols(self):
        return set(self.transitions)

    def get_transitions(self, alphabet=None, to_state=None):
        """
        Outgoing transitions of this state as Transition objects

        :param alphabet: order to list them in, defaults to insertion order
        :param to_state: only keep transitions into this state
        :return: list of Transition
        """
        symbols = alphabet if alphabet is not None else list(self.transitions)
        transitions = [
            Transition(symbol, self, self.transitions[symbol])
            for symbol in symbols
            if symbol in self.transitions
        ]

        if to_state is not None:
            transitions = list(filter(lambda x: x.to_state == to_state, transitions))

        return transitions

    def is_dead_end(self):
        return not self.is_final_state and all(
            t.is_self_loop() for t in self.get_transitions()
        )

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, State):
            return False
        return self.name == value.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"{self.name}"

    def __repr__(self) -> str:
        return f"{self.name}"
