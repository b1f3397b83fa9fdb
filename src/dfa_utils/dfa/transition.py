class Transition:
    def __init__(self, symbol, from_state, to_state):
        self.symbol = symbol
        self.from_state = from_state
        self.to_state = to_state

    def is_self_loop(self):
        return self.from_state == self.to_state

    def swapped(self, symbol1, symbol2):
        """
        Same edge with symbol1 and symbol2 interchanged on its label
        """
        if self.symbol == symbol1:
            return Transition(symbol2, self.from_state, self.to_state)
        if self.symbol == symbol2:
            return Transition(symbol1, self.from_state, self.to_state)
        return self

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, Transition):
            return False
        return (
            self.symbol == value.symbol
            and self.from_state == value.from_state
            and self.to_state == value.to_state
        )

    def __hash__(self) -> int:
        return hash((self.symbol, self.from_state, self.to_state))

    def __str__(self) -> str:
        return f"({self.from_state})-{self.symbol}->({self.to_state})"

    def __repr__(self) -> str:
        return self.__str__()
