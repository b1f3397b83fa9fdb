from .dfa import DFA
from .state import State
from .transition import Transition

__all__ = [
    'DFA',
    'State',
    'Transition',
]
