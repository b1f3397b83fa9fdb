import logging

from .dfa import DFA, State, Transition

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'DFA',
    'State',
    'Transition',
]
