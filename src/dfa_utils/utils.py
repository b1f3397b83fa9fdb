import sys

import more_itertools

NO_TRANSITION = "-"
RANGE_THRESHOLD = 3


def check_symbol(symbol):
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ValueError(f"symbol must be a single character, got {symbol!r}")
    return symbol


def swap_symbol(symbol, symbol1, symbol2):
    if symbol == symbol1:
        return symbol2
    if symbol == symbol2:
        return symbol1
    return symbol


def range_label(symbols, alphabet=None):
    """
    Build a compact edge label for a group of symbols.
    Runs of more than RANGE_THRESHOLD consecutive characters collapse to `a-z`,
    everything else is listed as is.

    :param symbols: symbols on the parallel transitions
    :param alphabet: when given, symbols are ordered by their position in it
    :return: a label such as "0,1" or "a-z,_"
    """
    if not symbols:
        return ""
    if len(symbols) == 1:
        return escape_symbol(next(iter(symbols)))

    if alphabet is None:
        symbols = sorted(symbols)
    else:
        symbols = [s for s in alphabet if s in symbols]

    parts = []
    for r in more_itertools.consecutive_groups(symbols, ordering=_symbol_order):
        r = list(r)
        if len(r) > RANGE_THRESHOLD:
            parts.append(f"{escape_symbol(r[0])}-{escape_symbol(r[-1])}")
        else:
            parts.extend(escape_symbol(s) for s in r)

    return ",".join(parts)


def _symbol_order(symbol):
    # Symbols longer than one character never join a range
    if isinstance(symbol, str) and len(symbol) == 1:
        return ord(symbol)
    return -sys.maxunicode - 2


def escape_symbol(symbol):
    symbol = str(symbol)
    # Escape if \r, \n, \t, \f, \v
    if len(symbol) == 1 and ord(symbol) < 32:
        return repr(symbol)[1:-1]

    return symbol
