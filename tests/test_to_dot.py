from dfa_utils import DFA


def node_line(source, name):
    return next(line for line in source.splitlines() if line.strip().startswith(f"{name} ["))


def test_to_dot():
    dfa = DFA()
    dfa.add_sigma("0")
    dfa.add_sigma("1")
    for name in ["a", "b", "c"]:
        dfa.add_state(name)
    dfa.set_start("a")
    dfa.set_final("b")
    dfa.add_transition("a", "b", "0")
    dfa.add_transition("a", "b", "1")
    dfa.add_transition("b", "b", "0")

    source = dfa.to_dot()

    assert "rankdir=LR" in source
    assert "shape=doublecircle" in node_line(source, "b")
    assert "shape=circle" in node_line(source, "a")
    # c is not final and has nowhere to go
    assert "color=gray" in node_line(source, "c")
    assert "color=black" in node_line(source, "a")

    edges = [line for line in source.splitlines() if "a -> b" in line]
    assert 1 == len(edges)
    assert 'label="0,1"' in edges[0]
    assert "b -> b [label=0]" in source
    assert "__start -> a" in source


def test_to_dot_without_start_state():
    dfa = DFA()
    dfa.add_state("a")
    source = dfa.to_dot()

    assert "__start" not in source
    assert "a [" in source


def test_to_dot_range_label():
    dfa = DFA()
    for symbol in "abcdef":
        dfa.add_sigma(symbol)
    dfa.add_state("s")
    dfa.add_state("t")
    for symbol in "abcdf":
        dfa.add_transition("s", "t", symbol)

    assert 's -> t [label="a-d,f"]' in dfa.to_dot()


def test_to_dot_start_arrow_does_not_clash_with_state_names():
    dfa = DFA()
    for name in ["", "__start"]:
        dfa.add_state(name)
    dfa.set_start("")

    source = dfa.to_dot()
    lines = [line.strip() for line in source.splitlines()]

    assert 1 == len([line for line in lines if line.startswith('"" [')])
    assert "shape=circle" in node_line(source, '""')
    assert "shape=circle" in node_line(source, "__start")
    assert '__start_ -> ""' in source
