import io
from dataclasses import replace

import pytest

from complab.subset import build_dfa, main

RULES = [(0, 0, 0), (0, 0, 1), (0, 1, 0), (1, 1, 1)]


@pytest.fixture
def dfa():
    return replace(build_dfa(2, RULES), start=1, finals=frozenset({1}))


def test_singleton_states_are_present(dfa):
    assert 1 in dfa.transitions
    assert 2 in dfa.transitions


def test_singleton_transitions_follow_rules(dfa):
    assert dfa.transitions[1] == ((1 << 0) | (1 << 1), 1 << 0)
    assert dfa.transitions[2] == (0, 1 << 1)


def test_composite_states_are_unions(dfa):
    for mask, (zero, one) in dfa.transitions.items():
        members = [1 << bit for bit in range(2) if mask & (1 << bit)]
        expected_zero = expected_one = 0
        for member in members:
            expected_zero |= dfa.transitions[member][0]
            expected_one |= dfa.transitions[member][1]
        assert (zero, one) == (expected_zero, expected_one)


def test_every_target_is_a_state(dfa):
    for targets in dfa.transitions.values():
        for target in targets:
            assert target in dfa.transitions


def test_states_are_sorted(dfa):
    assert list(dfa.states) == sorted(dfa.transitions)


def test_run_path_length_and_start(dfa):
    path = dfa.run("0110")
    assert len(path) == 5
    assert path[0] == dfa.start


def test_run_empty_string(dfa):
    assert dfa.run("") == [dfa.start]


def test_accepts_and_rejects(dfa):
    assert dfa.accepts("01")
    assert not dfa.accepts("1")
    assert not dfa.accepts("")


def test_run_rejects_other_symbols(dfa):
    with pytest.raises(ValueError):
        dfa.run("012")


def test_rule_outside_states_is_rejected():
    with pytest.raises(ValueError):
        build_dfa(2, [(0, 0, 2)])


def test_nonzero_symbol_means_one():
    assert build_dfa(2, [(0, 7, 1)]).transitions == build_dfa(2, [(0, 1, 1)]).transitions


def test_main_accepts_string(monkeypatch, capsys):
    text = "2\n1\n1\n4\n0 0 0\n0 0 1\n0 1 0\n1 1 1\n0\n01\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "STATE     0   1" in out
    assert "String Accepted" in out


def test_main_rejects_string(monkeypatch, capsys):
    text = "2\n1\n1\n4\n0 0 0\n0 0 1\n0 1 0\n1 1 1\n0\n1\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    assert "String Rejected" in capsys.readouterr().out