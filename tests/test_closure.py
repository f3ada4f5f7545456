import io

import pytest

from complab.closure import chain_closure, main, parse_transitions


def test_parse_transitions_groups_triples():
    text = "A e B\nB e C\nC a A\n"
    assert parse_transitions(text) == [("A", "e", "B"), ("B", "e", "C"), ("C", "a", "A")]


def test_parse_transitions_empty():
    assert parse_transitions("") == []


def test_parse_transitions_rejects_incomplete_triple():
    with pytest.raises(ValueError):
        parse_transitions("A e B\nB e")


def test_chain_follows_epsilon_moves():
    table = [("A", "e", "B"), ("B", "e", "C")]
    assert chain_closure(table, "A") == ["A", "B", "C"]


def test_chain_ignores_other_symbols():
    table = [("A", "a", "B"), ("A", "b", "C")]
    assert chain_closure(table, "A") == ["A"]


def test_chain_is_a_single_pass_in_table_order():
    table = [("B", "e", "C"), ("A", "e", "B")]
    assert chain_closure(table, "A") == ["A", "B"]


@pytest.mark.parametrize("state", ["A", "B", "C", "Z"])
def test_chain_starts_with_the_state(state):
    table = [("A", "e", "B"), ("B", "e", "C"), ("C", "a", "A")]
    result = chain_closure(table, state)
    assert result[0] == state
    assert len(result) <= 1 + len(table)


def test_main_prints_closures(tmp_path, monkeypatch, capsys):
    path = tmp_path / "input.dat"
    path.write_text("A e B\nB e C\nC a A\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nA\nC\n"))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "epsilon closure of A => {\tA\t\tB\t\tC\t}" in out
    assert "epsilon closure of C => {\tC\t}" in out