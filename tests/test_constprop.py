import io

import pytest

from complab.constprop import Quad, main, parse_quads, propagate


def test_parse_quads():
    quads = parse_quads("2\n+ a b t\n= 3 - x\n")
    assert quads == [Quad("+", "a", "b", "t"), Quad("=", "3", "-", "x")]


@pytest.mark.parametrize("text", ["", "x", "2\n+ a b t", "-1"])
def test_parse_quads_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_quads(text)


def test_parse_ignores_extra_words():
    assert parse_quads("1 + a b t extra") == [Quad("+", "a", "b", "t")]


def test_chain_is_folded_away():
    quads = [
        Quad("=", "5", "-", "x"),
        Quad("*", "x", "2", "y"),
        Quad("+", "y", "1", "z"),
    ]
    assert propagate(quads) == []


def test_assignment_propagates_into_later_statements():
    quads = [
        Quad("=", "3", "-", "a"),
        Quad("+", "a", "b", "t1"),
        Quad("+", "a", "c", "t2"),
        Quad("+", "t1", "t2", "t3"),
    ]
    assert propagate(quads) == [
        Quad("+", "3", "b", "t1"),
        Quad("+", "3", "c", "t2"),
        Quad("+", "t1", "t2", "t3"),
    ]


def test_only_first_matching_operand_is_replaced():
    quads = [Quad("=", "4", "-", "a"), Quad("+", "a", "a", "b")]
    assert propagate(quads) == [Quad("+", "4", "a", "b")]


def test_division_truncates():
    quads = [Quad("/", "7", "2", "q"), Quad("+", "q", "x", "r")]
    assert propagate(quads) == [Quad("+", "3", "x", "r")]


def test_nothing_constant_is_unchanged():
    quads = [Quad("+", "a", "b", "c"), Quad("*", "c", "d", "e")]
    assert propagate(quads) == quads


def test_assignment_of_variable_is_kept():
    quads = [Quad("=", "b", "-", "a"), Quad("+", "a", "c", "d")]
    assert propagate(quads) == quads


def test_input_is_not_modified():
    quads = [Quad("=", "5", "-", "x"), Quad("+", "x", "y", "z")]
    copy = list(quads)
    propagate(quads)
    assert quads == copy


def test_unknown_operator_with_constants():
    with pytest.raises(ValueError):
        propagate([Quad("%", "1", "2", "r")])


def test_main_prints_remaining(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n= 3 - a\n+ a b c\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Optimized code is:" in out
    assert " + 3 b c" in out