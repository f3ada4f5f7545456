import io

import pytest

from complab.codegen import generate, main


def test_single_addition():
    assert generate(["a=b+c"]) == ["Mov b,R0", "ADDc,R0", "Mov R0,a"]


@pytest.mark.parametrize(
    "operator, opcode", [("+", "ADD"), ("-", "SUB"), ("*", "MUL"), ("/", "DIV")]
)
def test_opcodes(operator, opcode):
    code = generate([f"x=y{operator}z"])
    assert code[1] == f"{opcode}z,R0"


def test_each_statement_gets_its_own_register():
    statements = ["a=b+c", "d=e-f", "g=h*i", "j=k/l"]
    code = generate(statements)
    assert len(code) == 3 * len(statements)
    for register, statement in enumerate(statements):
        load, _, store = code[3 * register : 3 * register + 3]
        assert load == f"Mov {statement[2]},R{register}"
        assert store == f"Mov R{register},{statement[0]}"


def test_empty_input_gives_no_code():
    assert generate([]) == []


def test_unknown_operator_rejected():
    with pytest.raises(ValueError):
        generate(["a=b%c"])


def test_short_statement_rejected():
    with pytest.raises(ValueError):
        generate(["a=b"])


def test_main_stops_at_exit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a=b+c\nexit\nd=e-f\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "ADDc,R0" in out
    assert "SUB" not in out