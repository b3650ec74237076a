import pytest

from nand_errors import (
    InvalidFunctionId,
    LexicalError,
    NestingTooDeep,
    ParseError,
    UnexpectedEnd,
    UnexpectedToken,
)
from nand_lexer import DELIM, FUNC_IDENT, LPAREN, RPAREN, VAR_IDENT, Token
from nand_parser import parse
from nand_tree import Func, GateId, Var, render


def test_parse_simple_function():
    assert parse("And(a, b)") == Func(GateId.AND, (Var("a"), Var("b")))


def test_parse_nested_functions():
    tree = parse("Or(Nand(a, b), And(c, d))")
    assert tree == Func(GateId.OR, (
        Func(GateId.NAND, (Var("a"), Var("b"))),
        Func(GateId.AND, (Var("c"), Var("d"))),
    ))


def test_parse_from_tokens():
    tokens = [
        Token(FUNC_IDENT, "Nand"),
        Token(LPAREN, "("),
        Token(VAR_IDENT, "a"),
        Token(DELIM, ","),
        Token(VAR_IDENT, "b"),
        Token(RPAREN, ")"),
    ]
    assert parse(iter(tokens)) == Func(GateId.NAND, (Var("a"), Var("b")))


def test_too_many_arguments():
    with pytest.raises(InvalidFunctionId) as excinfo:
        parse("And(a, b, c)")
    assert excinfo.value.name == "And"
    assert excinfo.value.arity == 3
    assert excinfo.value.position == 0


def test_too_few_arguments():
    with pytest.raises(InvalidFunctionId):
        parse("Nand(a)")


def test_unknown_gate():
    with pytest.raises(InvalidFunctionId) as excinfo:
        parse("Xor(a, b)")
    assert "Xor" in str(excinfo.value)


def test_unknown_nested_gate_position():
    with pytest.raises(InvalidFunctionId) as excinfo:
        parse("And(a, Xor(b, c))")
    assert excinfo.value.position == 4


def test_gate_names_are_case_sensitive():
    with pytest.raises(InvalidFunctionId):
        parse("AND(a, b)")


def test_trailing_tokens():
    with pytest.raises(UnexpectedToken) as excinfo:
        parse("Nand(a, b))")
    assert excinfo.value.token.kind == RPAREN
    assert excinfo.value.position == 6
    assert "')'" in str(excinfo.value)


def test_function_where_variable_required():
    with pytest.raises(UnexpectedToken) as excinfo:
        parse("Nand(a, Bc)")
    assert excinfo.value.token.kind == RPAREN


def test_top_level_variable():
    with pytest.raises(UnexpectedToken) as excinfo:
        parse("a")
    assert "variable 'a'" in str(excinfo.value)


def test_missing_argument():
    with pytest.raises(UnexpectedToken) as excinfo:
        parse("Nand(, b)")
    assert excinfo.value.token.kind == DELIM


@pytest.mark.parametrize("text", ["", "Nand", "Nand(a, b", "Nand(a,"])
def test_unexpected_end(text):
    with pytest.raises(UnexpectedEnd) as excinfo:
        parse(text)
    assert excinfo.value.token is None
    assert isinstance(excinfo.value, UnexpectedToken)


def test_lexical_errors_propagate():
    with pytest.raises(LexicalError):
        parse("Nand(a, !)")


def nested(depth):
    expr = "a"
    for _ in range(depth):
        expr = f"Nand({expr}, a)"
    return expr


def test_nesting_limit():
    assert parse(nested(5), max_depth=5)
    with pytest.raises(NestingTooDeep) as excinfo:
        parse(nested(6), max_depth=5)
    assert isinstance(excinfo.value, ParseError)
    assert excinfo.value.limit == 5


def test_parser_calls_are_independent():
    assert parse("Or(a, b)") == parse("Or(a, b)")


def test_no_nesting_limit_by_default():
    text = nested(1000)
    assert render(parse(text)) == text


def test_deeply_nested_unterminated_call():
    text = nested(1000)[:-1]
    with pytest.raises(UnexpectedEnd):
        parse(text)


def test_deep_unknown_gate():
    text = "Xor(a, " * 1500 + "a" + ", a)" * 1500
    with pytest.raises(InvalidFunctionId) as excinfo:
        parse(text)
    assert excinfo.value.position == 4 * 1499
