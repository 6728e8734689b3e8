import math

import pytest

from posfixa.expressao import (
    Expressao,
    InvalidExpressionError,
    eval_infix,
    eval_postfix,
    is_valid_infix,
    to_infix,
    to_postfix,
)

ROUND_TRIP_POSTFIX = [
    "3 12 4 + *",
    "45 sen 2 ^ 0.5 +",
    "8 3 - 2 -",
    "2 3 2 ^ ^",
    "10 log 1 +",
    "30 cos 60 sen *",
]


@pytest.mark.parametrize(
    "text",
    [
        "3 * (12 + 4)",
        "sen(45) ^2 + 0,5",
        "(3 + 4) * 5",
        "log(100)",
        "cos 60",
        "1.5 + 2,5",
        "tg(30) / (2 - 1)",
    ],
)
def test_valid_infix(text):
    assert is_valid_infix(text)


@pytest.mark.parametrize(
    "text",
    ["", "3 +", "(1 + 2", "1 + 2)", "2 (3)", "sen", "1.2.3", "3 ++ 4", "()", "a + 1", "1 2", "-1"],
)
def test_invalid_infix(text):
    assert not is_valid_infix(text)


def test_to_postfix_header_example():
    assert to_postfix("3 * (12 + 4)") == "3 12 4 + *"


def test_to_postfix_keeps_comma_decimal():
    result = to_postfix("sen(45) ^2 + 0,5")
    assert "0,5" in result
    assert result.replace(",", ".") == "45 sen 2 ^ 0.5 +"


def test_to_postfix_rejects_invalid():
    with pytest.raises(InvalidExpressionError):
        to_postfix("3 +")


def test_to_infix_sample():
    assert to_infix("45 sen 2 ^ 0.5 +") == "((sen(45) ^ 2) + 0.5)"


def test_to_infix_empty():
    assert to_infix("") == ""


@pytest.mark.parametrize("text", ["+", "sen", "1 2", "1 x", "1 +"])
def test_to_infix_errors(text):
    with pytest.raises(InvalidExpressionError):
        to_infix(text)


def test_to_infix_number_length_limit():
    assert to_infix("1" * 63) == "1" * 63
    with pytest.raises(InvalidExpressionError):
        to_infix("1" * 64)


@pytest.mark.parametrize("postfix", ROUND_TRIP_POSTFIX)
def test_round_trip(postfix):
    assert to_postfix(to_infix(postfix)) == postfix


@pytest.mark.parametrize("postfix", ROUND_TRIP_POSTFIX)
def test_infix_and_postfix_values_agree(postfix):
    assert eval_infix(to_infix(postfix)) == eval_postfix(postfix)


def test_eval_postfix_sample():
    assert eval_postfix("45 sen 2 ^ 0.5 +") == pytest.approx(1.0, abs=1e-5)


def test_power_is_right_associative():
    assert eval_infix("2 ^ 3 ^ 2") == eval_postfix("2 3 2 ^ ^")
    assert eval_infix("2 ^ 3 ^ 2") != eval_postfix("2 3 ^ 2 ^")


def test_subtraction_is_left_associative():
    assert eval_infix("8 - 3 - 2") == eval_postfix("8 3 - 2 -")


def test_function_without_parentheses():
    assert eval_infix("cos 60") == eval_postfix("60 cos")


def test_log_infix_matches_postfix():
    assert eval_infix("log(100)") == eval_postfix("100 log")


def test_comma_and_dot_decimals_agree():
    assert eval_postfix("0,5 0,5 +") == eval_postfix("0.5 0.5 +")


def test_unknown_characters_are_skipped():
    assert eval_postfix("1 x 2 +") == eval_postfix("1 2 +")


def test_not_single_result_gives_zero():
    assert eval_postfix("1 2") == 0.0
    assert eval_postfix("") == 0.0


@pytest.mark.parametrize("text", ["+", "sen", "1 +"])
def test_eval_postfix_underflow(text):
    with pytest.raises(InvalidExpressionError):
        eval_postfix(text)


def test_division_by_zero():
    result = eval_postfix("1 0 /")
    assert math.isinf(result) and result > 0
    assert math.isnan(eval_postfix("0 0 /"))


def test_log_of_zero():
    result = eval_postfix("0 log")
    assert math.isinf(result) and result < 0


def test_eval_infix_rejects_invalid():
    with pytest.raises(InvalidExpressionError):
        eval_infix("(1")


def test_expressao_from_postfix():
    text = "45 sen 2 ^ 0.5 +"
    expr = Expressao.from_postfix(text)
    assert expr.postfix == text
    assert expr.infix == to_infix(text)
    assert expr.value == eval_postfix(text)


def test_expressao_from_infix():
    expr = Expressao.from_infix("3 * (12 + 4)")
    assert expr.infix == "3 * (12 + 4)"
    assert expr.postfix == "3 12 4 + *"
    assert expr.value == eval_postfix("3 12 4 + *")


def test_expressao_from_infix_invalid():
    with pytest.raises(InvalidExpressionError):
        Expressao.from_infix("3 * (")