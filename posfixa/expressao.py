"""Infix and postfix arithmetic expressions: validation, conversion and evaluation.

Supported operators are ``+ - * / ^`` (``^`` is right associative) and the
functions ``sen``, ``cos``, ``tg`` (arguments in degrees) and ``log`` (base 10).
Decimal numbers may use either ``.`` or ``,`` as separator. Evaluation is done
in single precision.
"""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass
from enum import Enum, auto

FUNCTIONS = ("sen", "cos", "tg", "log")
OPERATORS = "+-*/^"
PI = 3.14159265358979323846

_DIGITS = "0123456789"
_SEPARATORS = ",."
_PRECEDENCE = {"^": 4, "*": 3, "/": 3, "+": 2, "-": 2}
_MAX_NUMBER_CHARS = 63
_LEADING_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]*)?")


class InvalidExpressionError(ValueError):
    """Raised when an expression cannot be parsed."""


class _Prev(Enum):
    START = auto()
    NUMBER = auto()
    OPERATOR = auto()
    FUNCTION = auto()
    CLOSE = auto()


_VALUE_END = (_Prev.NUMBER, _Prev.CLOSE)


def _match_function(text: str, i: int) -> str | None:
    for name in FUNCTIONS:
        if text.startswith(name, i):
            return name
    return None


def _scan_number(text: str, i: int, single_separator: bool) -> int:
    """Return the index just past the number starting at ``i``."""
    seen_separator = False
    while i < len(text):
        ch = text[i]
        if ch in _DIGITS:
            i += 1
        elif ch in _SEPARATORS and not (single_separator and seen_separator):
            seen_separator = True
            i += 1
        else:
            break
    return i


def is_valid_infix(text: str) -> bool:
    """Tell whether ``text`` is a well-formed infix expression."""
    depth = 0
    prev = _Prev.START
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == " ":
            i += 1
            continue

        func = _match_function(text, i)
        if func:
            if prev in _VALUE_END:
                return False
            i += len(func)
            prev = _Prev.FUNCTION
            continue

        if ch == "(":
            depth += 1
            if prev in _VALUE_END:
                return False
            i += 1
            prev = _Prev.START
            continue

        if ch == ")":
            depth -= 1
            if depth < 0:
                return False
            if prev in (_Prev.OPERATOR, _Prev.START, _Prev.FUNCTION):
                return False
            i += 1
            prev = _Prev.CLOSE
            continue

        if ch in _DIGITS:
            if prev in _VALUE_END:
                return False
            i = _scan_number(text, i, single_separator=True)
            prev = _Prev.NUMBER
            continue

        if ch in OPERATORS:
            if prev not in _VALUE_END:
                return False
            i += 1
            prev = _Prev.OPERATOR
            continue

        return False

    return prev in _VALUE_END and depth == 0


def _pops_before(incoming: str, top: str) -> bool:
    if incoming == "^":
        return _PRECEDENCE[incoming] < _PRECEDENCE[top]
    return _PRECEDENCE[incoming] <= _PRECEDENCE[top]


def to_postfix(text: str) -> str:
    """Convert an infix expression to postfix, tokens separated by single spaces."""
    if not is_valid_infix(text):
        raise InvalidExpressionError(f"invalid infix expression: {text!r}")

    output: list[str] = []
    operators: list[str] = []
    functions: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == " ":
            i += 1
            continue

        func = _match_function(text, i)
        if func:
            functions.append(func)
            i += len(func)
            continue

        if ch in _DIGITS:
            end = _scan_number(text, i, single_separator=False)
            output.append(text[i:end])
            i = end
            continue

        if ch == "(":
            operators.append(ch)
        elif ch == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if operators:
                operators.pop()
            if functions:
                output.append(functions.pop())
        elif ch in OPERATORS:
            while (
                operators
                and operators[-1] in OPERATORS
                and _pops_before(ch, operators[-1])
            ):
                output.append(operators.pop())
            operators.append(ch)
        i += 1

    output.extend(reversed(operators))
    output.extend(reversed(functions))
    return " ".join(output)


def _pop(stack: list, text: str):
    if not stack:
        raise InvalidExpressionError(f"missing operand in postfix expression: {text!r}")
    return stack.pop()


def to_infix(text: str) -> str:
    """Convert a postfix expression to a fully parenthesised infix expression."""
    stack: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == " ":
            i += 1
            continue

        func = _match_function(text, i)
        if func:
            stack.append(f"{func}({_pop(stack, text)})")
            i += len(func)
            continue

        if ch in _DIGITS:
            end = _scan_number(text, i, single_separator=False)
            run = text[i:end]
            while len(run) > _MAX_NUMBER_CHARS:
                stack.append(run[:_MAX_NUMBER_CHARS])
                run = run[_MAX_NUMBER_CHARS:]
                if run[0] not in _DIGITS:
                    raise InvalidExpressionError(f"invalid postfix expression: {text!r}")
            stack.append(run)
            i = end
            continue

        if ch in OPERATORS:
            right = _pop(stack, text)
            left = _pop(stack, text)
            stack.append(f"({left} {ch} {right})")
            i += 1
            continue

        raise InvalidExpressionError(f"unexpected character {ch!r} in postfix expression")

    if not stack:
        return ""
    if len(stack) > 1:
        raise InvalidExpressionError(f"too many operands in postfix expression: {text!r}")
    return stack[0]


def _f32(x: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def _parse_number(token: str) -> float:
    match = _LEADING_NUMBER.match(token.replace(",", "."))
    return _f32(float(match.group())) if match else 0.0


def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        odd_integer = b.is_integer() and int(b) % 2 == 1
        return -math.inf if a < 0 and odd_integer else math.inf
    except ValueError:
        return math.inf if a == 0 else math.nan


def _apply_operator(op: str, a: float, b: float) -> float:
    if op == "+":
        result = a + b
    elif op == "-":
        result = a - b
    elif op == "*":
        result = a * b
    elif op == "/":
        result = _divide(a, b)
    else:
        result = _power(a, b)
    return _f32(result)


_TRIG = {"sen": math.sin, "cos": math.cos, "tg": math.tan}


def _apply_function(name: str, arg: float) -> float:
    if name == "log":
        if arg == 0:
            return -math.inf
        if math.isnan(arg) or arg < 0:
            return math.nan
        return _f32(math.log10(arg))
    radians = arg * PI / 180.0
    if not math.isfinite(radians):
        return math.nan
    return _f32(_TRIG[name](_f32(radians)))


def eval_postfix(text: str) -> float:
    """Evaluate a postfix expression.

    Unknown characters are skipped. If the expression does not reduce to
    exactly one value, the result is 0.0.
    """
    stack: list[float] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == " ":
            i += 1
            continue

        func = _match_function(text, i)
        if func:
            stack.append(_apply_function(func, _pop(stack, text)))
            i += len(func)
            continue

        if ch in _DIGITS:
            end = _scan_number(text, i, single_separator=False)
            stack.append(_parse_number(text[i:end]))
            i = end
            continue

        if ch in OPERATORS:
            b = _pop(stack, text)
            a = _pop(stack, text)
            stack.append(_apply_operator(ch, a, b))
        i += 1

    return stack[0] if len(stack) == 1 else 0.0


def eval_infix(text: str) -> float:
    """Evaluate an infix expression."""
    return eval_postfix(to_postfix(text))


@dataclass(frozen=True)
class Expressao:
    """An expression in both notations together with its value."""

    infix: str
    postfix: str
    value: float

    @classmethod
    def from_infix(cls, text: str) -> "Expressao":
        return cls(infix=text, postfix=to_postfix(text), value=eval_infix(text))

    @classmethod
    def from_postfix(cls, text: str) -> "Expressao":
        return cls(infix=to_infix(text), postfix=text, value=eval_postfix(text))