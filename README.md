# posfixa

A small calculator that converts arithmetic expressions between infix
notation (`3 * (12 + 4)`) and postfix notation (`3 12 4 + *`) and evaluates
them.

Supported elements:

- numbers, with either `.` or `,` as the decimal separator (`0,5` or `0.5`)
- binary operators `+ - * / ^` (`^` is right-associative and binds tightest;
  `*` and `/` come next, then `+` and `-`)
- parentheses
- functions `sen`, `cos` and `tg`, which take their argument in degrees, and
  `log`, the base-10 logarithm

Values are computed in single precision, so results carry float32 rounding.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Library use

Everything lives in `posfixa.expressao`:

```python
from posfixa.expressao import (
    Expressao,
    InvalidExpressionError,
    eval_infix,
    eval_postfix,
    is_valid_infix,
    to_infix,
    to_postfix,
)

to_postfix("(3 + 4) * 5")          # '3 4 + 5 *'
to_infix("3 4 + 5 *")              # '((3 + 4) * 5)'
eval_infix("(3 + 4) * 5")          # 35.0
eval_postfix("45 sen 2 ^ 0.5 +")   # about 1.0

is_valid_infix("3 + * 4")          # False

expr = Expressao.from_postfix("45 sen 2 ^ 0.5 +")
expr.infix                         # '((sen(45) ^ 2) + 0.5)'
expr.postfix                       # '45 sen 2 ^ 0.5 +'
expr.value                         # about 1.0

Expressao.from_infix("sen(45) ^2 + 0,5").postfix   # '45 sen 2 ^ 0,5 +'
```

- `is_valid_infix(text)` returns `True` or `False`; it never raises.
- `to_postfix(text)` raises `InvalidExpressionError` (a `ValueError`) when
  the infix text is not well formed. The result has its tokens separated by
  single spaces.
- `to_infix(text)` returns a fully parenthesised infix form and raises
  `InvalidExpressionError` on an unknown character, a missing operand or
  operands left over. An empty or blank input gives `""`.
- `eval_postfix(text)` skips characters it does not recognise, raises
  `InvalidExpressionError` when an operator or function has no operand, and
  returns `0.0` when the expression does not reduce to exactly one value.
- `eval_infix(text)` is `eval_postfix(to_postfix(text))`, so it raises on
  invalid infix text.
- `Expressao` is a frozen dataclass with `infix`, `postfix` and `value`,
  built with `Expressao.from_infix` or `Expressao.from_postfix`.

## Command line

```
posfixa
```

With no arguments it prints a built-in example: the infix form of
`45 sen 2 ^ 0.5 +`, the postfix form itself and its value to two decimals.

```
posfixa "3 12 4 + *"
posfixa --infix "3 * (12 + 4)"
```

A postfix expression is read by default; `-i`/`--infix` reads infix instead.
Each run prints three lines: the infix form, the postfix form and the value
with two decimals. An invalid expression prints an error on standard error
and exits with status 1. `posfixa --help` lists the options.

## Limitations

There is no unary minus: `-3` or `2 * -1` is not a valid infix expression.
Write `0 - 3` instead. Only the four named functions are known; there are no
variables or constants.