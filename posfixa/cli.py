"""Command line entry point: show an expression in both notations and its value."""

from __future__ import annotations

import argparse
import sys

from posfixa.expressao import Expressao, InvalidExpressionError

DEFAULT_POSTFIX = "45 sen 2 ^ 0.5 +"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="posfixa",
        description="Convert an expression between postfix and infix and evaluate it.",
    )
    parser.add_argument(
        "expression",
        nargs="?",
        default=DEFAULT_POSTFIX,
        help=f"the expression (postfix unless --infix; default: {DEFAULT_POSTFIX!r})",
    )
    parser.add_argument(
        "-i",
        "--infix",
        action="store_true",
        help="read the expression in infix notation",
    )
    args = parser.parse_args(argv)

    try:
        if args.infix:
            expr = Expressao.from_infix(args.expression)
        else:
            expr = Expressao.from_postfix(args.expression)
    except InvalidExpressionError as exc:
        print(f"posfixa: {exc}", file=sys.stderr)
        return 1

    print(expr.infix)
    print(expr.postfix)
    print(f"{expr.value:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())