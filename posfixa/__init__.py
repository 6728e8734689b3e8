"""Convert arithmetic expressions between infix and postfix notation and evaluate them."""

__version__ = "0.1.0"
__all__ = ["__version__"]