"""Parsing of resistor expressions such as ``(R1+R2)//R3``."""

from __future__ import annotations

import re

from .resistor import Resistor

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class ExpressionError(ValueError):
    """Raised when a resistor expression cannot be parsed."""


def _leading_number(text: str) -> float:
    """Read the number at the start of ``text``, ignoring anything after it."""
    match = _NUMBER.match(text)
    if match is None:
        raise ExpressionError(f"Invalid resistor value: {text!r}")
    return float(match.group(1))


def parse_series(expression: str) -> Resistor:
    """Return the series sum of the '+'-separated values in ``expression``."""
    result = Resistor()
    for token in expression.split("+"):
        if token:
            result = result + Resistor(_leading_number(token))
    return result


def parse_side(text: str) -> Resistor:
    """Parse one side of a parallel expression: a bracketed series sum or a value."""
    start = text.find("(")
    end = text.find(")")
    if start != -1 and end != -1:
        inside = text[start + 1:end] if end >= start else text[start + 1:]
        return parse_series(inside)
    return Resistor(_leading_number(text))


def parse_expression(text: str) -> Resistor:
    """Parse ``left//right`` and return the parallel combination of both sides."""
    left, sep, right = text.partition("//")
    if not sep:
        raise ExpressionError(
            "Invalid input! Please include '//' for parallel resistance."
        )
    return parse_side(left) | parse_side(right)