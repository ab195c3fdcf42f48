"""Resistor values and their series and parallel combinations."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _reciprocal(value: float) -> float:
    """Return 1/value, treating a zero value as an infinite reciprocal."""
    if value == 0:
        return math.copysign(math.inf, value)
    return 1.0 / value


@dataclass(frozen=True)
class Resistor:
    """A resistor with a resistance in ohms."""

    value: float = 0.0

    def __float__(self) -> float:
        return float(self.value)

    def series(self, other: Resistor) -> Resistor:
        """Return the equivalent of this resistor in series with ``other``."""
        return Resistor(self.value + other.value)

    def parallel(self, other: Resistor) -> Resistor:
        """Return the equivalent of this resistor in parallel with ``other``.

        A zero-ohm branch shorts the pair, giving zero ohms.
        """
        conductance = _reciprocal(self.value) + _reciprocal(other.value)
        return Resistor(_reciprocal(conductance))

    def __add__(self, other: object) -> Resistor:
        if not isinstance(other, Resistor):
            return NotImplemented
        return self.series(other)

    def __or__(self, other: object) -> Resistor:
        if not isinstance(other, Resistor):
            return NotImplemented
        return self.parallel(other)