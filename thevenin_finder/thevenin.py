"""The Thevenin equivalent of a circuit and the figures derived from it."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path

LOG_FILE_NAME = "TheveninEquivalentLogs.txt"
REPO_LOG_FILE = "circuits.txt"


def _divide(numerator: float, denominator: float) -> float:
    """Divide with floating-point semantics for a zero denominator."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _general(value: float) -> str:
    return f"{value:g}"


def desktop_log_path() -> str:
    """Return the path of the log file on the user's desktop."""
    if os.name == "nt":
        for variable in ("ONEDRIVE", "USERPROFILE"):
            base = os.environ.get(variable)
            if base:
                return base + "\\Desktop\\" + LOG_FILE_NAME
    else:
        home = os.environ.get("HOME")
        if home:
            return home + "/Desktop/" + LOG_FILE_NAME
    raise RuntimeError("Error writing into file. Try running in the repo folder (clone)")


@dataclass
class TheveninEquivalent:
    """A Thevenin source with its load, as found during a session."""

    thevenin_resistance: float = 0.0
    thevenin_voltage: float = 0.0
    load_resistance: float = 0.0
    branch_current: float = 0.0
    problem_number: int = 0

    def power_to_load(self) -> float:
        """Power delivered to the load resistance, in watts."""
        current = _divide(
            self.thevenin_voltage, self.thevenin_resistance + self.load_resistance
        )
        return current * current * self.load_resistance

    def max_power(self) -> float:
        """Maximum power the source can deliver, reached when the load matches."""
        return _divide(
            self.thevenin_voltage * self.thevenin_voltage, 4 * self.thevenin_resistance
        )

    def absorption_rating(self) -> float:
        """Actual power as a percentage of the maximum possible power."""
        return _divide(self.power_to_load(), self.max_power()) * 100

    def suggestions(self) -> str:
        """Advice on whether the load resistance should be changed."""
        max_power = self.max_power()
        actual = self.power_to_load()
        lines = [
            "\n\n*** Improvements and Suggestions ***\n\n",
            "To check if this circuit can be optimized, we compare the actual power "
            "supplied to the load with the *maximum possible power*.\n",
            "According to the Maximum Power Transfer Theorem, power is maximized when "
            "the load resistance equals the Thevenin resistance.\n\n",
        ]
        if max_power - actual < 1e-2:
            lines.append(
                f"Your circuit is supplying near maximum power: {max_power:.2f} W "
                "to your load; no further improvements are needed!\n"
            )
        else:
            lines.append(
                f"Your circuit is supplying {actual:.2f} W which is not the maximum "
                "possible power.\n"
            )
            lines.append(
                "Consider adjusting the load resistance to "
                f"{self.thevenin_resistance:.2f} Ohms for maximum power absorption."
            )
        return "".join(lines)

    def equivalent_circuit(self) -> str:
        """An ASCII drawing of the equivalent circuit."""
        if self.load_resistance > 0:
            load = f"[{_general(self.load_resistance)} Ohms]"
        else:
            load = "(No Load)"
        return (
            "\n\n********   Thevenin Equivalent Circuit Illustration   ********\n\n"
            f"           +-----------[{_general(self.thevenin_resistance)}  Ohms]"
            "-----------+ A\n"
            "           |                                 |\n"
            f"         [+]                                {load}\n"
            f"        ({_general(self.thevenin_voltage)} V)"
            "                              |\n"
            "         [-]                                 |\n"
            "           |                                 |\n"
            "           +---------------------------------+ B\n"
        )

    def report(self) -> str:
        """The log entry recorded for this problem."""
        rating = self.absorption_rating()
        comment = (
            "Load resistance is sub-optimal, adjust it to match the Thevenin Resistance."
            if rating < 98
            else "Load resistance is almost optimal, no further improvements are needed."
        )
        return (
            f"\n\nProblem #{self.problem_number}\n\n"
            f"Thevenin Voltage: {_general(self.thevenin_voltage)} V.\n"
            f"Thevenin Resistance: {_general(self.thevenin_resistance)} Ohms.\n"
            f"Load Resistance: {_general(self.load_resistance)} Ohms.\n"
            f"Power Supplied to Load: {_general(self.power_to_load())} W.\n"
            f"Maximum Possible Power to Load: {_general(self.max_power())} W.\n"
            f"Load's Power Absorption Rating: {_general(rating)}.\n\n"
            f"Comments: {comment}\n"
            "********************\n\n\n"
        )

    def write_to_path(self, path: str | os.PathLike[str]) -> Path:
        """Append the report to ``path`` and return that path."""
        target = Path(path)
        with target.open("a", encoding="utf-8") as log:
            log.write(self.report())
        return target

    def write_to_file(self) -> Path:
        """Append the report to ``circuits.txt`` if present, else to the desktop log."""
        if Path(REPO_LOG_FILE).exists():
            return self.write_to_path(REPO_LOG_FILE)
        return self.write_to_path(desktop_log_path())