"""Interactive session that walks through finding a Thevenin equivalent."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from .expression import ExpressionError, parse_expression
from .thevenin import TheveninEquivalent

_RESISTANCE_GUIDE = (
    "\n\n*************** Thevenin Resistance ***************\n\n"
    "To begin, turn off all independent sources:\n"
    " - Short-circuit all voltage sources (replace them with a wire).\n"
    " - Open-circuit all current sources (remove them from the circuit).\n\n"
    "Then enter the resistor expression for the simplified circuit (no spaces).\n\n"
    "Format:\n"
    " * Use parentheses for resistors in series.\n"
    " * Use '//' to indicate resistors in parallel.\n\n"
    "Examples:\n"
    " * For resistors 1, 2, and 3 in series, and in parallel with resistor 4:\n"
    "   (R1+R2+R3)//R4\n"
    " * For resistors 1, 2, and 3 in series, and in parallel with resistors 4 and 5 "
    "in series:\n"
    "   (R1+R2+R3)//(R4+R5)\n\n"
    "Where R1, R2, etc. are numeric resistor values (e.g., 10, 4.7, 3.3).\n"
    "Note: You may need to simplify or group resistors to match one of the above "
    "forms.\n"
)

_VOLTAGE_GUIDE = (
    "\n*****Thevenin Voltage*****\n"
    "\nImportant: Use KCL to find the current through the branch of the node just "
    "before the terminals.\n"
    "Remember: KCL states that the sum of all currents going into a node is zero; "
    "meaning I1 + I2 + ... + In = 0 \n"
)

_POWER_GUIDE = (
    "\n***** Power Supplied to Load *****\n"
    "\nTo find the power supplied to the load, we calculate the current through it, "
    "square it, and multiply it by the load resistance:\n"
    "Note: This comes from Ohm's Law (V = I x R) and the power formula (P = V x I).\n"
    "Substituting V in gives: P = I^2 x R.\n"
)


def welcome_text(problem_number: int) -> str:
    """The introduction shown when the program starts."""
    return (
        f"THEVENIN EQUIVALENCE: PROBLEM #{problem_number} intro\n\n"
        "\n\n"
        "********** WELCOME TO YOUR FAVORITE TOOL: THE THEVENIN EQUIVALENT CIRCUIT "
        "FINDER **********"
        "\n\n"
        "Let's start by understanding what a 'Thevenin Equivalent' circuit means.\n\n"
        "Any electrical circuit, no matter how complex, can be simplified into a basic "
        "circuit with just one voltage source and one resistor. "
        "This is known as the *Thevenin Equivalent*.\n\n"
        "This simplification is useful when we want to analyze how a load resistor "
        "behaves in the circuit using Ohm's Law (V = I * R).\n\n"
        "In practice, what we electrical engineering students do is:\n"
        "1. Remove the load resistor from the circuit.\n"
        "2. Measure the voltage across the open terminals with a voltmeter; this gives "
        "us the *Thevenin Voltage* (Vth).\n"
        "3. Then, using the same multimeter, measure the resistance seen from those "
        "terminals; that gives us the *Thevenin Resistance* (Rth).\n\n"
        "Now, instead of dealing with a whole circuit, we can analyze a simple model: "
        "just Vth in series with Rth and the load resistor. How cool is that?!\n\n"
        "In theory, it's a bit different:\n"
        "We consider the circuit open between nodes A and B (where the load connects). "
        "We then:\n"
        "- Find the equivalent resistance *looking into* those terminals; this is our "
        "Thevenin resistance.\n"
        "- Use KVL or KCL to find the voltage at the node just before the terminals, "
        "assuming there's no load and there's no branch continuing past the terminals; "
        "this gives us Vth.\n\n"
        "Ready to simplify some circuits? Let's go!"
        "\n\n"
        "**********THEVENIN EQUIVALENT CIRCUIT FINDER**********\n"
    )


def run_session(
    ask: Callable[[str], str], say: Callable[[str], object]
) -> TheveninEquivalent:
    """Run one full session, reading answers with ``ask`` and writing with ``say``."""
    te = TheveninEquivalent()
    say(welcome_text(te.problem_number))
    te.problem_number = int(ask("Enter problem number: "))

    say(_RESISTANCE_GUIDE)
    expression = ask("Enter resistor expression: ")
    te.thevenin_resistance = parse_expression(expression).value
    say(
        "The Thevenin Resistance for the circuit is: "
        f"{te.thevenin_resistance:.2f} Ohms"
    )

    say(_VOLTAGE_GUIDE)
    te.branch_current = float(ask("Enter the value of the branch current (A): "))
    branch_resistance = float(
        ask("\nEnter the value of the resistor in the same branch (Ohms): ")
    )
    say("\n\n....V = I x R....Finding Thevenin voltage....\n\n")
    te.thevenin_voltage = te.branch_current * branch_resistance
    say(f"The Thevenin Voltage is: {te.thevenin_voltage:.2f} V.")

    say(_POWER_GUIDE)
    te.load_resistance = float(ask("What is the value of the load resistor: "))
    say("\nUsing the Voltage Division Rule...")
    say(f"Power supplied to load is: {te.power_to_load():.2f} W.")

    say(te.equivalent_circuit())
    say(te.suggestions())

    try:
        path = te.write_to_file()
    except (RuntimeError, OSError) as error:
        say(f"\n[ERROR] {error}")
    else:
        say(f"\n\n[DONE!] Saved to file: {path}")
    return te


def main(argv: list[str] | None = None) -> int:
    """Entry point for the interactive Thevenin equivalent finder."""
    parser = argparse.ArgumentParser(
        description="Find the Thevenin equivalent of a circuit step by step."
    )
    parser.parse_args(argv)
    try:
        run_session(input, print)
    except (ExpressionError, ValueError) as error:
        print(f"[ERROR] {error}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    try:
        input("\n\nPress ENTER to exit program..")
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())