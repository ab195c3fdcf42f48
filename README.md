# thevenin-finder

A small interactive tool that walks you through reducing a circuit to its
Thevenin equivalent: one voltage source in series with one resistor. It then
works out the power delivered to a load and compares it with the maximum
possible power.

## Installing

```
pip install .
```

## Running the finder

```
thevenin-finder
```

The command takes no options besides `--help`. The session asks for:

1. **A problem number**, used to label the saved report.
2. **A resistor expression** for the circuit with all independent sources
   turned off (voltage sources shorted, current sources opened). Write two
   sides joined by `//` (parallel). A side is either a single value or a
   series sum in parentheses using `+`:

   ```
   (10+4.7+3.3)//22
   (10+20)//(5+5)
   ```

   A side without parentheses is read as the number it starts with, so
   `10+5//20` is taken as `10//20`.
3. **The branch current** (A) and **the branch resistance** (Ohms) next to the
   terminals; the Thevenin voltage is their product, `V = I x R`.
4. **The load resistance** (Ohms).

It then prints the power delivered to the load, an ASCII sketch of the
equivalent circuit, and advice based on the Maximum Power Transfer Theorem.

The report is appended to `circuits.txt` when that file exists in the current
directory. Otherwise it is appended to `Desktop/TheveninEquivalentLogs.txt`
under `HOME` (on Windows, under `ONEDRIVE` or else `USERPROFILE`). If that
location cannot be found or written, an error is printed and the session still
ends normally.

An invalid expression or number ends the session with a message on standard
error and exit status 1.

## Using it as a library

```python
from thevenin_finder.resistor import Resistor
from thevenin_finder.expression import parse_expression
from thevenin_finder.thevenin import TheveninEquivalent

r = Resistor(10) + Resistor(20)   # series: same as Resistor(10).series(Resistor(20))
p = r | Resistor(30)              # parallel: same as r.parallel(Resistor(30))

rth = parse_expression("(10+20)//(5+5)").value   # 7.5
circuit = TheveninEquivalent(
    thevenin_resistance=rth,
    thevenin_voltage=12.0,
    load_resistance=7.5,
)
print(circuit.power_to_load(), circuit.max_power(), circuit.absorption_rating())
print(circuit.equivalent_circuit())
print(circuit.suggestions())
print(circuit.report())
circuit.write_to_path("circuits.txt")   # appends the report
```

- `Resistor` is an immutable value in ohms; a zero-ohm branch in parallel
  gives zero ohms.
- `parse_series` sums `+`-separated values, `parse_side` reads one side of an
  expression, and `parse_expression` combines both sides in parallel.
  `ExpressionError` (a `ValueError`) is raised when the expression has no
  `//` or a value cannot be read.
- `TheveninEquivalent.write_to_file()` chooses the log file as the command
  does and raises `RuntimeError` when no desktop location is known;
  `desktop_log_path()` returns that location.
- `thevenin_finder.cli.run_session(ask, say)` runs the whole dialogue with
  your own input and output callables and returns the filled-in
  `TheveninEquivalent`.

## What it does not do

Expressions cover only one parallel pair of two sides; nested groups, more
than one `//`, or spaces inside values are not understood. The Thevenin
voltage is not solved from a circuit: you supply the branch current and
resistance yourself.

## Running the tests

```
pip install .[test]
pytest
```