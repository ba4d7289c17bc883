# starpatterns

`starpatterns` is a collection of classic console patterns. It covers squares of numbers and letters, left- and right-aligned triangles, pyramids, diamonds and butterfly shapes. It can also print the multiplication table of a number.

## Installation

```
pip install .
```

To get the test dependencies, install `.[test]` instead.

## Command line

```
starpatterns
```

The command prints a numbered menu and asks for a choice:

- Entries 1 to 27 each draw one pattern. The command then asks for the number of rows.
- Entry 28 asks for a number and prints its table from 1 to 10.
- Any other number prints `Invalid choice. Try again.`

Answers are read from standard input as whitespace-separated tokens. This means the whole session can be piped in, for example:

```
echo "21 5" | starpatterns
```

The command stops with an `error:` message on standard error and exit status 1 in two cases:

- an answer is not a whole number;
- the input ends before an answer is given.

## Library use

Each pattern is a function in `starpatterns.patterns` named `pattern_1` to `pattern_27`. Each one takes a row count and returns the rendered text as a string. Every line of that string ends in a newline.

```python
from starpatterns.patterns import pattern_8, pattern_22, render

print(pattern_8(3), end="")    # left-aligned star triangle
print(pattern_22(4), end="")   # number pyramid 1, 1 2 1, 1 2 3 2 1, ...
print(render(21, 5), end="")   # star pyramid, chosen by its number
```

`render(number, rows)` picks a pattern by its menu number, from 1 to 27. Any other number raises `ValueError`. The mapping from number to function is available as `PATTERNS`.

The multiplication table is in `starpatterns.table`:

```python
from starpatterns.table import multiplication_table

print(multiplication_table(7), end="")
```

The output has ten lines, and the first one is `7 x 1 = 7`.

The menu can also be driven from code through `starpatterns.cli`:

- `menu()` returns the menu text.
- `run_choice(choice, read, write)` runs one entry. `read` is called with a prompt and must return the answer, and `write` receives the output. It returns `False` when the choice is not on the menu.
- `main(argv=None)` is the entry point of the `starpatterns` command.

## Running the tests

```
pytest
```