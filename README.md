# contestkit

A small collection of classic programming-contest problems solved in plain
Python, usable both as a library and as stdin-to-stdout filters. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Number theory — `contestkit.numtheory`

```python
from contestkit.numtheory import fibonacci, gcd, lcm, sieve, composite_marks

fibonacci(8)          # 21 (fibonacci(0) == 0, fibonacci(1) == 1)
gcd(2, 3)             # 1
lcm(4, 6)             # 12
sieve(20)             # [2, 3, 5, 7, 11, 13, 17, 19]
composite_marks(6)    # [False, True, False, False, True, False, True]
```

`composite_marks(n)` returns `n + 1` flags; flag `i` is `True` when `i` is 1
or composite. `fibonacci` and `composite_marks` raise `ValueError` for a
negative `n`, and `lcm(0, 0)` raises `ValueError`.

## Problem solvers

Each problem module offers a function for the core algorithm, a
`solve(text)` that turns a whole judge-style input into the expected output
text, and a `main(argv=None)` that reads standard input and writes standard
output. Malformed or truncated input raises `ValueError`.

| Module                 | Core function(s)                                  | What it does                                                                 |
|------------------------|---------------------------------------------------|------------------------------------------------------------------------------|
| `contestkit.factorial` | `factorial_digits(n)`                             | Exact decimal digits of `n!` as a string                                     |
| `contestkit.brackets`  | `is_balanced(text)`, `stack_trace(text)`          | Checks `()` / `[]` nesting; the trace lists the stack top (or `"Null"`) after each scanned character |
| `contestkit.bombs`     | `shortest_path(rows, cols, bombs, start, dest)`   | Fewest four-way steps on a grid avoiding bombed cells; `0` when unreachable |
| `contestkit.maze`      | `min_path_cost(grid)`                             | Cheapest path from the top-left to the bottom-right cell, counting every visited cell |
| `contestkit.mail`      | `shortest_distance(n, edges, source, dest)`       | Shortest weighted distance in an undirected graph; `None` when unreachable  |
| `contestkit.ladder`    | `differs_by_one(first, second)`, `build_graph(words)`, `transformation_distance(words, start, dest)` | Word-ladder steps where each move changes one letter; `None` when unknown or unreachable |
| `contestkit.news`      | `boom(friends, source)`                           | `(size, day)` of the largest number of people first told on one day, earliest day on ties; `None` when nobody else hears |

Example:

```python
from contestkit.factorial import factorial_digits
from contestkit.mail import shortest_distance
from contestkit.brackets import is_balanced

factorial_digits(10)                                                # "3628800"
shortest_distance(3, [(0, 1, 100), (0, 2, 200), (1, 2, 50)], 2, 0)  # 150
is_balanced("([])")                                                 # True
```

## Command line

Every solver is installed as a command that reads the problem's input from
standard input and prints the answer:

```
contestkit-factorial < input.txt
contestkit-brackets  < input.txt
contestkit-bombs     < input.txt
contestkit-maze      < input.txt
contestkit-mail      < input.txt
contestkit-ladder    < input.txt
contestkit-news      < input.txt
```

Input formats:

- `contestkit-factorial`: whitespace-separated integers; prints `n!` and then
  the digits of `n!` for each.
- `contestkit-brackets`: a line count, then that many lines; prints each
  line's stack trace followed by `Yes` or `No`.
- `contestkit-bombs`: grids as `rows cols`, a count of bomb rows, each as
  `row count col...`, then start and destination coordinates; input ends at
  `0 0`. Prints one distance per grid.
- `contestkit-maze`: a case count, then each grid as `rows cols` and its
  values. Prints one cost per grid.
- `contestkit-mail`: a case count, then each network as `n m source dest`
  followed by `m` lines `u v weight`. Prints `Case #k: distance` or
  `Case #k: unreachable`.
- `contestkit-ladder`: a case count, then per case a dictionary closed by `*`
  and `start dest` queries up to a blank line. Prints `start dest distance`
  (`0` when unreachable), with a blank line between cases.
- `contestkit-news`: an employee count, each employee's friend list as a
  count and the friends' numbers, then a count of sources and the sources.
  Prints `size day` per source, or `0` when there is no boom.

None of the commands take options; `argv` is ignored.