# tinkerkit

A small toolbox of command-line tools and library types:

- **Calculator** (`tinkerkit.calculator`): evaluates infix expressions. It handles operator
  precedence, parentheses, implicit multiplication, factorials, functions, constants and
  stored variables.
- **Geometry** (`tinkerkit.geometry`): 2D and 3D `Point`, `Line` and `Polygon` types. They
  have a text format and can be combined with `+`.
- **Expression editor** (`tinkerkit.editor`): an in-memory model of a multi-line expression
  editor that is driven by key presses.
- **Networking**: a threaded TCP echo server and its client (`tinkerkit.echo_server`,
  `tinkerkit.echo_client`), and a hostname-to-address lookup (`tinkerkit.showip`).

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

Install with the `test` extra (`pip install .[test]`) to run the test suite with pytest.

## Calculator

```
tinkerkit-calc "2(3+4)" "ans*2"
```

Each expression given as an argument is evaluated in order. Without arguments, the command
reads one expression per line from standard input until end of input. A result is printed as
`= 14`. An error prints its message, and evaluation continues with the next expression.
Blank lines are skipped.

From Python:

```python
from tinkerkit.calculator import Calculator

calc = Calculator()
calc.evaluate("2(3+4)")      # 14.0
calc.evaluate("5!")          # 120.0
calc.evaluate("2^3^2")       # 512.0 (power is right-associative)
calc.evaluate("10c3>A")      # 120.0, also stored in variable A
calc.variable("A")           # 120.0
calc.evaluate("ans/2")       # 60.0
calc.evaluate("   ")         # None (empty input)
```

Spaces and tabs are ignored. `strip_whitespace(text)` removes them.

**Operators**, from loosest to tightest binding:

| Operator | Meaning |
| --- | --- |
| `+` `-` | Addition and subtraction |
| `*` `/` `%` | Multiplication, division, and integer modulo of the truncated operands |
| `^` `v` | Power, and root: `3v27` is the cube root of 27 |
| `p` `c` `l` | Permutations (nPr), combinations (nCr), and logarithm: `2l8` is log base 2 of 8 |

**Functions**: `sin`, `cos`, `tan`, `asin`, `acos`, `atan`, `sqrt`, `ln`, `log` (base 10),
`abs`. A function applies to the operand that follows it, as in `sin(pi/2)` or `sqrt4`.

**Constants**: `pi`, `e`, and `ans`, which holds the last successful result.

**Variables**: the capital letters `A` to `Z` all start at 0. End an expression with `>X` to
store its result in `X`. Adjacent variables multiply, so `AB` means `A*B`.

**Other syntax**

- A postfix `!` gives the factorial.
- A number, a `)` or a `!` followed directly by `(`, a function, a number or a constant is an
  implicit multiplication, as in `3pi`.
- A run of signs collapses to one sign, so `2+--3` is `5`.
- A comma is accepted as the decimal point, in the same way as `.`.

Malformed input raises `ExpressionSyntaxError`. Division or modulo by zero, and factorial,
`p` or `c` of negative, non-integer or out-of-range operands, raise
`tinkerkit.mathfuncs.MathError`. After an error, `ans` and the variables are left unchanged.

The building blocks can also be used directly. `tinkerkit.mathfuncs` provides `add`, `sub`,
`mul`, `div`, `mod`, `root`, `log_base`, `factorial`, `npr` and `ncr`.
`tinkerkit.operators` provides the `BinaryOperator` and `UnaryFunction` tables, built by
`default_operators()` and `default_functions()`.

## Geometry

```python
from tinkerkit.geometry import Point, Line, Polygon, read_shapes

line = Point(1, 2) + Point(3, 4)   # Line
poly = line + Point(5, 6)          # Polygon
str(poly)                          # "{(5,6),(1,2),(3,4)}"
poly.add(Point(7, 8))              # adds in place and returns the polygon

Point.parse("(1,2,3)")
Line.parse("[(1,2),(3,4)]")
Polygon.parse("{(0,0),(1,0),(0,1)}")
read_shapes("(1,2)[(1,2),(3,4)]{(0,0),(1,1),(2,0)}")   # [Point, Line, Polygon]
```

- Points have 2 or 3 integer coordinates.
- A line needs two distinct points with the same number of axes.
- A polygon never holds the same point twice, and repeated points are dropped.
- `Polygon + shape` returns a new polygon. `Polygon += shape` and `Polygon.add(shape)` change
  the polygon in place.

Breaking any of these rules, or giving text that cannot be read, raises `GeometryError`.

## Expression editor

`ExpressionEditor` keeps a list of expression lines and a cursor. Pass `press()` either one
printable character or a `Key` (`BACKSPACE`, `DELETE`, `LEFT`, `RIGHT`, `UP`, `DOWN`, `ENTER`,
`ESCAPE`).

- Typing `(` inserts `()` and puts the cursor between the two brackets.
- Typing one of `! + - * / ^` as the first key on a fresh line inserts `ans` before it.
- `ENTER` returns the index of the line under the cursor and starts a new line.
- `ESCAPE` closes the editor. After that, any further press raises `RuntimeError`.

This is a model only. The package has no full-screen terminal front end that draws it or
reads keys from a console. `tinkerkit-calc` reads plain lines instead.

## Networking

Start an echo server. It binds to `0.0.0.0:54000` by default, and `--host` and `--port`
change this:

```
tinkerkit-echo-server
```

The server echoes each client's data back on a separate thread. Type `shutdown` on the
server's standard input to stop it. From Python, use `EchoServer(host, port)` with
`serve_forever()` and `shutdown()`.

Connect to it and send lines:

```
tinkerkit-echo-client --host 127.0.0.1 --port 54000
```

Each line is sent to the server and the reply is printed as `SERVER> ...`. An empty line or
end of input ends the session. `run_client(host, port, lines)` does the same from Python and
returns the replies.

List the IPv4 and IPv6 addresses of a host:

```
tinkerkit-showip localhost
```

`resolve_addresses(hostname)` returns the same information as `(version, address)` pairs.
The command exits with status 1 on wrong usage and 2 when the name cannot be resolved.