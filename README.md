# fieldmatrix

Square matrices whose elements come from a pluggable field. A field
decides how elements are zeroed, added, multiplied, formatted and parsed.
Two fields are included: integers (`of_int()`) and double-precision
floats (`of_double()`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from fieldmatrix.fields import of_int
from fieldmatrix.matrix import Matrix

a = Matrix(2, of_int())
b = Matrix(2, of_int())
a[0, 0], a[0, 1], a[1, 0], a[1, 1] = 1, 2, 3, 4
b[0, 0], b[0, 1], b[1, 0], b[1, 1] = 5, 6, 7, 8

c = Matrix(2, of_int())
a.add(b, c)            # c = a + b
print(c.format(), end="")
# 6 8
# 10 12

a.multiply(b, c)       # c = a * b
a.scale(3, of_int())   # multiply every element of a by 3 in place

# Add a linear combination of the other rows to row 1;
# the coefficient for row 1 itself is ignored.
a.add_linear_combination(1, [2, 0])
```

A new matrix is filled with the field's zero. `add` and `multiply`
write into the `out` matrix and return it; `scale` and
`add_linear_combination` change the matrix in place and return it.
`format()` (and `str()`) gives one line per row, elements separated by
single spaces; integers are written as `%d`, floats as `%g`.

Errors:

- `MatrixError` (a subclass of `ValueError`) is raised for a size that
  is not a positive integer, operands of different sizes or over
  different fields, a scalar given with a field other than the matrix's,
  a wrong number of coefficients, and storing `None`.
- `IndexError` is raised for an element index or row outside the matrix.

Field objects are compared by identity: `of_int()` and `of_double()`
always return the same shared instances, and matrices over different
field objects cannot be combined.

`Field.parse` reads one element from text and raises `ValueError` when
the text is not a valid element. New fields can be made by subclassing
`Field` and implementing `zero`, `add`, `multiply`, `format` and `parse`.

### Counting field operations

`FieldSpy` in `fieldmatrix.spy` wraps a field and counts calls to
`zero`, `add`, `multiply` and `format` (`parse` is passed through
uncounted):

```python
from fieldmatrix.fields import of_double
from fieldmatrix.spy import FieldSpy
from fieldmatrix.matrix import Matrix

spy = FieldSpy(of_double())
a, b, out = Matrix(2, spy), Matrix(2, spy), Matrix(2, spy)
spy.reset()
a.multiply(b, out)
print(spy.zero_calls, spy.add_calls, spy.multiply_calls)  # 4 8 8
```

## Interactive menu

```
fieldmatrix
```

The menu reads whitespace-separated input from standard input. It lets
you choose a field (1 for int, 2 for double), create matrix 1 and
matrix 2, set elements, print matrices, and compute sums, products,
scalar multiples and row linear combinations. Sums and products are
written to a third, output matrix, which can be printed or scaled as
matrix 3. Choosing a field discards all matrices; recreating matrix 1
or 2 discards the output matrix.

Enter `0` to exit. The menu also stops when the input ends, or when a
number is expected (a command, a menu choice, a size or an index) and
something else is given; an invalid element value only prints
`Input error!` and returns to the menu.

From code, `run_menu(input_stream, output_stream)` in `fieldmatrix.cli`
runs the same menu over any text streams and returns `True` if it ended
with the exit command.

## What it does not do

Matrices are square only, live in memory only, and cannot be saved to
or loaded from files. There is no determinant, inverse or row reduction
beyond adding a linear combination of rows.