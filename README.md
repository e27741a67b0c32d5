# decimizer

A small library for multi-criteria decision making, written in pure Python.

A decision problem is a set of named variables. Each variable holds one value
per alternative, and every variable in a problem must have the same number of
values. Each variable is rescaled to the range `[0, 1]`, where 0 is best:

- `VariableAutoscale` maps its minimum to 0 and its maximum to 1, so lower raw
  values are better.
- `VariableInvertedAutoscale` maps its maximum to 0 and its minimum to 1, so
  higher raw values are better.

The rescaled variables become the columns of a matrix with one row per
alternative. The best alternative is the row with the smallest Euclidean (L2)
norm, which is the row nearest the ideal point (all zeros).

## Installation

```
pip install .
```

The package needs nothing beyond the Python standard library. It runs on
Python 3.10 and later.

## Usage

```python
from decimizer.problem import Problem
from decimizer.variables import VariableAutoscale, VariableInvertedAutoscale

problem = Problem()
problem.add_variable(VariableAutoscale("cost", [1.0, 2.0, 3.0]))      # returns 1
problem.add_variable(VariableInvertedAutoscale("quality", [3.0, 4.0, 5.0]))  # returns 2

matrix = problem.problem_matrix()  # three rows (alternatives), two columns
print(matrix[1])                   # (0.5, 0.5)
print(problem.solve())             # 1
```

### `Problem`

- `add_variable(variable)` stores the variable under its name and returns the
  number of variables in the problem. Adding a variable with a name that is
  already present replaces the earlier one.
- `problem_matrix()` returns a list of tuples, one tuple per alternative, with
  one column per variable in the sorted order of the variable names. It raises
  `ValueError` if the problem has no variables or if the variables have
  different numbers of values.
- `solve()` returns the index of the best alternative (the first one on ties).
- `len(problem)` is the number of variables.

### Variables

`Variable` is an immutable base class with a `name` and a tuple of float
`values`; `len(variable)` is the number of values. Subclass it and implement
`rescale()` to define your own scaling. `VariableAutoscale` and
`VariableInvertedAutoscale` are the two ready-made subclasses.

### Lower-level helpers

- `decimizer.scaling`:
  - `rescale_vector(v, shift, scaling_factor)` returns `(x - shift) * scaling_factor`
    for every value.
  - `rescale_and_invert_vector(v, shift, scaling_factor)` rescales and then
    mirrors the result around 1, so the minimum becomes the maximum.
  - `autorescale_vector(v, inverted)` maps the minimum to 0 and the maximum
    to 1 (mirrored when `inverted` is true). It raises `ValueError` for an
    empty vector or one holding NaN. A vector whose values are all equal
    yields NaN entries.
- `decimizer.vector`:
  - `l2_norm(v)` is the Euclidean length of a vector.
  - `l2_norm_vectors(m)` is the list of norms of every row of a matrix.
  - `index_of_best_vector(m)` is the index of the row with the smallest norm,
    first on ties; it raises `ValueError` for a matrix with no rows or when a
    norm is NaN.

## What it does not do

decimizer is a library only: it has no command-line program. It uses one
fixed ranking method (unit-interval rescaling and the L2 distance to the
ideal point) and offers no weighting of variables.

## Running the tests

```
pip install ".[test]"
pytest
```