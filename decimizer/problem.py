"""A decision problem: pick the alternative closest to the ideal point."""

from __future__ import annotations

from .variables import Variable
from .vector import index_of_best_vector


class Problem:
    """A set of named variables, each scoring the same alternatives."""

    def __init__(self) -> None:
        self._variables: dict[str, Variable] = {}

    def __len__(self) -> int:
        return len(self._variables)

    def add_variable(self, variable: Variable) -> int:
        """Add a variable, replacing any of the same name; return the count."""
        self._variables[variable.name] = variable
        return len(self._variables)

    def problem_matrix(self) -> list[tuple[float, ...]]:
        """Return one row per alternative, one column per variable by name.

        Raises ValueError if there are no variables or their lengths differ.
        """
        if not self._variables:
            raise ValueError("the problem has no variables")
        columns = [self._variables[name].rescale() for name in sorted(self._variables)]
        if len({len(column) for column in columns}) != 1:
            raise ValueError("all variables must have the same number of values")
        return list(zip(*columns))

    def solve(self) -> int:
        """Return the index of the best alternative."""
        return index_of_best_vector(self.problem_matrix())