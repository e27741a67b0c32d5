import pytest

from decimizer.problem import Problem
from decimizer.variables import VariableAutoscale, VariableInvertedAutoscale


def make_problem():
    p = Problem()
    p.add_variable(VariableAutoscale("x", [1.0, 2.0, 3.0]))
    p.add_variable(VariableInvertedAutoscale("y", [3.0, 4.0, 5.0]))
    return p


def test_create_empty_problem():
    p = Problem()
    assert len(p) == 0


def test_create_problem_with_variables():
    p = Problem()
    assert p.add_variable(VariableAutoscale("x", [1.0, 2.0, 3.0])) == 1
    assert p.add_variable(VariableInvertedAutoscale("y", [3.0, 4.0, 5.0])) == 2


def test_problem_matrix_is_rescaled():
    matrix = make_problem().problem_matrix()
    assert len(matrix) == 3
    for row, expected in zip(matrix, [[0.0, 1.0], [0.5, 0.5], [1.0, 0.0]]):
        assert list(row) == pytest.approx(expected)


def test_problem_is_solved():
    assert make_problem().solve() == 1


def test_columns_ordered_by_name():
    p = Problem()
    p.add_variable(VariableInvertedAutoscale("b", [3.0, 4.0, 5.0]))
    p.add_variable(VariableAutoscale("a", [1.0, 2.0, 3.0]))
    assert list(p.problem_matrix()[0]) == pytest.approx([0.0, 1.0])


def test_same_name_replaces_variable():
    p = Problem()
    p.add_variable(VariableAutoscale("x", [1.0, 2.0]))
    assert p.add_variable(VariableAutoscale("x", [5.0, 1.0])) == 1
    assert p.solve() == 1


def test_empty_problem_solve_raises():
    with pytest.raises(ValueError):
        Problem().solve()


def test_mismatched_lengths_raise():
    p = Problem()
    p.add_variable(VariableAutoscale("x", [1.0, 2.0, 3.0]))
    p.add_variable(VariableAutoscale("y", [1.0, 2.0]))
    with pytest.raises(ValueError):
        p.problem_matrix()