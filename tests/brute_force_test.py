from pathlib import Path

import pytest

import salesman


PROBLEMS = str(Path(__file__).resolve().parent.parent / "problems")


def test_small_problems() -> None:
    assert salesman.solve_brute_force(salesman.CostMatrix([[0]])).path == (0,)

    tour = salesman.solve_brute_force(salesman.CostMatrix([[0, 5], [5, 0]]))
    assert tour.path == (0, 1)
    assert tour.cost() == 10


def test_first_minimum_wins() -> None:
    matrix = salesman.CostMatrix.import_problem("classic4", directory=PROBLEMS)
    tour = salesman.solve_brute_force(matrix)
    assert tour.path == (0, 1, 3, 2)
    assert tour.cost() == 80

    tour = salesman.solve_brute_force(matrix, 3)
    assert tour.path[0] == 3
    assert tour.cost() == 80


def test_sample5() -> None:
    matrix = salesman.CostMatrix.import_problem("sample5", directory=PROBLEMS)
    tour = salesman.solve_brute_force(matrix)
    assert tour.cost() == matrix.cycle_cost(tour.path)
    assert tour.cost() == salesman.solve_held_karp(matrix).cost()


def test_node_limit() -> None:
    matrix = salesman.CostMatrix.random(5, seed=0)
    with pytest.raises(salesman.NodeLimitExceeded):
        salesman.solve_brute_force(matrix, config=salesman.SolverConfig(brute_force_nodes=4))


def test_invalid_start() -> None:
    with pytest.raises(salesman.InvalidStartNode):
        salesman.solve_brute_force(salesman.CostMatrix([[0, 1], [1, 0]]), 2)
