import itertools

import pytest

import salesman


SEEDS = range(6)


def _instances():
    for size, seed, symmetric in itertools.product(range(1, 8), SEEDS, (True, False)):
        yield salesman.CostMatrix.random(size, seed=1000 * size + seed, symmetric=symmetric)


@pytest.mark.parametrize("matrix", list(_instances()), ids=repr)
def test_tours_are_closed_permutations(matrix: salesman.CostMatrix) -> None:
    for start in range(matrix.size):
        for solve in (salesman.solve_nearest_neighbor, salesman.solve_held_karp):
            tour = solve(matrix, start)
            assert tour.path[0] == start
            assert sorted(tour.path) == list(range(matrix.size))
            assert tour.cost() == matrix.cycle_cost(tour.path)


@pytest.mark.parametrize("matrix", list(_instances()), ids=repr)
def test_exact_dominates_heuristic(matrix: salesman.CostMatrix) -> None:
    costs = set()
    for start in range(matrix.size):
        exact = salesman.solve_held_karp(matrix, start)
        assert exact <= salesman.solve_nearest_neighbor(matrix, start)
        costs.add(exact.cost())

    assert len(costs) == 1


@pytest.mark.parametrize("size", [3, 4, 5, 6, 7, 8])
def test_matches_brute_force(size: int) -> None:
    for seed in SEEDS:
        for symmetric in (True, False):
            matrix = salesman.CostMatrix.random(size, seed=seed, symmetric=symmetric, high=20)
            assert salesman.solve_held_karp(matrix).cost() == salesman.solve_brute_force(matrix).cost()


def test_heuristic_depends_on_start() -> None:
    matrix = salesman.CostMatrix.from_positions([0, 1, 2, 3, 10])
    costs = {salesman.solve_nearest_neighbor(matrix, start).cost() for start in range(matrix.size)}
    assert min(costs) == salesman.solve_held_karp(matrix).cost()

    matrix = salesman.CostMatrix([[0, 1, 2, 9], [1, 0, 1, 2], [2, 1, 0, 1], [9, 2, 1, 0]])
    costs = {salesman.solve_nearest_neighbor(matrix, start).cost() for start in range(matrix.size)}
    assert len(costs) > 1
