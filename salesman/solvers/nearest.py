from __future__ import annotations

from typing import List

from ..matrix import CostMatrix
from ..tour import Tour


__all__ = (
    "find_nearest_neighbor",
    "solve_nearest_neighbor",
)


def find_nearest_neighbor(matrix: CostMatrix, current: int, visited: List[bool]) -> int:
    """Return the cheapest unvisited node from `current`, the lowest index on ties"""
    row = matrix[current]
    nearest = current
    for node in range(matrix.size):
        if not visited[node] and (nearest == current or row[node] < row[nearest]):
            nearest = node

    return nearest


def solve_nearest_neighbor(matrix: CostMatrix, start: int = 0) -> Tour:
    """Build a tour greedily by always moving to the cheapest unvisited node

    Runs in O(n^2) and always succeeds, but gives no optimality guarantee.

    Parameters
    -----
    matrix: `CostMatrix`
        The travel costs
    start: `int`
        The node the tour starts from and returns to

    Raises
    -----
    InvalidStartNode
        `start` is not a node of `matrix`.
    """
    matrix.check_node(start)

    visited = [False] * matrix.size
    visited[start] = True

    path = [start]
    cost = 0
    current = start
    for _ in range(matrix.size - 1):
        nearest = find_nearest_neighbor(matrix, current, visited)
        path.append(nearest)
        cost += matrix[current][nearest]
        visited[nearest] = True
        current = nearest

    cost += matrix[current][start]
    return Tour(path, cost=cost)
