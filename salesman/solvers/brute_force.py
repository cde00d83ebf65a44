from __future__ import annotations

import itertools
import math
from typing import Iterable, Optional, Tuple, Union

from tqdm import tqdm

from ..config import SolverConfig
from ..errors import NodeLimitExceeded
from ..matrix import CostMatrix
from ..tour import Tour


__all__ = (
    "solve_brute_force",
)


def solve_brute_force(
    matrix: CostMatrix,
    start: int = 0,
    *,
    config: Optional[SolverConfig] = None,
    use_tqdm: bool = False,
) -> Tour:
    """Find the optimal tour by trying all (n - 1)! orderings of the other nodes

    The first ordering (in lexicographic order) reaching the minimum cost is returned.

    Raises
    -----
    InvalidStartNode
        `start` is not a node of `matrix`.
    NodeLimitExceeded
        The matrix has more than ``config.brute_force_nodes`` nodes.
    """
    if config is None:
        config = SolverConfig()

    matrix.check_node(start)
    if matrix.size > config.brute_force_nodes:
        raise NodeLimitExceeded(matrix.size, config.brute_force_nodes)

    others = [node for node in range(matrix.size) if node != start]

    orderings: Union[Iterable[Tuple[int, ...]], tqdm[Tuple[int, ...]]] = itertools.permutations(others)
    if use_tqdm:
        orderings = tqdm(orderings, desc="Brute force", total=math.factorial(len(others)), ascii=" █", colour="red")

    best_path = (start, *others)
    best_cost = matrix.cycle_cost(best_path)
    for ordering in orderings:
        path = (start, *ordering)
        cost = matrix.cycle_cost(path)
        if cost < best_cost:
            best_path, best_cost = path, cost

    return Tour(best_path, cost=best_cost)
