from __future__ import annotations

from typing import Final, Optional, Tuple, Union

import numpy as np
from tqdm import tqdm

from ..config import SolverConfig
from ..errors import OutOfMemory
from ..matrix import CostMatrix
from ..tour import Tour
from ..utils import bit, full_mask


__all__ = (
    "UNREACHABLE",
    "solve_held_karp",
)


UNREACHABLE: Final[int] = int(np.iinfo(np.int64).max)


def _allocate_tables(size: int) -> Tuple[np.ndarray, np.ndarray]:
    """Allocate the cost and backpointer tables as flat buffers viewed as ``(2^size, size)``

    Cell ``subset * size + node`` of either buffer holds the state "visited `subset`, now at `node`".
    """
    cells = (1 << size) * size
    try:
        costs = np.full(cells, UNREACHABLE, dtype=np.int64)
        previous = np.full(cells, -1, dtype=np.int8)

    except MemoryError as exc:
        costs = previous = None  # type: ignore
        raise OutOfMemory(size, SolverConfig.table_bytes(size)) from exc

    return costs.reshape(1 << size, size), previous.reshape(1 << size, size)


def _fill_tables(
    costs: np.ndarray,
    previous: np.ndarray,
    distances: np.ndarray,
    start: int,
    *,
    use_tqdm: bool,
) -> None:
    size = distances.shape[0]

    subsets = np.arange(1 << size)
    population = np.zeros_like(subsets)
    for node in range(size):
        population += (subsets >> node) & 1

    visited_start = (subsets >> start) & 1 == 1
    subsets = subsets[visited_start]
    population = population[visited_start]

    # Every strict subset has fewer nodes, so it is final before its layer is extended
    layers: Union[range, tqdm[int]] = range(2, size + 1)
    if use_tqdm:
        layers = tqdm(layers, desc="Held-Karp", ascii=" █", colour="green")

    for count in layers:
        layer = subsets[population == count]
        for last in range(size):
            if last == start:
                continue

            extended = layer[(layer >> last) & 1 == 1]
            if extended.size == 0:
                continue

            # candidates[r, i]: cheapest path over extended[r] minus last, ending at i
            candidates = costs[extended ^ bit(last)]
            reachable = candidates != UNREACHABLE

            totals = np.full_like(candidates, UNREACHABLE)
            np.add(candidates, distances[:, last], out=totals, where=reachable)

            best = totals.argmin(axis=1)
            best_costs = totals[np.arange(extended.size), best]

            improved = best_costs < costs[extended, last]
            costs[extended[improved], last] = best_costs[improved]
            previous[extended[improved], last] = best[improved]


def solve_held_karp(
    matrix: CostMatrix,
    start: int = 0,
    *,
    config: Optional[SolverConfig] = None,
    use_tqdm: bool = False,
) -> Tour:
    """Find a minimum-cost tour with the Held-Karp dynamic programming algorithm

    ``costs[subset][last]`` is the cheapest way to leave `start`, visit exactly the nodes of
    `subset` and stand at `last`; ``previous[subset][last]`` is the node visited just before
    `last` on that path. Subsets are filled one population count at a time, all subsets of a
    layer in one vectorised step per final node. Time is O(n^2 * 2^n), memory O(n * 2^n).

    Ties are resolved towards the lowest predecessor index and, when closing the tour,
    towards the lowest final node.

    Parameters
    -----
    matrix: `CostMatrix`
        The travel costs
    start: `int`
        The node the tour starts from and returns to
    config: `Optional[SolverConfig]`
        Limits checked before anything is allocated, defaults to ``SolverConfig()``
    use_tqdm: `bool`
        Whether to display the progress bar

    Raises
    -----
    InvalidStartNode
        `start` is not a node of `matrix`.
    ConfigurationError
        The matrix has more nodes than the subset mask or the configured limit allows.
    OutOfMemory
        The tables exceed the configured memory limit, or the tables or a working array
        cannot be allocated.
    """
    if config is None:
        config = SolverConfig()

    size = matrix.size
    matrix.check_node(start)
    config.check(size)

    if size == 1:
        return Tour((start,), cost=0)

    costs, previous = _allocate_tables(size)
    distances = matrix.as_array()
    full = full_mask(size)

    costs[bit(start), start] = 0
    try:
        _fill_tables(costs, previous, distances, start, use_tqdm=use_tqdm)

    except MemoryError as exc:
        # No frame may keep a reference to the tables once OutOfMemory is raised
        exc.__traceback__ = None
        costs = previous = None  # type: ignore
        raise OutOfMemory(size, SolverConfig.table_bytes(size)) from exc

    result = UNREACHABLE
    end = start
    for last in range(size):
        if last == start or costs[full, last] == UNREACHABLE:
            continue

        cost = int(costs[full, last]) + int(distances[last, start])
        if cost < result:
            result = cost
            end = last

    path = [start] * size
    subset = full
    for position in range(size - 1, 0, -1):
        path[position] = end
        subset, end = subset ^ bit(end), int(previous[subset, end])

    return Tour(path, cost=result)
