from __future__ import annotations

from typing import Dict, Optional, Protocol

from .brute_force import *
from .held_karp import *
from .nearest import *
from ..config import SolverConfig
from ..matrix import CostMatrix
from ..tour import Tour


__all__ = (
    "SOLVERS",
    "UNREACHABLE",
    "Solver",
    "solve_brute_force",
    "solve_held_karp",
    "solve_nearest_neighbor",
)


class Solver(Protocol):
    """Common call signature of the entries in `SOLVERS`"""

    def __call__(self, matrix: CostMatrix, start: int = 0, *, config: Optional[SolverConfig] = None, use_tqdm: bool = False) -> Tour: ...


def _nearest_neighbor(matrix: CostMatrix, start: int = 0, *, config: Optional[SolverConfig] = None, use_tqdm: bool = False) -> Tour:
    """`solve_nearest_neighbor` with the `Solver` signature, `config` and `use_tqdm` are unused"""
    return solve_nearest_neighbor(matrix, start)


SOLVERS: Dict[str, Solver] = {
    "nearest-neighbor": _nearest_neighbor,
    "held-karp": solve_held_karp,
    "brute-force": solve_brute_force,
}
