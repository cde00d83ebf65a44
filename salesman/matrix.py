from __future__ import annotations

import itertools
import json
import numbers
import random
from os import path
from typing import Any, Final, Iterator, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from .errors import InvalidCostMatrix, InvalidStartNode, ProblemNotFound, ProblemParsingException
from .utils import label


__all__ = (
    "MAX_COST",
    "CostMatrix",
)


MAX_COST: Final[int] = 2 ** 31 - 1


class CostMatrix:
    """An immutable square table of travel costs between nodes ``0..size-1``

    ``matrix[i][j]`` is the cost of travelling from node ``i`` to node ``j``. Entries are
    non-negative integers no larger than `MAX_COST` and the diagonal is zero. The table
    does not have to be symmetric.
    """

    __slots__ = (
        "_array",
        "rows",
        "size",
    )
    if TYPE_CHECKING:
        _array: Optional[np.ndarray]
        rows: Final[Tuple[Tuple[int, ...], ...]]
        size: Final[int]

    def __init__(self, rows: Sequence[Sequence[Any]], /) -> None:
        size = len(rows)
        if size == 0:
            raise InvalidCostMatrix("A cost matrix must have at least one node")

        result = []
        for i, row in enumerate(rows):
            if len(row) != size:
                raise InvalidCostMatrix(f"Row {i} has {len(row)} entries, expected {size}")

            converted = []
            for j, value in enumerate(row):
                if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                    raise InvalidCostMatrix(f"Cost [{i}][{j}] = {value!r} is not an integer")

                value = int(value)
                if value < 0 or value > MAX_COST:
                    raise InvalidCostMatrix(f"Cost [{i}][{j}] = {value} is not in range [0, {MAX_COST}]")

                if i == j and value != 0:
                    raise InvalidCostMatrix(f"Cost [{i}][{i}] = {value}, the diagonal must be zero")

                converted.append(value)

            result.append(tuple(converted))

        self.rows = tuple(result)
        self.size = size
        self._array = None

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> Tuple[int, ...]:
        return self.rows[index]

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        return iter(self.rows)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, CostMatrix):
            return self.rows == other.rows

        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.rows)

    def __repr__(self) -> str:
        return f"<CostMatrix size={self.size}>"

    def is_symmetric(self) -> bool:
        return all(self.rows[i][j] == self.rows[j][i] for i, j in itertools.combinations(range(self.size), 2))

    def check_node(self, node: Any, /) -> None:
        if isinstance(node, bool) or not isinstance(node, numbers.Integral) or not 0 <= node < self.size:
            raise InvalidStartNode(node, self.size)

    def cycle_cost(self, path: Sequence[int], /) -> int:
        """Total cost of the closed cycle visiting `path` in order and returning to ``path[0]``"""
        return sum(self.rows[path[index - 1]][path[index]] for index in range(len(path)))

    def as_array(self) -> np.ndarray:
        """A read-only int64 numpy view of this matrix"""
        if self._array is None:
            array = np.array(self.rows, dtype=np.int64)
            array.flags.writeable = False
            self._array = array

        return self._array

    def format_table(self) -> str:
        """Render the matrix with letter headings, leaving the zero diagonal blank"""
        width = max(len(str(value)) for row in self.rows for value in row)
        width = max(width, len(label(self.size - 1)))

        lines = [" " * width + " " + " ".join(label(j).rjust(width) for j in range(self.size))]
        for i, row in enumerate(self.rows):
            cells = (" " * width if i == j else str(value).rjust(width) for j, value in enumerate(row))
            lines.append(label(i).rjust(width) + " " + " ".join(cells))

        return "\n".join(lines)

    def to_json(self) -> Any:
        return [list(row) for row in self.rows]

    @classmethod
    def from_positions(cls, positions: Sequence[int], /) -> CostMatrix:
        """Build the matrix of distances ``|p_i - p_j|`` between points on a line"""
        return cls([[abs(p - q) for q in positions] for p in positions])

    @classmethod
    def random(
        cls,
        size: int,
        *,
        seed: Optional[int] = None,
        low: int = 1,
        high: int = 100,
        symmetric: bool = True,
    ) -> CostMatrix:
        """Generate a matrix with off-diagonal costs drawn uniformly from ``[low, high]``"""
        rng = random.Random(seed)
        rows = [[0] * size for _ in range(size)]
        for i, j in itertools.combinations(range(size), 2):
            rows[i][j] = rng.randint(low, high)
            rows[j][i] = rows[i][j] if symmetric else rng.randint(low, high)

        return cls(rows)

    @classmethod
    def import_problem(cls, problem: str, *, directory: str = "problems") -> CostMatrix:
        """Load a matrix from ``<directory>/<problem>.json``

        The file holds either a list of rows or an object with a ``"matrix"`` key.
        """
        problem = problem.removesuffix(".json")
        archive_file = path.join(directory, f"{problem}.json")
        if not path.isfile(archive_file):
            raise ProblemNotFound(problem)

        return cls.load(archive_file, problem=problem)

    @classmethod
    def load(cls, file_path: str, *, problem: Optional[str] = None) -> CostMatrix:
        if problem is None:
            problem = path.splitext(path.basename(file_path))[0]

        try:
            with open(file_path, "r") as file:
                data = json.load(file)

            if isinstance(data, dict):
                data = data["matrix"]

            return cls(data)

        except Exception as exc:
            raise ProblemParsingException(problem, exc) from exc
