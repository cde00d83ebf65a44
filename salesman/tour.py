from __future__ import annotations

from typing import Any, Final, Iterable, Tuple, TYPE_CHECKING

from matplotlib import axes, pyplot

from .costs import BaseCostComparison
from .errors import InvalidTour
from .utils import label
if TYPE_CHECKING:
    from .matrix import CostMatrix


__all__ = (
    "Tour",
)


class Tour(BaseCostComparison):
    """A closed tour: every node exactly once, returning from ``path[-1]`` to ``path[0]``"""

    __slots__ = (
        "_cost",
        "path",
    )
    if TYPE_CHECKING:
        _cost: Final[int]
        path: Final[Tuple[int, ...]]

    def __init__(self, path: Iterable[int], /, *, cost: int) -> None:
        path = tuple(int(node) for node in path)
        if sorted(path) != list(range(len(path))) or len(path) == 0:
            raise InvalidTour(path, None)

        if cost < 0:
            raise InvalidTour(path, cost)

        self.path = path
        self._cost = int(cost)

    def cost(self) -> int:
        return self._cost

    @property
    def size(self) -> int:
        return len(self.path)

    @property
    def start(self) -> int:
        return self.path[0]

    def edges(self) -> Tuple[Tuple[int, int], ...]:
        """The ``(from, to)`` pairs of the cycle in travel order, ending with the edge back to the start"""
        return tuple((self.path[index], self.path[(index + 1) % self.size]) for index in range(self.size))

    def labels(self) -> str:
        return "->".join(label(node) for node in self.path + (self.path[0],))

    def plot(self, matrix: CostMatrix, *, title: str = "Tour") -> None:
        _, ax = pyplot.subplots()
        assert isinstance(ax, axes.Axes)

        ax.imshow(matrix.as_array(), cmap="Greys")

        names = [label(node) for node in range(matrix.size)]
        ax.set_xticks(range(matrix.size), names)
        ax.set_yticks(range(matrix.size), names)
        ax.set_xlabel("To")
        ax.set_ylabel("From")

        sources, targets = zip(*self.edges())
        ax.scatter(targets, sources, c="red", marker="s", label="Edge")
        for step, (source, target) in enumerate(self.edges(), start=1):
            ax.annotate(str(step), (target, source), ha="center", va="center", color="white")

        ax.set_title(f"{title} (cost {self._cost})")

        pyplot.legend()
        pyplot.show()
        pyplot.close()

    def to_json(self) -> Any:
        return {
            "cost": self._cost,
            "path": list(self.path),
        }

    def __repr__(self) -> str:
        return f"<Tour cost={self._cost} path={self.path}>"
