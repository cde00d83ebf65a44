from __future__ import annotations

from functools import total_ordering
from typing import Any, final


__all__ = ("BaseCostComparison",)


@total_ordering
class BaseCostComparison:
    """Base class for objects ordered by an integer cost"""

    __slots__ = ()

    def cost(self) -> int:
        """The cost of this object

        Subclasses must implement this.
        """
        raise NotImplementedError

    @final
    def __eq__(self, other: Any) -> bool:
        if isinstance(other, self.__class__):
            return self.cost() == other.cost()

        return NotImplemented

    @final
    def __lt__(self, other: Any) -> bool:
        if isinstance(other, self.__class__):
            return self.cost() < other.cost()

        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.cost())
