from __future__ import annotations

from typing import Any, TYPE_CHECKING


__all__ = (
    "SalesmanException",
    "InvalidCostMatrix",
    "InvalidStartNode",
    "InvalidTour",
    "ConfigurationError",
    "SubsetMaskOverflow",
    "NodeLimitExceeded",
    "OutOfMemory",
    "ProblemNotFound",
    "ProblemParsingException",
)


class SalesmanException(Exception):
    """Base class for all exceptions from this library"""
    pass


class InvalidCostMatrix(SalesmanException):
    """Exception raised when a cost matrix is not a square table of non-negative integers with a zero diagonal"""
    pass


class InvalidStartNode(SalesmanException):
    """Exception raised when the start node is outside the matrix"""

    __slots__ = (
        "start",
        "size",
    )
    if TYPE_CHECKING:
        start: Any
        size: int

    def __init__(self, start: Any, size: int, /) -> None:
        self.start = start
        self.size = size
        super().__init__(f"Start node {start!r} is not in range [0, {size})")


class InvalidTour(SalesmanException):
    """Exception raised when a tour path is not a permutation of the nodes or its cost is negative"""

    __slots__ = (
        "path",
        "cost",
    )
    if TYPE_CHECKING:
        path: Any
        cost: Any

    def __init__(self, path: Any, cost: Any, /) -> None:
        self.path = path
        self.cost = cost
        if cost is not None and cost < 0:
            super().__init__(f"Negative cost {cost!r} for tour {path!r}")
        else:
            super().__init__(f"Not a permutation of the nodes: {path!r}")


class ConfigurationError(SalesmanException):
    """Base class for requests rejected by the solver configuration before any computation"""
    pass


class SubsetMaskOverflow(ConfigurationError):
    """Exception raised when the subset bitmask is too narrow for the number of nodes"""

    __slots__ = (
        "size",
        "mask_bits",
    )
    if TYPE_CHECKING:
        size: int
        mask_bits: int

    def __init__(self, size: int, mask_bits: int, /) -> None:
        self.size = size
        self.mask_bits = mask_bits
        super().__init__(f"{size} nodes do not fit a {mask_bits}-bit subset mask (at most {mask_bits - 2})")


class NodeLimitExceeded(ConfigurationError):
    """Exception raised when the number of nodes exceeds the configured limit"""

    __slots__ = (
        "size",
        "limit",
    )
    if TYPE_CHECKING:
        size: int
        limit: int

    def __init__(self, size: int, limit: int, /) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"{size} nodes exceed the configured limit of {limit}")


class OutOfMemory(SalesmanException):
    """Exception raised when the dynamic programming tables cannot be allocated"""

    __slots__ = (
        "size",
        "requested",
    )
    if TYPE_CHECKING:
        size: int
        requested: int

    def __init__(self, size: int, requested: int, /) -> None:
        self.size = size
        self.requested = requested
        super().__init__(f"Cannot allocate {requested} bytes of tables for {size} nodes")


class ProblemNotFound(SalesmanException):
    """Exception raised when the problem is not found within the archive"""

    def __init__(self, problem: Any, /) -> None:
        super().__init__(f"Cannot find any problems with the given name: {problem!r}")


class ProblemParsingException(SalesmanException):
    """Exception raised when parsing the problem input fails"""

    __slots__ = (
        "original",
    )
    if TYPE_CHECKING:
        original: BaseException

    def __init__(self, problem: Any, original: BaseException, /) -> None:
        super().__init__(f"Cannot parse input for problem {problem!r}")
        self.original = original
