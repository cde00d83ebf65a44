from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import NodeLimitExceeded, OutOfMemory, SubsetMaskOverflow


__all__ = (
    "SolverConfig",
)


# Bytes per (subset, node) cell: an int64 cost and an int8 backpointer
CELL_BYTES = 9


@dataclass(frozen=True, kw_only=True, slots=True)
class SolverConfig:
    """Limits checked before a solver allocates or computes anything

    Parameters
    -----
    mask_bits: `int`
        Width of the subset bitmask. ``1 << n`` must stay representable in a signed
        integer of this width, so at most ``mask_bits - 2`` nodes are accepted.
    max_nodes: `Optional[int]`
        Deployment ceiling on the number of nodes for Held-Karp, or ``None`` for no ceiling
        beyond the mask width.
    memory_limit: `Optional[int]`
        Maximum number of bytes the Held-Karp tables may occupy, or ``None``.
    brute_force_nodes: `int`
        Maximum number of nodes the brute-force solver accepts.
    """
    mask_bits: int = 32
    max_nodes: Optional[int] = None
    memory_limit: Optional[int] = None
    brute_force_nodes: int = 10

    @property
    def node_ceiling(self) -> int:
        ceiling = self.mask_bits - 2
        if self.max_nodes is not None:
            ceiling = min(ceiling, self.max_nodes)

        return ceiling

    @staticmethod
    def table_bytes(size: int) -> int:
        return (1 << size) * size * CELL_BYTES

    def check(self, size: int) -> None:
        """Reject a Held-Karp request for `size` nodes that this configuration cannot serve

        Raises
        -----
        SubsetMaskOverflow
            `size` does not fit the subset mask.
        NodeLimitExceeded
            `size` exceeds `max_nodes`.
        OutOfMemory
            The tables would exceed `memory_limit`.
        """
        if size > self.mask_bits - 2:
            raise SubsetMaskOverflow(size, self.mask_bits)

        if self.max_nodes is not None and size > self.max_nodes:
            raise NodeLimitExceeded(size, self.max_nodes)

        if self.memory_limit is not None:
            requested = self.table_bytes(size)
            if requested > self.memory_limit:
                raise OutOfMemory(size, requested)
