from __future__ import annotations

import math
import os
import platform
import sys


__all__ = (
    "ngettext",
    "display_platform",
    "bit",
    "full_mask",
    "label",
    "count_tours",
)


def ngettext(predicate: bool, if_true: str, if_false: str, /) -> str:
    return if_true if predicate else if_false


def display_platform() -> None:
    cpu_count = os.cpu_count() or 1

    display = f"Running on {sys.platform} with {cpu_count} " + ngettext(cpu_count == 1, "CPU", "CPUs") + "\n"
    display += f"Python {sys.version}\n"
    display += ", ".join((platform.platform(), platform.processor())) + "\n"
    display += "-" * 30

    print(display)


def bit(node: int, /) -> int:
    """The subset mask holding only `node`"""
    return 1 << node


def full_mask(size: int, /) -> int:
    """The subset mask holding every node of a `size`-node problem"""
    return (1 << size) - 1


def label(node: int, /) -> str:
    """Display label of a node: A, B, ..., Z, then the plain index"""
    if 0 <= node < 26:
        return chr(ord("A") + node)

    return str(node)


def count_tours(size: int, /) -> int:
    """Number of distinct undirected Hamiltonian cycles over `size` nodes"""
    if size < 3:
        return 1

    return math.factorial(size - 1) // 2
