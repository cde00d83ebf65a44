from __future__ import annotations

import argparse
import json
import sys
from os import path
from typing import Dict, List, Optional, TYPE_CHECKING

import salesman
from salesman import utils


class Namespace(argparse.Namespace):
    if TYPE_CHECKING:
        problem: Optional[str]
        random: Optional[int]
        seed: Optional[int]
        start: int
        solvers: List[str]
        max_nodes: Optional[int]
        mask_bits: int
        memory_limit: Optional[int]
        verify: bool
        verbose: bool
        dump: Optional[str]


def read_matrix(namespace: Namespace) -> salesman.CostMatrix:
    if namespace.random is not None:
        print(f"Generating a random problem with {namespace.random} nodes (seed {namespace.seed})")
        return salesman.CostMatrix.random(namespace.random, seed=namespace.seed)

    assert namespace.problem is not None
    if path.isfile(namespace.problem):
        return salesman.CostMatrix.load(namespace.problem)

    return salesman.CostMatrix.import_problem(namespace.problem)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Exact and nearest-neighbor tours for small TSP problems")
    parser.add_argument("problem", nargs="?", type=str, help="the problem name (e.g. \"sample6\", \"sample15\", ...) or the path to a JSON matrix")
    parser.add_argument("-r", "--random", type=int, help="solve a random symmetric problem with this many nodes instead")
    parser.add_argument("--seed", type=int, help="seed for the random problem")
    parser.add_argument("-s", "--start", default=0, type=int, help="the start node (default: 0)")
    parser.add_argument("--solver", dest="solvers", action="append", choices=tuple(salesman.SOLVERS), help="the solver to run, may be repeated (default: nearest-neighbor and held-karp)")
    parser.add_argument("-m", "--max-nodes", type=int, help="refuse Held-Karp above this many nodes")
    parser.add_argument("--mask-bits", default=32, type=int, help="the subset mask width (default: 32)")
    parser.add_argument("--memory-limit", type=int, help="the Held-Karp table limit in MiB")
    parser.add_argument("--verify", action="store_true", help="check the Held-Karp tour against a brute-force search")
    parser.add_argument("-v", "--verbose", action="store_true", help="whether to display the progress bar and plot the tours")
    parser.add_argument("-d", "--dump", type=str, help="dump the tours to a file")

    utils.display_platform()

    namespace = Namespace()
    parser.parse_args(namespace=namespace)
    if namespace.problem is None and namespace.random is None:
        parser.error("either a problem or --random is required")

    print(namespace)

    config = salesman.SolverConfig(
        mask_bits=namespace.mask_bits,
        max_nodes=namespace.max_nodes,
        memory_limit=None if namespace.memory_limit is None else namespace.memory_limit * 1024 * 1024,
    )

    try:
        matrix = read_matrix(namespace)
    except salesman.SalesmanException as exc:
        print(exc)
        sys.exit(1)

    print(f"Distances with N={matrix.size}")
    print(matrix.format_table())
    print(f"There are {utils.count_tours(matrix.size)} distinct tours over {matrix.size} " + utils.ngettext(matrix.size == 1, "node", "nodes"))

    solvers = namespace.solvers or ["nearest-neighbor", "held-karp"]
    tours: Dict[str, salesman.Tour] = {}
    try:
        for name in solvers:
            tour = salesman.SOLVERS[name](matrix, namespace.start, config=config, use_tqdm=namespace.verbose)
            tours[name] = tour
            print(f"{name}: cost = {tour.cost()}\n\t{tour.labels()}")

        if namespace.verify:
            check = salesman.SOLVERS["brute-force"](matrix, namespace.start, config=config)
            exact = tours.get("held-karp") or salesman.SOLVERS["held-karp"](matrix, namespace.start, config=config)
            assert check.cost() == exact.cost()
            print(f"Verified against brute force: cost = {check.cost()}")

    except salesman.SalesmanException as exc:
        print(exc)
        sys.exit(1)

    if "nearest-neighbor" in tours and "held-karp" in tours:
        optimal = tours["held-karp"].cost()
        overhead = tours["nearest-neighbor"].cost() - optimal
        if optimal > 0:
            print(f"Nearest neighbor overhead: {overhead} ({100 * overhead / optimal:.2f}%)")

    if namespace.verbose:
        for name, tour in tours.items():
            tour.plot(matrix, title=name)

    if namespace.dump is not None:
        with open(namespace.dump, "w") as f:
            data = {
                "problem": namespace.problem,
                "start": namespace.start,
                "matrix": matrix.to_json(),
                "tours": {name: tour.to_json() for name, tour in tours.items()},
            }
            json.dump(data, f)

        print(f"Saved tours to {namespace.dump!r}")
