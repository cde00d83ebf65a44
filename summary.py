import os
import re
from io import TextIOWrapper
from pathlib import Path

import salesman


problems_dir = Path("problems/")
summary_dir = Path("summary/")
field_names = ("Problem", "Size", "Nearest neighbor", "Held-Karp", "Overhead (%)", "Path")
pattern = re.compile(r"([a-z0-9]+)\.json")


def write_row(*, file: TextIOWrapper, problem: str) -> None:
    matrix = salesman.CostMatrix.import_problem(problem, directory=str(problems_dir))
    print(f"Solving {problem!r} ({matrix.size} nodes)")

    heuristic = salesman.solve_nearest_neighbor(matrix)
    exact = salesman.solve_held_karp(matrix, use_tqdm=True)
    assert exact <= heuristic

    overhead = 0.0 if exact.cost() == 0 else 100 * (heuristic.cost() - exact.cost()) / exact.cost()
    file.write(",".join((problem, str(matrix.size), str(heuristic.cost()), str(exact.cost()), f"{overhead:.2f}", "\"" + exact.labels() + "\"")) + "\n")


summary_dir.mkdir(exist_ok=True)
with open(summary_dir / "summary.csv", "w") as csv:
    csv.write(",".join(field_names) + "\n")

    for file in sorted(os.listdir(problems_dir)):
        if match := pattern.fullmatch(file):
            write_row(file=csv, problem=match.group(1))
