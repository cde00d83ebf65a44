from pathlib import Path

import pytest

import salesman


PROBLEMS = str(Path(__file__).resolve().parent.parent / "problems")


@pytest.mark.parametrize(
    "rows",
    [
        [],
        [[0, 1], [1]],
        [[0, -1], [1, 0]],
        [[1, 2], [2, 0]],
        [[0, 1.5], [1, 0]],
        [[0, True], [1, 0]],
        [[0, "1"], [1, 0]],
        [[0, salesman.MAX_COST + 1], [1, 0]],
    ],
)
def test_invalid_matrix(rows: list) -> None:
    with pytest.raises(salesman.InvalidCostMatrix):
        salesman.CostMatrix(rows)


def test_matrix_is_read_only() -> None:
    rows = [[0, 3], [4, 0]]
    matrix = salesman.CostMatrix(rows)
    rows[0][1] = 100

    assert matrix[0][1] == 3
    assert matrix.size == len(matrix) == 2
    assert not matrix.is_symmetric()

    array = matrix.as_array()
    with pytest.raises(ValueError):
        array[0, 1] = 100


def test_cycle_cost() -> None:
    matrix = salesman.CostMatrix([[0, 1, 2], [3, 0, 4], [5, 6, 0]])
    assert matrix.cycle_cost([0, 1, 2]) == 1 + 4 + 5
    assert matrix.cycle_cost([0, 2, 1]) == 2 + 6 + 3
    assert matrix.cycle_cost([0]) == 0


def test_from_positions() -> None:
    matrix = salesman.CostMatrix.from_positions([0, 1, 2, 3, 10])
    assert matrix[0] == (0, 1, 2, 3, 10)
    assert matrix[4] == (10, 9, 8, 7, 0)
    assert matrix.is_symmetric()


def test_random() -> None:
    matrix = salesman.CostMatrix.random(7, seed=42, low=5, high=9)
    assert matrix.size == 7
    assert matrix.is_symmetric()
    assert all(5 <= matrix[i][j] <= 9 for i in range(7) for j in range(7) if i != j)
    assert matrix == salesman.CostMatrix.random(7, seed=42, low=5, high=9)

    asymmetric = salesman.CostMatrix.random(7, seed=42, symmetric=False)
    assert all(asymmetric[i][i] == 0 for i in range(7))


def test_import_problem() -> None:
    matrix = salesman.CostMatrix.import_problem("classic4", directory=PROBLEMS)
    assert matrix.size == 4
    assert matrix[1] == (10, 0, 35, 25)

    matrix = salesman.CostMatrix.import_problem("sample20.json", directory=PROBLEMS)
    assert matrix.size == 20
    assert matrix.is_symmetric()


def test_unknown_problem() -> None:
    with pytest.raises(salesman.ProblemNotFound):
        salesman.CostMatrix.import_problem("hanoi69", directory=PROBLEMS)


def test_problem_parsing(tmp_path: Path) -> None:
    (tmp_path / "broken.json").write_text("{\"matrix\": [[0, 1], [1, 0, 2]]}")
    with pytest.raises(salesman.ProblemParsingException) as exception:
        salesman.CostMatrix.import_problem("broken", directory=str(tmp_path))

    assert isinstance(exception.value.original, salesman.InvalidCostMatrix)

    (tmp_path / "garbage.json").write_text("not json")
    with pytest.raises(salesman.ProblemParsingException):
        salesman.CostMatrix.load(str(tmp_path / "garbage.json"))


def test_format_table() -> None:
    matrix = salesman.CostMatrix([[0, 10, 15], [10, 0, 35], [15, 35, 0]])
    lines = matrix.format_table().splitlines()

    assert len(lines) == 4
    assert lines[0].split() == ["A", "B", "C"]
    assert lines[1].split() == ["A", "10", "15"]
    assert lines[3].split() == ["C", "15", "35"]
