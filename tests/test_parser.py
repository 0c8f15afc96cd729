import pytest

from sudokusolver.io.parser import GridParseError, grid_values, load_puzzles, parse_grid

from grids import EASY, HARD, HARD_SOLUTION


def test_grid_values_maps_cell_names():
    values = grid_values(HARD)
    assert len(values) == 81
    assert values["A1"] == "4"
    assert values["A2"] == "."
    assert values["I3"] == "4"


def test_zero_and_dot_are_blank():
    board = parse_grid(EASY.replace("0", "."))
    assert board is not None
    assert board.to_string() == parse_grid(EASY).to_string()


@pytest.mark.parametrize("grid", ["", "1" * 80, "." * 82, "." * 80 + "x", "." * 40 + " " + "." * 40])
def test_malformed_grid_is_rejected(grid):
    with pytest.raises(GridParseError):
        parse_grid(grid)


def test_non_string_grid_is_rejected():
    with pytest.raises(GridParseError):
        grid_values(None)


def test_duplicate_given_in_row_is_contradiction():
    assert parse_grid("55" + "." * 79) is None


def test_two_threes_in_row_is_contradiction():
    assert parse_grid("3" + "." * 7 + "3" + "." * 72) is None


def test_load_yaml_examples(examples_path):
    puzzles = load_puzzles(examples_path)
    assert [p.name for p in puzzles] == ["easy1", "hard1"]
    assert puzzles[1].grid == HARD
    assert puzzles[1].solution == HARD_SOLUTION
    assert puzzles[0].options == {"unique": True}


def test_load_text_file(tmp_path):
    path = tmp_path / "grids.txt"
    path.write_text(f"# two grids\n{EASY}\n\n{HARD}\n", encoding="utf-8")
    puzzles = load_puzzles(path)
    assert [p.grid for p in puzzles] == [EASY, HARD]
    assert puzzles[0].name == "grids.txt:2"


def test_load_file_with_bad_grid(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("123\n", encoding="utf-8")
    with pytest.raises(GridParseError, match="bad.txt:1"):
        load_puzzles(path)


@pytest.mark.parametrize(
    "text, match",
    [
        ("puzzles: [\n", "bad.yaml"),
        ("- just\n- a list\n", "bad.yaml"),
        ("puzzles: not-a-list\n", "'puzzles' must be a list"),
        ("options: [1]\npuzzles: []\n", "'options' must be a mapping"),
        ("puzzles:\n  - just a string\n", "bad-1: puzzle entry must be a mapping"),
        ("puzzles:\n  - name: a\n", "a: missing 'grid'"),
    ],
)
def test_load_malformed_yaml(tmp_path, text, match):
    path = tmp_path / "bad.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(GridParseError, match=match):
        load_puzzles(path)


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_puzzles(path) == []
