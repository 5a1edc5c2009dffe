import pytest

from algokit.maze import (
    EMPTY,
    WALL,
    WATER_SOURCE,
    Grid,
    backtrack,
    flood,
    format_grid,
    main,
    parse_grid,
)

SAMPLE = "####\n# ##\n#w #\n#   \n####\n"


def _adjacent(grid: Grid, a: int, b: int) -> bool:
    return b in grid.neighbors(a)


def test_parse_sample_dimensions_and_cells():
    grid = parse_grid(SAMPLE)
    assert (grid.width, grid.height) == (4, 5)
    assert grid.cell_count == 20
    assert grid.cells[9] == WATER_SOURCE
    assert grid.cells[0] == WALL
    assert grid.cells[5] == EMPTY


def test_parse_without_trailing_newline_matches():
    assert parse_grid(SAMPLE.rstrip("\n")) == parse_grid(SAMPLE)


def test_short_rows_are_padded_with_empty_cells():
    grid = parse_grid("###\n#w\n###")
    assert grid.cells[5] == EMPTY
    assert len(grid.cells) == grid.width * grid.height


def test_long_row_rejected():
    with pytest.raises(ValueError):
        parse_grid("##\n###\n")


def test_invalid_symbol_rejected():
    with pytest.raises(ValueError):
        parse_grid("#x#\n")


def test_empty_text_rejected():
    with pytest.raises(ValueError):
        parse_grid("")


def test_format_round_trip():
    grid = parse_grid(SAMPLE)
    assert format_grid(grid) == SAMPLE.rstrip("\n")
    assert parse_grid(format_grid(grid)) == grid


def test_edge_mask_and_neighbors():
    grid = parse_grid(SAMPLE)
    assert grid.edge_mask(0) == (True, False, True, False)
    assert grid.edge_mask(15) == (False, True, False, False)
    assert grid.neighbors(0) == (None, 1, None, 4)
    assert grid.neighbors(9) == (8, 10, 5, 13)
    assert grid.is_on_edge(15)
    assert not grid.is_on_edge(9)


def test_edge_mask_out_of_range():
    grid = parse_grid(SAMPLE)
    with pytest.raises(IndexError):
        grid.edge_mask(20)


def test_flood_sample_path():
    grid = parse_grid(SAMPLE)
    path = flood(grid)
    assert path == [9, 13, 14, 15]


def test_flood_path_invariants():
    grid = parse_grid(SAMPLE)
    path = flood(grid)
    assert grid.cells[path[0]] == WATER_SOURCE
    assert grid.is_on_edge(path[-1])
    assert all(_adjacent(grid, a, b) for a, b in zip(path, path[1:]))
    assert [grid.cells[i] for i in path] == list(range(1, len(path) + 1))


def test_flood_without_exit():
    grid = parse_grid("###\n#w#\n###\n")
    assert flood(grid) is None


def test_source_on_edge_is_its_own_path():
    grid = parse_grid("w#\n##\n")
    assert flood(grid) == [0]


def test_backtrack_after_flood_ends_at_given_cell():
    grid = parse_grid(SAMPLE)
    flood(grid)
    path = backtrack(grid, 14)
    assert path[0] == 9
    assert path[-1] == 14


def test_backtrack_without_source_raises():
    grid = parse_grid("   \n   \n")
    with pytest.raises(ValueError):
        backtrack(grid, 4)


def test_main_prints_path(tmp_path, capsys):
    maze = tmp_path / "maze.maze"
    maze.write_text(SAMPLE, encoding="utf-8")
    assert main([str(maze)]) == 0
    out = capsys.readouterr().out
    assert "The path to exit is: " in out
    assert "9 --> 13 --> 14 --> 15" in out


def test_main_no_exit(tmp_path, capsys):
    maze = tmp_path / "closed.maze"
    maze.write_text("###\n#w#\n###\n", encoding="utf-8")
    assert main([str(maze)]) == 0
    assert "The maze has no exit" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.maze")]) == 1