import pytest

from wireframe.parse import HeightMap, MapError, load_map, parse_cell, parse_map


def test_cell_without_color():
    assert parse_cell("10") == (10, None)


def test_cell_with_color():
    assert parse_cell("5,0xFF0000") == (5, 0xFF0000)


def test_cell_negative_depth_and_lower_case_prefix():
    assert parse_cell("-7,0x00ff00") == (-7, 0x00FF00)


def test_cell_with_too_many_parts():
    with pytest.raises(MapError, match="Failed to read map."):
        parse_cell("1,0xFF,3")


@pytest.mark.parametrize("text", ["abc", "12x", ",", "-"])
def test_cell_with_bad_depth(text):
    with pytest.raises(MapError, match="Invalid map coord."):
        parse_cell(text)


@pytest.mark.parametrize("text", ["1,ff", "1,0x1000000", "1,0xZZ", "1,0x-1"])
def test_cell_with_bad_color(text):
    with pytest.raises(MapError, match="Invalid color code."):
        parse_cell(text)


def test_depth_out_of_int_range():
    with pytest.raises(MapError, match="Invalid map coord."):
        parse_cell("2147483648")


def test_parse_map_shape_and_range():
    grid = parse_map(["0 0 3\n", "0 10,0xFFFFFF -4\n"])
    assert isinstance(grid, HeightMap)
    assert (grid.width, grid.height) == (3, 2)
    assert grid.depths == [[0, 0, 3], [0, 10, -4]]
    assert grid.colors == [[None, None, None], [None, 0xFFFFFF, None]]
    assert grid.depth_max == 10
    assert grid.depth_min == -4


def test_parse_map_trims_blanks():
    grid = parse_map(["  1   2  \n"])
    assert grid.depths == [[1, 2]]


def test_parse_map_empty():
    with pytest.raises(MapError, match="Invalid map."):
        parse_map([])


def test_parse_map_only_blank_lines():
    with pytest.raises(MapError, match="Invalid map."):
        parse_map(["\n", "   \n"])


def test_parse_map_width_mismatch():
    with pytest.raises(MapError, match="Invalid width in map."):
        parse_map(["1 2 3\n", "1 2\n"])


def test_width_checked_before_cells():
    with pytest.raises(MapError, match="Invalid width in map."):
        parse_map(["x 2\n", "1\n"])


def test_depth_difference_too_large():
    with pytest.raises(MapError, match="Height difference"):
        parse_map(["2147483647 -2147483648\n"])


def test_load_map(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_text("1 2\n3 4\n")
    grid = load_map(path)
    assert grid.depths == [[1, 2], [3, 4]]


def test_load_map_ignores_unterminated_last_line(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_text("1 2\n3 4")
    grid = load_map(path)
    assert grid.height == 1
    assert grid.depths == [[1, 2]]


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError, match="Failed to open file."):
        load_map(tmp_path / "absent.fdf")


def test_load_map_empty_file(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    with pytest.raises(MapError, match="Invalid map."):
        load_map(path)