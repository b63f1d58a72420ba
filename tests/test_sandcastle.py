import copy
import io

import pytest

from stackqueue.sandcastle import main, parse_grid, waves_until_stable

SAMPLE = ["......", ".939..", ".3428.", ".9393.", "......"]


def _transpose(rows):
    return ["".join(column) for column in zip(*rows)]


def test_parse_grid_maps_dots_to_none():
    assert parse_grid(["1.2", "..9"]) == [[1, None, 2], [None, None, 9]]


def test_parse_grid_strips_line_endings():
    assert parse_grid(["12\n", "3.\n"]) == parse_grid(["12", "3."])


def test_parse_grid_rejects_unknown_cell():
    with pytest.raises(ValueError):
        parse_grid(["1x2"])


def test_parse_grid_rejects_ragged_rows():
    with pytest.raises(ValueError):
        parse_grid(["123", "12"])


def test_sample_castle():
    assert waves_until_stable(parse_grid(SAMPLE)) == 3


def test_lone_weak_cell_falls_in_first_wave():
    assert waves_until_stable(parse_grid(["...", ".1.", "..."])) == 1


def test_transpose_does_not_change_result():
    assert waves_until_stable(parse_grid(_transpose(SAMPLE))) == waves_until_stable(
        parse_grid(SAMPLE)
    )


def test_mirror_does_not_change_result():
    mirrored = [row[::-1] for row in SAMPLE]
    assert waves_until_stable(parse_grid(mirrored)) == waves_until_stable(
        parse_grid(SAMPLE)
    )


def test_grid_without_interior_never_falls():
    assert waves_until_stable(parse_grid(["1.1", "..."])) == waves_until_stable([])


def test_full_grid_matches_empty_grid():
    assert waves_until_stable(parse_grid(["999", "999", "999"])) == waves_until_stable([])


def test_input_grid_is_not_modified():
    grid = parse_grid(SAMPLE)
    before = copy.deepcopy(grid)
    waves_until_stable(grid)
    assert grid == before


def test_main_prints_wave_count(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 6\n" + "\n".join(SAMPLE) + "\n"))
    assert main() == 0
    expected = str(waves_until_stable(parse_grid(SAMPLE)))
    assert capsys.readouterr().out.strip() == expected