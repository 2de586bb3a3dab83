import pytest

from gateway.domain.board_rules import (
    looks_like_board,
    row_lengths,
    total_cells,
    validate_layout,
)


def test_row_lengths():
    assert row_lengths(4) == [1, 2, 3, 4]
    assert row_lengths(3, "square") == [3, 3, 3]
    with pytest.raises(ValueError):
        row_lengths(3, "hexagonal")


def test_total_cells():
    assert total_cells(5) == 15
    assert total_cells(5, "square") == 25


@pytest.mark.parametrize(
    "layout, size, topology",
    [
        (".", 1, "triangular"),
        ("B/.R/...", 3, "triangular"),
        ("B/BB/BBR", 3, "triangular"),
        ("B./.R", 2, "square"),
    ],
)
def test_valid_layouts(layout, size, topology):
    validate_layout(layout, size, topology=topology)


@pytest.mark.parametrize(
    "layout, size, topology",
    [
        ("./..", 3, "triangular"),
        ("./../....", 3, "triangular"),
        ("../.", 2, "triangular"),
        ("./X.", 2, "triangular"),
        ("B/.R/...", 3, "square"),
        ("", 0, "triangular"),
    ],
)
def test_invalid_layouts(layout, size, topology):
    with pytest.raises(ValueError):
        validate_layout(layout, size, topology=topology)


def test_custom_player_marks():
    validate_layout("X/.O", 2, players=["X", "O"])
    with pytest.raises(ValueError):
        validate_layout("B/..", 2, players=["X", "O"])


def test_looks_like_board():
    assert looks_like_board({"size": 1, "layout": "."})
    assert not looks_like_board({"layout": "."})
    assert not looks_like_board("./..")
