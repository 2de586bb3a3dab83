"""Board layout rules that are independent from HTTP and DB.

A layout is ``size`` rows joined by ``/``. Each cell is ``.`` (empty) or one of
the player marks. The game engine serves triangular boards where row ``i``
(0-based) holds ``i + 1`` cells; square boards hold ``size`` cells per row.
"""

from typing import List, Sequence

ROW_SEPARATOR = "/"
EMPTY_CELL = "."
DEFAULT_PLAYER_MARKS = ("B", "R")
TOPOLOGIES = ("triangular", "square")


def row_lengths(size: int, topology: str = "triangular") -> List[int]:
    """Return the expected number of cells of each row."""
    if topology == "triangular":
        return [row + 1 for row in range(size)]
    if topology == "square":
        return [size] * size
    raise ValueError(f"Unknown board topology: {topology}")


def total_cells(size: int, topology: str = "triangular") -> int:
    """Return the number of cells on a board of the given size."""
    return sum(row_lengths(size, topology))


def split_layout(layout: str) -> List[str]:
    return layout.split(ROW_SEPARATOR)


def validate_layout(
    layout: str,
    size: int,
    players: Sequence[str] = DEFAULT_PLAYER_MARKS,
    topology: str = "triangular",
) -> None:
    """Check that a layout matches its declared size and only uses known marks.

    Args:
        layout (str): Row-delimited layout, e.g. ``"./B./..R"``
        size (int): Declared board size
        players (Sequence[str]): Player marks allowed in occupied cells
        topology (str): ``triangular`` or ``square``

    Raises:
        ValueError: The layout does not describe a board of ``size``
    """
    if size < 1:
        raise ValueError(f"Board size must be positive, got {size}")

    rows = split_layout(layout)
    expected = row_lengths(size, topology)
    if len(rows) != len(expected):
        raise ValueError(f"Expected {len(expected)} rows, got {len(rows)}")

    cell_count = sum(len(row) for row in rows)
    if cell_count != sum(expected):
        raise ValueError(f"Expected {sum(expected)} cells, got {cell_count}")

    allowed = {EMPTY_CELL, *players}
    for index, (row, length) in enumerate(zip(rows, expected)):
        if len(row) != length:
            raise ValueError(f"Row {index} should have {length} cells, got {len(row)}")
        unknown = set(row) - allowed
        if unknown:
            raise ValueError(f"Unknown cell marks in row {index}: {sorted(unknown)}")


def looks_like_board(value: object) -> bool:
    """A board payload is a mapping carrying at least a layout and a size."""
    return isinstance(value, dict) and "layout" in value and "size" in value
